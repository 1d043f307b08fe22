"""Knowledge base endpoints."""

from fastapi import APIRouter

from ...knowledge import (
    CASE_STUDY_DATABASE,
    DETERMINATION_DATABASE,
    EXPLANATIONS,
    get_case_study,
    get_determination,
    get_explanation,
)

router = APIRouter(prefix="/knowledge", tags=["Knowledge"])


@router.get("/determinations")
async def list_determinations():
    """All MBIE determinations the rules can cite."""
    return [d.to_dict() for d in DETERMINATION_DATABASE.values()]


@router.get("/determinations/{key}")
async def determination_detail(key: str):
    return get_determination(key).to_dict()


@router.get("/case-studies")
async def list_case_studies():
    """All Building Practitioners Board case studies."""
    return [c.to_dict() for c in CASE_STUDY_DATABASE.values()]


@router.get("/case-studies/{key}")
async def case_study_detail(key: str):
    return get_case_study(key).to_dict()


@router.get("/explanations")
async def list_explanations():
    """Question labels and per-answer legislative references."""
    return [e.to_dict() for e in EXPLANATIONS.values()]


@router.get("/explanations/{field}")
async def explanation_detail(field: str):
    return get_explanation(field).to_dict()
