"""
roofcompliance Knowledge Base

Reference data cited by the engine: MBIE determinations, Building
Practitioners Board case studies and per-question legislation
explanations. The bundled NZ pack is loaded once at import.

Usage:
    from roofcompliance.knowledge import get_determination, DETERMINATION_DATABASE

    det = get_determination("zero_pitch")
    print(det.id, det.title)
"""
from __future__ import annotations

from pathlib import Path

from ..models import CaseStudy, Determination, LegislationExplanation
from .base import KnowledgeBase
from .loader import (
    KnowledgePackLoader,
    load_knowledge_pack,
    load_knowledge_pack_from_string,
    validate_reference_integrity,
)
from .schema import SCHEMA_VERSION, KnowledgePackSchema

DEFAULT_PACK_PATH = Path(__file__).parent / "packs" / "nz_roofing.yaml"

KNOWLEDGE_BASE: KnowledgeBase = load_knowledge_pack(DEFAULT_PACK_PATH)

DETERMINATION_DATABASE = KNOWLEDGE_BASE.determinations
CASE_STUDY_DATABASE = KNOWLEDGE_BASE.case_studies
EXPLANATIONS = KNOWLEDGE_BASE.explanations


def get_determination(key: str) -> Determination:
    """Determination from the bundled pack (UnknownDeterminationError if absent)."""
    return KNOWLEDGE_BASE.get_determination(key)


def get_case_study(key: str) -> CaseStudy:
    """Case study from the bundled pack (UnknownCaseStudyError if absent)."""
    return KNOWLEDGE_BASE.get_case_study(key)


def get_explanation(field_name: str) -> LegislationExplanation:
    """Explanation for a wizard field (UnknownExplanationError if absent)."""
    return KNOWLEDGE_BASE.get_explanation(field_name)


__all__ = [
    "CASE_STUDY_DATABASE",
    "DEFAULT_PACK_PATH",
    "DETERMINATION_DATABASE",
    "EXPLANATIONS",
    "KNOWLEDGE_BASE",
    "SCHEMA_VERSION",
    "KnowledgeBase",
    "KnowledgePackLoader",
    "KnowledgePackSchema",
    "get_case_study",
    "get_determination",
    "get_explanation",
    "load_knowledge_pack",
    "load_knowledge_pack_from_string",
    "validate_reference_integrity",
]
