"""Questionnaire navigation endpoints."""

from fastapi import APIRouter

from ...engine import evaluate_compliance, explain_result, wizard_progress
from ..schemas.requests import WizardInputsRequest
from ..schemas.responses import (
    ExplainedAnswerResponse,
    ExplainResponse,
    WizardProgressResponse,
)

router = APIRouter(prefix="/wizard", tags=["Wizard"])


@router.post("/next", response_model=WizardProgressResponse)
async def next_question(body: WizardInputsRequest):
    """Required questions for the current answers and which one to ask next."""
    progress = wizard_progress(body.to_inputs())
    return WizardProgressResponse(**progress.to_dict())


@router.post("/explain", response_model=ExplainResponse)
async def explain(body: WizardInputsRequest):
    """Legislative basis for each answer that drove the result."""
    inputs = body.to_inputs()
    result = evaluate_compliance(inputs)
    return ExplainResponse(
        status=result.status.value,
        explanations=[
            ExplainedAnswerResponse(**entry.to_dict())
            for entry in explain_result(inputs, result)
        ],
    )
