"""
roofcompliance Evaluator

Top-level entry point: dispatches the questionnaire answers to the
planning or execution rule set.

Usage:
    from roofcompliance.engine import evaluate_compliance

    result = evaluate_compliance({"pathway": "planning", "scope": "new"})
    print(result.status, result.banner_title)
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from ..exceptions import KnowledgeIntegrityError
from ..knowledge import KNOWLEDGE_BASE, KnowledgeBase
from ..models import ComplianceResult, ComplianceStatus, Pathway, WizardInputs
from .execution import EXECUTION_RULES, evaluate_execution
from .planning import PLANNING_RULES, evaluate_planning
from .rules import Rule, missing_citations

logger = logging.getLogger(__name__)

ALL_RULES: tuple[Rule, ...] = PLANNING_RULES + EXECUTION_RULES

SELECT_PATHWAY_RESULT = ComplianceResult(
    status=ComplianceStatus.CHECK_REQUIRED,
    banner_class="res-check",
    banner_title="SELECT PATHWAY",
)


def evaluate_compliance(
    inputs: Union[WizardInputs, Mapping[str, Any]],
) -> ComplianceResult:
    """
    Evaluate questionnaire answers.

    Args:
        inputs: WizardInputs, or a plain mapping validated via
            ``WizardInputs.from_dict``

    Returns:
        ComplianceResult; ``check_required`` when no pathway is selected

    Raises:
        UnknownFieldError / InvalidAnswerError: mapping input is malformed
    """
    if not isinstance(inputs, WizardInputs):
        inputs = WizardInputs.from_dict(inputs)

    if inputs.pathway is None:
        logger.debug("No pathway selected")
        return SELECT_PATHWAY_RESULT

    logger.debug("Evaluating %s pathway", inputs.pathway.value)
    if inputs.pathway == Pathway.PLANNING:
        return evaluate_planning(inputs)
    return evaluate_execution(inputs)


def check_knowledge_integrity(
    knowledge: Optional[KnowledgeBase] = None,
    rules: Optional[tuple[Rule, ...]] = None,
) -> None:
    """
    Verify every determination cited by the rules exists in ``knowledge``.

    Raises:
        KnowledgeIntegrityError: one or more cited keys are missing
    """
    knowledge = knowledge if knowledge is not None else KNOWLEDGE_BASE
    rules = rules if rules is not None else ALL_RULES
    missing = missing_citations(rules, knowledge)
    if missing:
        raise KnowledgeIntegrityError(
            message=f"Rules cite {len(missing)} determination(s) missing from pack {knowledge.pack_id}",
            details={"missing": missing, "pack_id": knowledge.pack_id},
        )
