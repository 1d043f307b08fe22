"""
roofcompliance Engine

Rule-based evaluation of the roofing compliance questionnaire.

Services:
- evaluate_compliance: dispatch to the planning or execution rule set
- Wizard navigation: required fields, next question, completeness
- explain_result: legislative basis for the answers behind a result
- check_knowledge_integrity: every cited determination exists

Usage:
    from roofcompliance.engine import (
        evaluate_compliance,
        get_next_required_field,
        is_wizard_complete,
    )
"""
from __future__ import annotations

from .evaluator import (
    ALL_RULES,
    SELECT_PATHWAY_RESULT,
    check_knowledge_integrity,
    evaluate_compliance,
)
from .execution import (
    EXECUTION_INITIAL,
    EXECUTION_LEGISLATION_KEYS,
    EXECUTION_RULES,
    evaluate_execution,
)
from .explain import ExplainedAnswer, explain_result
from .planning import (
    PLANNING_INITIAL,
    PLANNING_LEGISLATION_KEYS,
    PLANNING_RULES,
    evaluate_planning,
)
from .rules import (
    Assessment,
    Rule,
    cite,
    give_reason,
    missing_citations,
    referenced_determination_keys,
    require_action,
    run_rules,
    set_banner,
    set_consent,
    warn,
)
from .wizard import (
    WizardProgress,
    answer,
    get_next_required_field,
    initial_inputs,
    is_wizard_complete,
    required_fields,
    toggle_complex_risk,
    wizard_progress,
)

__all__ = [
    # Evaluation
    "ALL_RULES",
    "SELECT_PATHWAY_RESULT",
    "check_knowledge_integrity",
    "evaluate_compliance",
    "EXECUTION_INITIAL",
    "EXECUTION_LEGISLATION_KEYS",
    "EXECUTION_RULES",
    "evaluate_execution",
    "PLANNING_INITIAL",
    "PLANNING_LEGISLATION_KEYS",
    "PLANNING_RULES",
    "evaluate_planning",
    # Rules
    "Assessment",
    "Rule",
    "cite",
    "give_reason",
    "missing_citations",
    "referenced_determination_keys",
    "require_action",
    "run_rules",
    "set_banner",
    "set_consent",
    "warn",
    # Wizard
    "WizardProgress",
    "answer",
    "get_next_required_field",
    "initial_inputs",
    "is_wizard_complete",
    "required_fields",
    "toggle_complex_risk",
    "wizard_progress",
    # Explanations
    "ExplainedAnswer",
    "explain_result",
]
