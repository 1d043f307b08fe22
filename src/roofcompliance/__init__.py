"""
roofcompliance - NZ Roofing Compliance Assessment Engine

Answers a short questionnaire about a roofing job and reports whether the
work needs a building consent and a Licensed Building Practitioner (LBP),
citing MBIE determinations and Building Practitioners Board rulings.

It produces GUIDANCE, not legal advice. The practitioner and the building
consent authority decide.

Two pathways:
- planning: is consent required for the work as planned?
- execution: what do licensing, supervision and Record of Work rules
  require for work under way?

Quick Start:
    from roofcompliance import evaluate_compliance, get_next_required_field

    answers = {"pathway": "planning", "scope": "replace_same", "pitch": "low"}
    result = evaluate_compliance(answers)
    print(result.status.value, result.banner_title)
    for alert in result.warnings:
        print("-", alert.title)

Version: 0.1.0
"""
from __future__ import annotations

__version__ = "0.1.0"

# =============================================================================
# Core Models (Re-exported for convenience)
# =============================================================================
from .models import (
    # Enums
    Age,
    AlertType,
    BuildingType,
    ComplexRisk,
    ComplianceStatus,
    Completion,
    ConsentStatus,
    Discovery,
    ExecTask,
    Licence,
    Pathway,
    Pitch,
    Scope,
    Supervision,
    Variation,
    # Alerts
    CaseStudy,
    CustomAlert,
    Determination,
    LegislationExplanation,
    # Inputs / Result
    WizardInputs,
    ComplianceResult,
)

# =============================================================================
# Knowledge Base
# =============================================================================
from .knowledge import (
    CASE_STUDY_DATABASE,
    DETERMINATION_DATABASE,
    EXPLANATIONS,
    get_case_study,
    get_determination,
    get_explanation,
)

# =============================================================================
# Engine
# =============================================================================
from .engine import (
    check_knowledge_integrity,
    evaluate_compliance,
    explain_result,
    get_next_required_field,
    is_wizard_complete,
    wizard_progress,
)

# =============================================================================
# Utilities
# =============================================================================
from .canon import (
    canonical_json,
    content_hash,
    inputs_hash,
    knowledge_pack_hash,
    result_hash,
)

# =============================================================================
# Exceptions
# =============================================================================
from .exceptions import (
    RoofComplianceError,
    KnowledgePackLoadError,
    KnowledgePackValidationError,
    KnowledgePackVersionMismatch,
    KnowledgeIntegrityError,
    UnknownDeterminationError,
    UnknownCaseStudyError,
    UnknownExplanationError,
    RuleDefinitionError,
    WizardInputError,
    UnknownFieldError,
    InvalidAnswerError,
)

__all__ = [
    # Version
    "__version__",
    # Enums
    "Age",
    "AlertType",
    "BuildingType",
    "ComplexRisk",
    "ComplianceStatus",
    "Completion",
    "ConsentStatus",
    "Discovery",
    "ExecTask",
    "Licence",
    "Pathway",
    "Pitch",
    "Scope",
    "Supervision",
    "Variation",
    # Alerts
    "CaseStudy",
    "CustomAlert",
    "Determination",
    "LegislationExplanation",
    # Inputs / Result
    "WizardInputs",
    "ComplianceResult",
    # Knowledge
    "CASE_STUDY_DATABASE",
    "DETERMINATION_DATABASE",
    "EXPLANATIONS",
    "get_case_study",
    "get_determination",
    "get_explanation",
    # Engine
    "check_knowledge_integrity",
    "evaluate_compliance",
    "explain_result",
    "get_next_required_field",
    "is_wizard_complete",
    "wizard_progress",
    # Utilities
    "canonical_json",
    "content_hash",
    "inputs_hash",
    "knowledge_pack_hash",
    "result_hash",
    # Exceptions
    "RoofComplianceError",
    "KnowledgePackLoadError",
    "KnowledgePackValidationError",
    "KnowledgePackVersionMismatch",
    "KnowledgeIntegrityError",
    "UnknownDeterminationError",
    "UnknownCaseStudyError",
    "UnknownExplanationError",
    "RuleDefinitionError",
    "WizardInputError",
    "UnknownFieldError",
    "InvalidAnswerError",
]
