"""
roofcompliance Models

Data types shared by the knowledge base, the engine and the service.

Usage:
    from roofcompliance.models import (
        WizardInputs, ComplianceResult, Pathway, Scope, ComplexRisk,
    )
"""
from __future__ import annotations

from .enums import (
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
)
from .alerts import (
    Alert,
    CaseStudy,
    CustomAlert,
    Determination,
    ExplanationOption,
    LegislationExplanation,
)
from .inputs import (
    EXECUTION_FIELDS,
    FIELD_ENUMS,
    MULTI_VALUED_FIELDS,
    PLANNING_FIELDS,
    WIZARD_FIELDS,
    WizardInputs,
    allowed_values,
    coerce_answer,
)
from .result import ComplianceResult

__all__ = [
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
    "Alert",
    "CaseStudy",
    "CustomAlert",
    "Determination",
    "ExplanationOption",
    "LegislationExplanation",
    # Inputs
    "EXECUTION_FIELDS",
    "FIELD_ENUMS",
    "MULTI_VALUED_FIELDS",
    "PLANNING_FIELDS",
    "WIZARD_FIELDS",
    "WizardInputs",
    "allowed_values",
    "coerce_answer",
    # Result
    "ComplianceResult",
]
