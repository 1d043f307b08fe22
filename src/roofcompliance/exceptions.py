"""
roofcompliance Exception Hierarchy

Domain-specific exceptions for the roofing compliance engine.
All exceptions include error codes for tracking and logging.

Exception codes follow the pattern: RC_<CATEGORY>_<SPECIFIC>

Evaluation itself never raises: errors surface at the boundaries
(knowledge pack loading, wizard input validation, rule definition).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class RoofComplianceError(Exception):
    """
    Base exception for all roofcompliance errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (RC_*)
        details: Additional context about the error
        field: Wizard field the error relates to, if any
    """
    message: str
    code: str = "RC_INTERNAL_ERROR"
    details: dict[str, Any] = field(default_factory=dict)
    field: Optional[str] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.field:
            parts.append(f"(field: {self.field})")
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging/API responses."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.field:
            result["field"] = self.field
        return result


# =============================================================================
# Knowledge Pack Errors
# =============================================================================

@dataclass
class KnowledgePackLoadError(RoofComplianceError):
    """Failed to read or parse a knowledge pack file."""
    code: str = "RC_KNOWLEDGE_LOAD_ERROR"


@dataclass
class KnowledgePackValidationError(RoofComplianceError):
    """Knowledge pack failed schema or reference validation."""
    code: str = "RC_KNOWLEDGE_VALIDATION_ERROR"


@dataclass
class KnowledgePackVersionMismatch(RoofComplianceError):
    """Knowledge pack schema version is not supported."""
    code: str = "RC_KNOWLEDGE_VERSION_MISMATCH"


@dataclass
class KnowledgeIntegrityError(RoofComplianceError):
    """A rule cites a knowledge base entry that does not exist."""
    code: str = "RC_KNOWLEDGE_INTEGRITY_ERROR"


# =============================================================================
# Lookup Errors
# =============================================================================

@dataclass
class UnknownDeterminationError(RoofComplianceError):
    """Requested determination key is not in the knowledge base."""
    code: str = "RC_DETERMINATION_NOT_FOUND"


@dataclass
class UnknownCaseStudyError(RoofComplianceError):
    """Requested case study key is not in the knowledge base."""
    code: str = "RC_CASE_STUDY_NOT_FOUND"


@dataclass
class UnknownExplanationError(RoofComplianceError):
    """No legislation explanation exists for the requested field."""
    code: str = "RC_EXPLANATION_NOT_FOUND"


# =============================================================================
# Rule Errors
# =============================================================================

@dataclass
class RuleDefinitionError(RoofComplianceError):
    """Rule structure is invalid."""
    code: str = "RC_RULE_DEFINITION_ERROR"


# =============================================================================
# Wizard Input Errors
# =============================================================================

@dataclass
class WizardInputError(RoofComplianceError):
    """Wizard inputs are invalid."""
    code: str = "RC_WIZARD_INPUT_ERROR"


@dataclass
class UnknownFieldError(WizardInputError):
    """Input names a field that is not part of the questionnaire."""
    code: str = "RC_UNKNOWN_FIELD"


@dataclass
class InvalidAnswerError(WizardInputError):
    """Answer is outside the allowed values for its field."""
    code: str = "RC_INVALID_ANSWER"
