"""
roofcompliance Knowledge Pack Schemas

Pydantic models for validating knowledge pack YAML/JSON files.

These schemas define the on-disk structure of a knowledge pack. They map
to the frozen records in roofcompliance.models.alerts.

Schema versioning:
- schema_version field tracks breaking changes
- Loaders check major version compatibility
"""
from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0.0"


# =============================================================================
# Enums as Literals (for YAML validation)
# =============================================================================

AlertTypeValue = Literal[
    "danger-box", "warning-box", "precedent-box", "success-box",
    "case-study-box", "tech-alert", "info-box",
]


# =============================================================================
# Record Schemas
# =============================================================================

class DeterminationSchema(BaseModel):
    """Schema for an MBIE determination summary."""
    id: str = Field(..., min_length=1, description="Citation, e.g. 'Det 2016/016'")
    file: str = Field(..., min_length=1, description="Source document file name")
    title: str = Field(..., min_length=1)
    summary: str = Field(..., min_length=1, description="Rich-text explanation")
    type: AlertTypeValue = Field(..., description="Alert classification")

    model_config = {"extra": "forbid"}


class CaseStudySchema(BaseModel):
    """Schema for a BPB upheld complaint summary."""
    id: str = Field(..., min_length=1, description="Citation, e.g. 'Newton [2023]'")
    file: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    summary: str = Field(..., min_length=1)
    type: AlertTypeValue = Field("case-study-box")

    model_config = {"extra": "forbid"}


class ExplanationOptionSchema(BaseModel):
    """Reference and text for a single answer."""
    ref: str = Field(..., min_length=1, description="Legislative reference")
    text: str = Field(..., min_length=1)

    model_config = {"extra": "forbid"}


class LegislationExplanationSchema(BaseModel):
    """Explanations for one wizard field."""
    question: str = Field(..., min_length=1)
    options: dict[str, ExplanationOptionSchema] = Field(default_factory=dict)

    model_config = {"extra": "forbid"}


# =============================================================================
# Knowledge Pack Schema
# =============================================================================

class KnowledgePackSchema(BaseModel):
    """
    Complete knowledge pack.

    Determinations, case studies and explanations are keyed by their
    stable identifiers; rules look them up by those keys.
    """
    schema_version: str = Field(SCHEMA_VERSION)
    pack_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    jurisdiction: str = Field(..., min_length=2)
    version: str = Field(..., min_length=1)
    description: Optional[str] = None

    determinations: dict[str, DeterminationSchema] = Field(default_factory=dict)
    case_studies: dict[str, CaseStudySchema] = Field(default_factory=dict)
    explanations: dict[str, LegislationExplanationSchema] = Field(default_factory=dict)

    @field_validator("jurisdiction")
    @classmethod
    def validate_jurisdiction(cls, v: str) -> str:
        return v.upper()

    model_config = {
        "extra": "forbid",  # Reject unknown fields
    }


# =============================================================================
# Validation Helpers
# =============================================================================

def validate_knowledge_pack(data: dict[str, Any]) -> KnowledgePackSchema:
    """
    Validate a knowledge pack dictionary against the schema.

    Raises:
        pydantic.ValidationError: If validation fails
    """
    return KnowledgePackSchema.model_validate(data)


def check_schema_version(data: dict[str, Any]) -> bool:
    """True if the pack's major schema version matches ours."""
    pack_version = str(data.get("schema_version", SCHEMA_VERSION))
    pack_major = pack_version.split(".")[0]
    current_major = SCHEMA_VERSION.split(".")[0]
    return pack_major == current_major
