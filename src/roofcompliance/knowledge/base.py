"""
roofcompliance Knowledge Base

A loaded knowledge pack: determinations, case studies and legislation
explanations held in read-only mappings. Built once by the loader and
shared freely between threads; nothing mutates it after construction.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..exceptions import (
    UnknownCaseStudyError,
    UnknownDeterminationError,
    UnknownExplanationError,
)
from ..models import CaseStudy, Determination, LegislationExplanation


@dataclass(frozen=True)
class KnowledgeBase:
    """
    Immutable reference data for the engine.

    Attributes:
        pack_id: Knowledge pack identifier
        name: Human-readable pack name
        jurisdiction: Jurisdiction code (e.g. "NZ")
        version: Pack content version
        determinations: key -> Determination (read-only)
        case_studies: key -> CaseStudy (read-only)
        explanations: wizard field -> LegislationExplanation (read-only)
    """
    pack_id: str
    name: str
    jurisdiction: str
    version: str
    determinations: Mapping[str, Determination]
    case_studies: Mapping[str, CaseStudy]
    explanations: Mapping[str, LegislationExplanation]
    description: Optional[str] = None

    def get_determination(self, key: str) -> Determination:
        """
        Look up a determination by key.

        Raises:
            UnknownDeterminationError: key is not in the pack
        """
        try:
            return self.determinations[key]
        except KeyError:
            raise UnknownDeterminationError(
                message=f"Determination '{key}' not found",
                details={"key": key, "pack_id": self.pack_id},
            ) from None

    def get_case_study(self, key: str) -> CaseStudy:
        """
        Look up a case study by key.

        Raises:
            UnknownCaseStudyError: key is not in the pack
        """
        try:
            return self.case_studies[key]
        except KeyError:
            raise UnknownCaseStudyError(
                message=f"Case study '{key}' not found",
                details={"key": key, "pack_id": self.pack_id},
            ) from None

    def get_explanation(self, field_name: str) -> LegislationExplanation:
        """
        Look up the legislation explanation for a wizard field.

        Raises:
            UnknownExplanationError: no explanation for the field
        """
        try:
            return self.explanations[field_name]
        except KeyError:
            raise UnknownExplanationError(
                message=f"No explanation for field '{field_name}'",
                details={"pack_id": self.pack_id},
                field=field_name,
            ) from None

    def to_dict(self) -> dict[str, Any]:
        """Serialize the full pack (used for hashing and the API)."""
        return {
            "pack_id": self.pack_id,
            "name": self.name,
            "jurisdiction": self.jurisdiction,
            "version": self.version,
            "determinations": {k: v.to_dict() for k, v in self.determinations.items()},
            "case_studies": {k: v.to_dict() for k, v in self.case_studies.items()},
            "explanations": {k: v.to_dict() for k, v in self.explanations.items()},
        }
