"""
roofcompliance Alerts and Reference Records

Immutable records that appear in an evaluation's warning list:

- Determination: an MBIE ruling summary from the knowledge base
- CaseStudy: a Building Practitioners Board (BPB) ruling summary
- CustomAlert: a warning composed inline by a rule

Plus the legislation explanation records that back ``legislation_keys``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from .enums import AlertType


# =============================================================================
# Knowledge Base Records
# =============================================================================

@dataclass(frozen=True)
class Determination:
    """
    A regulatory determination used as canned citation content.

    Attributes:
        key: Stable knowledge base key (e.g. "zero_pitch")
        id: Human citation (e.g. "Det 2016/016")
        file: Source document file name
        title: Short title
        summary: Rich-text explanation (may contain inline HTML)
        type: Alert classification
    """
    key: str
    id: str
    file: str
    title: str
    summary: str
    type: AlertType

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "key": self.key,
            "id": self.id,
            "file": self.file,
            "title": self.title,
            "summary": self.summary,
            "type": self.type.value,
        }


@dataclass(frozen=True)
class CaseStudy:
    """A disciplinary board ruling used as a cautionary precedent."""
    key: str
    id: str
    file: str
    title: str
    summary: str
    type: AlertType = AlertType.CASE_STUDY

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "key": self.key,
            "id": self.id,
            "file": self.file,
            "title": self.title,
            "summary": self.summary,
            "type": self.type.value,
        }


@dataclass(frozen=True)
class CustomAlert:
    """
    A warning built inline during evaluation rather than looked up.

    ``pdf_link`` points at a supporting document when one exists.
    """
    type: AlertType
    title: str
    content: str
    pdf_link: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary (``pdfLink`` only when set)."""
        result: dict[str, Any] = {
            "type": self.type.value,
            "title": self.title,
            "content": self.content,
        }
        if self.pdf_link:
            result["pdfLink"] = self.pdf_link
        return result


Alert = Union[Determination, CaseStudy, CustomAlert]


# =============================================================================
# Legislation Explanations
# =============================================================================

@dataclass(frozen=True)
class ExplanationOption:
    """Legislative reference and plain-language text for one answer."""
    ref: str
    text: str

    def to_dict(self) -> dict[str, str]:
        return {"ref": self.ref, "text": self.text}


@dataclass(frozen=True)
class LegislationExplanation:
    """Explanations for the answers of one questionnaire field."""
    field: str
    question: str
    options: Mapping[str, ExplanationOption] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def option(self, value: str) -> Optional[ExplanationOption]:
        """Explanation for a single answer value, if one exists."""
        return self.options.get(value)

    def to_dict(self) -> dict[str, Any]:
        return {
            "field": self.field,
            "question": self.question,
            "options": {k: v.to_dict() for k, v in self.options.items()},
        }
