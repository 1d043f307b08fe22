"""
roofcompliance Compliance Result

Output of one evaluation. Wholly derived from the WizardInputs that
produced it: the same inputs always give an equal result.

``to_dict`` produces the JSON shape the questionnaire UI and stored
assessments use (camelCase keys).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .alerts import Alert
from .enums import ComplianceStatus


@dataclass(frozen=True)
class ComplianceResult:
    """
    Verdict plus supporting warnings, reasons and actions.

    Attributes:
        status: The verdict
        banner_class: Presentation hint derived from status
        banner_title: Headline shown with the verdict
        banner_subtitle: Optional secondary headline
        warnings: Alerts in the order the rules fired
        reasons: Rich-text justifications
        required_actions: Rich-text imperative actions
        legislation_keys: Input field names that drove the result
        rules_fired: Ids of the rules that fired, in order
    """
    status: ComplianceStatus
    banner_class: str
    banner_title: str
    banner_subtitle: Optional[str] = None
    warnings: tuple[Alert, ...] = ()
    reasons: tuple[str, ...] = ()
    required_actions: tuple[str, ...] = ()
    legislation_keys: tuple[str, ...] = ()
    rules_fired: tuple[str, ...] = ()

    @property
    def warning_titles(self) -> list[str]:
        """Titles of all warnings, in order."""
        return [w.title for w in self.warnings]

    @property
    def cited_keys(self) -> list[str]:
        """Knowledge base keys of the determinations and case studies cited."""
        return [w.key for w in self.warnings if hasattr(w, "key")]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase JSON shape."""
        result: dict[str, Any] = {
            "status": self.status.value,
            "bannerClass": self.banner_class,
            "bannerTitle": self.banner_title,
            "warnings": [w.to_dict() for w in self.warnings],
            "reasons": list(self.reasons),
            "requiredActions": list(self.required_actions),
            "legislationKeys": list(self.legislation_keys),
            "rulesFired": list(self.rules_fired),
        }
        if self.banner_subtitle is not None:
            result["bannerSubtitle"] = self.banner_subtitle
        return result
