"""
roofcompliance Wizard Navigation

Which questions the current answers make required, which one to ask next,
and the answer-editing helpers the questionnaire uses.

Completeness and next-field navigation share one required-field list, so
they can never disagree (the age question is required only for
like-for-like replacement in both).
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional, Union

from ..models import (
    ComplexRisk,
    ExecTask,
    MULTI_VALUED_FIELDS,
    Pathway,
    Pitch,
    Scope,
    WizardInputs,
    coerce_answer,
)


def required_fields(inputs: WizardInputs) -> list[str]:
    """
    Ordered list of the fields the current answers make required.

    ``exec_task`` is never required: an unanswered task behaves as "none".
    """
    if inputs.pathway is None:
        return ["pathway"]

    if inputs.pathway == Pathway.PLANNING:
        fields = ["pathway", "scope", "pitch", "complex"]
        if inputs.scope == Scope.REPLACE_SAME:
            fields.append("age")
        fields.append("consent_status")
        return fields

    return [
        "pathway",
        "b_type",
        "variation",
        "discovery",
        "licence",
        "supervision",
        "completion",
    ]


def _is_answered(inputs: WizardInputs, field_name: str) -> bool:
    value = getattr(inputs, field_name)
    if field_name in MULTI_VALUED_FIELDS:
        return len(value) > 0
    return value is not None


def get_next_required_field(inputs: WizardInputs) -> Optional[str]:
    """First required field still unanswered, or None when complete."""
    for field_name in required_fields(inputs):
        if not _is_answered(inputs, field_name):
            return field_name
    return None


def is_wizard_complete(inputs: WizardInputs) -> bool:
    """True when a pathway is selected and every required field is answered."""
    return inputs.pathway is not None and get_next_required_field(inputs) is None


@dataclass(frozen=True)
class WizardProgress:
    """Snapshot of questionnaire progress."""
    required: tuple[str, ...]
    answered: tuple[str, ...]
    next_field: Optional[str]
    complete: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "required": list(self.required),
            "answered": list(self.answered),
            "nextField": self.next_field,
            "complete": self.complete,
        }


def wizard_progress(inputs: WizardInputs) -> WizardProgress:
    required = required_fields(inputs)
    return WizardProgress(
        required=tuple(required),
        answered=tuple(f for f in required if _is_answered(inputs, f)),
        next_field=get_next_required_field(inputs),
        complete=is_wizard_complete(inputs),
    )


# =============================================================================
# Answer Editing
# =============================================================================

def initial_inputs() -> WizardInputs:
    """Fresh questionnaire: standard pitch and no execution task preselected."""
    return WizardInputs(pitch=Pitch.STANDARD, exec_task=ExecTask.NONE)


def answer(inputs: WizardInputs, field_name: str, value: Any) -> WizardInputs:
    """
    Copy of ``inputs`` with one field answered (``None`` clears it).

    Raises:
        UnknownFieldError: field_name is not a wizard field
        InvalidAnswerError: value is outside the field's answer set
    """
    return replace(inputs, **{field_name: coerce_answer(field_name, value)})


def toggle_complex_risk(
    inputs: WizardInputs,
    risk: Union[ComplexRisk, str],
    checked: bool,
) -> WizardInputs:
    """
    Check or uncheck one complex risk tag.

    "none" is exclusive: checking it clears every other tag, and checking
    any other tag removes it.

    Raises:
        InvalidAnswerError: risk is not a complex risk tag
    """
    tag = coerce_answer("complex", [risk])[0]

    if tag == ComplexRisk.NONE:
        current = [ComplexRisk.NONE] if checked else []
    else:
        current = [t for t in inputs.complex if t != ComplexRisk.NONE]
        if checked:
            if tag not in current:
                current.append(tag)
        else:
            current = [t for t in current if t != tag]

    return replace(inputs, complex=current)
