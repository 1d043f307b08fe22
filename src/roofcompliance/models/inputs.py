"""
roofcompliance Wizard Inputs

The questionnaire state, filled in one answer at a time by the caller.
Every field is optional: ``None`` (or an empty ``complex`` list) means the
question has not been answered yet.

``WizardInputs.from_dict`` and attribute assignment are the validation
boundary. Anything that gets past them is a closed set of enum values,
which keeps evaluation total.
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Mapping, Optional

from ..exceptions import InvalidAnswerError, UnknownFieldError
from .enums import (
    Age,
    BuildingType,
    ComplexRisk,
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


# =============================================================================
# Field Registry
# =============================================================================

PLANNING_FIELDS: tuple[str, ...] = (
    "scope",
    "pitch",
    "complex",
    "age",
    "consent_status",
)

EXECUTION_FIELDS: tuple[str, ...] = (
    "b_type",
    "variation",
    "exec_task",
    "discovery",
    "licence",
    "supervision",
    "completion",
)

WIZARD_FIELDS: tuple[str, ...] = ("pathway",) + PLANNING_FIELDS + EXECUTION_FIELDS

FIELD_ENUMS: dict[str, type[Enum]] = {
    "pathway": Pathway,
    "scope": Scope,
    "pitch": Pitch,
    "complex": ComplexRisk,
    "age": Age,
    "consent_status": ConsentStatus,
    "b_type": BuildingType,
    "variation": Variation,
    "exec_task": ExecTask,
    "discovery": Discovery,
    "licence": Licence,
    "supervision": Supervision,
    "completion": Completion,
}

MULTI_VALUED_FIELDS: frozenset[str] = frozenset({"complex"})


def allowed_values(field_name: str) -> list[str]:
    """Allowed answer strings for a wizard field."""
    if field_name not in FIELD_ENUMS:
        raise UnknownFieldError(
            message=f"Unknown wizard field '{field_name}'",
            details={"known_fields": list(WIZARD_FIELDS)},
            field=field_name,
        )
    return [member.value for member in FIELD_ENUMS[field_name]]


def _coerce_single(field_name: str, value: Any) -> Enum:
    enum_cls = FIELD_ENUMS[field_name]
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value)
        except ValueError:
            pass
    raise InvalidAnswerError(
        message=f"Invalid answer {value!r} for '{field_name}'",
        details={"value": repr(value), "allowed": allowed_values(field_name)},
        field=field_name,
    )


def coerce_answer(field_name: str, value: Any) -> Any:
    """
    Validate and coerce a raw answer for one field.

    ``None`` and ``""`` mean unanswered. ``complex`` takes a list of tags
    (a single tag string is accepted); duplicates are dropped, order kept.
    A set of tags is returned in ``ComplexRisk`` declaration order.

    Raises:
        UnknownFieldError: field_name is not a wizard field
        InvalidAnswerError: value is outside the field's answer set
    """
    if field_name not in FIELD_ENUMS:
        raise UnknownFieldError(
            message=f"Unknown wizard field '{field_name}'",
            details={"known_fields": list(WIZARD_FIELDS)},
            field=field_name,
        )

    if field_name in MULTI_VALUED_FIELDS:
        if value is None or value == "":
            return []
        if isinstance(value, (str, Enum)):
            value = [value]
        if not isinstance(value, (list, tuple, set, frozenset)):
            raise InvalidAnswerError(
                message=f"'{field_name}' must be a list of tags",
                details={"value": repr(value), "allowed": allowed_values(field_name)},
                field=field_name,
            )
        tags: list[Enum] = []
        for item in value:
            tag = _coerce_single(field_name, item)
            if tag not in tags:
                tags.append(tag)
        if isinstance(value, (set, frozenset)):
            # unordered input: fall back to declaration order
            declared = list(FIELD_ENUMS[field_name])
            tags.sort(key=declared.index)
        return tags

    if value is None or value == "":
        return None
    return _coerce_single(field_name, value)


# =============================================================================
# Wizard Inputs
# =============================================================================

@dataclass
class WizardInputs:
    """
    Questionnaire answers for one evaluation.

    Planning fields: scope, pitch, complex, age, consent_status.
    Execution fields: b_type, variation, exec_task, discovery, licence,
    supervision, completion.

    Fields of the pathway that is not selected may be present; the
    evaluator for the selected pathway never reads them.

    Every assignment, including the ones made by ``__init__``, goes through
    ``coerce_answer``, so answers filled in one at a time are validated too.
    """
    pathway: Optional[Pathway] = None

    # Planning phase
    scope: Optional[Scope] = None
    pitch: Optional[Pitch] = None
    complex: list[ComplexRisk] = field(default_factory=list)
    age: Optional[Age] = None
    consent_status: Optional[ConsentStatus] = None

    # Execution phase
    b_type: Optional[BuildingType] = None
    variation: Optional[Variation] = None
    exec_task: Optional[ExecTask] = None
    discovery: Optional[Discovery] = None
    licence: Optional[Licence] = None
    supervision: Optional[Supervision] = None
    completion: Optional[Completion] = None

    def __setattr__(self, name: str, value: Any) -> None:
        if name in FIELD_ENUMS:
            value = coerce_answer(name, value)
        super().__setattr__(name, value)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> WizardInputs:
        """
        Build validated inputs from a plain mapping (e.g. parsed JSON).

        Raises:
            UnknownFieldError: a key is not a wizard field
            InvalidAnswerError: a value is outside its field's answer set
        """
        values = {name: coerce_answer(name, value) for name, value in data.items()}
        return cls(**values)

    def has_risk(self, risk: ComplexRisk) -> bool:
        """True if the complex risk tag is selected."""
        return risk in self.complex

    @property
    def is_residential(self) -> bool:
        """Residential or rental building (RBW applies)."""
        return self.b_type in (BuildingType.RESIDENTIAL, BuildingType.RENTAL)

    def to_dict(self) -> dict[str, Any]:
        """Serialize answered fields to plain JSON values."""
        result: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name in MULTI_VALUED_FIELDS:
                if value:
                    result[f.name] = [_plain(tag) for tag in value]
            elif value is not None:
                result[f.name] = _plain(value)
        return result


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value
