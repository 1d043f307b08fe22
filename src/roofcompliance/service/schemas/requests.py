"""Request schemas for the API."""

from typing import Literal, Optional

from pydantic import BaseModel, Field

from ...models import WizardInputs

PathwayValue = Literal["planning", "execution"]
ScopeValue = Literal["new", "replace_same", "replace_change"]
PitchValue = Literal["standard", "low", "zero"]
ComplexRiskValue = Literal[
    "gutter", "skillion", "truss", "dormer", "container", "attic_storage",
    "h1_upgrade", "sips", "solar", "asbestos", "none",
]
AgeValue = Literal["old", "young"]
ConsentStatusValue = Literal["yes", "emergency", "no_check"]
BuildingTypeValue = Literal["residential", "rental", "commercial"]
YesNoValue = Literal["yes", "no"]
ExecTaskValue = Literal[
    "finish_eaves", "flashings", "penetration", "substitution", "insulation", "none",
]
DiscoveryValue = Literal["structural", "checked_ok", "none"]
SupervisionValue = Literal["self", "check", "remote"]
CompletionValue = Literal["in_progress", "finished", "dispute", "terminated"]


class WizardInputsRequest(BaseModel):
    """Questionnaire answers. Omitted or null fields are unanswered."""
    pathway: Optional[PathwayValue] = None

    # Planning
    scope: Optional[ScopeValue] = None
    pitch: Optional[PitchValue] = None
    complex: list[ComplexRiskValue] = Field(default_factory=list)
    age: Optional[AgeValue] = None
    consent_status: Optional[ConsentStatusValue] = None

    # Execution
    b_type: Optional[BuildingTypeValue] = None
    variation: Optional[YesNoValue] = None
    exec_task: Optional[ExecTaskValue] = None
    discovery: Optional[DiscoveryValue] = None
    licence: Optional[YesNoValue] = None
    supervision: Optional[SupervisionValue] = None
    completion: Optional[CompletionValue] = None

    model_config = {
        "extra": "forbid",
        "json_schema_extra": {
            "examples": [
                {
                    "pathway": "planning",
                    "scope": "replace_same",
                    "pitch": "low",
                    "complex": ["truss"],
                    "age": "old",
                    "consent_status": "no_check",
                },
                {
                    "pathway": "execution",
                    "b_type": "residential",
                    "variation": "no",
                    "exec_task": "flashings",
                    "discovery": "checked_ok",
                    "licence": "yes",
                    "supervision": "remote",
                    "completion": "dispute",
                },
            ]
        },
    }

    def to_inputs(self) -> WizardInputs:
        return WizardInputs.from_dict(self.model_dump(exclude_none=True))
