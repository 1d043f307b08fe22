"""
roofcompliance Rule Engine

Evaluation is an ordered fold of rules over an immutable accumulator:

1. Start from an initial Assessment (pathway defaults)
2. For each rule in list order, test its condition against the inputs and
   the assessment so far
3. If it fires, apply its effects in order and record its id

Later rules see earlier rules' effects, so for the consent decision the
last rule to set it wins. Rule order is warning order.

USAGE:
    from roofcompliance.engine.rules import Rule, cite, give_reason, run_rules, when_field

    rules = [
        Rule("PLN-ZERO-PITCH", "Zero pitch roof",
             when=when_field("pitch", Pitch.ZERO),
             effects=(cite("zero_pitch"), give_reason("..."))),
    ]
    assessment = run_rules(rules, inputs)
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, Iterable, Optional, Sequence

from ..exceptions import RuleDefinitionError
from ..knowledge import KNOWLEDGE_BASE, KnowledgeBase
from ..models import (
    Alert,
    ComplexRisk,
    ComplianceResult,
    ComplianceStatus,
    Determination,
    WizardInputs,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Accumulator
# =============================================================================

@dataclass(frozen=True)
class Assessment:
    """
    Partial evaluation state threaded through the rules.

    Every update returns a new instance; rules never mutate one in place.
    """
    consent_required: bool = False
    status: Optional[ComplianceStatus] = None
    banner_class: Optional[str] = None
    banner_title: Optional[str] = None
    banner_subtitle: Optional[str] = None
    warnings: tuple[Alert, ...] = ()
    reasons: tuple[str, ...] = ()
    required_actions: tuple[str, ...] = ()
    rules_fired: tuple[str, ...] = ()

    def with_warning(self, alert: Alert) -> Assessment:
        return replace(self, warnings=self.warnings + (alert,))

    def with_reason(self, text: str) -> Assessment:
        return replace(self, reasons=self.reasons + (text,))

    def with_action(self, text: str) -> Assessment:
        return replace(self, required_actions=self.required_actions + (text,))

    def with_consent(self, required: bool) -> Assessment:
        return replace(self, consent_required=required)

    def with_rule_fired(self, rule_id: str) -> Assessment:
        return replace(self, rules_fired=self.rules_fired + (rule_id,))

    def to_result(self, legislation_keys: Sequence[str]) -> ComplianceResult:
        """
        Freeze the accumulator into a ComplianceResult.

        Raises:
            RuleDefinitionError: no rule set the status or banner
        """
        if self.status is None or self.banner_class is None or self.banner_title is None:
            raise RuleDefinitionError(
                message="Rule set finished without setting a status and banner",
                details={"rules_fired": list(self.rules_fired)},
            )
        return ComplianceResult(
            status=self.status,
            banner_class=self.banner_class,
            banner_title=self.banner_title,
            banner_subtitle=self.banner_subtitle,
            warnings=self.warnings,
            reasons=self.reasons,
            required_actions=self.required_actions,
            legislation_keys=tuple(legislation_keys),
            rules_fired=self.rules_fired,
        )


Effect = Callable[[Assessment], Assessment]
Condition = Callable[[WizardInputs, Assessment], bool]


# =============================================================================
# Effects
# =============================================================================

@dataclass(frozen=True)
class Cite:
    """Attach a knowledge base determination as a warning."""
    determination: Determination

    @property
    def key(self) -> str:
        return self.determination.key

    def __call__(self, assessment: Assessment) -> Assessment:
        return assessment.with_warning(self.determination)


@dataclass(frozen=True)
class Warn:
    """Attach an inline alert as a warning."""
    alert: Alert

    def __call__(self, assessment: Assessment) -> Assessment:
        return assessment.with_warning(self.alert)


@dataclass(frozen=True)
class GiveReason:
    text: str

    def __call__(self, assessment: Assessment) -> Assessment:
        return assessment.with_reason(self.text)


@dataclass(frozen=True)
class RequireAction:
    text: str

    def __call__(self, assessment: Assessment) -> Assessment:
        return assessment.with_action(self.text)


@dataclass(frozen=True)
class SetConsent:
    required: bool

    def __call__(self, assessment: Assessment) -> Assessment:
        return assessment.with_consent(self.required)


@dataclass(frozen=True)
class SetBanner:
    """
    Overwrite the verdict and banner.

    Only the parts given are replaced; ``None`` keeps the current value.
    """
    status: Optional[ComplianceStatus] = None
    banner_class: Optional[str] = None
    banner_title: Optional[str] = None
    banner_subtitle: Optional[str] = None

    def __call__(self, assessment: Assessment) -> Assessment:
        changes: dict[str, Any] = {
            name: value
            for name, value in (
                ("status", self.status),
                ("banner_class", self.banner_class),
                ("banner_title", self.banner_title),
                ("banner_subtitle", self.banner_subtitle),
            )
            if value is not None
        }
        return replace(assessment, **changes)


def cite(key: str, knowledge: Optional[KnowledgeBase] = None) -> Cite:
    """
    Effect citing a determination by key.

    The key is resolved immediately, so a rule table that cites a missing
    determination fails when it is built.

    Raises:
        UnknownDeterminationError: key is not in the knowledge base
    """
    knowledge = knowledge if knowledge is not None else KNOWLEDGE_BASE
    return Cite(knowledge.get_determination(key))


def warn(alert: Alert) -> Warn:
    return Warn(alert)


def give_reason(text: str) -> GiveReason:
    return GiveReason(text)


def require_action(text: str) -> RequireAction:
    return RequireAction(text)


def set_consent(required: bool) -> SetConsent:
    return SetConsent(required)


def set_banner(
    status: Optional[ComplianceStatus] = None,
    banner_class: Optional[str] = None,
    banner_title: Optional[str] = None,
    banner_subtitle: Optional[str] = None,
) -> SetBanner:
    return SetBanner(status, banner_class, banner_title, banner_subtitle)


# =============================================================================
# Conditions
# =============================================================================

def when_field(field_name: str, *values: Any) -> Condition:
    """Fires when the field's answer is one of ``values`` (``None`` = unset)."""
    def condition(inputs: WizardInputs, assessment: Assessment) -> bool:
        return getattr(inputs, field_name) in values
    return condition


def when_field_not(field_name: str, *values: Any) -> Condition:
    """Fires when the field's answer is none of ``values``; unset counts."""
    def condition(inputs: WizardInputs, assessment: Assessment) -> bool:
        return getattr(inputs, field_name) not in values
    return condition


def when_risk(*risks: ComplexRisk) -> Condition:
    """Fires when any of the complex risk tags is selected."""
    def condition(inputs: WizardInputs, assessment: Assessment) -> bool:
        return any(inputs.has_risk(r) for r in risks)
    return condition


def when_residential(inputs: WizardInputs, assessment: Assessment) -> bool:
    return inputs.is_residential


def when_consent_required(inputs: WizardInputs, assessment: Assessment) -> bool:
    return assessment.consent_required


def when_consent_not_required(inputs: WizardInputs, assessment: Assessment) -> bool:
    return not assessment.consent_required


def always(inputs: WizardInputs, assessment: Assessment) -> bool:
    return True


def when_all(*conditions: Condition) -> Condition:
    """Conjunction of conditions."""
    def condition(inputs: WizardInputs, assessment: Assessment) -> bool:
        return all(c(inputs, assessment) for c in conditions)
    return condition


# =============================================================================
# Rules
# =============================================================================

@dataclass(frozen=True)
class Rule:
    """
    A named condition with ordered effects.

    Attributes:
        rule_id: Stable id recorded in ``rules_fired`` (e.g. "PLN-TRUSS")
        name: Human-readable description
        when: Condition over the inputs and the assessment so far
        effects: Applied in order when the rule fires
    """
    rule_id: str
    name: str
    when: Condition
    effects: tuple[Effect, ...]

    def __post_init__(self) -> None:
        if not self.rule_id:
            raise RuleDefinitionError(message="Rule must have rule_id")
        if self.when is None or not callable(self.when):
            raise RuleDefinitionError(
                message=f"Rule {self.rule_id} must have a callable condition",
                details={"rule_id": self.rule_id},
            )
        object.__setattr__(self, "effects", tuple(self.effects))
        if not self.effects:
            raise RuleDefinitionError(
                message=f"Rule {self.rule_id} must have at least one effect",
                details={"rule_id": self.rule_id},
            )

    @property
    def cites(self) -> list[str]:
        """Determination keys this rule attaches."""
        return [e.key for e in self.effects if isinstance(e, Cite)]

    def fires(self, inputs: WizardInputs, assessment: Assessment) -> bool:
        return bool(self.when(inputs, assessment))

    def apply(self, assessment: Assessment) -> Assessment:
        for effect in self.effects:
            assessment = effect(assessment)
        return assessment.with_rule_fired(self.rule_id)


def run_rules(
    rules: Iterable[Rule],
    inputs: WizardInputs,
    initial: Optional[Assessment] = None,
) -> Assessment:
    """
    Fold ``rules`` over ``initial`` in order.

    Returns:
        The final Assessment, with the id of every rule that fired
    """
    assessment = initial if initial is not None else Assessment()
    for rule in rules:
        if rule.fires(inputs, assessment):
            assessment = rule.apply(assessment)
            logger.debug("Rule fired: %s (%s)", rule.rule_id, rule.name)
    return assessment


def referenced_determination_keys(rules: Iterable[Rule]) -> list[str]:
    """Every determination key cited by ``rules``, in rule order, without repeats."""
    keys: list[str] = []
    for rule in rules:
        for key in rule.cites:
            if key not in keys:
                keys.append(key)
    return keys


def missing_citations(rules: Iterable[Rule], knowledge: KnowledgeBase) -> list[str]:
    """Cited determination keys absent from ``knowledge``."""
    return [
        key for key in referenced_determination_keys(rules)
        if key not in knowledge.determinations
    ]
