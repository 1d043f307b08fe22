"""
Tests for the rule fold.

Tests cover:
- Rule definition validation
- Effect application and ordering
- Later rules seeing earlier effects (last writer wins)
- Citation resolution
"""
import pytest

from roofcompliance.engine import (
    EXECUTION_RULES,
    PLANNING_RULES,
    Assessment,
    Rule,
    cite,
    give_reason,
    referenced_determination_keys,
    require_action,
    run_rules,
    set_banner,
    set_consent,
    warn,
)
from roofcompliance.engine.rules import always, when_consent_required, when_field
from roofcompliance.exceptions import RuleDefinitionError, UnknownDeterminationError
from roofcompliance.knowledge import DETERMINATION_DATABASE
from roofcompliance.models import (
    AlertType,
    ComplianceStatus,
    CustomAlert,
    Pitch,
    WizardInputs,
)


# =============================================================================
# Rule Definition
# =============================================================================

class TestRuleDefinition:

    def test_empty_id_rejected(self):
        with pytest.raises(RuleDefinitionError):
            Rule("", "No id", when=always, effects=(set_consent(True),))

    def test_missing_condition_rejected(self):
        with pytest.raises(RuleDefinitionError):
            Rule("R-1", "No condition", when=None, effects=(set_consent(True),))

    def test_no_effects_rejected(self):
        with pytest.raises(RuleDefinitionError):
            Rule("R-1", "No effects", when=always, effects=())

    def test_effects_list_becomes_tuple(self):
        rule = Rule("R-1", "List effects", when=always, effects=[set_consent(True)])

        assert isinstance(rule.effects, tuple)

    def test_cites(self):
        rule = Rule(
            "R-1", "Cites two",
            when=always,
            effects=(cite("zero_pitch"), give_reason("x"), cite("flue_gap")),
        )

        assert rule.cites == ["zero_pitch", "flue_gap"]

    def test_cite_unknown_key_fails_at_definition(self):
        with pytest.raises(UnknownDeterminationError):
            cite("chimney_fire")

    def test_rule_ids_unique(self):
        ids = [r.rule_id for r in PLANNING_RULES + EXECUTION_RULES]

        assert len(ids) == len(set(ids))

    def test_referenced_keys(self):
        keys = referenced_determination_keys(PLANNING_RULES)

        assert keys == [
            "zero_pitch", "low_pitch_repair", "skillion_vent", "truss_cow",
            "dormer_fire", "container_roof", "attic_storage",
        ]


# =============================================================================
# Fold
# =============================================================================

class TestRunRules:

    def test_effects_applied_in_order(self):
        alert = CustomAlert(type=AlertType.INFO, title="Note", content="Body")
        rules = [
            Rule("R-1", "All effects", when=always, effects=(
                give_reason("first"),
                warn(alert),
                cite("zero_pitch"),
                require_action("act"),
                give_reason("second"),
            )),
        ]

        assessment = run_rules(rules, WizardInputs())

        assert assessment.reasons == ("first", "second")
        assert assessment.warnings == (alert, DETERMINATION_DATABASE["zero_pitch"])
        assert assessment.required_actions == ("act",)
        assert assessment.rules_fired == ("R-1",)

    def test_rule_not_firing_leaves_assessment(self):
        rules = [
            Rule("R-1", "Zero only", when=when_field("pitch", Pitch.ZERO),
                 effects=(give_reason("zero"),)),
        ]
        initial = Assessment(reasons=("start",))

        assessment = run_rules(rules, WizardInputs(pitch="low"), initial)

        assert assessment == initial

    def test_last_writer_wins(self):
        rules = [
            Rule("R-ON", "On", when=always, effects=(set_consent(True),)),
            Rule("R-OFF", "Off", when=always, effects=(set_consent(False),)),
        ]

        assert run_rules(rules, WizardInputs()).consent_required is False
        assert run_rules(list(reversed(rules)), WizardInputs()).consent_required is True

    def test_later_rule_sees_earlier_effects(self):
        rules = [
            Rule("R-ON", "On", when=always, effects=(set_consent(True),)),
            Rule("R-CHECK", "Check", when=when_consent_required,
                 effects=(give_reason("consent seen"),)),
        ]

        assessment = run_rules(rules, WizardInputs())

        assert assessment.reasons == ("consent seen",)
        assert assessment.rules_fired == ("R-ON", "R-CHECK")

    def test_initial_not_mutated(self):
        initial = Assessment()
        run_rules([Rule("R-1", "x", when=always, effects=(give_reason("x"),))],
                  WizardInputs(), initial)

        assert initial.reasons == ()

    def test_set_banner_keeps_unspecified_parts(self):
        initial = Assessment(
            status=ComplianceStatus.LBP_REQUIRED,
            banner_class="res-consent",
            banner_title="LBP REQUIRED",
            banner_subtitle="Subtitle",
        )
        rules = [Rule("R-1", "Banner", when=always,
                      effects=(set_banner(banner_title="CHANGED"),))]

        assessment = run_rules(rules, WizardInputs(), initial)

        assert assessment.banner_title == "CHANGED"
        assert assessment.banner_subtitle == "Subtitle"
        assert assessment.status == ComplianceStatus.LBP_REQUIRED


class TestToResult:

    def test_requires_status(self):
        with pytest.raises(RuleDefinitionError):
            Assessment().to_result(())

    def test_builds_result(self):
        assessment = Assessment(
            status=ComplianceStatus.LIKELY_EXEMPT,
            banner_class="res-exempt",
            banner_title="LIKELY EXEMPT",
            reasons=("r",),
        )

        result = assessment.to_result(["scope"])

        assert result.legislation_keys == ("scope",)
        assert result.reasons == ("r",)
