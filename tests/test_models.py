"""
Tests for data models.

Tests cover:
- WizardInputs validation and coercion
- Alert serialization
- ComplianceResult JSON shape
"""
import json

import pytest

from roofcompliance.canon import inputs_hash
from roofcompliance.engine import (
    PLANNING_LEGISLATION_KEYS,
    evaluate_compliance,
    get_next_required_field,
)
from roofcompliance.exceptions import InvalidAnswerError, UnknownFieldError
from roofcompliance.knowledge import get_determination
from roofcompliance.models import (
    AlertType,
    BuildingType,
    ComplexRisk,
    ComplianceResult,
    ComplianceStatus,
    CustomAlert,
    Pathway,
    Scope,
    WizardInputs,
    allowed_values,
    coerce_answer,
)

from tests.conftest import make_execution_inputs, make_planning_inputs


# =============================================================================
# WizardInputs
# =============================================================================

class TestWizardInputs:

    def test_defaults_unanswered(self):
        inputs = WizardInputs()

        assert inputs.pathway is None
        assert inputs.complex == []
        assert inputs.to_dict() == {}

    def test_from_dict_coerces_enums(self):
        inputs = WizardInputs.from_dict({"pathway": "planning", "scope": "new"})

        assert inputs.pathway == Pathway.PLANNING
        assert inputs.scope == Scope.NEW

    def test_constructor_coerces_strings(self):
        inputs = WizardInputs(b_type="rental")

        assert inputs.b_type == BuildingType.RENTAL
        assert inputs.is_residential

    def test_empty_string_is_unanswered(self):
        inputs = WizardInputs.from_dict({"pathway": "", "complex": ""})

        assert inputs.pathway is None
        assert inputs.complex == []

    def test_single_complex_tag(self):
        inputs = WizardInputs.from_dict({"complex": "truss"})

        assert inputs.complex == [ComplexRisk.TRUSS]

    def test_duplicate_complex_tags_dropped(self):
        inputs = WizardInputs.from_dict({"complex": ["truss", "solar", "truss"]})

        assert inputs.complex == [ComplexRisk.TRUSS, ComplexRisk.SOLAR]

    def test_complex_must_be_list(self):
        with pytest.raises(InvalidAnswerError):
            WizardInputs.from_dict({"complex": 3})

    def test_unknown_field(self):
        with pytest.raises(UnknownFieldError) as exc_info:
            WizardInputs.from_dict({"roof_colour": "red"})

        assert exc_info.value.field == "roof_colour"
        assert exc_info.value.code == "RC_UNKNOWN_FIELD"

    def test_invalid_answer(self):
        with pytest.raises(InvalidAnswerError) as exc_info:
            WizardInputs.from_dict({"pitch": "steep"})

        assert exc_info.value.details["allowed"] == ["standard", "low", "zero"]

    def test_non_string_answer(self):
        with pytest.raises(InvalidAnswerError):
            coerce_answer("pitch", 3)

    def test_allowed_values(self):
        assert allowed_values("completion") == ["in_progress", "finished", "dispute", "terminated"]
        with pytest.raises(UnknownFieldError):
            allowed_values("colour")

    def test_has_risk(self):
        inputs = make_planning_inputs(complex=["skillion"])

        assert inputs.has_risk(ComplexRisk.SKILLION)
        assert not inputs.has_risk(ComplexRisk.TRUSS)

    def test_commercial_not_residential(self):
        assert not make_execution_inputs(b_type="commercial").is_residential
        assert not WizardInputs().is_residential

    def test_to_dict_round_trip(self):
        inputs = make_planning_inputs(complex=["truss", "sips"])

        assert WizardInputs.from_dict(inputs.to_dict()) == inputs

    def test_set_of_tags_in_declaration_order(self):
        tags = coerce_answer("complex", {"solar", "truss", "gutter"})

        assert tags == [ComplexRisk.GUTTER, ComplexRisk.TRUSS, ComplexRisk.SOLAR]

    def test_set_of_tags_hashes_like_list(self):
        from_set = WizardInputs.from_dict({"complex": frozenset({"sips", "dormer"})})
        from_list = WizardInputs.from_dict({"complex": ["dormer", "sips"]})

        assert inputs_hash(from_set) == inputs_hash(from_list)


class TestWizardInputsAssignment:

    def test_assignment_coerces_strings(self):
        inputs = WizardInputs()
        inputs.pathway = "planning"
        inputs.scope = "new"

        assert inputs.pathway == Pathway.PLANNING
        assert inputs.scope == Scope.NEW

    def test_answers_filled_one_at_a_time_evaluate(self):
        inputs = WizardInputs()
        inputs.pathway = "planning"
        inputs.complex = ["truss"]

        result = evaluate_compliance(inputs)

        assert result.legislation_keys == PLANNING_LEGISLATION_KEYS
        assert result.status == ComplianceStatus.CONSENT_REQUIRED

    def test_assignment_rejects_invalid_answer(self):
        inputs = WizardInputs()

        with pytest.raises(InvalidAnswerError) as exc_info:
            inputs.pathway = "bogus"

        assert exc_info.value.field == "pathway"
        assert inputs.pathway is None

    def test_assigning_none_to_complex_clears_it(self):
        inputs = make_planning_inputs()
        inputs.complex = None

        assert inputs.complex == []
        assert get_next_required_field(inputs) == "complex"


# =============================================================================
# Alerts
# =============================================================================

class TestAlerts:

    def test_custom_alert_pdf_link_only_when_set(self):
        plain = CustomAlert(type=AlertType.TECH, title="T", content="C")
        linked = CustomAlert(type=AlertType.CASE_STUDY, title="T", content="C", pdf_link="a.pdf")

        assert plain.to_dict() == {"type": "tech-alert", "title": "T", "content": "C"}
        assert linked.to_dict()["pdfLink"] == "a.pdf"

    def test_determination_to_dict(self):
        data = get_determination("flue_gap").to_dict()

        assert data["key"] == "flue_gap"
        assert set(data) == {"key", "id", "file", "title", "summary", "type"}


# =============================================================================
# ComplianceResult
# =============================================================================

class TestComplianceResult:

    def test_to_dict_camel_case(self):
        result = evaluate_compliance(make_execution_inputs(exec_task="flashings"))
        data = result.to_dict()

        assert data["status"] == "lbp_required"
        assert data["bannerClass"] == "res-consent"
        assert data["bannerTitle"] == "LBP REQUIRED"
        assert data["bannerSubtitle"] == "Residential Roofing is Restricted Building Work"
        assert data["warnings"][0]["key"] == "flashing_laps"
        assert data["legislationKeys"][0] == "b_type"
        assert "requiredActions" in data
        assert "rulesFired" in data

    def test_subtitle_omitted_when_none(self):
        data = evaluate_compliance(make_planning_inputs()).to_dict()

        assert "bannerSubtitle" not in data

    def test_json_serialisable(self):
        result = evaluate_compliance(make_planning_inputs(
            scope="new", pitch="zero", complex=["sips", "solar"], consent_status="no_check",
        ))

        json.dumps(result.to_dict())

    def test_frozen(self):
        result = ComplianceResult(
            status=ComplianceStatus.CHECK_REQUIRED,
            banner_class="res-check",
            banner_title="SELECT PATHWAY",
        )
        with pytest.raises(AttributeError):
            result.status = ComplianceStatus.LIKELY_EXEMPT
