"""
Tests for wizard navigation and answer editing.
"""
import pytest

from roofcompliance.engine import (
    answer,
    get_next_required_field,
    initial_inputs,
    is_wizard_complete,
    required_fields,
    toggle_complex_risk,
    wizard_progress,
)
from roofcompliance.exceptions import InvalidAnswerError, UnknownFieldError
from roofcompliance.models import ComplexRisk, ExecTask, Pitch, Scope, WizardInputs

from tests.conftest import make_execution_inputs, make_planning_inputs


# =============================================================================
# Completeness
# =============================================================================

class TestCompleteness:

    def test_empty_inputs(self):
        inputs = WizardInputs()

        assert not is_wizard_complete(inputs)
        assert get_next_required_field(inputs) == "pathway"

    def test_complete_planning(self):
        inputs = make_planning_inputs()

        assert is_wizard_complete(inputs)
        assert get_next_required_field(inputs) is None

    def test_complete_execution(self):
        inputs = make_execution_inputs()

        assert is_wizard_complete(inputs)
        assert get_next_required_field(inputs) is None

    def test_planning_order(self):
        inputs = WizardInputs.from_dict({"pathway": "planning"})
        expected = ["scope", "pitch", "complex", "age", "consent_status"]
        seen = []

        values = {
            "scope": "replace_same",
            "pitch": "low",
            "complex": ["none"],
            "age": "old",
            "consent_status": "yes",
        }
        for _ in range(len(expected) + 1):
            field_name = get_next_required_field(inputs)
            if field_name is None:
                break
            seen.append(field_name)
            inputs = answer(inputs, field_name, values[field_name])

        assert seen == expected
        assert is_wizard_complete(inputs)

    def test_execution_order(self):
        inputs = make_execution_inputs(
            b_type=None, variation=None, discovery=None,
            licence=None, supervision=None, completion=None,
        )

        assert required_fields(inputs) == [
            "pathway", "b_type", "variation", "discovery",
            "licence", "supervision", "completion",
        ]
        assert get_next_required_field(inputs) == "b_type"

    def test_age_not_required_for_new_work(self):
        inputs = make_planning_inputs(scope="new", age=None)

        assert "age" not in required_fields(inputs)
        assert is_wizard_complete(inputs)

    def test_age_required_for_like_for_like(self):
        inputs = make_planning_inputs(age=None)

        assert get_next_required_field(inputs) == "age"
        assert not is_wizard_complete(inputs)

    def test_empty_complex_is_unanswered(self):
        inputs = make_planning_inputs(complex=[])

        assert get_next_required_field(inputs) == "complex"
        assert not is_wizard_complete(inputs)

    def test_none_sentinel_counts_as_answered(self):
        assert is_wizard_complete(make_planning_inputs(complex=["none"]))

    def test_exec_task_never_required(self):
        inputs = make_execution_inputs(exec_task=None)

        assert "exec_task" not in required_fields(inputs)
        assert is_wizard_complete(inputs)

    def test_complete_iff_no_next_field(self):
        cases = [
            WizardInputs(),
            make_planning_inputs(),
            make_planning_inputs(age=None),
            make_planning_inputs(scope=None),
            make_execution_inputs(),
            make_execution_inputs(completion=None),
        ]
        for inputs in cases:
            assert is_wizard_complete(inputs) == (get_next_required_field(inputs) is None)


class TestProgress:

    def test_progress_snapshot(self):
        progress = wizard_progress(make_planning_inputs(consent_status=None))

        assert progress.required == ("pathway", "scope", "pitch", "complex", "age", "consent_status")
        assert progress.answered == ("pathway", "scope", "pitch", "complex", "age")
        assert progress.next_field == "consent_status"
        assert progress.complete is False

    def test_progress_to_dict(self):
        data = wizard_progress(make_execution_inputs()).to_dict()

        assert data["complete"] is True
        assert data["nextField"] is None


# =============================================================================
# Answer Editing
# =============================================================================

class TestAnswerEditing:

    def test_initial_inputs(self):
        inputs = initial_inputs()

        assert inputs.pathway is None
        assert inputs.pitch == Pitch.STANDARD
        assert inputs.exec_task == ExecTask.NONE
        assert inputs.complex == []
        assert get_next_required_field(inputs) == "pathway"

    def test_answer_returns_copy(self):
        inputs = initial_inputs()
        updated = answer(inputs, "scope", "new")

        assert updated.scope == Scope.NEW
        assert inputs.scope is None

    def test_answer_clears_with_none(self):
        updated = answer(make_planning_inputs(), "scope", None)

        assert updated.scope is None

    def test_answer_unknown_field(self):
        with pytest.raises(UnknownFieldError):
            answer(initial_inputs(), "colour", "red")

    def test_answer_invalid_value(self):
        with pytest.raises(InvalidAnswerError) as exc_info:
            answer(initial_inputs(), "pitch", "steep")

        assert exc_info.value.field == "pitch"


class TestToggleComplexRisk:

    def test_check_tag(self):
        inputs = toggle_complex_risk(initial_inputs(), "truss", True)

        assert inputs.complex == [ComplexRisk.TRUSS]

    def test_check_none_clears_others(self):
        inputs = make_planning_inputs(complex=["truss", "solar"])
        inputs = toggle_complex_risk(inputs, ComplexRisk.NONE, True)

        assert inputs.complex == [ComplexRisk.NONE]

    def test_check_tag_removes_none(self):
        inputs = make_planning_inputs(complex=["none"])
        inputs = toggle_complex_risk(inputs, "gutter", True)

        assert inputs.complex == [ComplexRisk.GUTTER]

    def test_uncheck_tag(self):
        inputs = make_planning_inputs(complex=["truss", "solar"])
        inputs = toggle_complex_risk(inputs, "truss", False)

        assert inputs.complex == [ComplexRisk.SOLAR]

    def test_uncheck_none(self):
        inputs = make_planning_inputs(complex=["none"])
        inputs = toggle_complex_risk(inputs, "none", False)

        assert inputs.complex == []

    def test_check_twice_no_duplicate(self):
        inputs = toggle_complex_risk(initial_inputs(), "truss", True)
        inputs = toggle_complex_risk(inputs, "truss", True)

        assert inputs.complex == [ComplexRisk.TRUSS]

    def test_invalid_tag(self):
        with pytest.raises(InvalidAnswerError):
            toggle_complex_risk(initial_inputs(), "chimney", True)
