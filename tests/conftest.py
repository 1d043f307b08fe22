"""
Pytest configuration and fixtures for roofcompliance tests.

Provides factory helpers that build complete questionnaire answers, so
each test only spells out the answers it is about.
"""
import pytest

from roofcompliance.models import WizardInputs


# =============================================================================
# Factory Helpers
# =============================================================================

def make_planning_inputs(**overrides) -> WizardInputs:
    """
    Complete planning answers for a like-for-like reroof of an old roof.

    With no overrides this is consent-free: scope replace_same, standard
    pitch, no complex risks, roof over 15 years old, consent confirmed.
    """
    data = {
        "pathway": "planning",
        "scope": "replace_same",
        "pitch": "standard",
        "complex": ["none"],
        "age": "old",
        "consent_status": "yes",
    }
    data.update(overrides)
    return WizardInputs.from_dict(data)


def make_execution_inputs(**overrides) -> WizardInputs:
    """
    Complete execution answers for a residential job with no red flags.
    """
    data = {
        "pathway": "execution",
        "b_type": "residential",
        "variation": "no",
        "exec_task": "none",
        "discovery": "checked_ok",
        "licence": "yes",
        "supervision": "self",
        "completion": "finished",
    }
    data.update(overrides)
    return WizardInputs.from_dict(data)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def planning_inputs() -> WizardInputs:
    return make_planning_inputs()


@pytest.fixture
def execution_inputs() -> WizardInputs:
    return make_execution_inputs()


@pytest.fixture
def minimal_pack_yaml() -> str:
    """Smallest knowledge pack the loader accepts."""
    return """
schema_version: "1.0.0"
pack_id: "TEST-PACK"
name: "Test Pack"
jurisdiction: "nz"
version: "0.1"
determinations:
  zero_pitch:
    id: "Det 2016/016"
    file: "2016-016.pdf"
    title: "Zero Pitch Exception"
    summary: "Protected membranes can comply."
    type: precedent-box
case_studies:
  newton_2023:
    id: "Newton [2023]"
    file: "newton.pdf"
    title: "Newton"
    summary: "Consent was required."
explanations:
  pitch:
    question: "Roof Pitch"
    options:
      zero:
        ref: "Det 2016/016"
        text: "Zero pitch needs a protected membrane."
"""
