"""
roofcompliance Planning Pathway

Decides whether planned roofing work needs a building consent (and with
it a Licensed Building Practitioner), and which determinations, precedents
and technical cautions apply.

Rule order matters: warnings appear in firing order, and later consent
rules override earlier ones. Low-pitch like-for-like repair switches
consent off; truss and container work switch it back on.
"""
from __future__ import annotations

import logging

from ..models import (
    AlertType,
    ComplexRisk,
    ComplianceResult,
    ComplianceStatus,
    ConsentStatus,
    CustomAlert,
    PLANNING_FIELDS,
    Pitch,
    Scope,
    Age,
    WizardInputs,
)
from .rules import (
    Assessment,
    Rule,
    cite,
    give_reason,
    require_action,
    run_rules,
    set_banner,
    set_consent,
    warn,
    when_all,
    when_consent_not_required,
    when_consent_required,
    when_field,
    when_field_not,
    when_risk,
)

logger = logging.getLogger(__name__)

PLANNING_LEGISLATION_KEYS: tuple[str, ...] = PLANNING_FIELDS

PLANNING_INITIAL = Assessment(consent_required=False)


PLANNING_RULES: tuple[Rule, ...] = (
    # Base consent triggers
    Rule(
        "PLN-BASE-COMPLEX",
        "Internal gutter or container roof needs consent",
        when=when_risk(ComplexRisk.GUTTER, ComplexRisk.CONTAINER),
        effects=(set_consent(True),),
    ),
    Rule(
        "PLN-BASE-SCOPE",
        "Anything other than like-for-like replacement needs consent",
        when=when_field_not("scope", Scope.REPLACE_SAME),
        effects=(set_consent(True),),
    ),
    Rule(
        "PLN-BASE-AGE",
        "Roof under 15 years old is outside the repair exemption",
        when=when_field("age", Age.YOUNG),
        effects=(set_consent(True),),
    ),
    Rule(
        "PLN-ZERO-PITCH",
        "Zero pitch needs a protected membrane system",
        when=when_field("pitch", Pitch.ZERO),
        effects=(
            cite("zero_pitch"),
            give_reason(
                "<strong>Zero Pitch:</strong> Requires 'Protected Membrane System' "
                "(Ballasted/Insulated) to comply."
            ),
        ),
    ),
    Rule(
        "PLN-LOW-PITCH-REPAIR",
        "Like-for-like low pitch repair is exempt",
        when=when_all(
            when_field("pitch", Pitch.LOW),
            when_field("scope", Scope.REPLACE_SAME),
        ),
        effects=(set_consent(False), cite("low_pitch_repair")),
    ),
    Rule(
        "PLN-SKILLION",
        "Skillion roof ventilation",
        when=when_risk(ComplexRisk.SKILLION),
        effects=(cite("skillion_vent"),),
    ),
    Rule(
        "PLN-TRUSS",
        "Truss alteration is structural",
        when=when_risk(ComplexRisk.TRUSS),
        effects=(set_consent(True), cite("truss_cow")),
    ),
    Rule(
        "PLN-DORMER",
        "Dormer fire separation",
        when=when_risk(ComplexRisk.DORMER),
        effects=(cite("dormer_fire"),),
    ),
    Rule(
        "PLN-CONTAINER",
        "Container roof is a building",
        when=when_risk(ComplexRisk.CONTAINER),
        effects=(set_consent(True), cite("container_roof")),
    ),
    Rule(
        "PLN-ATTIC-STORAGE",
        "Attic storage loads ceiling joists",
        when=when_risk(ComplexRisk.ATTIC_STORAGE),
        effects=(
            cite("attic_storage"),
            give_reason(
                "<strong>Structure (B1):</strong> Ceiling joists cannot act as floor joists."
            ),
        ),
    ),
    Rule(
        "PLN-SIPS",
        "Fixing to structural insulated panels",
        when=when_risk(ComplexRisk.SIPS),
        effects=(
            warn(CustomAlert(
                type=AlertType.CASE_STUDY,
                title="SIPs Warning (McFarlane [2025])",
                content=(
                    "Fixing cladding to SIPs is specialised. Standard timber frame "
                    "fixings/cavities may not apply. Lack of specific knowledge was "
                    "ruled as incompetence."
                ),
                pdf_link="public/upheld_complaints/ramon-mcfarlane-2025-bpb-26638-redacted.pdf",
            )),
        ),
    ),
    Rule(
        "PLN-SOLAR",
        "Solar panels change the load path",
        when=when_risk(ComplexRisk.SOLAR),
        effects=(
            warn(CustomAlert(
                type=AlertType.TECH,
                title="Solar & Structure (Education)",
                content=(
                    "<strong>Why it matters:</strong> Solar panels alter the structural "
                    "load path. Standard roof trusses are designed for \"distributed "
                    "loads\", not \"point loads\". <br><br><strong>Action:</strong> "
                    "Verify structure (B1) and flashings (E2)."
                ),
            )),
        ),
    ),
    Rule(
        "PLN-ASBESTOS",
        "Asbestos presumed in older buildings",
        when=when_risk(ComplexRisk.ASBESTOS),
        effects=(
            warn(CustomAlert(
                type=AlertType.TECH,
                title="Asbestos & The Law",
                content=(
                    "<strong>The Rule:</strong> Pre-2000 buildings are presumed to contain "
                    "asbestos. You generally cannot disturb materials without a negative test."
                ),
            )),
        ),
    ),
    Rule(
        "PLN-SKILLION-H1",
        "Skillion plus H1 insulation upgrade",
        when=when_all(
            when_risk(ComplexRisk.SKILLION),
            when_risk(ComplexRisk.H1_UPGRADE),
        ),
        effects=(
            warn(CustomAlert(
                type=AlertType.WARNING,
                title="DOUBLE RISK: Skillion + Insulation",
                content=(
                    "<strong>The Conflict:</strong> Thick H1 insulation (R6.6) in a shallow "
                    "skillion roof often blocks the 25mm air gap.<br><strong>Advice:</strong> "
                    "Raise the roof height (Consent required) or use high-density "
                    "insulation boards."
                ),
            )),
        ),
    ),
    Rule(
        "PLN-INTERNAL-GUTTER",
        "Internal gutter conversion alters drainage",
        when=when_risk(ComplexRisk.GUTTER),
        effects=(
            warn(CustomAlert(
                type=AlertType.TECH,
                title="Internal Gutters",
                content=(
                    "<strong>Why Consent is needed:</strong> Converting an internal gutter "
                    "to an external one alters drainage design (Clause E1)."
                ),
            )),
        ),
    ),
    Rule(
        "PLN-CONSENT-UNCHECKED",
        "Consent needed but not checked",
        when=when_all(
            when_field("consent_status", ConsentStatus.NO_CHECK),
            when_consent_required,
        ),
        effects=(
            warn(CustomAlert(
                type=AlertType.CASE_STUDY,
                title="Danger (Corbett-Pearson [2024])",
                content="Failing to check for consent is negligence. Verify now.",
                pdf_link="public/upheld_complaints/dean-corbett-pearson-2024-bpb-26512-redacted.pdf",
            )),
        ),
    ),
    Rule(
        "PLN-EMERGENCY",
        "Emergency work done without consent",
        when=when_field("consent_status", ConsentStatus.EMERGENCY),
        effects=(
            require_action("Apply for Certificate of Acceptance (s42) immediately."),
        ),
    ),
    # Verdict
    Rule(
        "PLN-VERDICT-CONSENT",
        "Consent and LBP required",
        when=when_consent_required,
        effects=(
            give_reason("<strong>LBP Required:</strong> Restricted Building Work."),
            set_banner(
                status=ComplianceStatus.CONSENT_REQUIRED,
                banner_class="res-consent",
                banner_title="CONSENT & LBP REQUIRED",
            ),
        ),
    ),
    Rule(
        "PLN-VERDICT-EXEMPT",
        "Likely exempt",
        when=when_consent_not_required,
        effects=(
            give_reason("<strong>No LBP Mandate:</strong> (But recommended)."),
            set_banner(
                status=ComplianceStatus.LIKELY_EXEMPT,
                banner_class="res-exempt",
                banner_title="LIKELY EXEMPT",
            ),
        ),
    ),
)


def evaluate_planning(inputs: WizardInputs) -> ComplianceResult:
    """
    Evaluate the planning pathway.

    Total over validated inputs: unanswered fields simply fire nothing
    (an unset scope still counts as "not like-for-like").
    """
    assessment = run_rules(PLANNING_RULES, inputs, PLANNING_INITIAL)
    logger.debug(
        "Planning verdict: consent_required=%s rules=%d",
        assessment.consent_required,
        len(assessment.rules_fired),
    )
    return assessment.to_result(PLANNING_LEGISLATION_KEYS)
