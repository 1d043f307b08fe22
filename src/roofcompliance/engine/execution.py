"""
roofcompliance Execution Pathway

Guidance for work under way: licensing and supervision duties, task
specific determinations, and Record of Work (RoW) obligations.

Residential and rental roofing is Restricted Building Work (RBW); only the
building-type rules change the verdict.
"""
from __future__ import annotations

import logging

from ..models import (
    AlertType,
    BuildingType,
    ComplianceResult,
    ComplianceStatus,
    Completion,
    CustomAlert,
    Discovery,
    EXECUTION_FIELDS,
    ExecTask,
    Licence,
    Supervision,
    Variation,
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
    warn,
    when_all,
    when_field,
    when_field_not,
    when_residential,
)

logger = logging.getLogger(__name__)

EXECUTION_LEGISLATION_KEYS: tuple[str, ...] = EXECUTION_FIELDS

EXECUTION_INITIAL = Assessment(
    status=ComplianceStatus.LBP_REQUIRED,
    banner_class="res-consent",
    banner_title="LBP REQUIRED",
    banner_subtitle="Residential Roofing is Restricted Building Work",
)

_UPHELD = "public/upheld_complaints/"


EXECUTION_RULES: tuple[Rule, ...] = (
    # 1. Building type
    Rule(
        "EXE-COMMERCIAL",
        "Commercial work is not RBW",
        when=when_field("b_type", BuildingType.COMMERCIAL),
        effects=(
            set_banner(
                status=ComplianceStatus.COMMERCIAL_EXEMPT,
                banner_class="res-commercial",
                banner_title="COMMERCIAL: LBP NOT MANDATED",
            ),
            give_reason("Commercial work is generally not RBW."),
        ),
    ),
    Rule(
        "EXE-STRUCTURAL-BANNER",
        "Structural discovery on non-commercial work",
        when=when_all(
            when_field_not("b_type", BuildingType.COMMERCIAL),
            when_field("discovery", Discovery.STRUCTURAL),
        ),
        effects=(set_banner(banner_subtitle="Structural Work Discovered (RBW)"),),
    ),
    Rule(
        "EXE-RESIDENTIAL",
        "Residential roofing is RBW",
        when=when_residential,
        effects=(
            give_reason(
                "<strong>Residential Rule:</strong> This work is Restricted Building Work "
                "(RBW). It must be supervised by an LBP, with the relevant licence class."
            ),
        ),
    ),
    Rule(
        "EXE-RENTAL-VENTILATION",
        "Rental moisture loads",
        when=when_field("b_type", BuildingType.RENTAL),
        effects=(
            warn(CustomAlert(
                type=AlertType.WARNING,
                title="Rental Property Ventilation (Det 2015/057)",
                content=(
                    "Tenanted properties have higher moisture loads. MBIE rules often "
                    "require <strong>Mechanical Ventilation</strong> (kitchen/bathroom "
                    "extraction) to meet Clause E3, as tenants cannot be relied upon to "
                    "open windows."
                ),
            )),
        ),
    ),
    # 2. Task
    Rule(
        "EXE-TASK-EAVES",
        "Finishing underlay at the eaves",
        when=when_field("exec_task", ExecTask.FINISH_EAVES),
        effects=(
            cite("underlay_uv"),
            require_action("Trim underlay at gutter line. Install metal turn-downs."),
        ),
    ),
    Rule(
        "EXE-TASK-FLASHINGS",
        "Flashing laps",
        when=when_field("exec_task", ExecTask.FLASHINGS),
        effects=(cite("flashing_laps"),),
    ),
    Rule(
        "EXE-TASK-PENETRATION",
        "Flue and pipe penetrations",
        when=when_field("exec_task", ExecTask.PENETRATION),
        effects=(cite("flue_gap"),),
    ),
    Rule(
        "EXE-TASK-SUBSTITUTION",
        "Product substitution",
        when=when_field("exec_task", ExecTask.SUBSTITUTION),
        effects=(
            cite("membrane_sub"),
            warn(CustomAlert(
                type=AlertType.CASE_STUDY,
                title="Substitution Warning (Dhillon [2025])",
                content=(
                    "Swapping '5-Rib' for 'Brownbuilt 900' without a variation was ruled "
                    "as negligent. You must have paperwork for product swaps."
                ),
                pdf_link=_UPHELD + "gaganjeet-dhillon-2025-bpb-26605.pdf",
            )),
            require_action("STOP: Apply for Amendment (Form 2) before installing."),
        ),
    ),
    Rule(
        "EXE-TASK-INSULATION",
        "Roof insulation",
        when=when_field("exec_task", ExecTask.INSULATION),
        effects=(
            cite("spray_foam"),
            warn(CustomAlert(
                type=AlertType.WARNING,
                title="PIR Board (Det 2017/071)",
                content=(
                    "If using PIR board, ensure thermal breaks and cavities match NZ "
                    "construction standards. Overseas certificates (BBA) are valid but "
                    "installation details must be adapted for NZ."
                ),
            )),
        ),
    ),
    # 3. Variation
    Rule(
        "EXE-VARIATION",
        "Unapproved variation",
        when=when_field("variation", Variation.YES),
        effects=(
            warn(CustomAlert(
                type=AlertType.CASE_STUDY,
                title="STOP: Variation / Substitution (Langdon [2025])",
                content="Unapproved changes = Fines. Apply for Minor Variation (Form 45A).",
                pdf_link=_UPHELD + "langdon-2025-bpb-cb26658-finalised-draft-decision.pdf",
            )),
        ),
    ),
    # 4. Discovery
    Rule(
        "EXE-DISCOVERY-STRUCTURAL",
        "Structural defects found",
        when=when_field("discovery", Discovery.STRUCTURAL),
        effects=(
            give_reason(
                "<strong>Structural Finding:</strong> Replacing substrate/purlins is RBW. "
                "New work MUST meet current code (s112)."
            ),
        ),
    ),
    Rule(
        "EXE-DISCOVERY-UNCHECKED",
        "Substrate not inspected",
        when=when_field("discovery", Discovery.NONE),
        effects=(
            warn(CustomAlert(
                type=AlertType.CASE_STUDY,
                title="Substrate Liability (Woolhouse [2024])",
                content=(
                    "The Board ruled that if you cover up a builder's mistake, you "
                    "<strong>adopt that defect</strong> as your own.<br><br>"
                    "<strong>Advice:</strong> Always inspect the substrate before starting."
                ),
                pdf_link=_UPHELD + "jesse-woolhouse-2024-bpb-cb26464.pdf",
            )),
        ),
    ),
    # 5. Licence
    Rule(
        "EXE-LICENCE",
        "Working outside licence class",
        when=when_field("licence", Licence.NO),
        effects=(
            warn(CustomAlert(
                type=AlertType.CASE_STUDY,
                title="Licence Breach (Casha [2025])",
                content=(
                    "You are working outside your licence class. You cannot supervise "
                    "this work."
                ),
                pdf_link=_UPHELD + "christopher-scott-casha-2025-bpb-cb26690-finalised-draft-decision.pdf",
            )),
            warn(CustomAlert(
                type=AlertType.WARNING,
                title="Tanking vs Roofing (Wu [2025])",
                content=(
                    "While Tanking is RBW, confusion exists over which licence covers it. "
                    "Ensure your licence explicitly covers the scope of work (e.g. External "
                    "Plastering/Foundations vs Roofing)."
                ),
            )),
        ),
    ),
    # 6. Supervision
    Rule(
        "EXE-SUPERVISION-REMOTE",
        "Remote supervision",
        when=when_field("supervision", Supervision.REMOTE),
        effects=(
            warn(CustomAlert(
                type=AlertType.CASE_STUDY,
                title="Supervision Risk (Horrack [2024])",
                content="Remote supervision requires physical inspection.",
                pdf_link=_UPHELD + "bjorn-horrack-2024-bpb-26456-redacted.pdf",
            )),
            warn(CustomAlert(
                type=AlertType.CASE_STUDY,
                title="Subcontracting & Liability (Bogue [2024])",
                content=(
                    "You cannot outsource your RoW liability. Even if you subcontract the "
                    "labour, if you are the lead LBP, you must ensure the Record of Work "
                    "is provided."
                ),
                pdf_link=_UPHELD + "scott-bogue-2024-bpb-26384.pdf",
            )),
            require_action("Schedule a physical site inspection immediately."),
        ),
    ),
    # 7. Completion
    Rule(
        "EXE-COMPLETION-IN-PROGRESS",
        "Work in progress",
        when=when_field("completion", Completion.IN_PROGRESS),
        effects=(
            give_reason(
                "<strong>Status:</strong> Work in progress. Maintain compliant supervision."
            ),
        ),
    ),
    Rule(
        "EXE-COMPLETION-IN-PROGRESS-ROW",
        "RoW reminder for residential work in progress",
        when=when_all(when_field("completion", Completion.IN_PROGRESS), when_residential),
        effects=(
            give_reason("<strong>Reminder:</strong> Issue Record of Work upon completion."),
        ),
    ),
    Rule(
        "EXE-COMPLETION-FINISHED-ROW",
        "RoW on completion",
        when=when_all(when_field("completion", Completion.FINISHED), when_residential),
        effects=(require_action("Issue Record of Work (RoW) to Owner AND Council."),),
    ),
    Rule(
        "EXE-COMPLETION-DISPUTE",
        "Payment dispute",
        when=when_field("completion", Completion.DISPUTE),
        effects=(
            warn(CustomAlert(
                type=AlertType.CASE_STUDY,
                title="Issue RoW Now (Moyes [2025])",
                content="Do not withhold RoW for payment.",
                pdf_link=_UPHELD + "moyes-2025-bpb-cb26670-finalised-draft-decision.pdf",
            )),
        ),
    ),
    Rule(
        "EXE-COMPLETION-DISPUTE-ROW",
        "RoW is statutory during a dispute",
        when=when_all(when_field("completion", Completion.DISPUTE), when_residential),
        effects=(
            require_action(
                "Issue Record of Work (RoW) to the Owner & Council immediately. Your "
                "obligation to certify RBW is statutory, not contractual. Withholding an "
                "RoW as leverage for payment is a disciplinary offence."
            ),
        ),
    ),
    Rule(
        "EXE-COMPLETION-TERMINATED-ROW",
        "RoW for work done before termination",
        when=when_all(when_field("completion", Completion.TERMINATED), when_residential),
        effects=(
            require_action(
                "Issue RoW to Owner & Council for the specific work done to date. This "
                "creates a liability 'line in the sand'."
            ),
        ),
    ),
    # 8. General
    Rule(
        "EXE-GENERAL-ROW",
        "RoW to owner and council",
        when=when_residential,
        effects=(give_reason("<strong>General:</strong> Send RoW to Owner AND Council."),),
    ),
)


def evaluate_execution(inputs: WizardInputs) -> ComplianceResult:
    """
    Evaluate the execution pathway.

    An unset ``exec_task`` behaves like "none" and an unset ``b_type`` like
    a non-commercial, non-residential building.
    """
    assessment = run_rules(EXECUTION_RULES, inputs, EXECUTION_INITIAL)
    logger.debug("Execution verdict: %s", assessment.status)
    return assessment.to_result(EXECUTION_LEGISLATION_KEYS)
