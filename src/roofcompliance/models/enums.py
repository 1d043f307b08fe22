"""
roofcompliance Enumerations

Answer sets for every questionnaire field, plus the alert and status
classifications the engine emits.

All enums inherit from (str, Enum) for JSON serialization compatibility,
so ``Scope.NEW == "new"`` holds.
"""
from __future__ import annotations

from enum import Enum


# =============================================================================
# Pathway
# =============================================================================

class Pathway(str, Enum):
    """Which stage of the job the questionnaire evaluates."""
    PLANNING = "planning"      # Pre-work design / consent questions
    EXECUTION = "execution"    # On-site workmanship, supervision, disputes


# =============================================================================
# Planning Answers
# =============================================================================

class Scope(str, Enum):
    """Scope of the roofing work."""
    NEW = "new"                        # New build or extension
    REPLACE_SAME = "replace_same"      # Like-for-like, same position
    REPLACE_CHANGE = "replace_change"  # Replacement with design changes


class Pitch(str, Enum):
    """Roof pitch band."""
    STANDARD = "standard"  # > 3 degrees
    LOW = "low"            # 1.5 - 3 degrees
    ZERO = "zero"          # < 1.5 degrees


class ComplexRisk(str, Enum):
    """Complex risk tags. ``NONE`` is an explicit 'none of the above'."""
    GUTTER = "gutter"
    SKILLION = "skillion"
    TRUSS = "truss"
    DORMER = "dormer"
    CONTAINER = "container"
    ATTIC_STORAGE = "attic_storage"
    H1_UPGRADE = "h1_upgrade"
    SIPS = "sips"
    SOLAR = "solar"
    ASBESTOS = "asbestos"
    NONE = "none"


class Age(str, Enum):
    """Age of the failed roof (15-year rule)."""
    OLD = "old"      # Over 15 years, normal end of life
    YOUNG = "young"  # Under 15 years, premature failure


class ConsentStatus(str, Enum):
    """Whether a building consent has been confirmed."""
    YES = "yes"
    EMERGENCY = "emergency"  # s41(c) emergency work
    NO_CHECK = "no_check"    # Unsure / not confirmed


# =============================================================================
# Execution Answers
# =============================================================================

class BuildingType(str, Enum):
    """Building use; residential and rental work is RBW."""
    RESIDENTIAL = "residential"
    RENTAL = "rental"
    COMMERCIAL = "commercial"


class Variation(str, Enum):
    """Deviation from the consented plans."""
    YES = "yes"
    NO = "no"


class ExecTask(str, Enum):
    """Specific execution task being performed."""
    FINISH_EAVES = "finish_eaves"
    FLASHINGS = "flashings"
    PENETRATION = "penetration"
    SUBSTITUTION = "substitution"
    INSULATION = "insulation"
    NONE = "none"


class Discovery(str, Enum):
    """Substrate / structure check outcome."""
    STRUCTURAL = "structural"  # Rot or non-compliant structure found
    CHECKED_OK = "checked_ok"
    NONE = "none"              # Not checked yet


class Licence(str, Enum):
    """Whether the LBP licence class covers the work."""
    YES = "yes"
    NO = "no"


class Supervision(str, Enum):
    """How the work is supervised."""
    SELF = "self"
    CHECK = "check"    # Supervising others with physical checks
    REMOTE = "remote"  # Remote / no inspection


class Completion(str, Enum):
    """How the job stands or concluded."""
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"
    DISPUTE = "dispute"
    TERMINATED = "terminated"


# =============================================================================
# Output Classifications
# =============================================================================

class AlertType(str, Enum):
    """Visual / severity class of a warning."""
    DANGER = "danger-box"
    WARNING = "warning-box"
    PRECEDENT = "precedent-box"
    SUCCESS = "success-box"
    CASE_STUDY = "case-study-box"
    TECH = "tech-alert"
    INFO = "info-box"


class ComplianceStatus(str, Enum):
    """Verdict of an evaluation."""
    CONSENT_REQUIRED = "consent_required"
    LBP_REQUIRED = "lbp_required"
    LIKELY_EXEMPT = "likely_exempt"
    COMMERCIAL_EXEMPT = "commercial_exempt"
    CHECK_REQUIRED = "check_required"
