"""CI environment detection."""

from million_telemetry.ci.detector import (
    CIInfo,
    DetectionResult,
    detect,
    detect_ci,
    get_ci_info,
    is_ci,
)
from million_telemetry.ci.matcher import matches, pr_matches
from million_telemetry.ci.vendors import VENDORS

__all__ = [
    "CIInfo",
    "DetectionResult",
    "VENDORS",
    "detect",
    "detect_ci",
    "get_ci_info",
    "is_ci",
    "matches",
    "pr_matches",
]
