"""Anonymous usage telemetry with CI environment detection."""

from million_telemetry.ci import CIInfo, DetectionResult, detect, detect_ci, get_ci_info, is_ci
from million_telemetry.config import GlobalConfig
from million_telemetry.recorder import MillionTelemetry
from million_telemetry.schema import Envelope, TelemetryEvent
from million_telemetry.system_info import SystemInfo
from million_telemetry.version import __version__

__all__ = [
    "CIInfo",
    "DetectionResult",
    "Envelope",
    "GlobalConfig",
    "MillionTelemetry",
    "SystemInfo",
    "TelemetryEvent",
    "__version__",
    "detect",
    "detect_ci",
    "get_ci_info",
    "is_ci",
]
