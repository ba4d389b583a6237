"""System facts attached to every telemetry event."""

import os
import platform
import sys
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

from million_telemetry.ci import get_ci_info
from million_telemetry.version import __version__


class SystemInfo(BaseModel):
    """Anonymous description of the machine sending the event."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    is_ci: bool = Field(..., alias="isCI", description="Running under CI")
    ci_name: str | None = Field(None, alias="ciName", description="Detected CI vendor")
    is_pr: bool | None = Field(None, alias="isPR", description="Pull request build")
    system_platform: str = Field(..., alias="systemPlatform", description="OS name")
    system_release: str = Field(..., alias="systemRelease", description="OS release")
    system_architecture: str = Field(..., alias="systemArchitecture", description="CPU arch")
    python_version: str = Field(..., alias="pythonVersion", description="Interpreter version")
    cpu_count: int | None = Field(None, alias="cpuCount", description="Logical CPUs")
    cpu_model: str | None = Field(None, alias="cpuModel", description="Processor name")
    package_version: str = Field(__version__, alias="packageVersion")


@lru_cache(maxsize=1)
def get_system_info() -> SystemInfo:
    """Collect system facts once per process."""
    ci = get_ci_info()
    return SystemInfo(
        is_ci=ci.is_ci,
        ci_name=ci.vendor_name,
        is_pr=ci.is_pr,
        system_platform=platform.system(),
        system_release=platform.release(),
        system_architecture=platform.machine(),
        python_version=sys.version.split()[0],
        cpu_count=os.cpu_count(),
        cpu_model=platform.processor() or None,
    )
