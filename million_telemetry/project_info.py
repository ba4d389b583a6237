"""Anonymous project identification.

The project id is a SHA-256 hash, so neither the repository URL nor the
local path ever leaves the machine.
"""

import hashlib
import logging
import subprocess
from pathlib import Path

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class ProjectInfo(BaseModel):
    """Anonymized project information."""

    anonymous_project_id: str = Field("", description="Hashed project identifier")
    is_git: bool = Field(False, description="Project id derived from a git remote")


def hash_value(value: str) -> str:
    """SHA-256 hex digest of a string."""
    return hashlib.sha256(value.encode()).hexdigest()


def get_git_remote_url(cwd: Path | str | None = None) -> str | None:
    """Get ``remote.origin.url`` of the repository at ``cwd``.

    Returns:
        Remote URL, or None if git is missing or no remote is configured
    """
    try:
        completed = subprocess.run(
            ["git", "config", "--local", "--get", "remote.origin.url"],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=5,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug(f"git remote lookup failed: {e}")
        return None

    if completed.returncode != 0:
        return None
    return completed.stdout.strip() or None


def get_project_info(is_ci: bool, cwd: Path | str | None = None) -> ProjectInfo:
    """Derive anonymous project information.

    Uses the git remote when there is one. Outside of git, the working
    directory identifies the project, except under CI where checkout paths
    are meaningless and the id is left empty.

    Args:
        is_ci: Whether the process runs under CI
        cwd: Project directory (defaults to the current directory)

    Returns:
        ProjectInfo instance
    """
    remote_url = get_git_remote_url(cwd)
    if remote_url:
        return ProjectInfo(anonymous_project_id=hash_value(remote_url), is_git=True)

    if is_ci:
        return ProjectInfo()

    directory = Path(cwd) if cwd else Path.cwd()
    return ProjectInfo(anonymous_project_id=hash_value(str(directory.resolve())))
