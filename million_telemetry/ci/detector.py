"""CI vendor detection.

Runs the vendor rule table against an environment snapshot and combines the
result with a handful of generic CI variables into a single ``is_ci`` flag.
"""

import logging
import os
from collections.abc import Iterable, Mapping
from functools import lru_cache

from pydantic import BaseModel, Field

from million_telemetry.ci.matcher import matches, pr_matches
from million_telemetry.ci.predicates import VendorRule
from million_telemetry.ci.vendors import VENDORS

logger = logging.getLogger(__name__)

# Generic variables set by many CI systems regardless of vendor
GENERIC_CI_VARIABLES = (
    "BUILD_ID",  # Jenkins, Cloudbees
    "BUILD_NUMBER",  # Jenkins, TeamCity
    "CI",  # Travis CI, CircleCI, Cirrus CI, GitLab CI, AppVeyor, Codeship, dsari
    "CI_APP_ID",  # Appflow
    "CI_BUILD_ID",  # Appflow
    "CI_BUILD_NUMBER",  # Appflow
    "CI_NAME",  # Codeship and others
    "CONTINUOUS_INTEGRATION",  # Travis CI, Cirrus CI
    "RUN_ID",  # TaskCluster, dsari
)


class DetectionResult(BaseModel):
    """Outcome of running the vendor rule table."""

    vendor_name: str | None = Field(None, description="Name of the last matching vendor")
    vendor_flags: dict[str, bool] = Field(
        default_factory=dict, description="Match result per vendor constant"
    )
    is_pr: bool | None = Field(None, description="Pull request build (None if unknown)")


class CIInfo(DetectionResult):
    """Detection result plus the composite CI flag."""

    is_ci: bool = Field(False, description="Whether the process runs under CI")


def detect(rules: Iterable[VendorRule], env: Mapping[str, str]) -> DetectionResult:
    """Evaluate every rule and accumulate the detection result.

    All rules are evaluated; when several match, the last one wins. A
    matching rule without a PR predicate keeps the previous ``is_pr``.

    Args:
        rules: Vendor rules in table order
        env: Environment variables snapshot

    Returns:
        DetectionResult for ``env``
    """
    result = DetectionResult()

    for rule in rules:
        matched = matches(rule.env, env)
        result.vendor_flags[rule.constant] = matched
        if not matched:
            continue

        logger.debug(f"CI vendor rule matched: {rule.constant}")
        result.vendor_name = rule.name
        if rule.pr is not None:
            result.is_pr = pr_matches(rule.pr, env)

    return result


def is_ci(env: Mapping[str, str], vendor_name: str | None = None) -> bool:
    """Decide whether the environment belongs to a CI run.

    ``CI=false`` is an explicit opt-out and beats every other signal.
    """
    if env.get("CI") == "false":
        return False
    if any(env.get(name) for name in GENERIC_CI_VARIABLES):
        return True
    return vendor_name is not None


def detect_ci(
    env: Mapping[str, str] | None = None,
    rules: Iterable[VendorRule] = VENDORS,
) -> CIInfo:
    """Run vendor detection and the composite CI check on one snapshot.

    Args:
        env: Environment variables (defaults to a copy of ``os.environ``)
        rules: Vendor rule table

    Returns:
        CIInfo combining vendor detection and the ``is_ci`` flag
    """
    snapshot = dict(os.environ) if env is None else env
    result = detect(rules, snapshot)
    return CIInfo(**result.model_dump(), is_ci=is_ci(snapshot, result.vendor_name))


@lru_cache(maxsize=1)
def get_ci_info() -> CIInfo:
    """CI information for the current process, computed on first call."""
    return detect_ci()
