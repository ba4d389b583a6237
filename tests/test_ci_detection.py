"""Tests for CI vendor detection.

Tests cover:
- Predicate matching for every shape
- Pull request predicates
- Rule table accumulation and precedence
- Composite CI flag
"""

import pytest

from million_telemetry.ci import VENDORS, detect, detect_ci, is_ci, matches, pr_matches
from million_telemetry.ci.predicates import (
    AllKeys,
    AnyKey,
    EnvFlag,
    EnvNotEqual,
    KeyContains,
    KeyEquals,
    SingleKey,
    VendorRule,
)


class TestMatcher:
    """Tests for environment predicate matching."""

    def test_single_key(self):
        """Test single key requires a non-empty value."""
        predicate = SingleKey(name="TRAVIS")
        assert matches(predicate, {"TRAVIS": "true"})
        assert not matches(predicate, {"TRAVIS": ""})
        assert not matches(predicate, {})

    def test_all_keys(self):
        """Test all keys must be non-empty."""
        predicate = AllKeys(names=("K1", "K2"))
        assert matches(predicate, {"K1": "x", "K2": "y"})
        assert not matches(predicate, {"K1": "x"})
        assert not matches(predicate, {"K1": "x", "K2": ""})

    def test_key_contains(self):
        """Test substring match is case sensitive and needs the variable."""
        predicate = KeyContains(name="NODE", substring="/app/.heroku/node/bin/node")
        assert matches(predicate, {"NODE": "/app/.heroku/node/bin/node"})
        assert matches(predicate, {"NODE": "x:/app/.heroku/node/bin/node:y"})
        assert not matches(predicate, {"NODE": "/APP/.HEROKU/NODE/BIN/NODE"})
        assert not matches(predicate, {})

    def test_key_equals(self):
        """Test every mapping entry must match exactly."""
        predicate = KeyEquals(mapping={"CI_NAME": "codeship", "EXTRA": "1"})
        assert matches(predicate, {"CI_NAME": "codeship", "EXTRA": "1"})
        assert not matches(predicate, {"CI_NAME": "codeship"})
        assert not matches(predicate, {"CI_NAME": "Codeship", "EXTRA": "1"})

    def test_any_key(self):
        """Test at least one key must be non-empty."""
        predicate = AnyKey(names=("NOW_BUILDER", "VERCEL"))
        assert matches(predicate, {"VERCEL": "1"})
        assert matches(predicate, {"NOW_BUILDER": "1", "VERCEL": ""})
        assert not matches(predicate, {"VERCEL": ""})

    def test_unknown_predicate_raises(self):
        """Test that an unsupported predicate type is a programming error."""
        with pytest.raises(TypeError):
            matches(EnvFlag(name="X"), {"X": "1"})


class TestPullRequestMatcher:
    """Tests for pull request predicates."""

    def test_env_flag(self):
        assert pr_matches(EnvFlag(name="CIRCLE_PULL_REQUEST"), {"CIRCLE_PULL_REQUEST": "url"})
        assert not pr_matches(EnvFlag(name="CIRCLE_PULL_REQUEST"), {})

    def test_env_not_equal(self):
        """Test that only a present, different value counts."""
        predicate = EnvNotEqual(name="TRAVIS_PULL_REQUEST", excluded="false")
        assert not pr_matches(predicate, {})
        assert pr_matches(predicate, {"TRAVIS_PULL_REQUEST": "123"})
        assert not pr_matches(predicate, {"TRAVIS_PULL_REQUEST": "false"})

    def test_key_equals(self):
        predicate = KeyEquals(mapping={"BUILD_REASON": "PullRequest"})
        assert pr_matches(predicate, {"BUILD_REASON": "PullRequest"})
        assert not pr_matches(predicate, {"BUILD_REASON": "Manual"})

    def test_any_key(self):
        predicate = AnyKey(names=("ghprbPullId", "CHANGE_ID"))
        assert pr_matches(predicate, {"CHANGE_ID": "5"})
        assert not pr_matches(predicate, {})


class TestVendorTable:
    """Tests for the vendor rule table."""

    def test_names_unique(self):
        names = [rule.name for rule in VENDORS]
        assert len(names) == len(set(names))

    def test_constants_unique(self):
        constants = [rule.constant for rule in VENDORS]
        assert len(constants) == len(set(constants))

    def test_rules_are_immutable(self):
        with pytest.raises(Exception):
            VENDORS[0].name = "Other"


class TestDetect:
    """Tests for rule table detection."""

    def test_no_match(self):
        """Test that an empty environment matches nothing."""
        result = detect(VENDORS, {})
        assert result.vendor_name is None
        assert result.is_pr is None
        assert set(result.vendor_flags) == {rule.constant for rule in VENDORS}
        assert not any(result.vendor_flags.values())

    def test_github_actions_pull_request(self):
        result = detect(VENDORS, {"GITHUB_ACTIONS": "true", "GITHUB_EVENT_NAME": "pull_request"})
        assert result.vendor_name == "GitHub Actions"
        assert result.is_pr is True
        assert result.vendor_flags["GITHUB_ACTIONS"]

    def test_github_actions_push(self):
        result = detect(VENDORS, {"GITHUB_ACTIONS": "true", "GITHUB_EVENT_NAME": "push"})
        assert result.vendor_name == "GitHub Actions"
        assert result.is_pr is False

    def test_vendor_without_pr_predicate(self):
        """Test that PR status stays unknown when the vendor can't tell."""
        result = detect(VENDORS, {"TEAMCITY_VERSION": "2024.1"})
        assert result.vendor_name == "TeamCity"
        assert result.is_pr is None

    def test_heroku(self):
        result = detect(VENDORS, {"NODE": "/app/.heroku/node/bin/node"})
        assert result.vendor_name == "Heroku"

    def test_last_match_wins(self):
        """Test that later rules override earlier matches."""
        rules = [
            VendorRule(name="First", constant="FIRST", env=SingleKey(name="A"), pr=EnvFlag(name="PR")),
            VendorRule(name="Second", constant="SECOND", env=SingleKey(name="B")),
        ]
        result = detect(rules, {"A": "1", "B": "1", "PR": "1"})

        assert result.vendor_name == "Second"
        # Second has no PR predicate, so First's answer is kept
        assert result.is_pr is True
        assert result.vendor_flags == {"FIRST": True, "SECOND": True}

    def test_later_pr_predicate_overrides(self):
        rules = [
            VendorRule(name="First", constant="FIRST", env=SingleKey(name="A"), pr=EnvFlag(name="PR")),
            VendorRule(
                name="Second", constant="SECOND", env=SingleKey(name="B"), pr=EnvFlag(name="NOPE")
            ),
        ]
        result = detect(rules, {"A": "1", "B": "1", "PR": "1"})
        assert result.is_pr is False


class TestCompositeCI:
    """Tests for the composite CI flag."""

    def test_empty_environment(self):
        info = detect_ci({})
        assert info.is_ci is False
        assert info.vendor_name is None

    @pytest.mark.parametrize(
        "name",
        [
            "CI",
            "BUILD_ID",
            "BUILD_NUMBER",
            "CI_NAME",
            "CONTINUOUS_INTEGRATION",
            "RUN_ID",
            "CI_APP_ID",
            "CI_BUILD_ID",
            "CI_BUILD_NUMBER",
        ],
    )
    def test_generic_variables(self, name):
        assert is_ci({name: "1"})

    def test_vendor_name_alone(self):
        assert is_ci({}, vendor_name="Bamboo")

    def test_explicit_opt_out(self):
        """Test that CI=false wins over a vendor match."""
        info = detect_ci({"CI": "false", "GITHUB_ACTIONS": "true", "BUILD_ID": "9"})
        assert info.vendor_name == "GitHub Actions"
        assert info.is_ci is False

    def test_github_actions_end_to_end(self):
        info = detect_ci({"GITHUB_ACTIONS": "true", "GITHUB_EVENT_NAME": "pull_request"})
        assert info.vendor_name == "GitHub Actions"
        assert info.is_pr is True
        assert info.is_ci is True

    def test_jenkins_end_to_end(self):
        info = detect_ci({"JENKINS_URL": "http://x", "BUILD_ID": "42", "ghprbPullId": "7"})
        assert info.vendor_name == "Jenkins"
        assert info.is_pr is True
        assert info.is_ci is True

    def test_jenkins_needs_both_variables(self):
        info = detect_ci({"JENKINS_URL": "http://x"})
        assert info.vendor_name is None
        assert info.is_ci is False
