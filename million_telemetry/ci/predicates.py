"""Predicate shapes for CI vendor detection rules.

Each rule carries one environment predicate (does this look like vendor X?)
and optionally one pull-request predicate (is this build for a PR?). Every
shape is its own class so matching is done with ``match`` over the variant
instead of inspecting which fields are present.
"""

from pydantic import BaseModel, ConfigDict, Field


class _Predicate(BaseModel):
    model_config = ConfigDict(frozen=True)


class SingleKey(_Predicate):
    """True iff the variable is non-empty."""

    name: str


class AllKeys(_Predicate):
    """True iff every named variable is non-empty."""

    names: tuple[str, ...]


class KeyContains(_Predicate):
    """True iff the variable is set and its value contains ``substring``."""

    name: str
    substring: str


class KeyEquals(_Predicate):
    """True iff every listed variable equals its expected value."""

    mapping: dict[str, str]


class AnyKey(_Predicate):
    """True iff at least one named variable is non-empty."""

    names: tuple[str, ...]


class EnvFlag(_Predicate):
    """PR predicate: true iff the variable is non-empty."""

    name: str


class EnvNotEqual(_Predicate):
    """PR predicate: true iff the variable is set and differs from ``excluded``."""

    name: str
    excluded: str


EnvPredicate = SingleKey | AllKeys | KeyContains | KeyEquals | AnyKey
PRPredicate = EnvFlag | EnvNotEqual | AnyKey | KeyEquals


class VendorRule(BaseModel):
    """Detection rule for a single CI vendor."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Human-readable vendor label")
    constant: str = Field(..., description="Stable vendor identifier")
    env: EnvPredicate = Field(..., description="Predicate identifying the vendor")
    pr: PRPredicate | None = Field(None, description="Predicate identifying a PR build")
