"""Evaluate detection predicates against an environment snapshot.

Both functions are pure: they only read from the mapping they are given and
treat a missing variable as the empty string.
"""

from collections.abc import Mapping

from million_telemetry.ci.predicates import (
    AllKeys,
    AnyKey,
    EnvFlag,
    EnvNotEqual,
    EnvPredicate,
    KeyContains,
    KeyEquals,
    PRPredicate,
    SingleKey,
)


def _is_set(env: Mapping[str, str], name: str) -> bool:
    return bool(env.get(name, ""))


def _all_equal(env: Mapping[str, str], mapping: Mapping[str, str]) -> bool:
    return all(name in env and env[name] == expected for name, expected in mapping.items())


def matches(predicate: EnvPredicate, env: Mapping[str, str]) -> bool:
    """Check whether an environment predicate holds.

    Args:
        predicate: Vendor environment predicate
        env: Environment variables snapshot

    Returns:
        True if the predicate holds for ``env``
    """
    match predicate:
        case SingleKey(name=name):
            return _is_set(env, name)
        case AllKeys(names=names):
            return all(_is_set(env, name) for name in names)
        case KeyContains(name=name, substring=substring):
            return _is_set(env, name) and substring in env[name]
        case KeyEquals(mapping=mapping):
            return _all_equal(env, mapping)
        case AnyKey(names=names):
            return any(_is_set(env, name) for name in names)
        case _:
            raise TypeError(f"Unsupported environment predicate: {predicate!r}")


def pr_matches(predicate: PRPredicate, env: Mapping[str, str]) -> bool:
    """Check whether a pull-request predicate holds.

    ``EnvNotEqual`` only counts a variable that is present: an unset
    variable is not a pull request.
    """
    match predicate:
        case EnvFlag(name=name):
            return _is_set(env, name)
        case EnvNotEqual(name=name, excluded=excluded):
            return name in env and env[name] != excluded
        case AnyKey(names=names):
            return any(_is_set(env, name) for name in names)
        case KeyEquals(mapping=mapping):
            return _all_equal(env, mapping)
        case _:
            raise TypeError(f"Unsupported pull request predicate: {predicate!r}")
