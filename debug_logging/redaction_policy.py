"""
Redaction policy for debug payloads.

A policy is a set of text fragments. A leaf value is redacted when its
natural string form contains any fragment, ignoring case. Matching looks at
the value, never at the key it is stored under.

Typical usage:
1) Build a policy from fragments, or load one via `load_policy_from_json(...)`
2) Hand it to `DebugDictionaryBuilder` (see `sanitizer.py`)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union
import json


def validate_fragments(fragments: Iterable[str]) -> None:
    for fragment in fragments:
        if not isinstance(fragment, str):
            raise ValueError(f"redaction fragment must be a string, got {fragment!r}")
        # An empty fragment would be contained in every value.
        if not fragment:
            raise ValueError("redaction fragment must be non-empty")


def _as_fragment_set(fragments: Union[str, Iterable[str]]) -> frozenset[str]:
    # A bare string is one fragment, not a set of characters.
    if isinstance(fragments, str):
        return frozenset([fragments])
    return frozenset(fragments)


@dataclass(frozen=True, slots=True)
class RedactionPolicy:
    """
    Case-insensitive substring fragments that mark a value as sensitive.

    An empty policy matches nothing.
    """

    fragments: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        fragments = _as_fragment_set(self.fragments)
        validate_fragments(fragments)
        object.__setattr__(self, "fragments", fragments)

    @classmethod
    def of(cls, fragments: Union[str, Iterable[str]]) -> "RedactionPolicy":
        return cls(_as_fragment_set(fragments))

    def matches(self, text: str) -> bool:
        folded = text.casefold()
        return any(fragment.casefold() in folded for fragment in self.fragments)

    def __bool__(self) -> bool:
        return bool(self.fragments)


PolicyLike = Union[RedactionPolicy, Iterable[str], None]

DEFAULT_POLICY = RedactionPolicy()


def as_policy(policy: PolicyLike) -> RedactionPolicy:
    """
    Normalize a policy argument: None, a RedactionPolicy, or any iterable of fragments.

    A bare string is treated as a single fragment rather than a set of characters.
    """
    if policy is None:
        return DEFAULT_POLICY
    if isinstance(policy, RedactionPolicy):
        return policy
    return RedactionPolicy.of(policy)


def merge_policy(base: PolicyLike, overrides: PolicyLike) -> RedactionPolicy:
    """
    Create a new policy matching everything either input matches.
    """
    return RedactionPolicy(as_policy(base).fragments | as_policy(overrides).fragments)


def load_policy_from_json(path: str) -> RedactionPolicy:
    """
    Load a redaction policy from a JSON file.

    Expected JSON shape (a bare list of fragments is also accepted):
    {
      "redact_keys": ["secret", "token", "password"]
    }
    """
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)

    if isinstance(raw, dict):
        if "redact_keys" not in raw:
            raise ValueError(f"policy JSON in {path!r} has no 'redact_keys' entry")
        raw = raw["redact_keys"]
    if not isinstance(raw, list):
        raise ValueError(f"'redact_keys' must be a list of strings, got {type(raw).__name__}")

    return RedactionPolicy.of(raw)
