"""Tests for redaction policy construction and loading."""

import json

import pytest

from debug_logging.redaction_policy import (
    DEFAULT_POLICY,
    RedactionPolicy,
    as_policy,
    load_policy_from_json,
    merge_policy,
)


def test_default_policy_matches_nothing():
    assert not DEFAULT_POLICY
    assert DEFAULT_POLICY.matches("secret") is False


def test_matching_is_case_insensitive_substring():
    policy = RedactionPolicy.of(["Token"])

    assert policy.matches("x-TOKEN-y")
    assert not policy.matches("tok")


def test_empty_fragment_rejected():
    with pytest.raises(ValueError):
        RedactionPolicy.of([""])


def test_as_policy_accepts_common_shapes():
    assert as_policy(None) is DEFAULT_POLICY
    assert as_policy("secret").fragments == frozenset({"secret"})
    assert as_policy(["a", "b"]).fragments == frozenset({"a", "b"})

    policy = RedactionPolicy.of(["c"])
    assert as_policy(policy) is policy


def test_merge_policy_unions_fragments():
    merged = merge_policy(["secret"], RedactionPolicy.of(["token"]))

    assert merged.fragments == frozenset({"secret", "token"})


def test_load_policy_from_json_object(tmp_path):
    path = tmp_path / "policy.json"
    path.write_text(json.dumps({"redact_keys": ["secret", "password"]}), encoding="utf-8")

    policy = load_policy_from_json(str(path))

    assert policy.fragments == frozenset({"secret", "password"})


def test_load_policy_from_json_list(tmp_path):
    path = tmp_path / "policy.json"
    path.write_text('["token"]', encoding="utf-8")

    assert load_policy_from_json(str(path)).matches("my token")


def test_load_policy_rejects_bad_shapes(tmp_path):
    path = tmp_path / "policy.json"
    path.write_text('{"fields": ["x"]}', encoding="utf-8")
    with pytest.raises(ValueError):
        load_policy_from_json(str(path))

    path.write_text('{"redact_keys": "secret"}', encoding="utf-8")
    with pytest.raises(ValueError):
        load_policy_from_json(str(path))

    path.write_text('{"redact_keys": [1]}', encoding="utf-8")
    with pytest.raises(ValueError):
        load_policy_from_json(str(path))


def test_load_policy_missing_file_raises_file_not_found(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_policy_from_json(str(tmp_path / "absent.json"))


def test_bare_string_is_one_fragment():
    assert RedactionPolicy.of("secret").fragments == frozenset({"secret"})
    assert RedactionPolicy(fragments="secret").fragments == frozenset({"secret"})
    assert not RedactionPolicy.of("secret").matches("rest")


def test_fragments_are_normalized_to_frozenset():
    policy = RedactionPolicy(fragments=["a", "a", "b"])

    assert policy.fragments == frozenset({"a", "b"})
