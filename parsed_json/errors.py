"""Errors raised by JSONInspector when decoding or type-checking fails."""

from __future__ import annotations

from typing import Any


class ParsedJSONError(Exception):
    """Base class for inspector failures."""


class InvalidEncoding(ParsedJSONError):
    def __init__(self) -> None:
        super().__init__("Failed to decode JSON text as UTF-8.")


class DecodeError(ParsedJSONError):
    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Malformed JSON: {detail}")


class NotAMap(ParsedJSONError):
    def __init__(self, actual: str) -> None:
        self.actual = actual
        super().__init__(f"Expected a JSON object, got {actual}.")


class MissingKey(ParsedJSONError):
    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Missing required key: {key!r}")


class TypeMismatch(ParsedJSONError):
    def __init__(self, key: str, expected: str, actual: str, value: Any) -> None:
        self.key = key
        self.expected = expected
        self.actual = actual
        self.value = value
        super().__init__(
            f"Expected value of type {expected} for key {key!r}, but got {actual}: {value!r}"
        )
