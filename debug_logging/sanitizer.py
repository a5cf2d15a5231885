"""
Turn arbitrary payloads into JSON-safe structures for debug logging.

Logging must never be the thing that crashes: every input, however exotic,
degrades to a string. Sensitive leaves are swapped for a small envelope that
keeps the value's type for diagnostics:

    {"value": "[REDACTED]", "type": "String", "isNilOrEmpty": false}

`isNilOrEmpty` is only present for the String and Null tags. None is always
enveloped, whatever the policy says; timestamps are never redacted.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Mapping, Optional
import json
import logging
import re

from debug_logging.date_formatting import DEFAULT_DATE_FORMATTER, DateFormatter
from debug_logging.redaction_policy import PolicyLike, RedactionPolicy, as_policy

logger = logging.getLogger(__name__)

# Placeholder used in logs instead of real values.
REDACTED_PLACEHOLDER = "[REDACTED]"

# "\/" produced by an encoder, i.e. not itself preceded by an escaped backslash.
_ESCAPED_SLASH = re.compile(r"(?<!\\)((?:\\\\)*)\\/")


def _describe(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        logger.debug("str() failed for %s, using object repr", type(value).__name__, exc_info=True)
        return object.__repr__(value)


@dataclass(frozen=True, slots=True)
class Opaque:
    """
    A value of no recognised kind, reduced to its text and type name.
    """

    description: str
    type_name: str

    @classmethod
    def of(cls, value: Any) -> "Opaque":
        if isinstance(value, Opaque):
            return value
        return cls(description=_describe(value), type_name=type(value).__name__)


def _envelope(type_tag: str, *, is_nil_or_empty: Optional[bool] = None) -> Dict[str, Any]:
    out: Dict[str, Any] = {"value": REDACTED_PLACEHOLDER, "type": type_tag}
    if is_nil_or_empty is not None:
        out["isNilOrEmpty"] = is_nil_or_empty
    return out


class DebugDictionaryBuilder:
    """
    Build pretty-printed JSON descriptions of debug payloads.

    Args:
        policy: Fragments (or a RedactionPolicy) whose presence in a value's
            text, ignoring case, gets that value redacted.
        date_formatter: Renders datetime values. Defaults to the fixed UTC profile.
        redaction_enabled: If False, only JSON-legality is enforced: no
            envelopes are produced and None stays null.
    """

    def __init__(
        self,
        policy: PolicyLike = None,
        *,
        date_formatter: Optional[DateFormatter] = None,
        redaction_enabled: bool = True,
    ) -> None:
        self.policy: RedactionPolicy = as_policy(policy)
        self.date_formatter = date_formatter or DEFAULT_DATE_FORMATTER
        self.redaction_enabled = redaction_enabled

    def _should_redact(self, text: str) -> bool:
        return self.redaction_enabled and bool(self.policy) and self.policy.matches(text)

    def sanitize(self, value: Any) -> Any:
        """
        Return a JSON-safe copy of value. The input is never mutated.
        """
        if isinstance(value, str):
            if self._should_redact(value):
                return _envelope("String", is_nil_or_empty=value == "")
            return value
        if isinstance(value, bool):
            if self._should_redact("true" if value else "false"):
                return _envelope("Bool")
            return value
        if isinstance(value, int):
            try:
                text = str(int(value))
            except ValueError:
                # Past the interpreter's int-to-str digit limit; hex has none.
                text = hex(value)
                return _envelope("Int") if self._should_redact(text) else text
            if self._should_redact(text):
                return _envelope("Int")
            return value
        if isinstance(value, float):
            if self._should_redact(repr(float(value))):
                return _envelope("Double")
            return value
        if value is None:
            if not self.redaction_enabled:
                return None
            return _envelope("Null", is_nil_or_empty=True)
        if isinstance(value, datetime):
            try:
                return self.date_formatter.format(value)
            except (OverflowError, ValueError):
                logger.debug("could not format %r, describing it instead", value, exc_info=True)
        elif isinstance(value, Mapping):
            return {k: self.sanitize(v) for k, v in value.items()}
        elif isinstance(value, (list, tuple)):
            return [self.sanitize(item) for item in value]

        opaque = Opaque.of(value)
        if self._should_redact(opaque.description):
            return _envelope(opaque.type_name)
        return opaque.description

    def make_description(self, dictionary: Mapping[str, Any]) -> str:
        """
        Sanitize dictionary and render it as pretty-printed JSON.

        Escaped slashes ("\\/") are written as plain "/". If encoding fails
        the plain str() of the sanitized dict is returned instead.
        """
        safe = self.sanitize(dictionary)
        try:
            text = json.dumps(
                safe,
                indent=2,
                separators=(",", " : "),
                ensure_ascii=False,
                allow_nan=False,
            )
        except (TypeError, ValueError):
            logger.warning("debug payload is not JSON encodable, using plain description", exc_info=True)
            return _describe(safe)
        return _ESCAPED_SLASH.sub(r"\1/", text)


def sanitize_value(
    value: Any,
    policy: PolicyLike = None,
    *,
    date_formatter: Optional[DateFormatter] = None,
    redaction_enabled: bool = True,
) -> Any:
    builder = DebugDictionaryBuilder(
        policy, date_formatter=date_formatter, redaction_enabled=redaction_enabled
    )
    return builder.sanitize(value)


def make_description(
    dictionary: Mapping[str, Any],
    policy: PolicyLike = None,
    *,
    date_formatter: Optional[DateFormatter] = None,
    redaction_enabled: bool = True,
) -> str:
    """
    Sanitize-and-render entry point. See DebugDictionaryBuilder.make_description.
    """
    builder = DebugDictionaryBuilder(
        policy, date_formatter=date_formatter, redaction_enabled=redaction_enabled
    )
    return builder.make_description(dictionary)
