"""
Typed, fail-fast access to parsed JSON, for test assertions and diagnostics.

    doc = parse(make_description({"user": {"name": "Alice", "age": 30}}))
    user = doc.require_nested_object("user")
    assert user.require("age", int) == 30

Type checks are exact: an int is not a float, and a bool is not an int.
Nested access returns new inspectors; nothing is ever mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Type, TypeVar, Union
import json

from debug_logging.sanitizer import make_description
from parsed_json.errors import DecodeError, InvalidEncoding, MissingKey, NotAMap, TypeMismatch

T = TypeVar("T")

_LEAF_TYPES = (str, int, float, bool, type(None))


def _reject_constant(name: str) -> Any:
    # NaN / Infinity are accepted by the json module but are not JSON.
    raise ValueError(f"non-standard JSON constant {name!r}")


def _type_name(value: Any) -> str:
    return type(value).__name__


def count_leaves(value: Any) -> int:
    """
    Count the scalar nodes under value. Containers count as the sum of their
    children; any value of an unexpected type counts as a single leaf.
    """
    if isinstance(value, _LEAF_TYPES):
        return 1
    if isinstance(value, dict):
        return sum(count_leaves(v) for v in value.values())
    if isinstance(value, list):
        return sum(count_leaves(v) for v in value)
    return 1


@dataclass(frozen=True, slots=True)
class JSONInspector:
    root: Any

    @classmethod
    def parse(cls, text: Union[str, bytes]) -> "JSONInspector":
        """
        Decode UTF-8 JSON text.

        Raises:
            InvalidEncoding: text is not valid UTF-8.
            DecodeError: text is not valid JSON.
        """
        try:
            if isinstance(text, (bytes, bytearray)):
                text = bytes(text).decode("utf-8")
            else:
                text.encode("utf-8")
        except UnicodeError as exc:
            raise InvalidEncoding() from exc

        try:
            root = json.loads(text, parse_constant=_reject_constant)
        except ValueError as exc:
            raise DecodeError(str(exc)) from exc
        except RecursionError as exc:
            raise DecodeError("nesting too deep to decode") from exc
        return cls(root)

    @property
    def top_level_key_count(self) -> int:
        return len(self.root) if isinstance(self.root, dict) else 0

    def require(self, key: str, kind: Optional[Type[T]]) -> T:
        """
        Return the value at key, which must have exactly the runtime type kind.

        kind=None asks for a JSON null.

        Raises:
            NotAMap: the root is not an object.
            MissingKey: key is absent.
            TypeMismatch: the value has any other type.
        """
        if not isinstance(self.root, dict):
            raise NotAMap(_type_name(self.root))
        if key not in self.root:
            raise MissingKey(key)

        expected = type(None) if kind is None else kind
        value = self.root[key]
        if type(value) is not expected:
            raise TypeMismatch(key, expected.__name__, _type_name(value), value)
        return value

    def require_nested_object(self, key: str) -> "JSONInspector":
        return JSONInspector(self.require(key, dict))

    def require_array(self, key: str) -> list:
        return self.require(key, list)

    @property
    def count_leaf_values(self) -> int:
        return count_leaves(self.root)

    @property
    def debug_description(self) -> str:
        if isinstance(self.root, dict):
            return make_description(self.root)
        return repr(self.root)

    def __repr__(self) -> str:
        return self.debug_description


def parse(text: Union[str, bytes]) -> JSONInspector:
    return JSONInspector.parse(text)
