"""
Debug descriptions for enum-like types.

Mix into an Enum to get a JSON rendering of the member's raw value next to
its display text:

    class Status(DebugDescriptionMixin, Enum):
        ACTIVE = "active"

    Status.ACTIVE.debug_description
    # {
    #   "rawValue" : "active",
    #   "description" : "Status.ACTIVE"
    # }
"""

from __future__ import annotations

from typing import Any, Dict

from debug_logging.sanitizer import make_description


class DebugDescriptionMixin:
    @property
    def debug_dictionary(self) -> Dict[str, Any]:
        return {
            "rawValue": self.value,  # type: ignore[attr-defined]
            "description": str(self),
        }

    @property
    def debug_description(self) -> str:
        return make_description(self.debug_dictionary)
