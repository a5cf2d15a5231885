"""Category loggers and lazy debug payloads."""

from __future__ import annotations

from typing import Any, Mapping, Optional
import logging
import sys

from debug_logging.redaction_policy import PolicyLike
from debug_logging.sanitizer import make_description

UNKNOWN_SUBSYSTEM = "unknown"


def _main_subsystem() -> str:
    main = sys.modules.get("__main__")
    spec = getattr(main, "__spec__", None)
    name = getattr(spec, "name", None)
    if not name:
        return UNKNOWN_SUBSYSTEM
    # "myapp.cli" run with -m -> "myapp"
    return name.split(".", 1)[0]


def get_logger(category: str, *, subsystem: Optional[str] = None) -> logging.Logger:
    """Get the logger for `<subsystem>.<category>`. No handlers are installed."""
    return logging.getLogger(f"{subsystem or _main_subsystem()}.{category}")


class DebugPayload:
    """
    Log argument that renders a sanitized payload only when the record is emitted.

        logger.debug("request %s", DebugPayload(payload, policy=["token"]))
    """

    __slots__ = ("dictionary", "policy")

    def __init__(self, dictionary: Mapping[str, Any], policy: PolicyLike = None) -> None:
        self.dictionary = dictionary
        self.policy = policy

    def __str__(self) -> str:
        return make_description(self.dictionary, self.policy)
