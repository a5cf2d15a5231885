"""
Timestamp rendering for sanitized payloads.

Formatters are plain values passed to the sanitizer; there is no shared
module-level instance. Two profiles are provided:
- fixed: "1970-01-01 00:00:01 +0000", always UTC, reproducible in tests
- medium: "Jan 1, 1970 at 12:00:01 AM" in a chosen (or the host's) time zone
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from typing import Optional

FIXED_PATTERN = "%Y-%m-%d %H:%M:%S %z"
MEDIUM_PATTERN = "%b %-d, %Y at %-I:%M:%S %p"


@dataclass(frozen=True, slots=True)
class DateFormatter:
    """
    strftime pattern plus the zone to render in.

    - tz=None renders in the host's local zone
    - naive datetimes are taken to be UTC
    - month and AM/PM names follow the process LC_TIME locale
    - "%-d" and "%-I" are the unpadded day and 12-hour clock on every platform
    """

    pattern: str = FIXED_PATTERN
    tz: Optional[tzinfo] = timezone.utc

    @classmethod
    def fixed(cls) -> "DateFormatter":
        return cls(pattern=FIXED_PATTERN, tz=timezone.utc)

    @classmethod
    def medium(cls, tz: Optional[tzinfo] = None) -> "DateFormatter":
        return cls(pattern=MEDIUM_PATTERN, tz=tz)

    def format(self, value: datetime) -> str:
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        value = value.astimezone(self.tz)
        hour12 = value.hour % 12 or 12
        pattern = self.pattern.replace("%-d", str(value.day)).replace("%-I", str(hour12))
        return value.strftime(pattern)


DEFAULT_DATE_FORMATTER = DateFormatter.fixed()
