"""Duration components and the compact ``PT{h}H{m}M{s}S`` text form."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Tuple

_HOUR_RE = re.compile(r"([0-9]{1,2})H")
_MINUTE_RE = re.compile(r"([0-9]{1,2})M")
_NON_DIGIT_RE = re.compile(r"[^0-9]")


def set_component(raw: str, previous: str = "00") -> str:
    """Normalize an edited hour/minute/second field.

    Non-digits are stripped first. More than two digits rejects the edit
    and `previous` is kept; an empty field becomes "00" and a single digit
    is zero-padded.
    """
    digits = _NON_DIGIT_RE.sub("", raw)
    if len(digits) > 2:
        return previous
    if len(digits) == 0:
        return "00"
    return digits.zfill(2)


def _parse_hour_minute(pt: str) -> Tuple[str | None, str | None]:
    hour = _HOUR_RE.search(pt)
    minute = _MINUTE_RE.search(pt)
    return (hour.group(1) if hour else None, minute.group(1) if minute else None)


def display_text(hours: int, minutes: int) -> str:
    if hours != 0 and minutes != 0:
        return f"{hours} h, {minutes} min"
    if hours != 0:
        return f"{hours} h"
    if minutes != 0:
        return f"{minutes} min"
    return "-"


def pt_to_text(pt: str) -> str:
    """Human readable form of a PT-string, e.g. "PT1H30M0S" -> "1 h, 30 min"."""
    hour, minute = _parse_hour_minute(pt)
    return display_text(int(hour or 0), int(minute or 0))


@dataclass
class DurationComponents:
    hour: str = "00"
    minute: str = "00"
    second: str = "00"

    def set_hour(self, raw: str) -> str:
        self.hour = set_component(raw, self.hour)
        return self.hour

    def set_minute(self, raw: str) -> str:
        self.minute = set_component(raw, self.minute)
        return self.minute

    def set_second(self, raw: str) -> str:
        self.second = set_component(raw, self.second)
        return self.second

    def from_string(self, pt: str) -> "DurationComponents":
        """Update hour and minute from a PT-string.

        Components the string does not mention keep their current value.
        """
        hour, minute = _parse_hour_minute(pt)
        if hour is not None:
            self.set_hour(hour)
        if minute is not None:
            self.set_minute(minute)
        return self

    @classmethod
    def parse(cls, pt: str) -> "DurationComponents":
        return cls().from_string(pt)

    def to_string(self, include_seconds: bool = False) -> str:
        second = self.second if include_seconds else "00"
        return f"PT{self.hour}H{self.minute}M{second}S"

    @property
    def hours(self) -> int:
        return int(self.hour)

    @property
    def minutes(self) -> int:
        return int(self.minute)

    @property
    def seconds(self) -> int:
        return int(self.second)

    def to_display_text(self) -> str:
        return display_text(self.hours, self.minutes)

    def to_timer_text(self) -> str:
        if self.hours != 0:
            return f"{self.hour}:{self.minute}:{self.second}"
        return f"{self.minute}:{self.second}"

    def to_seconds(self) -> int:
        return self.hours * 3600 + self.minutes * 60 + self.seconds

    @classmethod
    def from_seconds(cls, total_seconds: int) -> "DurationComponents":
        """Split a second count; more than 99 hours leaves the hour at "00"."""
        duration = cls()
        hours, rest = divmod(max(total_seconds, 0), 3600)
        minutes, seconds = divmod(rest, 60)
        duration.set_hour(str(hours))
        duration.set_minute(str(minutes))
        duration.set_second(str(seconds))
        return duration
