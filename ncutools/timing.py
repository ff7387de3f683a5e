"""Wall-clock helpers: current time, timestamp parsing and countdowns."""

from __future__ import annotations

import re
import time
from dataclasses import dataclass
from datetime import datetime, timezone

_DATE_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
_DATE_FORMAT = "%Y-%m-%d"
_CLOCK_FORMAT = "%H:%M:%S"
_SECONDS_PER_DAY = 24 * 60 * 60

_TIME_PATTERN = re.compile(
    r"\s*(\d{1,4})-(\d{1,2})-(\d{1,2})\s*(\d{1,2}):(\d{1,2}):(\d{1,2})"
)


@dataclass
class ReservationInfo:
    """A court reservation request and the moment it opens."""

    date: str
    hall_id: int
    r_time: int
    enable_timestamp: int


def _parse_local(time_str: str) -> int | None:
    """Parse ``YYYY-MM-DD HH:MM:SS`` as local time; None if it does not parse."""
    match = _TIME_PATTERN.match(time_str)
    if match is None:
        return None
    year, month, day, hour, minute, second = (int(g) for g in match.groups())
    if not (
        1 <= month <= 12
        and 1 <= day <= 31
        and 0 <= hour <= 23
        and 0 <= minute <= 59
        and 0 <= second <= 60
    ):
        return None
    try:
        return int(time.mktime((year, month, day, hour, minute, second, 0, 0, -1)))
    except (OverflowError, ValueError):
        return None


def string_to_timestamp(time_str: str) -> int:
    """Return the epoch seconds of a local ``YYYY-MM-DD HH:MM:SS``, or 0."""
    parsed = _parse_local(time_str)
    return 0 if parsed is None else parsed


def _now_seconds() -> int:
    return int(time.time())


class CurrentTime:
    """Reads the system clock afresh on every call."""

    def seconds(self) -> int:
        return _now_seconds()

    def formatted_time(self) -> str:
        return time.strftime(_DATE_TIME_FORMAT, time.localtime(_now_seconds()))

    def formatted_date(self) -> str:
        return time.strftime(_DATE_FORMAT, time.localtime(_now_seconds()))

    def formatted_date_after(self, days: int) -> str:
        moment = _now_seconds() + days * _SECONDS_PER_DAY
        return time.strftime(_DATE_FORMAT, time.localtime(moment))

    def hour(self) -> int:
        return time.localtime(_now_seconds()).tm_hour

    def minute(self) -> int:
        return time.localtime(_now_seconds()).tm_min

    def second(self) -> int:
        return time.localtime(_now_seconds()).tm_sec

    def millisecond(self) -> int:
        return datetime.now().microsecond // 1000


class UTCTimer:
    """Formats the current or a given moment in UTC."""

    def __init__(self) -> None:
        self.start_time = time.monotonic()
        self.timezone_offset_hours = 0

    def set_timezone_offset(self, offset_hours: int) -> None:
        self.timezone_offset_hours = offset_hours

    def current_time_string(self) -> str:
        return datetime.now(timezone.utc).strftime(_DATE_TIME_FORMAT)

    def current_date_string(self) -> str:
        return datetime.now(timezone.utc).strftime(_DATE_FORMAT)

    def current_clock_string(self) -> str:
        return datetime.now(timezone.utc).strftime(_CLOCK_FORMAT)

    def specific_time_string(self, timestamp: int) -> str:
        return datetime.fromtimestamp(timestamp, timezone.utc).strftime(
            _DATE_TIME_FORMAT
        )


class CountdownTimer:
    """Counts down to an end moment given in epoch seconds or local time.

    ``end`` may be epoch seconds, a ``YYYY-MM-DD HH:MM:SS`` string, or a
    ``YYYY-MM-DD`` string with ``clock`` as ``HH:MM:SS``.
    """

    def __init__(self, end: int | str | None = None, clock: str | None = None) -> None:
        self.start_time = 0
        if isinstance(end, str):
            text = end if clock is None else f"{end} {clock}"
            parsed = _parse_local(text)
            if parsed is None:
                raise ValueError(f"failed to parse time string: {text}")
            self.end_time = parsed
        elif clock is not None:
            raise TypeError("clock is only accepted with a date string")
        elif end is None:
            self.end_time = 0
        else:
            self.end_time = int(end)

    def begin(self) -> None:
        self.start_time = _now_seconds()

    def is_finished(self) -> bool:
        return _now_seconds() >= self.end_time

    def remaining_seconds(self) -> int:
        return max(0, self.end_time - _now_seconds())

    def compare(self, time_date: str, time_clock: str | None = None) -> bool:
        """Return whether the given local time is the current second."""
        text = time_date if time_clock is None else f"{time_date} {time_clock}"
        return string_to_timestamp(text) == _now_seconds()

    def remaining_time_string(self) -> str:
        hours, rest = divmod(self.remaining_seconds(), 3600)
        minutes, seconds = divmod(rest, 60)
        return f"{hours}:{minutes:02d}:{seconds:02d}"