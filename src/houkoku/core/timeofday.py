"""Pure clock-time arithmetic - no I/O dependencies.

Times are wall-clock hours and minutes with no date attached. All
arithmetic wraps around a 24-hour clock; "now" is always passed in.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime

MINUTES_PER_DAY = 24 * 60
MINIMUM_SLOT_MINUTES = 30
DEFAULT_DATE_FORMAT = "%Y/%m/%d"

_TIME_PATTERN = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")


@dataclass(frozen=True, order=True)
class TimeOfDay:
    """A time of day, whole minutes only."""

    hours: int
    minutes: int

    def __post_init__(self):
        if not (0 <= self.hours <= 23 and 0 <= self.minutes <= 59):
            raise ValueError(f"Invalid time of day: {self.hours}:{self.minutes}")

    @property
    def total_minutes(self) -> int:
        return self.hours * 60 + self.minutes

    @classmethod
    def from_minutes(cls, total: int) -> "TimeOfDay":
        """Build from minutes since midnight, wrapping modulo 24h."""
        total %= MINUTES_PER_DAY
        return cls(total // 60, total % 60)

    def format(self) -> str:
        return f"{self.hours:02d}:{self.minutes:02d}"


@dataclass(frozen=True)
class TimeInterval:
    """A start/end pair of clock times."""

    start: TimeOfDay
    end: TimeOfDay

    def format(self) -> str:
        return f"{self.start.format()}〜{self.end.format()}"


def to_time_of_day(instant: datetime) -> TimeOfDay:
    """Truncate a timestamp to hours and minutes."""
    return TimeOfDay(instant.hour, instant.minute)


def parse_time(text: str | None) -> TimeOfDay | None:
    """Parse "HH:MM". Returns None for empty or malformed input."""
    if not text:
        return None
    match = _TIME_PATTERN.match(text)
    if not match:
        return None
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        return None
    return TimeOfDay(hours, minutes)


def apply_offset(t: TimeOfDay, delta_minutes: int) -> TimeOfDay:
    """Add signed minutes, wrapping within 24 hours."""
    return TimeOfDay.from_minutes(t.total_minutes + delta_minutes)


def enforce_minimum_gap(
    start: TimeOfDay,
    end: TimeOfDay,
    gap_minutes: int = MINIMUM_SLOT_MINUTES,
) -> TimeOfDay:
    """
    Keep end strictly after start.

    Pure function - no I/O. Comparison is on clock time only, so an end
    that is earlier in the day than start counts as "not after".
    """
    if end <= start:
        return apply_offset(start, gap_minutes)
    return end


def preset_interval(now: datetime, duration_minutes: int) -> TimeInterval:
    """Interval from now lasting duration_minutes."""
    start = to_time_of_day(now)
    return TimeInterval(start=start, end=apply_offset(start, duration_minutes))


def adjust_time_text(text: str, delta_minutes: int) -> str:
    """Shift an "HH:MM" string. Unparseable input comes back unchanged."""
    t = parse_time(text)
    if t is None:
        return text
    return apply_offset(t, delta_minutes).format()


def format_date(day: date, pattern: str = DEFAULT_DATE_FORMAT) -> str:
    """Render a calendar date for display. Presentation only."""
    try:
        return day.strftime(pattern)
    except ValueError:
        return day.isoformat()


def format_range(
    day: date,
    start_text: str,
    end_text: str,
    pattern: str = DEFAULT_DATE_FORMAT,
) -> str:
    """
    Human-readable "<date> HH:MM〜HH:MM" range.

    Empty while either end is missing or malformed.
    """
    start = parse_time(start_text)
    end = parse_time(end_text)
    if start is None or end is None:
        return ""
    return f"{format_date(day, pattern)} {TimeInterval(start, end).format()}"
