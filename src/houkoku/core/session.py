"""Session state and its pure reducer - no I/O dependencies.

The host owns a SessionState value and replaces it with whatever
reduce() returns. Gap enforcement runs as an explicit derived step after
every event instead of reacting to field changes.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime

from .compose import after_copy
from .timeofday import (
    adjust_time_text,
    enforce_minimum_gap,
    parse_time,
    preset_interval,
    to_time_of_day,
)
from .variants import Variant

DEFAULT_DURATION_MINUTES = 60


@dataclass(frozen=True)
class SessionState:
    """Current interval, task texts by role and the last-saved timestamp."""

    start_time: str = ""
    end_time: str = ""
    tasks: dict[str, str] = field(default_factory=dict)
    last_saved: str = ""

    def task(self, role: str) -> str:
        return self.tasks.get(role, "")

    @property
    def is_configured(self) -> bool:
        return parse_time(self.start_time) is not None and parse_time(self.end_time) is not None


# ============== Events ==============


@dataclass(frozen=True)
class TaskEdited:
    role: str
    text: str


@dataclass(frozen=True)
class StartEdited:
    text: str


@dataclass(frozen=True)
class EndEdited:
    text: str


@dataclass(frozen=True)
class StartSetToNow:
    now: datetime


@dataclass(frozen=True)
class EndSetToNow:
    now: datetime


@dataclass(frozen=True)
class StartAdjusted:
    minutes: int


@dataclass(frozen=True)
class EndAdjusted:
    minutes: int


@dataclass(frozen=True)
class PresetApplied:
    now: datetime
    minutes: int


@dataclass(frozen=True)
class CopySucceeded:
    variant: Variant


Event = (
    TaskEdited
    | StartEdited
    | EndEdited
    | StartSetToNow
    | EndSetToNow
    | StartAdjusted
    | EndAdjusted
    | PresetApplied
    | CopySucceeded
)


# ============== Reducer ==============


def initial_state(now: datetime, duration_minutes: int = DEFAULT_DURATION_MINUTES) -> SessionState:
    """Fresh session: now -> now + duration, no tasks."""
    interval = preset_interval(now, duration_minutes)
    return SessionState(
        start_time=interval.start.format(),
        end_time=interval.end.format(),
        tasks={},
    )


def enforce_gap(state: SessionState) -> SessionState:
    """
    Derived-value step: push end to start + 30min when it is not after start.

    Skipped while either time is missing or malformed.
    """
    start = parse_time(state.start_time)
    end = parse_time(state.end_time)
    if start is None or end is None:
        return state

    adjusted = enforce_minimum_gap(start, end).format()
    if adjusted == state.end_time:
        return state
    return replace(state, end_time=adjusted)


def canonical_time(text: str) -> str:
    """Zero-pad a parseable time to "HH:MM"; keep partial input as typed."""
    parsed = parse_time(text)
    return parsed.format() if parsed is not None else text


def _apply(state: SessionState, event: Event) -> SessionState:
    match event:
        case TaskEdited(role=role, text=text):
            return replace(state, tasks={**state.tasks, role: text})
        case StartEdited(text=text):
            return replace(state, start_time=canonical_time(text))
        case EndEdited(text=text):
            return replace(state, end_time=canonical_time(text))
        case StartSetToNow(now=now):
            return replace(state, start_time=to_time_of_day(now).format())
        case EndSetToNow(now=now):
            return replace(state, end_time=to_time_of_day(now).format())
        case StartAdjusted(minutes=minutes):
            return replace(state, start_time=adjust_time_text(state.start_time, minutes))
        case EndAdjusted(minutes=minutes):
            return replace(state, end_time=adjust_time_text(state.end_time, minutes))
        case PresetApplied(now=now, minutes=minutes):
            interval = preset_interval(now, minutes)
            return replace(state, start_time=interval.start.format(), end_time=interval.end.format())
        case CopySucceeded(variant=variant):
            return replace(state, tasks=after_copy(state.tasks, variant))
    raise TypeError(f"Unknown session event: {event!r}")


def reduce(state: SessionState, event: Event) -> SessionState:
    """
    Apply one event and re-derive the interval.

    Pure function - no I/O.
    """
    return enforce_gap(_apply(state, event))


# ============== Persisted record ==============


def to_record(state: SessionState, saved_at: datetime) -> dict:
    """Serializable record for the state store."""
    return {
        "start_time": state.start_time,
        "end_time": state.end_time,
        "tasks": dict(state.tasks),
        "last_saved": saved_at.isoformat(),
    }


def from_record(
    record: dict | None,
    now: datetime,
    duration_minutes: int = DEFAULT_DURATION_MINUTES,
) -> SessionState:
    """
    Rehydrate a session, falling back to defaults field by field.

    Never raises: anything that is not the expected shape is ignored.
    """
    default = initial_state(now, duration_minutes)
    if not isinstance(record, dict):
        return default

    start = record.get("start_time")
    end = record.get("end_time")
    raw_tasks = record.get("tasks")
    tasks = {}
    if isinstance(raw_tasks, dict):
        tasks = {str(k): v for k, v in raw_tasks.items() if isinstance(v, str)}
    last_saved = record.get("last_saved")

    state = SessionState(
        start_time=canonical_time(start) if isinstance(start, str) and start else default.start_time,
        end_time=canonical_time(end) if isinstance(end, str) and end else default.end_time,
        tasks=tasks,
        last_saved=last_saved if isinstance(last_saved, str) else "",
    )
    return enforce_gap(state)
