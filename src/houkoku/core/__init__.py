"""Functional core - pure formatting, editing and time logic with no I/O."""

from .bullets import BulletLine, ensure_bullet_line, normalize, parse_bullet_line
from .line_editor import EditResult, on_structural_key
from .timeofday import (
    TimeInterval,
    TimeOfDay,
    apply_offset,
    enforce_minimum_gap,
    format_range,
    parse_time,
    preset_interval,
    to_time_of_day,
)
from .variants import Role, Transition, Variant, get_variant
from .compose import ComposedMessage, after_copy, compose
from .session import SessionState, from_record, initial_state, reduce, to_record

__all__ = [
    # Bullets
    "BulletLine",
    "ensure_bullet_line",
    "normalize",
    "parse_bullet_line",
    # Line editor
    "EditResult",
    "on_structural_key",
    # Time
    "TimeInterval",
    "TimeOfDay",
    "apply_offset",
    "enforce_minimum_gap",
    "format_range",
    "parse_time",
    "preset_interval",
    "to_time_of_day",
    # Variants
    "Role",
    "Transition",
    "Variant",
    "get_variant",
    # Composer
    "ComposedMessage",
    "after_copy",
    "compose",
    # Session
    "SessionState",
    "from_record",
    "initial_state",
    "reduce",
    "to_record",
]
