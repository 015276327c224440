"""Tests for the session reducer and persisted-record conversion."""

from datetime import datetime

import pytest

from houkoku.core.session import (
    CopySucceeded,
    EndAdjusted,
    EndEdited,
    EndSetToNow,
    PresetApplied,
    SessionState,
    StartAdjusted,
    StartEdited,
    StartSetToNow,
    TaskEdited,
    enforce_gap,
    from_record,
    initial_state,
    reduce,
    to_record,
)
from houkoku.core.variants import REPORT, ROTATE


@pytest.fixture
def now():
    return datetime(2025, 1, 15, 9, 0, 12)


@pytest.fixture
def state():
    return SessionState(start_time="09:00", end_time="10:00", tasks={"next": "B"})


class TestInitialState:
    def test_defaults_to_one_hour_from_now(self, now):
        s = initial_state(now)
        assert (s.start_time, s.end_time) == ("09:00", "10:00")
        assert s.tasks == {}

    def test_custom_duration(self, now):
        assert initial_state(now, 30).end_time == "09:30"


class TestReduce:
    def test_task_edited(self, state):
        new = reduce(state, TaskEdited("must", "m"))
        assert new.tasks == {"next": "B", "must": "m"}
        assert state.tasks == {"next": "B"}

    def test_scenario_end_equal_to_start(self, state):
        new = reduce(state, EndEdited("09:00"))
        assert new.end_time == "09:30"

    def test_start_moved_past_end_pushes_end(self, state):
        new = reduce(state, StartEdited("11:00"))
        assert (new.start_time, new.end_time) == ("11:00", "11:30")

    def test_start_adjusted_reenforces_gap(self, state):
        new = reduce(reduce(state, StartAdjusted(30)), StartAdjusted(30))
        assert (new.start_time, new.end_time) == ("10:00", "10:30")

    def test_end_adjusted_backwards(self, state):
        new = reduce(state, EndAdjusted(-30))
        assert new.end_time == "09:30"

    def test_end_adjusted_below_start(self, state):
        new = reduce(state, EndAdjusted(-60))
        assert new.end_time == "09:30"

    @pytest.mark.parametrize("typed, stored", [("9:05", "09:05"), (" 09:00 ", "09:00"), ("7:5x", "7:5x")])
    def test_edited_times_are_zero_padded(self, state, typed, stored):
        assert reduce(state, StartEdited(typed)).start_time == stored

    def test_edited_end_is_zero_padded(self, state):
        assert reduce(state, EndEdited("9:45")).end_time == "09:45"

    def test_partial_input_skips_gap(self, state):
        new = reduce(state, EndEdited(""))
        assert new.end_time == ""
        assert not new.is_configured

    def test_adjust_on_missing_time_is_noop(self):
        s = SessionState(start_time="", end_time="10:00")
        assert reduce(s, StartAdjusted(15)).start_time == ""

    def test_set_to_now(self, state, now):
        assert reduce(state, StartSetToNow(now.replace(hour=9, minute=20))).start_time == "09:20"
        assert reduce(state, EndSetToNow(now.replace(hour=8))).end_time == "09:30"

    def test_preset_applied(self, state, now):
        new = reduce(state, PresetApplied(now, 15))
        assert (new.start_time, new.end_time) == ("09:00", "09:15")

    def test_copy_succeeded_clear(self, state):
        assert reduce(state, CopySucceeded(REPORT)).tasks == {"next": ""}

    def test_copy_succeeded_rotate(self):
        s = SessionState(start_time="09:00", end_time="10:00", tasks={"completed": "A", "next": "B"})
        assert reduce(s, CopySucceeded(ROTATE)).tasks == {"completed": "B", "next": ""}

    def test_unknown_event(self, state):
        with pytest.raises(TypeError):
            reduce(state, object())


class TestEnforceGap:
    def test_returns_same_object_when_valid(self, state):
        assert enforce_gap(state) is state


class TestRecords:
    def test_round_trip(self, state, now):
        record = to_record(state, now)
        assert record["last_saved"] == now.isoformat()
        restored = from_record(record, now)
        assert restored.tasks == state.tasks
        assert (restored.start_time, restored.end_time) == ("09:00", "10:00")
        assert restored.last_saved == now.isoformat()

    @pytest.mark.parametrize("record", [None, [], "garbage", 42])
    def test_not_a_dict_falls_back(self, record, now):
        assert from_record(record, now) == initial_state(now)

    def test_missing_fields_default(self, now):
        restored = from_record({"tasks": {"next": "x", "bad": 3}}, now)
        assert (restored.start_time, restored.end_time) == ("09:00", "10:00")
        assert restored.tasks == {"next": "x"}

    def test_wrong_types_ignored(self, now):
        restored = from_record({"start_time": 9, "end_time": None, "tasks": "x", "last_saved": 1}, now)
        assert restored == initial_state(now)

    def test_restored_interval_gets_gap_enforced(self, now):
        restored = from_record({"start_time": "12:00", "end_time": "11:00"}, now)
        assert restored.end_time == "12:30"

    def test_restored_times_are_zero_padded(self, now):
        restored = from_record({"start_time": "9:05", "end_time": "10:00"}, now)
        assert restored.start_time == "09:05"
