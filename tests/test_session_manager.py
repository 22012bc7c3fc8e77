"""Tests for SessionManager - lifecycle transitions and time accounting."""

from __future__ import annotations

import pytest

from BackEnd.core.errors import InvalidTransition, PersistenceFailure
from BackEnd.models.session import SessionState
from BackEnd.services.history_store import HistoryStore
from BackEnd.services.session_manager import SessionManager


# -- Transitions ----------------------------------------------------------------------


def test_new_manager_is_idle(manager: SessionManager) -> None:
    assert manager.state is SessionState.IDLE
    assert manager.active is None
    assert manager.elapsed() == 0


def test_start_creates_running_session(manager: SessionManager, clock) -> None:
    session = manager.start("Design")

    assert manager.state is SessionState.RUNNING
    assert session.task_name == "Design"
    assert session.started_at == clock.now()
    assert session.pause_intervals == []


def test_second_start_is_rejected_and_keeps_existing_session(manager: SessionManager, clock) -> None:
    first = manager.start("Design")
    clock.advance(30)

    with pytest.raises(InvalidTransition):
        manager.start("Other")

    assert manager.active is first
    assert manager.active.task_name == "Design"
    assert manager.state is SessionState.RUNNING


@pytest.mark.parametrize("operation", ["pause", "resume", "stop"])
def test_operations_from_idle_are_rejected(manager: SessionManager, operation: str) -> None:
    with pytest.raises(InvalidTransition):
        getattr(manager, operation)()
    assert manager.state is SessionState.IDLE


def test_resume_while_running_is_rejected(manager: SessionManager) -> None:
    manager.start("Design")
    with pytest.raises(InvalidTransition):
        manager.resume()


def test_pause_while_paused_is_rejected(manager: SessionManager) -> None:
    manager.start("Design")
    manager.pause()
    with pytest.raises(InvalidTransition):
        manager.pause()
    assert len(manager.active.pause_intervals) == 1


def test_pause_opens_exactly_one_interval(manager: SessionManager, clock) -> None:
    manager.start("Design")
    clock.advance(10)
    manager.pause()

    intervals = manager.active.pause_intervals
    assert manager.state is SessionState.PAUSED
    assert len(intervals) == 1
    assert intervals[0].paused_at == clock.now()
    assert intervals[0].resumed_at is None


def test_resume_closes_open_interval(manager: SessionManager, clock) -> None:
    manager.start("Design")
    manager.pause()
    clock.advance(42)
    manager.resume()

    assert manager.state is SessionState.RUNNING
    assert manager.active.open_interval() is None
    assert manager.active.pause_intervals[0].resumed_at == clock.now()


def test_invalid_transition_reports_operation_and_state(manager: SessionManager) -> None:
    with pytest.raises(InvalidTransition) as excinfo:
        manager.pause()
    assert excinfo.value.operation == "pause"
    assert excinfo.value.state == "idle"


# -- Elapsed time ---------------------------------------------------------------------


def test_elapsed_advances_while_running(manager: SessionManager, clock) -> None:
    manager.start("Design")
    readings = []
    for _ in range(5):
        clock.advance(1.5)
        readings.append(manager.elapsed())

    assert readings == sorted(readings)
    assert readings[-1] == 7


def test_elapsed_is_frozen_while_paused(manager: SessionManager, clock) -> None:
    manager.start("Design")
    clock.advance(600)
    manager.pause()

    frozen = manager.elapsed()
    clock.advance(3600)

    assert frozen == 600
    assert manager.elapsed() == 600


def test_elapsed_accepts_explicit_timestamp(manager: SessionManager, clock) -> None:
    session = manager.start("Design")
    at = clock.advance(90)
    clock.advance(1000)

    assert manager.elapsed(at) == 90
    assert session.elapsed(at) == 90


def test_elapsed_survives_long_gap_between_refreshes(manager: SessionManager, clock) -> None:
    manager.start("Design")
    clock.advance(8 * 3600)

    assert manager.elapsed() == 8 * 3600


def test_paused_seconds_audits_all_intervals(manager: SessionManager, clock) -> None:
    manager.start("Design")
    clock.advance(100)
    manager.pause()
    clock.advance(20)
    manager.resume()
    clock.advance(100)
    manager.pause()
    clock.advance(5)

    assert manager.paused_seconds() == 25


# -- Stop -----------------------------------------------------------------------------


def test_design_scenario_yields_1200_seconds(manager: SessionManager, history: HistoryStore, clock) -> None:
    t0 = clock.now()
    manager.start("Design")
    clock.advance(600)
    manager.pause()
    clock.advance(300)
    manager.resume()
    clock.advance(600)
    record = manager.stop()

    assert record.duration_seconds == 1200
    assert record.started_at == t0
    assert (record.ended_at - record.started_at).total_seconds() == 1500
    assert history.records == [record]
    assert manager.state is SessionState.IDLE
    assert manager.active is None


def test_duration_excludes_every_pause_cycle(manager: SessionManager, clock) -> None:
    manager.start("Cycles")
    paused_total = 0
    for work, rest in [(60, 15), (120, 45), (30, 300)]:
        clock.advance(work)
        manager.pause()
        clock.advance(rest)
        paused_total += rest
        manager.resume()
    clock.advance(10)
    record = manager.stop()

    span = (record.ended_at - record.started_at).total_seconds()
    assert record.duration_seconds == span - paused_total == 220


def test_stop_while_paused_excludes_trailing_pause(manager: SessionManager, clock) -> None:
    manager.start("Design")
    clock.advance(100)
    manager.pause()
    clock.advance(500)
    record = manager.stop()

    assert record.duration_seconds == 100


def test_duration_equals_span_without_pauses(manager: SessionManager, clock) -> None:
    manager.start("Focus")
    clock.advance(75)
    record = manager.stop()

    assert record.duration_seconds == (record.ended_at - record.started_at).total_seconds()


@pytest.mark.parametrize("name", ["", "   "])
def test_empty_task_name_defaults_at_stop(manager: SessionManager, clock, name: str) -> None:
    session = manager.start(name)
    assert session.task_name == name
    clock.advance(1)

    record = manager.stop()

    assert record.task_name == "Untitled Task"


def test_stop_returns_record_with_session_id(manager: SessionManager, clock) -> None:
    session = manager.start("Review")
    clock.advance(5)
    record = manager.stop()

    assert record.id == session.id


def test_sessions_get_unique_ids(manager: SessionManager, clock) -> None:
    ids = set()
    for _ in range(3):
        manager.start("Loop")
        clock.advance(1)
        ids.add(manager.stop().id)
    assert len(ids) == 3


def test_stop_returns_to_idle_when_history_write_fails(history: HistoryStore, clock, monkeypatch) -> None:
    def fail_save() -> None:
        raise PersistenceFailure("disk full")

    manager = SessionManager(history, clock=clock)
    manager.start("Design")
    clock.advance(10)
    monkeypatch.setattr(history, "save", fail_save)

    with pytest.raises(PersistenceFailure) as excinfo:
        manager.stop()

    assert excinfo.value.record is history.records[0]
    assert excinfo.value.record.duration_seconds == 10

    assert manager.state is SessionState.IDLE
    assert len(history) == 1
    assert history.records[0].duration_seconds == 10


def test_can_start_again_after_stop(manager: SessionManager, clock) -> None:
    manager.start("One")
    clock.advance(1)
    manager.stop()

    manager.start("Two")
    assert manager.state is SessionState.RUNNING
