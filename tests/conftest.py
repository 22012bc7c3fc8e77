from __future__ import annotations

import os
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from BackEnd.services.history_store import HistoryStore
from BackEnd.services.session_manager import SessionManager

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

T0 = datetime(2024, 6, 15, 9, 0, 0, tzinfo=timezone.utc)


class FakeClock:
    """Manually advanced clock used by tests."""

    def __init__(self, start: datetime = T0) -> None:
        self.current = start

    def now(self) -> datetime:
        return self.current

    def advance(self, seconds: float) -> datetime:
        self.current += timedelta(seconds=seconds)
        return self.current


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def db_file(tmp_path: Path) -> Path:
    return tmp_path / "worktime.db"


@pytest.fixture
def history(db_file: Path) -> HistoryStore:
    store = HistoryStore(db_file)
    store.load()
    return store


@pytest.fixture
def manager(history: HistoryStore, clock: FakeClock) -> SessionManager:
    return SessionManager(history, clock=clock)


@pytest.fixture(scope="session")
def qapp():
    """Provide a QCoreApplication instance for Qt timers and signals."""
    from PySide6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication(sys.argv)
    return app
