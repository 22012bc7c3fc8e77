"""Lifecycle and time accounting for the single active work session.

State machine::

	idle --start--> running --pause--> paused --resume--> running
	running/paused --stop--> idle   (emits a SessionRecord)

Elapsed time is computed from the start timestamp minus the recorded pause
intervals, never by counting refresh ticks.
"""
from __future__ import annotations

import logging
import uuid
from datetime import datetime
from typing import Optional

from BackEnd.core.clock import Clock
from BackEnd.core.config import DEFAULT_TASK_NAME
from BackEnd.core.errors import InvalidTransition, PersistenceFailure
from BackEnd.models.session import ActiveSession, PauseInterval, SessionRecord, SessionState
from BackEnd.services.history_store import HistoryStore

logger = logging.getLogger(__name__)


class SessionManager:
	def __init__(self, history: HistoryStore, clock: Optional[Clock] = None):
		self.history = history
		self.clock = clock if clock is not None else Clock()
		self._active: Optional[ActiveSession] = None

	@property
	def active(self) -> Optional[ActiveSession]:
		return self._active

	@property
	def state(self) -> SessionState:
		return self._active.state if self._active is not None else SessionState.IDLE

	def _require(self, operation, *allowed):
		if self.state not in allowed:
			raise InvalidTransition(operation, self.state.value)

	def start(self, task_name: str = "") -> ActiveSession:
		self._require("start", SessionState.IDLE)
		self._active = ActiveSession(
			id=str(uuid.uuid4()),
			task_name=task_name,
			started_at=self.clock.now(),
		)
		logger.info("Session %s started (%r)", self._active.id, task_name)
		return self._active

	def pause(self) -> None:
		self._require("pause", SessionState.RUNNING)
		self._active.pause_intervals.append(PauseInterval(paused_at=self.clock.now()))
		self._active.state = SessionState.PAUSED
		logger.info("Session %s paused", self._active.id)

	def resume(self) -> None:
		self._require("resume", SessionState.PAUSED)
		self._active.open_interval().resumed_at = self.clock.now()
		self._active.state = SessionState.RUNNING
		logger.info("Session %s resumed", self._active.id)

	def stop(self) -> SessionRecord:
		"""
		Finalize the active session and append it to the history.

		A pause still open at stop time is closed at the stop timestamp, so the
		paused stretch is excluded. The manager returns to idle even when the
		history cannot be persisted; the PersistenceFailure is re-raised.
		"""
		self._require("stop", SessionState.RUNNING, SessionState.PAUSED)
		session = self._active
		ended_at = self.clock.now()
		interval = session.open_interval()
		if interval is not None:
			interval.resumed_at = ended_at
			session.state = SessionState.RUNNING

		record = SessionRecord(
			id=session.id,
			task_name=session.task_name if session.task_name.strip() else DEFAULT_TASK_NAME,
			started_at=session.started_at,
			ended_at=ended_at,
			duration_seconds=session.elapsed(ended_at),
		)
		try:
			self.history.append(record)
		except PersistenceFailure as e:
			e.record = record
			raise
		finally:
			self._active = None
		logger.info("Session %s stopped after %ds", record.id, record.duration_seconds)
		return record

	def elapsed(self, at: Optional[datetime] = None) -> int:
		"""Seconds worked in the active session up to ``at`` (default now); 0 when idle."""
		if self._active is None:
			return 0
		return self._active.elapsed(at if at is not None else self.clock.now())

	def paused_seconds(self, at: Optional[datetime] = None) -> float:
		if self._active is None:
			return 0.0
		return self._active.paused_seconds(at if at is not None else self.clock.now())
