"""Data models for the active session and completed session records."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from BackEnd.core.clock import from_iso, to_iso


class SessionState(str, enum.Enum):
	IDLE = "idle"
	RUNNING = "running"
	PAUSED = "paused"


@dataclass
class PauseInterval:
	paused_at: datetime
	resumed_at: Optional[datetime] = None

	@property
	def is_open(self) -> bool:
		return self.resumed_at is None

	def seconds(self, at: datetime) -> float:
		"""Length of the pause, with an open pause measured up to ``at``."""
		end = self.resumed_at if self.resumed_at is not None else at
		return max(0.0, (end - self.paused_at).total_seconds())


@dataclass
class ActiveSession:
	"""The single in-progress session. Owned by SessionManager."""

	id: str
	task_name: str
	started_at: datetime
	state: SessionState = SessionState.RUNNING
	pause_intervals: List[PauseInterval] = field(default_factory=list)

	def open_interval(self) -> Optional[PauseInterval]:
		if self.pause_intervals and self.pause_intervals[-1].is_open:
			return self.pause_intervals[-1]
		return None

	def paused_seconds(self, at: datetime) -> float:
		return sum(interval.seconds(at) for interval in self.pause_intervals)

	def elapsed(self, at: datetime) -> int:
		"""
		Whole seconds worked up to ``at``.

		Always derived from the absolute timestamps, so it stays exact across
		missed refreshes and does not advance while paused.
		"""
		total = (at - self.started_at).total_seconds() - self.paused_seconds(at)
		return max(0, int(total))


@dataclass(frozen=True)
class SessionRecord:
	"""A finalized session in the history. Immutable."""

	id: str
	task_name: str
	started_at: datetime
	ended_at: datetime
	duration_seconds: int

	def __post_init__(self):
		if self.ended_at < self.started_at:
			raise ValueError(f"session {self.id} ends before it starts")
		span = (self.ended_at - self.started_at).total_seconds()
		if self.duration_seconds < 0 or self.duration_seconds > span:
			raise ValueError(f"session {self.id} has duration {self.duration_seconds}s outside 0..{span:.0f}s")

	def to_dict(self) -> dict:
		return {
			"id": self.id,
			"taskName": self.task_name,
			"startedAt": to_iso(self.started_at),
			"endedAt": to_iso(self.ended_at),
			"durationSeconds": self.duration_seconds,
		}

	@classmethod
	def from_dict(cls, data: dict) -> "SessionRecord":
		"""Build a record from its stored form. Raises KeyError/TypeError/ValueError/OverflowError on bad data."""
		duration = data["durationSeconds"]
		if isinstance(duration, bool) or not isinstance(duration, (int, float)):
			raise TypeError(f"durationSeconds must be a number, got {duration!r}")
		if not math.isfinite(duration):
			raise ValueError(f"durationSeconds must be finite, got {duration!r}")
		return cls(
			id=str(data["id"]),
			task_name=str(data.get("taskName") or ""),
			started_at=from_iso(data["startedAt"]),
			ended_at=from_iso(data["endedAt"]),
			duration_seconds=int(duration),
		)
