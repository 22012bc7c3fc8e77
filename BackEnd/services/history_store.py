"""Durable, newest-first history of completed work sessions.

The whole history is kept in memory and written back to SQLite as a single
JSON blob after every mutation. The in-memory list stays authoritative for
the running process even when a write fails.
"""
from __future__ import annotations

import dataclasses
import json
import logging
import sqlite3
from typing import List, Optional

from BackEnd.core.config import STORAGE_KEY
from BackEnd.core.errors import PersistenceFailure
from BackEnd.models.session import SessionRecord
from BackEnd.repos import session_repo

logger = logging.getLogger(__name__)


def _reject_constant(name):
	raise ValueError(f"non-finite number {name} in session history")


class HistoryStore:
	def __init__(self, dbfile=None, key: str = STORAGE_KEY):
		self.dbfile = dbfile
		self.key = key
		self._records: List[SessionRecord] = []

	def __len__(self):
		return len(self._records)

	@property
	def records(self) -> List[SessionRecord]:
		"""Snapshot of the history, newest first."""
		return list(self._records)

	def get(self, record_id: str) -> Optional[SessionRecord]:
		for record in self._records:
			if record.id == record_id:
				return record
		return None

	def load(self) -> List[SessionRecord]:
		"""
		Replace the in-memory history with the persisted one.

		Missing or undecodable storage yields an empty history; entries that
		fail to decode individually are skipped.
		"""
		try:
			raw = session_repo.read_blob(self.key, self.dbfile)
		except (sqlite3.Error, OSError) as e:
			logger.warning("Could not read session history, starting empty: %s", e)
			raw = None

		records: List[SessionRecord] = []
		if raw:
			try:
				entries = json.loads(raw, parse_constant=_reject_constant)
			except (ValueError, RecursionError) as e:
				logger.warning("Stored session history is corrupt, starting empty: %s", e)
				entries = []
			if not isinstance(entries, list):
				logger.warning("Stored session history is not a list, starting empty")
				entries = []
			seen = set()
			for index, entry in enumerate(entries):
				try:
					record = SessionRecord.from_dict(entry)
				except (KeyError, TypeError, ValueError, AttributeError, OverflowError, OSError) as e:
					logger.warning("Skipping malformed session entry %d: %s", index, e)
					continue
				if record.id in seen:
					logger.warning("Skipping duplicate session id %s", record.id)
					continue
				seen.add(record.id)
				records.append(record)

		self._records = records
		logger.info("Loaded %d session(s) from history", len(records))
		return self.records

	def save(self) -> None:
		"""Write the full history to storage. Raises PersistenceFailure."""
		payload = json.dumps([record.to_dict() for record in self._records])
		try:
			session_repo.write_blob(self.key, payload, self.dbfile)
		except (sqlite3.Error, OSError) as e:
			logger.error("Failed to persist session history: %s", e)
			raise PersistenceFailure(f"could not save session history: {e}") from e

	def append(self, record: SessionRecord) -> None:
		if self.get(record.id) is not None:
			raise ValueError(f"duplicate session id {record.id}")
		self._records.insert(0, record)
		logger.debug("Appended session %s (%ds)", record.id, record.duration_seconds)
		self.save()

	def rename(self, record_id: str, new_task_name: str) -> None:
		"""Rename a session. Unknown ids are ignored."""
		for i, record in enumerate(self._records):
			if record.id == record_id:
				self._records[i] = dataclasses.replace(record, task_name=new_task_name)
				logger.debug("Renamed session %s", record_id)
				self.save()
				return
		logger.debug("Rename ignored, no session %s", record_id)

	def delete(self, record_id: str) -> None:
		"""Delete a session. Unknown ids are ignored."""
		remaining = [record for record in self._records if record.id != record_id]
		if len(remaining) == len(self._records):
			logger.debug("Delete ignored, no session %s", record_id)
			return
		self._records = remaining
		logger.debug("Deleted session %s", record_id)
		self.save()
