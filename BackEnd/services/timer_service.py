import logging
from PySide6.QtCore import QObject, Signal, QTimer
from BackEnd.core.config import REFRESH_INTERVAL_MS
from BackEnd.core.errors import PersistenceFailure
from BackEnd.models.session import SessionState

logger = logging.getLogger(__name__)

class TimerService(QObject):
	"""Qt front for SessionManager and HistoryStore.

	The internal QTimer only re-reads SessionManager.elapsed(); it runs while a
	session is running and is stopped on every other path.
	"""
	tick = Signal(int)  # emits elapsed seconds
	state_changed = Signal(str)  # emits 'idle', 'running', 'paused'
	history_changed = Signal()
	persistence_failed = Signal(str)

	def __init__(self, manager, interval_ms=REFRESH_INTERVAL_MS, parent=None):
		super().__init__(parent)
		self.manager = manager
		self.history = manager.history
		self._timer = QTimer(self)
		self._timer.setInterval(interval_ms)
		self._timer.timeout.connect(self._on_tick)

	@property
	def state(self):
		return self.manager.state

	@property
	def running(self):
		return self.state is not SessionState.IDLE

	@property
	def paused(self):
		return self.state is SessionState.PAUSED

	@property
	def elapsed_sec(self):
		return self.manager.elapsed()

	@property
	def refreshing(self):
		return self._timer.isActive()

	def start(self, task_name=""):
		try:
			self.manager.start(task_name)
		finally:
			self._sync()

	def pause_resume(self):
		"""Toggle between running and paused."""
		try:
			if self.paused:
				self.manager.resume()
			else:
				self.manager.pause()
		finally:
			self._sync()

	def stop(self):
		"""Finalize the active session. Returns the SessionRecord."""
		try:
			record = self.manager.stop()
		except PersistenceFailure as e:
			self._report(e)
			record = e.record
		finally:
			self._sync()
		self.history_changed.emit()
		return record

	def shutdown(self):
		"""Stop refreshing and finalize any active session (window close)."""
		self._timer.stop()
		if self.running:
			self.stop()

	def rename(self, record_id, new_task_name):
		try:
			self.history.rename(record_id, new_task_name)
		except PersistenceFailure as e:
			self._report(e)
		self.history_changed.emit()

	def delete(self, record_id):
		try:
			self.history.delete(record_id)
		except PersistenceFailure as e:
			self._report(e)
		self.history_changed.emit()

	def retry_save(self):
		"""Retry writing the history after a failure. Returns True on success."""
		try:
			self.history.save()
		except PersistenceFailure as e:
			self._report(e)
			return False
		return True

	def _report(self, error):
		logger.error("History not saved: %s", error)
		self.persistence_failed.emit(str(error))

	def _sync(self):
		"""Run the refresh timer iff a session is running, then notify listeners."""
		state = self.state
		if state is SessionState.RUNNING:
			if not self._timer.isActive():
				self._timer.start()
		else:
			self._timer.stop()
		self.tick.emit(self.manager.elapsed())
		self.state_changed.emit(state.value)

	def _on_tick(self):
		self.tick.emit(self.manager.elapsed())
