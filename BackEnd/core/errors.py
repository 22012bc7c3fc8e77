class TrackerError(Exception):
	"""Base class for work tracker errors."""


class InvalidTransition(TrackerError):
	"""A lifecycle operation was called in a state that forbids it."""

	def __init__(self, operation, state):
		super().__init__(f"cannot {operation} while {state}")
		self.operation = operation
		self.state = state


class PersistenceFailure(TrackerError):
	"""The session history could not be written to disk."""

	def __init__(self, message, record=None):
		super().__init__(message)
		# Set when the failed write was finalizing a session.
		self.record = record
