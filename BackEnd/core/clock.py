from datetime import datetime, timezone, timedelta

class Clock:
	"""Wall clock that never goes backwards within one process."""

	def __init__(self):
		self._last = None

	def now(self) -> datetime:
		"""Return the current UTC time, strictly later than any earlier call."""
		current = datetime.now(timezone.utc)
		if self._last is not None and current <= self._last:
			current = self._last + timedelta(microseconds=1)
		self._last = current
		return current

def utc_now_iso():
	"""Return current UTC time as ISO8601 string (no microseconds)."""
	return datetime.now(timezone.utc).replace(microsecond=0).isoformat()

def to_iso(dt: datetime) -> str:
	"""Serialize an aware datetime as an ISO8601 UTC string."""
	return dt.astimezone(timezone.utc).isoformat()

def from_iso(value) -> datetime:
	"""Parse an ISO8601 string or epoch milliseconds; naive values are taken as UTC."""
	if isinstance(value, (int, float)) and not isinstance(value, bool):
		return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
	dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
	if dt.tzinfo is None:
		dt = dt.replace(tzinfo=timezone.utc)
	return dt

def fmt_hms(seconds: int) -> str:
	"""Format seconds as HH:MM:SS."""
	seconds = max(0, int(seconds))
	h = seconds // 3600
	m = (seconds % 3600) // 60
	s = seconds % 60
	return f"{h:02}:{m:02}:{s:02}"

def fmt_hm(seconds: int) -> str:
	"""Format a duration as 'Xh Ym'."""
	seconds = max(0, int(seconds))
	return f"{seconds // 3600}h {(seconds % 3600) // 60}m"

def fmt_clock(dt: datetime) -> str:
	"""Local 12-hour time, e.g. '9:05 AM'."""
	local = dt.astimezone()
	hour = local.hour % 12 or 12
	return f"{hour}:{local.minute:02} {'AM' if local.hour < 12 else 'PM'}"

def fmt_day(dt: datetime) -> str:
	"""Local date as 'Thu, Jun 15'."""
	local = dt.astimezone()
	return f"{local.strftime('%a, %b')} {local.day}"
