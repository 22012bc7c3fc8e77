import os
from pathlib import Path

def user_data_dir(app_name="WorkTimeTracker"):
	"""Return per-user data dir (Windows/macOS/Linux). WORKTIME_DATA_DIR overrides it."""
	override = os.environ.get("WORKTIME_DATA_DIR")
	if override:
		path = Path(override)
	else:
		if os.name == "nt":
			base = os.environ.get("LOCALAPPDATA", os.path.expanduser("~\\AppData\\Local"))
		elif os.name == "posix":
			base = os.environ.get("XDG_DATA_HOME", os.path.expanduser("~/.local/share"))
		else:
			base = os.path.expanduser("~")
		path = Path(base) / app_name
	path.mkdir(parents=True, exist_ok=True)
	return path

def db_path():
	"""Return Path to worktime.db inside user data dir."""
	return user_data_dir() / "worktime.db"

def logs_dir():
	"""Return Path to the logs folder inside user data dir."""
	path = user_data_dir() / "logs"
	path.mkdir(parents=True, exist_ok=True)
	return path
