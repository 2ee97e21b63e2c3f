import os
from pathlib import Path

from BackEnd.core.settings import APP_NAME

def user_data_dir(app_name=APP_NAME):
	"""Return per-user data dir (Windows/macOS/Linux).

	LOCKIN_DATA_DIR overrides the platform location.
	"""
	override = os.environ.get("LOCKIN_DATA_DIR")
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
	"""Return Path to planner.db inside user data dir."""
	return user_data_dir() / "planner.db"

def log_path():
	return user_data_dir() / "planner.log"
