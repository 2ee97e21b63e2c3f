import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

def _default_level():
	name = os.environ.get("LOCKIN_LOG_LEVEL", "INFO").upper()
	return getattr(logging, name, logging.INFO)

def setup_logger(
	name: str,
	level: Optional[int] = None,
	console: bool = True,
	to_file: bool = True,
) -> logging.Logger:
	"""Configure and return a module-level logger."""
	logger = logging.getLogger(name)
	logger.setLevel(level or _default_level())

	if not logger.handlers:
		formatter = logging.Formatter(LOG_FORMAT)
		if to_file:
			# imported here so settings/paths can log without a cycle
			from BackEnd.core.paths import log_path
			try:
				file_handler = logging.FileHandler(log_path(), encoding="utf-8")
			except OSError:
				file_handler = None
			if file_handler is not None:
				file_handler.setFormatter(formatter)
				logger.addHandler(file_handler)

		if console:
			console_handler = logging.StreamHandler()
			console_handler.setFormatter(formatter)
			logger.addHandler(console_handler)

	return logger
