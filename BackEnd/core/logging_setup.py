import logging
import sys
from logging.handlers import RotatingFileHandler

from BackEnd.core.config import LOG_FILE, LOG_MAX_BYTES, LOG_BACKUP_COUNT
from BackEnd.core.paths import logs_dir

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s:%(funcName)s:%(lineno)d - %(message)s'


class ColorFormatter(logging.Formatter):
	"""Adds ANSI colors to console output by level."""

	GREY = "\x1b[38;20m"
	YELLOW = "\x1b[33;20m"
	RED = "\x1b[31;20m"
	BOLD_RED = "\x1b[31;1m"
	CYAN = "\x1b[36;20m"
	RESET = "\x1b[0m"

	COLORS = {
		logging.DEBUG: CYAN,
		logging.INFO: GREY,
		logging.WARNING: YELLOW,
		logging.ERROR: RED,
		logging.CRITICAL: BOLD_RED,
	}

	def format(self, record):
		color = self.COLORS.get(record.levelno, self.GREY)
		return logging.Formatter(f"{color}{LOG_FORMAT}{self.RESET}").format(record)


def setup_logging(log_dir=None):
	"""
	Configure the root logger for console and rotating file output.
	Call once at application start; repeated calls do not add handlers.
	"""
	root_logger = logging.getLogger()
	if getattr(root_logger, "_worktime_configured", False):
		return root_logger
	root_logger.setLevel(logging.DEBUG)

	console_handler = logging.StreamHandler(sys.stdout)
	console_handler.setLevel(logging.INFO)
	console_handler.setFormatter(ColorFormatter())
	root_logger.addHandler(console_handler)

	target_dir = log_dir if log_dir is not None else logs_dir()
	try:
		file_handler = RotatingFileHandler(
			target_dir / LOG_FILE, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT, encoding="utf-8"
		)
	except OSError as e:
		root_logger.warning("File logging disabled: %s", e)
	else:
		file_handler.setLevel(logging.DEBUG)
		file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
		root_logger.addHandler(file_handler)

	root_logger._worktime_configured = True
	logging.info("Logging initialized.")
	return root_logger
