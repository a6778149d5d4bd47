import os
import logging
from typing import Optional

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "INFO"


def load_env_file(path: Optional[str] = None) -> bool:
	"""Load a .env file into the environment without overriding variables already set.

	With no path, the file is searched upwards from the working directory.
	"""
	path = path or find_dotenv(usecwd=True)
	if not path:
		return False
	return load_dotenv(path, override=False)


def get_optional_str_env(name: str) -> Optional[str]:
	raw = os.getenv(name)
	if raw is None or raw.strip() == "":
		return None
	return raw.strip()


def get_float_env(name: str, default: float) -> float:
	raw = os.getenv(name)
	if raw is None or raw.strip() == "":
		return default
	try:
		return float(raw)
	except ValueError:
		logger.warning("Invalid %s: %r, using %s", name, raw, default)
		return default


def log_level() -> str:
	raw = (os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
	# getLevelName returns an int only for registered level names
	if not isinstance(logging.getLevelName(raw), int):
		logger.warning("Invalid LOG_LEVEL: %r, using %s", raw, DEFAULT_LOG_LEVEL)
		return DEFAULT_LOG_LEVEL
	return raw


load_env_file()
