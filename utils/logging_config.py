# utils/logging_config.py
import logging
import os
import sys

DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _get_log_level():
    """Get log level from env var, falling back to INFO."""
    name = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return None
    return level


def setup_logging():
    """Configure stdout logging for Lambda."""
    root = logging.getLogger()

    # Remove existing handlers
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    level = _get_log_level()
    if level is None:
        root.setLevel(logging.INFO)
        root.warning(f"Invalid LOG_LEVEL {os.getenv('LOG_LEVEL')!r}, using {DEFAULT_LOG_LEVEL}")
    else:
        root.setLevel(level)

    return root
