"""
Runtime configuration for LingoPath.

Values come from environment variables (entry points load `.env` first),
falling back to the bundled defaults.
"""

import os
from pathlib import Path

# Bundled curriculum content (lessons.yaml, learning_path.yaml, quiz_bank.yaml)
DEFAULT_CONTENT_DIR = Path(__file__).parent / "content"

CONTENT_DIR_ENV = "LINGOPATH_CONTENT_DIR"
LOG_LEVEL_ENV = "LINGOPATH_LOG_LEVEL"

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def get_content_dir() -> Path:
    """Content directory, overridable via LINGOPATH_CONTENT_DIR."""
    override = os.environ.get(CONTENT_DIR_ENV)
    return Path(override).expanduser() if override else DEFAULT_CONTENT_DIR


def get_log_level() -> str:
    return os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
