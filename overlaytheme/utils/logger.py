"""
Logging configuration for OverlayTheme.

Theme parsing reports every defaulted field at DEBUG, so running with
``OVERLAYTHEME_LOG_LEVEL=DEBUG`` shows exactly which keys a theme file
failed to provide.
"""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

LOG_LEVEL_ENV_VAR = "OVERLAYTHEME_LOG_LEVEL"

# Older session logs beyond this count are removed at startup
MAX_LOG_FILES = 10

LOG_FILE_PREFIX = "overlaytheme_"


def resolve_log_level(value: Optional[str] = None) -> int:
    """
    Map a level name to a logging level.

    Falls back to ``OVERLAYTHEME_LOG_LEVEL`` when value is empty, then to INFO.
    Unknown names resolve to INFO.
    """
    name = (value or os.environ.get(LOG_LEVEL_ENV_VAR, "")).strip().upper()
    level = logging.getLevelName(name) if name else logging.INFO
    return level if isinstance(level, int) else logging.INFO


def setup_logging(
    log_level: Optional[str] = None,
    log_file: bool = True,
    log_dir: Optional[Union[str, Path]] = None,
) -> Optional[Path]:
    """
    Configure the root logger for a session.

    The console shows messages at the requested level; the session log file
    always records DEBUG so parse reports can be inspected after the fact.

    Args:
        log_level: Level name, defaults to the environment or INFO
        log_file: If True, also write a timestamped session log
        log_dir: Directory for session logs, defaults to get_log_dir()

    Returns:
        Path of the session log file, or None when file logging is off
        or the directory is not writable
    """
    level = resolve_log_level(log_level)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG if log_file else level)
    root.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    root.addHandler(console_handler)

    if not log_file:
        return None

    log_dir = Path(log_dir) if log_dir else get_log_dir()
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        root.warning(f"Cannot create log directory {log_dir}: {e}")
        return None

    _prune_old_logs(log_dir, keep=MAX_LOG_FILES - 1)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file_path = log_dir / f"{LOG_FILE_PREFIX}{timestamp}.log"

    file_handler = logging.FileHandler(log_file_path, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    ))
    root.addHandler(file_handler)

    root.info(f"Logging to file: {log_file_path}")
    return log_file_path


def _prune_old_logs(log_dir: Path, keep: int):
    logs = sorted(log_dir.glob(f"{LOG_FILE_PREFIX}*.log"))
    for old in logs[:max(len(logs) - keep, 0)]:
        try:
            old.unlink()
        except OSError:
            logging.getLogger(__name__).debug(f"Could not remove old log {old}")


def get_log_dir() -> Path:
    """Return the platform cache directory used for session logs."""
    if os.name == 'nt':
        base = os.environ.get('LOCALAPPDATA', os.path.expanduser('~'))
    else:
        base = os.environ.get('XDG_CACHE_HOME', os.path.expanduser('~/.cache'))

    return Path(base) / 'overlaytheme' / 'logs'
