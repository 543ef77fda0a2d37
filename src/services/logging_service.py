"""
Logging service for Stipple.

Stipple logs through the standard library. setup_logging() installs a
console handler and, optionally, a daily log file under
~/.local/share/stipple/logs/ (one stipple_YYYYMMDD.log per day, older files
pruned). Modules never configure handlers themselves; they only call
get_logger(__name__).

Tool switches are logged at INFO, registry changes at DEBUG and rejected
requests (unknown tool names, unregistered tools) at WARNING, so the default
INFO level gives a readable trace of what the user selected.
"""

import logging
from datetime import date
from pathlib import Path
from typing import List, Optional, Union


DEFAULT_LOG_DIR = Path.home() / ".local" / "share" / "stipple" / "logs"
DEFAULT_KEEP_DAYS = 7

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_PREFIX = "stipple_"

# Handlers installed by setup_logging(), removed again by reset_logging()
_installed_handlers: List[logging.Handler] = []


def parse_log_level(level: Union[int, str]) -> int:
    """
    Convert a level name such as "debug" or "INFO" to a logging constant.

    Unknown names fall back to logging.INFO.
    """
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    return value if isinstance(value, int) else logging.INFO


def log_file_path(log_dir: Path, day: Optional[date] = None) -> Path:
    """Path of the log file written on the given day (today by default)."""
    day = day or date.today()
    return log_dir / f"{LOG_FILE_PREFIX}{day.strftime('%Y%m%d')}.log"


def prune_old_logs(log_dir: Path, keep: int = DEFAULT_KEEP_DAYS) -> List[Path]:
    """
    Delete all but the newest `keep` daily log files in log_dir.

    File names carry the date, so name order is age order.

    Returns:
        The files that were deleted.
    """
    if keep < 1 or not log_dir.is_dir():
        return []

    files = sorted(log_dir.glob(f"{LOG_FILE_PREFIX}*.log"))
    removed = []
    for path in files[:-keep]:
        try:
            path.unlink()
            removed.append(path)
        except OSError as e:
            logging.getLogger(__name__).warning(f"Could not delete old log {path}: {e}")
    return removed


def setup_logging(
    log_level: Union[int, str] = logging.INFO,
    log_to_file: bool = True,
    log_dir: Optional[Path] = None,
    keep_days: int = DEFAULT_KEEP_DAYS,
) -> None:
    """
    Configure logging for Stipple.

    Calling it again replaces the handlers installed by the previous call,
    which lets the level follow a reloaded config.

    Args:
        log_level: Level as a logging constant or a name such as "DEBUG".
        log_to_file: Also write today's log file.
        log_dir: Directory for log files. Defaults to ~/.local/share/stipple/logs/
        keep_days: Number of daily log files kept when pruning.
    """
    reset_logging()

    level = parse_log_level(log_level)
    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    _install(console_handler)

    if not log_to_file:
        return

    log_dir = log_dir or DEFAULT_LOG_DIR
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file_path(log_dir), encoding="utf-8")
    except OSError as e:
        root_logger.warning(f"Could not create log file in {log_dir}: {e}. Logging to console only.")
        return

    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    _install(file_handler)
    prune_old_logs(log_dir, keep_days)


def reset_logging() -> None:
    """Remove and close the handlers installed by setup_logging()."""
    root_logger = logging.getLogger()
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()


def _install(handler: logging.Handler) -> None:
    logging.getLogger().addHandler(handler)
    _installed_handlers.append(handler)


def get_logger(name: str) -> logging.Logger:
    """Logger for a module; pass __name__."""
    return logging.getLogger(name)
