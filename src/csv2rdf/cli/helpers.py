"""
Console output and logging for the command line tool.

Log records go to a rotating UTF-8 log file, either as text lines or as one
JSON object per line. Messages meant for the user are printed, never logged.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from ..constants import LoggingConfig
from ..core.config import resolve_log_level

logger = logging.getLogger(__name__)

# Attributes of every record; anything else was passed with ``extra``.
_RECORD_ATTRIBUTES = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime", "taskName"}

_handlers: List[logging.Handler] = []
_settings: Optional[Tuple[Any, ...]] = None
_log_file: Optional[str] = None


class JSONFormatter(logging.Formatter):
    """Formats a record as a single line JSON object, including ``extra`` fields."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: Dict[str, Any] = {
            "timestamp": timestamp.strftime(LoggingConfig.JSON_DATE_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        for key, value in vars(record).items():
            if key not in _RECORD_ATTRIBUTES and key not in payload:
                payload[key] = value

        return json.dumps(payload, ensure_ascii=False, default=str)


def reset_logging() -> None:
    """Remove the handlers installed by ``setup_logging``."""
    global _settings, _log_file
    root_logger = logging.getLogger()
    for handler in _handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _handlers.clear()
    _settings = None
    _log_file = None
    logging.captureWarnings(False)


def _rotating_file_handler(path: Path) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(
        path,
        maxBytes=LoggingConfig.MAX_LOG_FILE_MB * 1024 * 1024,
        backupCount=LoggingConfig.LOG_BACKUP_COUNT,
        encoding='utf-8',
    )


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    *,
    config: Optional[Dict[str, Any]] = None,
    include_console: bool = True,
) -> Optional[str]:
    """
    Configure the root logger.

    ``level`` and ``log_file`` take precedence over the ``level`` and
    ``file`` entries of ``config`` (the ``logging`` section of the
    configuration). Calling again with the same settings keeps the
    installed handlers. A log file that cannot be opened is replaced by
    console output.

    Args:
        level: Log level name.
        log_file: Log file path.
        config: Optional ``logging`` section with ``level``, ``file`` and ``format``.
        include_console: Also log to stderr when writing a log file.

    Returns:
        The log file path, or None if logging to the console only.
    """
    global _settings, _log_file

    config = config or {}
    level_name = str(level or config.get("level") or LoggingConfig.DEFAULT_LOG_LEVEL).upper()
    log_level = resolve_log_level(level_name)
    file_name = log_file if log_file is not None else config.get("file")
    format_style = config.get("format", LoggingConfig.DEFAULT_FORMAT_STYLE)

    settings = (log_level, file_name, format_style, include_console)
    if settings == _settings and _handlers:
        return _log_file

    reset_logging()

    handlers: List[logging.Handler] = []
    file_error: Optional[OSError] = None
    if file_name:
        try:
            handlers.append(_rotating_file_handler(Path(file_name)))
        except OSError as e:
            file_error = e
    if include_console or not handlers:
        handlers.append(logging.StreamHandler(sys.stderr))

    if format_style == "json":
        formatter: logging.Formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(LoggingConfig.LOG_FORMAT, LoggingConfig.DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
        _handlers.append(handler)
    logging.captureWarnings(True)

    _settings = settings
    _log_file = file_name if file_name and file_error is None else None

    if file_error is not None:
        logger.warning(f"Could not open log file {file_name}, logging to console: {file_error}")
    elif _log_file:
        logger.debug(f"Logging to: {_log_file}")
    return _log_file


def print_header(title: str, width: int = 60) -> None:
    """Print a title between two rules."""
    print("\n" + "=" * width)
    print(title)
    print("=" * width)


def print_footer(width: int = 60) -> None:
    print("=" * width + "\n")


def print_error(*lines: str) -> None:
    """Print error lines to stderr."""
    for line in lines:
        print(line, file=sys.stderr)
