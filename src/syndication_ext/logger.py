"""
Logging for syndication_ext.

Library modules log through ``get_logger(__name__)``; the bound name is what
the configured format prints. The library adds no sinks on import. Host
applications call :func:`setup_logger` to route its records.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger as _logger

from syndication_ext.config import get_config

# Handlers added by setup_logger; other handlers belong to the host
_handler_ids: list[int] = []


def _formatter(template: str):
    """Build a loguru format callable that always provides ``extra[name]``."""

    def format_record(record) -> str:
        record["extra"].setdefault("name", record["name"])
        return template + "\n{exception}"

    return format_record


def setup_logger(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    rotation: Optional[str] = None,
    retention: Optional[str] = None,
    format: Optional[str] = None,
) -> list[int]:
    """Add console and file sinks for syndication_ext records.

    Calling it again replaces the sinks added by the previous call and
    leaves sinks added elsewhere untouched.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, etc.)
        log_file: Path to log file; enables the file handler when given
        rotation: Log rotation setting (e.g., "100 MB", "1 day")
        retention: Log retention setting (e.g., "30 days", "1 week")
        format: Log format string; ``{extra[name]}`` is the bound logger name

    Returns:
        Ids of the handlers added
    """
    log_config = get_config().logging

    level = level or log_config.level
    file_enabled = log_config.file_enabled or log_file is not None
    log_file = log_file or log_config.file_path
    format_record = _formatter(format or log_config.format)

    remove_handlers()

    if log_config.console_enabled:
        _handler_ids.append(
            _logger.add(
                sys.stderr,
                format=format_record,
                level=level,
                colorize=True,
            )
        )

    if file_enabled:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        _handler_ids.append(
            _logger.add(
                log_file,
                format=format_record,
                level=level,
                rotation=rotation or log_config.rotation,
                retention=retention or log_config.retention,
                encoding="utf-8",
                enqueue=True,
            )
        )

    return list(_handler_ids)


def remove_handlers() -> None:
    """Remove the sinks added by :func:`setup_logger`."""
    while _handler_ids:
        _logger.remove(_handler_ids.pop())


def get_logger(name: Optional[str] = None):
    """Get a logger instance.

    Args:
        name: Logger name (typically __name__ from calling module)

    Returns:
        Logger instance
    """
    if name:
        return _logger.bind(name=name)
    return _logger


__all__ = [
    "get_logger",
    "remove_handlers",
    "setup_logger",
]
