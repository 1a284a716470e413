"""
Logging utilities for the cookie sync command.

Progress lines go to stdout; warnings and errors go to stderr.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


class _BelowLevelFilter(logging.Filter):
    def __init__(self, level: int) -> None:
        super().__init__()
        self._level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self._level


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging, splitting records between stdout and stderr."""
    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.addFilter(_BelowLevelFilter(logging.WARNING))

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.WARNING)

    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
        handlers=[stdout_handler, stderr_handler],
        force=True,
    )


__all__ = ["configure_logging"]
