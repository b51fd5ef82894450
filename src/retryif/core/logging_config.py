"""Central logging configuration utilities.

`configure_logging` is meant to be called once by the application that uses
the retry executors. It wires separate stdout/stderr sinks and injects the
current retry session id into every log record, so interleaved attempts of
different sessions can be told apart. Library code never mutates global
logging; it only emits via `LoggingPort` or standard module loggers.
"""

from __future__ import annotations

import contextvars
import logging
import sys
import uuid
from contextlib import contextmanager
from typing import Iterator, Optional

# Retry session id (populated by the executors for the duration of execute())
retry_session_var: contextvars.ContextVar[str] = contextvars.ContextVar(
    "retry_session", default="-"
)

DEFAULT_FORMAT = (
    "[%(asctime)s] %(levelname)s %(name)s %(retry_session)s: %(message)s"
)


def coerce_level(level: int | str | None) -> int:
    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    # getLevelName maps a registered name to its number, anything else to a str
    numeric = logging.getLevelName(str(level).upper().strip())
    return numeric if isinstance(numeric, int) else logging.INFO


class _RetrySessionFilter(logging.Filter):
    """Inject the retry session id from the contextvar into every log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.retry_session = retry_session_var.get()
        return True


class _LevelRangeFilter(logging.Filter):
    """Pass records whose level lies in [min_level, max_level]."""

    def __init__(self, min_level: int = logging.NOTSET, max_level: int = logging.CRITICAL):
        super().__init__()
        self.min_level = min_level
        self.max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return self.min_level <= record.levelno <= self.max_level


def _sink(stream, level_filter: logging.Filter, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.StreamHandler(stream=stream)
    handler.addFilter(level_filter)
    handler.addFilter(_RetrySessionFilter())
    handler.setFormatter(formatter)
    return handler


def configure_logging(
    level: int | str | None = None,
    fmt: Optional[str] = None,
) -> None:
    """Configure root logger with separate stdout/stderr sinks & retry session id.

    Notes
    -----
    * DEBUG/INFO records go to stdout, WARNING and above to stderr.
    * Existing root handlers are replaced, so calling this twice is harmless.
    """
    numeric_level = coerce_level(level)
    formatter = logging.Formatter(fmt or DEFAULT_FORMAT)

    root = logging.getLogger()
    root.setLevel(numeric_level)
    for h in list(root.handlers):
        root.removeHandler(h)

    root.addHandler(_sink(sys.stdout, _LevelRangeFilter(max_level=logging.INFO), formatter))
    root.addHandler(_sink(sys.stderr, _LevelRangeFilter(min_level=logging.WARNING), formatter))

    logging.getLogger("retryif").debug("Logging configured level=%s", numeric_level)


@contextmanager
def retry_session(session_id: Optional[str] = None) -> Iterator[str]:
    """Bind a retry session id to the current context for the enclosed block."""
    token = retry_session_var.set(session_id or uuid.uuid4().hex[:8])
    try:
        yield retry_session_var.get()
    finally:
        retry_session_var.reset(token)
