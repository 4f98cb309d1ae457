"""Centralized logging configuration for condmatch.

Two layers live here:

* package-level helpers (``setup_root_logger``, ``get_logger``, ...) that
  configure the ``condmatch`` logger hierarchy;
* log consumers, small objects that are injected into the evaluator and
  receive ``(level, message, fields)`` diagnostics.

Importing this module leaves the ``condmatch`` logger untouched. A handler is
attached the first time ``get_logger`` or ``set_global_log_level`` runs, so
library users that only pass their own consumer never see package output.
"""

from __future__ import annotations

import logging
import sys
from enum import IntEnum
from pathlib import Path
from typing import Any, Mapping, Optional, Protocol, Union

_PACKAGE_LOGGER = "condmatch"
_DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Set once the package handler is attached; cleared by reset_logging
_ROOT_LOGGER_CONFIGURED = False

#: Prefix prepended to every message emitted through a log consumer.
LOG_PREFIX = "[condmatch]"


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach the package handler to the ``condmatch`` logger.

    Later calls are no-ops until ``reset_logging`` runs.

    Args:
        level: Logging level (default: INFO).
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to a stdout StreamHandler).
    """
    global _ROOT_LOGGER_CONFIGURED
    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger(_PACKAGE_LOGGER)

    handler = handler if handler is not None else logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or _DEFAULT_FORMAT))

    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
    # Propagate so pytest's caplog still sees records
    root_logger.propagate = True
    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a child of the ``condmatch`` logger, configuring it on first use.

    Args:
        name: Logger name (typically ``__name__``).
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the ``condmatch`` logger and its handlers."""
    setup_root_logger()
    root_logger = logging.getLogger(_PACKAGE_LOGGER)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Switch package logging to DEBUG (the CLI's ``--verbose``)."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Return package logging to INFO."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the package handler and level; used by tests."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(_PACKAGE_LOGGER)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


class LogLevel(IntEnum):
    """Diagnostic levels understood by log consumers.

    Values are the matching stdlib ``logging`` levels so a ``LogLevel`` can be
    handed straight to ``logging.Logger.log``.
    """

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR

    @classmethod
    def from_string(cls, value: str) -> "LogLevel":
        """Parse a case-insensitive level name such as ``"warning"``.

        Raises:
            ValueError: If the name is not a known level.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid log level '{value}'. Valid values are: {valid}"
            ) from None


class LogConsumer(Protocol):
    """Sink for diagnostics emitted while evaluating conditions."""

    def log(
        self, level: LogLevel, message: str, fields: Mapping[str, Any]
    ) -> None: ...

    def set_log_level(self, level: LogLevel) -> None: ...


def _render_fields(fields: Mapping[str, Any]) -> str:
    return " ".join(f"{key}={fields[key]}" for key in sorted(fields))


class LevelLogConsumer:
    """Log consumer that filters by level and writes to a stdlib logger.

    Args:
        logger: Target logger. Defaults to ``condmatch.diagnostics``.
        level: Minimum level that is forwarded.
    """

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        level: LogLevel = LogLevel.INFO,
    ) -> None:
        self._logger = logger if logger is not None else get_logger(
            "condmatch.diagnostics"
        )
        self._level = LogLevel(level)

    @property
    def level(self) -> LogLevel:
        return self._level

    def log(
        self, level: LogLevel, message: str, fields: Mapping[str, Any]
    ) -> None:
        if level < self._level:
            return
        text = f"{LOG_PREFIX} {message}"
        if fields:
            text = f"{text} {_render_fields(fields)}"
        self._logger.log(int(level), text)

    def set_log_level(self, level: LogLevel) -> None:
        self._level = LogLevel(level)


class FileLogConsumer:
    """Log consumer writing diagnostics to a file it owns.

    The file is opened on construction and released by :meth:`close` or by
    leaving a ``with`` block. Each line has the form
    ``[condmatch][LEVEL][name] message key=value ...``.

    Args:
        path: Destination file, opened in append mode.
        level: Minimum level that is written.
        name: Label written into every line (for example a request id).
    """

    def __init__(
        self,
        path: Union[str, Path],
        level: LogLevel = LogLevel.INFO,
        name: str = "",
    ) -> None:
        self.path = Path(path)
        self.name = name
        self._level = LogLevel(level)
        self._handler: Optional[logging.FileHandler] = logging.FileHandler(
            self.path, mode="a", encoding="utf-8"
        )
        self._handler.setFormatter(logging.Formatter("%(message)s"))

    @property
    def closed(self) -> bool:
        return self._handler is None

    def log(
        self, level: LogLevel, message: str, fields: Mapping[str, Any]
    ) -> None:
        if self._handler is None:
            raise ValueError(f"Log file {self.path} is closed")
        if level < self._level:
            return
        level = LogLevel(level)
        text = f"{LOG_PREFIX}[{level.name}][{self.name}] {message}"
        if fields:
            text = f"{text} {_render_fields(fields)}"
        record = logging.LogRecord(
            name="condmatch.file",
            level=int(level),
            pathname=__file__,
            lineno=0,
            msg=text,
            args=None,
            exc_info=None,
        )
        self._handler.handle(record)

    def set_log_level(self, level: LogLevel) -> None:
        self._level = LogLevel(level)

    def close(self) -> None:
        if self._handler is None:
            return
        self._handler.close()
        self._handler = None

    def __enter__(self) -> "FileLogConsumer":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

