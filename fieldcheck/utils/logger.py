"""
FieldCheck Logger
=================

Structured logging for the validation engine.

Loggers are registered by name and pick up their level and output
format from the ``logging.*`` configuration section.
"""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import Any, Dict, List, Optional, TextIO, Union

from fieldcheck.core.exceptions import ConfigurationError


class LogLevel(IntEnum):
    """Log levels."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL

    @classmethod
    def parse(cls, value: Union[str, int, "LogLevel"]) -> "LogLevel":
        """Parse a level name or number, e.g. ``"debug"`` or ``10``."""
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ValueError(f"Unknown log level: {value!r}") from None
        return cls(value)


@dataclass
class LogRecord:
    """
    Structured log record.

    Attributes:
        level: Log level
        message: Log message
        timestamp: Record timestamp
        context: Additional context
    """

    level: LogLevel
    message: str
    timestamp: datetime = field(default_factory=datetime.now)
    context: Dict[str, Any] = field(default_factory=dict)
    logger_name: str = "fieldcheck"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        data: Dict[str, Any] = {
            "timestamp": self.timestamp.isoformat(),
            "level": self.level.name,
            "message": self.message,
            "logger": self.logger_name,
        }

        if self.context:
            data["context"] = self.context

        return data

    def to_json(self) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), default=str, ensure_ascii=False)


class LogFormatter:
    """Base log formatter."""

    def format(self, record: LogRecord) -> str:
        raise NotImplementedError


class TextFormatter(LogFormatter):
    """
    Plain text formatter.

    Example output:
        2024-01-15 10:30:45 [DEBUG] fieldcheck.validation: Rule failed field=email rule=email
    """

    def __init__(
        self,
        format_string: Optional[str] = None,
        date_format: str = "%Y-%m-%d %H:%M:%S",
    ):
        self.format_string = format_string or "{timestamp} [{level}] {logger}: {message}"
        self.date_format = date_format

    def format(self, record: LogRecord) -> str:
        message = record.message

        # Context as key=value pairs
        if record.context:
            context_str = " ".join(f"{k}={v}" for k, v in record.context.items())
            message = f"{message} {context_str}"

        return self.format_string.format(
            timestamp=record.timestamp.strftime(self.date_format),
            level=record.level.name,
            message=message,
            logger=record.logger_name,
        )


class JsonFormatter(LogFormatter):
    """JSON formatter, one object per line."""

    def format(self, record: LogRecord) -> str:
        return record.to_json()


class StreamHandler:
    """Writes formatted records to a stream (stderr by default)."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        formatter: Optional[LogFormatter] = None,
    ):
        self.stream = stream
        self.formatter = formatter or TextFormatter()

    def handle(self, record: LogRecord) -> None:
        # stderr is looked up late so captured streams are honoured
        stream = self.stream or sys.stderr
        stream.write(self.formatter.format(record) + "\n")
        stream.flush()


class Logger:
    """
    Structured logger.

    Example:
        logger = get_logger("fieldcheck.validation")

        logger.debug("Validation rule failed", field="email", rule="email")

        # With context
        logger = logger.with_context(session="signup")
        logger.warning("Falling back to default format")
    """

    def __init__(
        self,
        name: str = "fieldcheck",
        level: LogLevel = LogLevel.WARNING,
        handlers: Optional[List[StreamHandler]] = None,
    ):
        self.name = name
        self.level = level
        self.handlers: List[StreamHandler] = handlers if handlers is not None else []
        self._context: Dict[str, Any] = {}

    def add_handler(self, handler: StreamHandler) -> Logger:
        self.handlers.append(handler)
        return self

    def with_context(self, **context: Any) -> Logger:
        """
        Create logger with additional context.

        The new logger shares handlers with this one.
        """
        new_logger = Logger(name=self.name, level=self.level, handlers=self.handlers)
        new_logger._context = {**self._context, **context}
        return new_logger

    def _log(
        self,
        level: LogLevel,
        message: str,
        **context: Any,
    ) -> None:
        if level < self.level:
            return

        record = LogRecord(
            level=level,
            message=message,
            context={**self._context, **context},
            logger_name=self.name,
        )

        for handler in self.handlers:
            try:
                handler.handle(record)
            except Exception:
                pass  # Logging errors must not break validation

    def debug(self, message: str, **context: Any) -> None:
        self._log(LogLevel.DEBUG, message, **context)

    def info(self, message: str, **context: Any) -> None:
        self._log(LogLevel.INFO, message, **context)

    def warning(self, message: str, **context: Any) -> None:
        self._log(LogLevel.WARNING, message, **context)

    def error(self, message: str, **context: Any) -> None:
        self._log(LogLevel.ERROR, message, **context)


# Logger registry
_loggers: Dict[str, Logger] = {}


def _make_formatter(format: str) -> LogFormatter:
    return JsonFormatter() if format == "json" else TextFormatter()


def get_logger(name: str = "fieldcheck") -> Logger:
    """
    Get or create logger.

    New loggers read ``logging.level`` and ``logging.format`` from
    the process configuration.
    """
    if name not in _loggers:
        from fieldcheck.core.config import get_config

        settings = get_config()
        configured = settings.get("logging.level", "WARNING")
        try:
            level, unknown = LogLevel.parse(configured), False
        except ValueError:
            level, unknown = LogLevel.WARNING, True

        logger = Logger(name=name, level=level)
        logger.add_handler(StreamHandler(formatter=_make_formatter(settings.get("logging.format", "text"))))
        _loggers[name] = logger

        if unknown:
            logger.warning("Unknown log level, using WARNING", level=configured)

    return _loggers[name]


def configure_logging(
    level: Union[str, int, LogLevel] = LogLevel.WARNING,
    format: str = "text",
    stream: Optional[TextIO] = None,
) -> None:
    """
    Reconfigure every registered logger and the defaults for new ones.

    Args:
        level: Log level
        format: Output format ("text" or "json")
        stream: Output stream (stderr when omitted)

    Raises:
        ConfigurationError: If the level is not a known log level
    """
    from fieldcheck.core.config import get_config

    try:
        parsed = LogLevel.parse(level)
    except ValueError as e:
        raise ConfigurationError(str(e)) from e
    settings = get_config()
    settings.set("logging.level", parsed.name)
    settings.set("logging.format", format)

    for logger in _loggers.values():
        logger.level = parsed
        logger.handlers[:] = [StreamHandler(stream=stream, formatter=_make_formatter(format))]
