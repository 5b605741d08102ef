"""Structured logging configuration for seqsync."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

_RESERVED = (
    "name", "msg", "args", "created", "filename", "funcName",
    "levelname", "levelno", "lineno", "module", "msecs",
    "pathname", "process", "processName", "relativeCreated",
    "stack_info", "exc_info", "exc_text", "thread", "threadName",
    "message", "asctime", "taskName",
)


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def __init__(
        self,
        include_timestamp: bool = True,
        include_level: bool = True,
        include_logger: bool = True,
    ):
        super().__init__()
        self._include_timestamp = include_timestamp
        self._include_level = include_level
        self._include_logger = include_logger

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data: Dict[str, Any] = {}

        if self._include_timestamp:
            log_data["timestamp"] = datetime.now(timezone.utc).isoformat()

        if self._include_level:
            log_data["level"] = record.levelname

        if self._include_logger:
            log_data["logger"] = record.name

        log_data["message"] = record.getMessage()

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Trace events carry event/value/position/start/end/kind as extras
        for key, value in record.__dict__.items():
            if key.startswith("_") or key in _RESERVED:
                continue
            if isinstance(value, (str, int, float, bool, type(None))):
                log_data[key] = value
            elif isinstance(value, (list, tuple)):
                log_data[key] = list(value)

        return json.dumps(log_data, default=str)


class ContextLogger:
    """
    Logger that stamps a fixed set of fields onto every record.

    Context keys that clash with LogRecord attributes (e.g. "name",
    "module") are stored under a "ctx_" prefix so they can't break
    logging.makeRecord().
    """

    def __init__(self, logger: logging.Logger, context: Optional[Dict[str, Any]] = None):
        self._logger = logger
        self._context: Dict[str, Any] = _safe_extra(context or {})

    @property
    def context(self) -> Dict[str, Any]:
        return dict(self._context)

    def with_context(self, **kwargs) -> "ContextLogger":
        """Return a logger carrying this context plus `kwargs`."""
        return ContextLogger(self._logger, {**self._context, **kwargs})

    def log(self, level: int, msg: str, **kwargs) -> None:
        if not self._logger.isEnabledFor(level):
            return
        extra = {**self._context, **_safe_extra(kwargs)}
        self._logger.log(level, msg, extra=extra)

    def debug(self, msg: str, **kwargs) -> None:
        self.log(logging.DEBUG, msg, **kwargs)

    def info(self, msg: str, **kwargs) -> None:
        self.log(logging.INFO, msg, **kwargs)

    def warning(self, msg: str, **kwargs) -> None:
        self.log(logging.WARNING, msg, **kwargs)


def _safe_extra(fields: Dict[str, Any]) -> Dict[str, Any]:
    return {f"ctx_{k}" if k in _RESERVED else k: v for k, v in fields.items()}


def configure_logging(
    log_format: str = "text",
    log_level: str = "INFO",
    logger_name: Optional[str] = "seqsync",
) -> logging.Logger:
    """
    Configure logging for seqsync.

    Args:
        log_format: "json" or "text"
        log_level: Logging level name
        logger_name: Name for the logger (None for root)

    Returns:
        Configured logger
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(getattr(logging, log_level.upper()))

    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)

    if log_format == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))

    logger.addHandler(handler)

    return logger


def get_logger(name: str, **context) -> ContextLogger:
    """Get a context-aware logger, optionally pre-bound with `context`."""
    return ContextLogger(logging.getLogger(name), context)
