"""
Structured logging for wizard events.

Provides JSON-formatted logs with timestamps and structured fields.
"""
import json
import logging
import sys
from datetime import datetime
from typing import Any, Optional

from prompt_wizard.config import EnvironmentConfig


class StructuredFormatter(logging.Formatter):
    """JSON structured log formatter."""

    EXCLUDED_ATTRS = {
        'name', 'msg', 'args', 'levelname', 'levelno',
        'pathname', 'filename', 'module', 'exc_info',
        'exc_text', 'stack_info', 'lineno', 'funcName',
        'created', 'msecs', 'relativeCreated', 'thread',
        'threadName', 'processName', 'process', 'message',
        'asctime', 'taskName'
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON formatted string
        """
        log_data = {
            "timestamp": datetime.now().isoformat(),
            "level": record.levelname,
            "event": record.getMessage(),
            "logger": record.name,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in self.EXCLUDED_ATTRS:
                # Handle non-serializable objects
                try:
                    json.dumps(value)
                    log_data[key] = value
                except (TypeError, ValueError):
                    log_data[key] = str(value)

        return json.dumps(log_data)


class StructuredLogger:
    """Structured logger wrapper with convenience methods."""

    TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    def __init__(
        self,
        name: str = "prompt_wizard",
        level: Any = logging.INFO,
        json_output: bool = True,
        enable_console: bool = True,
        stream=None
    ):
        """Initialize structured logger.

        Args:
            name: Logger name
            level: Logging level (int or level name)
            json_output: Emit JSON lines instead of plain text
            enable_console: Output to a stream handler
            stream: Stream for the console handler, stderr by default
        """
        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)
        self._logger.handlers = []  # Clear existing handlers
        self._logger.propagate = False

        if enable_console:
            handler = logging.StreamHandler(stream or sys.stderr)
            if json_output:
                handler.setFormatter(StructuredFormatter())
            else:
                handler.setFormatter(logging.Formatter(self.TEXT_FORMAT))
            self._logger.addHandler(handler)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def info(self, event: str, **kwargs: Any) -> None:
        self._logger.info(event, extra=kwargs)

    def warning(self, event: str, **kwargs: Any) -> None:
        self._logger.warning(event, extra=kwargs)

    def error(self, event: str, **kwargs: Any) -> None:
        self._logger.error(event, extra=kwargs)

    def debug(self, event: str, **kwargs: Any) -> None:
        self._logger.debug(event, extra=kwargs)

    def log_notification(self, title: str, body: str, severity: str) -> None:
        """Log a notification handed to the notification sink.

        Args:
            title: Notification title
            body: Notification body
            severity: Severity label
        """
        level = logging.WARNING if severity == "destructive" else logging.INFO
        self._logger.log(
            level,
            "notification",
            extra={"title": title, "body": body, "severity": severity}
        )

    def log_import(
        self,
        target: str,
        outcome: str,
        file_name: Optional[str] = None,
        entries: int = 0,
        error: Optional[str] = None
    ) -> None:
        """Log the outcome of a file import.

        Args:
            target: Import target (selectors or data)
            outcome: Outcome label (replaced, malformed, unsupported_shape)
            file_name: Name of the uploaded file, if known
            entries: Number of entries written
            error: Decoder error message for malformed input
        """
        level = logging.INFO if outcome == "replaced" else logging.WARNING
        self._logger.log(
            level,
            "file_import",
            extra={
                "target": target,
                "outcome": outcome,
                "file_name": file_name,
                "entries": entries,
                "error": error
            }
        )

    def log_compilation(self, framework: str, steps: int, selectors: int, chars: int) -> None:
        self._logger.debug(
            "prompt_compiled",
            extra={
                "framework": framework,
                "steps": steps,
                "selectors": selectors,
                "chars": chars
            }
        )

    def log_stage_change(self, previous: int, current: int) -> None:
        self._logger.debug("stage_changed", extra={"previous": previous, "current": current})


_default_logger: Optional[StructuredLogger] = None


def get_logger() -> StructuredLogger:
    """Get the process-wide structured logger, configured from the environment."""
    global _default_logger
    if _default_logger is None:
        config = EnvironmentConfig.get_logging_config()
        _default_logger = StructuredLogger(level=config['level'], json_output=config['json'])
    return _default_logger
