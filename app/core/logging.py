import logging
import json
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Dict, Any, Optional, Union

# Request id of the HTTP request being served, set by the request middleware
request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

_RESERVED_ATTRS = set(vars(logging.makeLogRecord({})).keys()) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """
    Formatter that renders each record as a single JSON object.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as JSON."""
        log_record = self._format_record(record)
        return json.dumps(log_record, default=str)

    def _format_record(self, record: logging.LogRecord) -> Dict[str, Any]:
        log_record = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Fields passed through `extra=` or a LoggerAdapter
        for key, value in record.__dict__.items():
            if key in _RESERVED_ATTRS or key in log_record or key.startswith("_"):
                continue
            if isinstance(value, (str, int, float, bool, type(None))):
                log_record[key] = value

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        return log_record


class RequestIDFilter(logging.Filter):
    """
    Attach the current request id to every record that does not carry one.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "request_id", None) is None:
            record.request_id = request_id_var.get()
        return True


def setup_logging(logger_name: str = "app", log_level: str = "INFO") -> logging.Logger:
    """
    Set up structured logging with JSON formatting.

    Args:
        logger_name: Name of the root application logger
        log_level: Logging level to use

    Returns:
        Logger instance
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Re-running setup (tests, reloads) must not stack handlers
    logger.handlers = []

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter())
    handler.addFilter(RequestIDFilter())
    logger.addHandler(handler)

    logger.propagate = False

    return logger


def get_logger(
        module_name: str,
        request_id: Optional[str] = None,
        user_id: Optional[int] = None,
        entity: Optional[str] = None,
) -> Union[logging.Logger, logging.LoggerAdapter]:
    """
    Get a child of the application logger, optionally bound to context.

    Args:
        module_name: Name of the module (usually __name__)
        request_id: Request id to pin instead of the ambient one
        user_id: ID of the authenticated user
        entity: Entity type the caller works on (e.g. "destinations")

    Returns:
        Logger, or a LoggerAdapter when any context was given
    """
    name = module_name if module_name.startswith("app") else f"app.{module_name}"
    logger = logging.getLogger(name)

    extra = {}
    if request_id:
        extra["request_id"] = request_id
    if user_id:
        extra["user_id"] = user_id
    if entity:
        extra["entity"] = entity

    if extra:
        return logging.LoggerAdapter(logger, extra)

    return logger
