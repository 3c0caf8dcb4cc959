"""
Structured JSON logging for the preconditions package.

The only record the package emits is ``precondition_failed`` at DEBUG,
carrying the failing check name, the failure kind and the error about to
be raised (via ``exc_info``). StructuredFormatter flattens that error into
``exc_*`` keys so a log line identifies the failure without a traceback
parse.
"""

__all__ = [
    "StructuredFormatter",
    "get_logger",
    "configure_logging",
    "reset_logging",
]

import json
import logging
import sys
import threading
from datetime import UTC, datetime
from typing import Any

_STDLIB_KEYS: frozenset[str] = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None)).keys()
) | {"message", "taskName"}

_EXC_SKIP: frozenset[str] = frozenset({"args", "code"})


def _exception_fields(exc: BaseException) -> dict[str, Any]:
    """Flatten an exception into exc_* keys.

    code comes from PreconditionError subclasses; public instance
    attributes (InvalidArgumentError.message, a caller error's own fields)
    are copied as exc_<name>.
    """
    fields: dict[str, Any] = {
        "exc_type": type(exc).__name__,
        "exc_message": str(exc),
    }
    code = getattr(exc, "code", None)
    if code is not None:
        fields["exc_code"] = code
    for name, value in vars(exc).items():
        if not name.startswith("_") and name not in _EXC_SKIP:
            fields[f"exc_{name}"] = value
    return fields


class StructuredFormatter(logging.Formatter):
    """One JSON object per record: envelope, extras, then exception fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, val in vars(record).items():
            if key not in _STDLIB_KEYS and key not in payload:
                payload[key] = val

        if record.exc_info and record.exc_info[1] is not None:
            payload.update(_exception_fields(record.exc_info[1]))
            # Errors logged before their first raise have no traceback yet
            if record.exc_info[2] is not None:
                payload["traceback"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


_LOGGER_PREFIX = "preconditions"


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the preconditions namespace."""
    return logging.getLogger(f"{_LOGGER_PREFIX}.{name}")


_configured = False
_lock = threading.Lock()


def configure_logging(
    *,
    level: int = logging.INFO,
    stream: Any = None,
    handler: logging.Handler | None = None,
) -> None:
    """Attach a JSON handler to the preconditions logger (idempotent).

    Pass level=logging.DEBUG to see precondition_failed records.
    """
    global _configured
    with _lock:
        if _configured:
            return
        _configured = True

    root_logger = logging.getLogger(_LOGGER_PREFIX)
    root_logger.setLevel(level)
    root_logger.propagate = False

    h = handler if handler is not None else logging.StreamHandler(stream or sys.stderr)
    h.setFormatter(StructuredFormatter())
    root_logger.addHandler(h)


def reset_logging() -> None:
    """Undo configure_logging. FOR TESTING ONLY."""
    global _configured
    with _lock:
        _configured = False
    logger = logging.getLogger(_LOGGER_PREFIX)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
