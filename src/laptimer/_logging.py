"""Call logging for the timing engine and the dashboard's API fetchers.

The decorators log to the ``laptimer.calls`` logger, which does nothing until
an application attaches the call log file with :func:`set_log_dir`.
"""

from __future__ import annotations

import functools
import logging
import os
import threading
import time
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

LOGGER_NAME = "laptimer.calls"
LOG_FILE_NAME = "timing_calls.log"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())

_file_handler: logging.FileHandler | None = None
_handler_lock = threading.Lock()


def set_log_dir(path: str | os.PathLike[str] | None) -> str | None:
    """Write the call log to ``<path>/timing_calls.log``, or stop with ``None``.

    Replaces any call log attached earlier. Returns the log file path.
    """
    global _file_handler
    with _handler_lock:
        log_file = os.path.abspath(os.path.join(os.fspath(path), LOG_FILE_NAME)) if path is not None else None
        if _file_handler is not None:
            if _file_handler.baseFilename == log_file:
                return log_file
            logger.removeHandler(_file_handler)
            _file_handler.close()
            _file_handler = None

        if log_file is None:
            logger.setLevel(logging.NOTSET)
            logger.propagate = True
            return None

        os.makedirs(os.path.dirname(log_file), exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"),
        )
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False
        _file_handler = handler
        return log_file


def _describe_args(args: tuple[Any, ...], kwargs: dict[str, Any], skip_self: bool = True) -> str:
    arg_parts = [repr(a) for a in (args[1:] if skip_self else args)]
    arg_parts += [f"{k}={v!r}" for k, v in kwargs.items()]
    return ", ".join(arg_parts)


def log_engine_call(fn: F) -> F:
    """Decorator that logs engine operations and the number of events they emit."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        arg_str = _describe_args(args, kwargs)
        logger.info("CALL: %s(%s)", fn.__qualname__, arg_str)

        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
            elapsed = time.monotonic() - start
            count = len(result) if isinstance(result, list) else 0
            logger.info(
                "OK: %s(%s) -> %d events (%.3fs)",
                fn.__qualname__, arg_str, count, elapsed,
            )
            return result
        except Exception as exc:
            elapsed = time.monotonic() - start
            logger.error(
                "FAIL: %s(%s) -> %s: %s (%.3fs)",
                fn.__qualname__, arg_str, type(exc).__name__, exc, elapsed,
            )
            raise

    return wrapper  # type: ignore[return-value]


def log_api_call(fn: F) -> F:
    """Decorator that logs timing-server fetches made by the dashboard."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        arg_str = _describe_args(args, kwargs, skip_self=False)
        logger.info("API CALL: %s(%s)", fn.__qualname__, arg_str)

        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
            elapsed = time.monotonic() - start
            count = len(result) if isinstance(result, (list, dict)) else 1
            logger.info(
                "API OK: %s(%s) -> %d items (%.3fs)",
                fn.__qualname__, arg_str, count, elapsed,
            )
            return result
        except Exception as exc:
            elapsed = time.monotonic() - start
            logger.error(
                "API FAIL: %s(%s) -> %s: %s (%.3fs)",
                fn.__qualname__, arg_str, type(exc).__name__, exc, elapsed,
            )
            raise

    return wrapper  # type: ignore[return-value]
