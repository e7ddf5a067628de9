"""Structured logging utilities with context support."""

import functools
import logging
import threading
import time
from typing import Any, Callable, Dict, Optional, Tuple, Type

_thread_local = threading.local()


def _current_context() -> Dict[str, Any]:
    return getattr(_thread_local, "context", {})


def get_log_context() -> Dict[str, Any]:
    """Return a copy of the fields currently bound by ``LogContext``."""
    return dict(_current_context())


class LogContext:
    """
    Context manager for adding structured fields to log records.

    Fields with an empty value (``None`` or ``""``) are not bound, so an
    unselected engineer or week does not show up in the logs.

    Example:
        with LogContext(engineer=session.engineer, week=session.selected_week):
            logger.info("Exporting timesheet")
    """

    def __init__(self, **fields: Any):
        self.fields = {k: v for k, v in fields.items() if v is not None and v != ""}
        self._saved: Dict[str, Any] = {}

    def __enter__(self) -> "LogContext":
        self._saved = _current_context()
        _thread_local.context = {**self._saved, **self.fields}
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        _thread_local.context = self._saved


class ContextFilter(logging.Filter):
    """Copy the active ``LogContext`` fields onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in _current_context().items():
            setattr(record, key, value)
        return True


def log_function_call(
    func: Optional[Callable] = None,
    *,
    include_args: bool = False,
    level: str = "DEBUG",
    expected: Tuple[Type[BaseException], ...] = (),
) -> Callable:
    """
    Decorator to log function entry, exit and elapsed time.

    Unexpected exceptions are logged at ERROR with their traceback. Exceptions
    listed in ``expected`` describe bad user input (a corrupt session file,
    say) and are logged at ``level`` without one. Both are re-raised.

    Args:
        func: Function to decorate (when used without arguments)
        include_args: Whether to include function arguments in logs
        level: Log level to use (DEBUG, INFO, WARNING, ERROR)
        expected: Exception types that are part of the function's contract

    Example:
        @log_function_call
        def render_csv(entries, week_number):
            ...

        @log_function_call(expected=(SessionStoreError,))
        def load(self):
            ...
    """

    def decorator(f: Callable) -> Callable:
        @functools.wraps(f)
        def wrapper(*args, **kwargs):
            logger = logging.getLogger(f.__module__)
            log_level = getattr(logging, level.upper())

            if include_args:
                signature = ", ".join(
                    [repr(a) for a in args]
                    + [f"{k}={v!r}" for k, v in kwargs.items()]
                )
                logger.log(log_level, f"Entering {f.__name__} with args: {signature}")
            else:
                logger.log(log_level, f"Entering {f.__name__}")

            started = time.perf_counter()
            try:
                result = f(*args, **kwargs)
            except expected as e:
                logger.log(log_level, f"{f.__name__} failed: {e}")
                raise
            except Exception as e:
                logger.error(
                    f"Exception in {f.__name__}: {type(e).__name__}: {e}",
                    exc_info=True,
                )
                raise

            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.log(log_level, f"Exiting {f.__name__} ({elapsed_ms:.1f} ms)")
            return result

        return wrapper

    if func is None:
        return decorator
    return decorator(func)
