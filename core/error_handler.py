"""Decorators for consistent error handling and timing."""
from __future__ import annotations

import functools
import time
from typing import Any, Callable, Optional, TypeVar

from loguru import logger

from core.result import Failure, Result, Success

T = TypeVar('T')


def handle_exceptions(
    logger_instance=logger,
    default_return: Optional[Any] = None,
    reraise: bool = False,
    message: Optional[str] = None,
):
    """Log exceptions raised by the wrapped function and return a default.

    Args:
        logger_instance: Logger used for the error record
        default_return: Value returned when the wrapped call raises
        reraise: Re-raise after logging instead of returning the default
        message: Prefix for the logged message
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                error_msg = message or f"Error in {func.__name__}"
                logger_instance.error(f"{error_msg}: {e}")
                if reraise:
                    raise
                return default_return
        return wrapper
    return decorator


def as_result(*error_types: type):
    """Wrap the function output in Success, and listed exceptions in Failure.

    Exceptions not listed in ``error_types`` propagate unchanged. With no
    types given every ``Exception`` is captured.
    """
    caught = error_types or (Exception,)

    def decorator(func: Callable[..., T]) -> Callable[..., Result[T, Exception]]:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Result[T, Exception]:
            try:
                return Success(func(*args, **kwargs))
            except caught as e:
                return Failure(e)
        return wrapper
    return decorator


def log_execution_time(logger_instance=logger, level: str = "DEBUG"):
    """Log how long the wrapped function took.

    Args:
        logger_instance: Logger to use
        level: Log level name (DEBUG, INFO, ...)
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                elapsed = time.perf_counter() - start_time
                log_func = getattr(logger_instance, level.lower(), logger_instance.debug)
                log_func(f"{func.__name__} executed in {elapsed * 1000:.2f}ms")
        return wrapper
    return decorator
