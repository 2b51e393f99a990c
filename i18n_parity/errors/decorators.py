"""
Error logging decorators for i18n-parity.

Wraps sync and async callables so that failures are logged with their
structured context before propagating to the caller.
"""

import asyncio
import functools
import traceback
from typing import Any, Callable, Dict, Optional

import structlog

from .exceptions import I18nParityError

logger = structlog.get_logger(__name__)


def _error_log_data(op_name: str, error: Exception, include_traceback: bool) -> Dict[str, Any]:
    log_data: Dict[str, Any] = {
        "operation": op_name,
        "error_type": type(error).__name__,
        "error": str(error),
    }
    if isinstance(error, I18nParityError):
        log_data["error_code"] = error.error_code
        log_data["context"] = error.context
    if include_traceback:
        log_data["traceback"] = traceback.format_exc()
    return log_data


def log_errors(
    level: str = "error",
    include_traceback: bool = False,
    operation_name: Optional[str] = None
):
    """
    Decorator to log errors with context and re-raise them.

    Args:
        level: Log level (debug, info, warning, error, critical)
        include_traceback: Include full traceback in logs
        operation_name: Custom operation name for logging
    """
    def decorator(func: Callable) -> Callable:
        op_name = operation_name or f"{func.__module__}.{func.__name__}"

        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs) -> Any:
            try:
                return await func(*args, **kwargs)
            except Exception as e:
                log_method = getattr(logger, level.lower(), logger.error)
                log_method("Error in operation", **_error_log_data(op_name, e, include_traceback))
                raise

        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs) -> Any:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                log_method = getattr(logger, level.lower(), logger.error)
                log_method("Error in operation", **_error_log_data(op_name, e, include_traceback))
                raise

        if asyncio.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
