"""
Attempt-with-fallback helpers for resilient reads.

Every read that should degrade instead of raising goes through
``with_fallback`` so the failure is always logged the same way.
"""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Dict, Optional, Tuple, Type, TypeVar

from mantle_operator.utils.logging import get_logger

T = TypeVar("T")

_logger = get_logger(__name__)


async def with_fallback(
    fn: Callable[[], Awaitable[T]],
    fallback: T,
    *,
    label: str,
    errors: Tuple[Type[Exception], ...] = (Exception,),
    logger: Optional[logging.Logger] = None,
    level: int = logging.WARNING,
    context: Optional[Dict[str, Any]] = None,
) -> T:
    """
    Await ``fn`` and return ``fallback`` if it raises one of ``errors``.

    Args:
        fn: Async function to execute (no arguments)
        fallback: Value returned on failure
        label: Short description used in the log message
        errors: Exception types that trigger the fallback
        logger: Logger to report on (defaults to this module's)
        level: Log level for the failure record
        context: Extra structured fields for the log record

    Returns:
        Result of ``fn`` or ``fallback``

    Example:
        ```python
        symbol = await with_fallback(
            lambda: token.functions.symbol().call(),
            "TOKEN",
            label="token symbol",
        )
        ```
    """
    try:
        return await fn()
    except errors as e:
        (logger or _logger).log(
            level,
            "%s failed, using fallback",
            label,
            extra={
                **(context or {}),
                "error": str(e),
                "error_type": type(e).__name__,
                "fallback": repr(fallback),
            },
        )
        return fallback


__all__ = ["with_fallback"]
