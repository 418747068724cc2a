"""
Async execution helpers for wallet provider calls.

Provider calls suspend until the remote side answers. An optional timeout can
be layered on top without changing the error contract of the caller: the
caller decides which NetworkError a timeout becomes.
"""

import asyncio
from collections.abc import Awaitable
from typing import TypeVar

from loguru import logger

from spark_client.utils.exceptions import NetworkError


T = TypeVar("T")


async def run_with_timeout(
    awaitable: Awaitable[T],
    timeout: float | None,
    operation: str,
    error_cls: type[NetworkError],
) -> T:
    """
    Await a provider call with an optional timeout.

    Args:
        awaitable: Provider coroutine
        timeout: Seconds to wait, None waits indefinitely
        operation: Operation name for logs and the error message
        error_cls: NetworkError subclass raised on timeout

    Returns:
        Result of the awaitable

    Raises:
        error_cls: If the timeout expires
    """
    if timeout is None:
        return await awaitable

    try:
        return await asyncio.wait_for(awaitable, timeout=timeout)
    except TimeoutError:
        logger.error(f"Timeout in wallet provider operation '{operation}' after {timeout}s")
        raise error_cls(f"Wallet provider operation '{operation}' timed out") from None
    except asyncio.CancelledError:
        logger.warning(f"Wallet provider operation '{operation}' cancelled")
        raise  # Always re-raise CancelledError
