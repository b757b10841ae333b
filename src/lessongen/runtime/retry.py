"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: runtime/retry.py.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from ..errors import FailureReason, RemoteCallError
from .contracts import RetryPolicy

T = TypeVar("T")

Sleep = Callable[[float], Awaitable[None]]

logger = logging.getLogger("lessongen.runtime.retry")


def as_remote_error(error: Exception) -> RemoteCallError:
    """Tag an arbitrary failure as a `RemoteCallError` once."""
    if isinstance(error, RemoteCallError):
        return error
    if isinstance(error, (asyncio.TimeoutError, TimeoutError)):
        return RemoteCallError(str(error) or "Request timed out", status=408, reason=FailureReason.TIMEOUT)
    return RemoteCallError(str(error), reason=FailureReason.UNKNOWN)


def is_retryable(error: RemoteCallError, policy: RetryPolicy) -> bool:
    """Only transient transport statuses are retried."""
    return policy.is_retryable_status(error.status)


async def call_with_retry(
    fn: Callable[[], Awaitable[T]],
    *,
    policy: RetryPolicy,
    sleep: Sleep = asyncio.sleep,
    label: str = "remote",
) -> T:
    """Execute callable under bounded exponential backoff."""
    last: RemoteCallError | None = None
    for attempt in range(policy.max_attempts):
        try:
            return await fn()
        except Exception as error:
            classified = as_remote_error(error)
            last = classified
            if not is_retryable(classified, policy) or attempt + 1 >= policy.max_attempts:
                if classified is error:
                    raise
                raise classified from error
            delay = policy.delay_for(attempt)
            logger.warning(
                "%s call failed (attempt %d/%d, status=%s); retrying in %.2fs",
                label,
                attempt + 1,
                policy.max_attempts,
                classified.status,
                delay,
            )
            await sleep(delay)
    raise RemoteCallError("Retry loop exhausted") from last
