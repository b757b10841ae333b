"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: runtime/coalescing.py.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class RequestCoalescer(Generic[T]):
    """Deduplicate identical in-flight requests."""

    def __init__(self) -> None:
        self._tasks: dict[str, asyncio.Future[T]] = {}
        self._lock = asyncio.Lock()

    async def run(self, key: str, factory: Callable[[], Awaitable[T]]) -> T:
        async with self._lock:
            existing = self._tasks.get(key)
            if existing is None:
                existing = asyncio.ensure_future(factory())
                self._tasks[key] = existing
                existing.add_done_callback(lambda task: self._forget(key, task))

        # Shield so one abandoned waiter does not cancel the shared fetch.
        return await asyncio.shield(existing)

    def _forget(self, key: str, task: asyncio.Future[T]) -> None:
        if self._tasks.get(key) is task:
            self._tasks.pop(key, None)
        if not task.cancelled():
            # Marks the exception retrieved when every waiter has gone away.
            task.exception()

    def in_flight(self) -> int:
        return len(self._tasks)
