"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: runtime/fetcher.py.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from ..errors import FailureReason, RemoteCallError
from ..types import CompletionRequest
from .contracts import RetryPolicy
from .retry import Sleep, call_with_retry

if TYPE_CHECKING:
    from ..clients.contracts import CompletionTransport


class ResilientFetcher:
    """Wrap one completion call with retry eligibility and bounded backoff."""

    def __init__(
        self,
        transport: "CompletionTransport",
        *,
        retry_policy: RetryPolicy | None = None,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self._transport = transport
        self.retry_policy = retry_policy or RetryPolicy()
        self._sleep = sleep

    async def call(self, request: CompletionRequest) -> str:
        """Return raw text for `request`, raising the last `RemoteCallError`."""

        async def attempt() -> str:
            text = await self._transport.complete(request)
            if not text:
                raise RemoteCallError("No content returned", reason=FailureReason.NO_CONTENT)
            return text

        return await call_with_retry(
            attempt,
            policy=self.retry_policy,
            sleep=self._sleep,
            label=self._transport.provider_id,
        )
