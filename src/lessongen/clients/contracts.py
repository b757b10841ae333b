"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: clients/contracts.py.
"""

from __future__ import annotations

from typing import Protocol

from ..types import CompletionRequest


class CompletionTransport(Protocol):
    """
    One outbound completion call.

    Implementations return `choices[0].message.content` (or `None` when the
    response carries no text) and raise `RemoteCallError` on failure.
    """

    @property
    def provider_id(self) -> str: ...

    async def complete(self, request: CompletionRequest) -> str | None: ...
