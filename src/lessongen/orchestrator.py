"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Content orchestrator: the public entry point for generation requests.
"""

from __future__ import annotations

import logging

from .cache.base import RequestCacheBackend, cache_key
from .catalog import DEFAULT_CATALOG, PromptCatalog, coerce_kind
from .errors import ContentGenerationError, RemoteCallError, classify_failure
from .runtime.coalescing import RequestCoalescer
from .runtime.contracts import CoalescingPolicy
from .runtime.fetcher import ResilientFetcher
from .sanitize import parse_follow_up_questions, sanitize
from .types import ChatMessage, CompletionRequest, FollowUpQuestion, RequestKind

logger = logging.getLogger("lessongen.orchestrator")


class ContentOrchestrator:
    """
    Cache-first generation over a resilient fetcher.

    Flow for one `generate` call: cache lookup, then on a miss render the
    kind's template, fetch with retry, sanitize, store and return. Terminal
    failures surface as one `ContentGenerationError` subclass.
    """

    def __init__(
        self,
        *,
        fetcher: ResilientFetcher,
        cache: RequestCacheBackend,
        model: str = "gpt-4o-mini",
        temperature: float = 0.7,
        max_tokens: int = 2000,
        catalog: PromptCatalog | None = None,
        coalescing_policy: CoalescingPolicy | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._cache = cache
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.catalog = DEFAULT_CATALOG if catalog is None else catalog
        self._coalescing_policy = coalescing_policy or CoalescingPolicy()
        self._coalescer: RequestCoalescer[str] = RequestCoalescer()

    @property
    def cache(self) -> RequestCacheBackend:
        return self._cache

    def build_request(self, topic: str, kind: RequestKind | str) -> CompletionRequest:
        """Render the kind's template for `topic` into a completion request."""
        template = self.catalog[kind]
        return CompletionRequest(
            model=self.model,
            messages=(
                ChatMessage(role="system", content=template.system_instruction),
                ChatMessage(role="user", content=template.render(topic)),
            ),
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )

    async def generate(self, topic: str, kind: RequestKind | str) -> str:
        """Return sanitized content for `(topic, kind)`, cached for the TTL window."""
        kind = coerce_kind(kind)
        key = cache_key(topic, kind)

        cached = await self._cache.get(key)
        if cached is not None:
            logger.debug("Cache hit for %s", key)
            return cached

        logger.debug("Cache miss for %s", key)
        if self._coalescing_policy.enabled:
            return await self._coalescer.run(key, lambda: self._fetch_and_store(key, topic, kind))
        return await self._fetch_and_store(key, topic, kind)

    async def follow_up_questions(self, topic: str) -> list[FollowUpQuestion]:
        """Generate and parse follow-up questions; malformed output yields `[]`."""
        return parse_follow_up_questions(await self.generate(topic, RequestKind.FOLLOW_UP))

    async def _fetch_and_store(self, key: str, topic: str, kind: RequestKind) -> str:
        request = self.build_request(topic, kind)
        try:
            raw = await self._fetcher.call(request)
        except (RemoteCallError, ContentGenerationError) as error:
            classified = classify_failure(error)
            logger.error(
                "Content generation failed for %s (%s): %r",
                key,
                classified.kind.value,
                error,
                exc_info=error,
            )
            raise classified from error

        result = sanitize(raw, kind)
        await self._cache.set(key, result)
        return result
