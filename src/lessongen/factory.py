"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: factory.py.
"""

from __future__ import annotations

from .cache.base import RequestCacheBackend
from .cache.inmemory import InMemoryRequestCache
from .catalog import PromptCatalog
from .clients.contracts import CompletionTransport
from .clients.openai import OpenAIChatTransport
from .orchestrator import ContentOrchestrator
from .runtime.fetcher import ResilientFetcher
from .runtime.retry import Sleep
from .settings import GeneratorSettings


def create_content_orchestrator(
    settings: GeneratorSettings | None = None,
    *,
    transport: CompletionTransport | None = None,
    cache: RequestCacheBackend | None = None,
    catalog: PromptCatalog | None = None,
    sleep: Sleep | None = None,
) -> ContentOrchestrator:
    """
    Wire settings, transport, fetcher and cache into one orchestrator.

    Call once at startup and keep the result; each call builds a fresh cache
    unless one is passed in.
    """
    if settings is None:
        settings = GeneratorSettings.from_env()
    if transport is None:
        transport = OpenAIChatTransport(settings)
    if cache is None:
        cache = InMemoryRequestCache(settings.cache_policy().ttl_s)

    fetcher_kwargs = {"retry_policy": settings.retry_policy()}
    if sleep is not None:
        fetcher_kwargs["sleep"] = sleep
    fetcher = ResilientFetcher(transport, **fetcher_kwargs)

    return ContentOrchestrator(
        fetcher=fetcher,
        cache=cache,
        model=settings.model,
        temperature=settings.temperature,
        max_tokens=settings.max_tokens,
        catalog=catalog,
        coalescing_policy=settings.coalescing_policy(),
    )
