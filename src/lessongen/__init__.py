"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: __init__.py.
"""

from __future__ import annotations

from .cache import CacheEntry, InMemoryRequestCache, RequestCacheBackend, cache_key
from .catalog import DEFAULT_CATALOG, PromptCatalog, PromptTemplate
from .clients import CompletionTransport, OpenAIChatTransport
from .errors import (
    ConfigurationError,
    ContentGenerationError,
    ErrorKind,
    FailureReason,
    GenerationFailedError,
    InvalidCredentialError,
    LessongenError,
    QuotaExceededError,
    RateLimitedError,
    RemoteCallError,
    UnknownRequestKindError,
    classify_failure,
)
from .factory import create_content_orchestrator
from .orchestrator import ContentOrchestrator
from .runtime import CoalescingPolicy, RequestCoalescer, ResilientFetcher, RetryPolicy
from .sanitize import parse_follow_up_questions, sanitize, strip_code_fences
from .settings import GeneratorSettings
from .types import ChatMessage, CompletionRequest, FollowUpQuestion, RequestKind

__all__ = [
    "CacheEntry",
    "InMemoryRequestCache",
    "RequestCacheBackend",
    "cache_key",
    "DEFAULT_CATALOG",
    "PromptCatalog",
    "PromptTemplate",
    "CompletionTransport",
    "OpenAIChatTransport",
    "ConfigurationError",
    "ContentGenerationError",
    "ErrorKind",
    "FailureReason",
    "GenerationFailedError",
    "InvalidCredentialError",
    "LessongenError",
    "QuotaExceededError",
    "RateLimitedError",
    "RemoteCallError",
    "UnknownRequestKindError",
    "classify_failure",
    "create_content_orchestrator",
    "ContentOrchestrator",
    "CoalescingPolicy",
    "RequestCoalescer",
    "ResilientFetcher",
    "RetryPolicy",
    "parse_follow_up_questions",
    "sanitize",
    "strip_code_fences",
    "GeneratorSettings",
    "ChatMessage",
    "CompletionRequest",
    "FollowUpQuestion",
    "RequestKind",
]
