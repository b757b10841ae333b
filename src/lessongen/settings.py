"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Generator settings and explicit environment loading.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .cache.base import DEFAULT_CACHE_TTL_S
from .errors import ConfigurationError
from .runtime.contracts import CachePolicy, CoalescingPolicy, RetryPolicy

logger = logging.getLogger("lessongen.settings")

API_KEY_ENV = "OPENAI_API_KEY"


@dataclass(frozen=True, slots=True)
class GeneratorSettings:
    """Explicit settings used by the transport, fetcher and orchestrator."""

    api_key: str | None = None
    api_base_url: str | None = None
    model: str = "gpt-4o-mini"
    temperature: float = 0.7
    max_tokens: int = 2000
    timeout_s: float = 60.0

    cache_ttl_s: float = DEFAULT_CACHE_TTL_S

    max_attempts: int = 5
    backoff_base_s: float = 2.0
    backoff_multiplier: float = 2.0
    backoff_max_s: float = 20.0

    coalesce_requests: bool = False

    @staticmethod
    def from_env() -> "GeneratorSettings":
        """
        Load settings from environment variables.

        A missing credential is logged and tolerated; it surfaces as an
        invalid-credential failure on the first remote call.
        """
        api_key = os.getenv(API_KEY_ENV) or None
        if not api_key:
            logger.error(
                "OpenAI API key is missing! Set %s in the environment.", API_KEY_ENV
            )
        return GeneratorSettings(
            api_key=api_key,
            api_base_url=os.getenv("LESSONGEN_API_BASE_URL") or None,
            model=os.getenv("LESSONGEN_MODEL", "gpt-4o-mini"),
            temperature=_env_float("LESSONGEN_TEMPERATURE", 0.7),
            max_tokens=_env_int("LESSONGEN_MAX_TOKENS", 2000),
            timeout_s=_env_float("LESSONGEN_TIMEOUT_S", 60.0),
            cache_ttl_s=_env_float("LESSONGEN_CACHE_TTL_S", DEFAULT_CACHE_TTL_S),
            max_attempts=_env_int("LESSONGEN_MAX_ATTEMPTS", 5),
            backoff_base_s=_env_float("LESSONGEN_BACKOFF_BASE_S", 2.0),
            backoff_multiplier=_env_float("LESSONGEN_BACKOFF_MULTIPLIER", 2.0),
            backoff_max_s=_env_float("LESSONGEN_BACKOFF_MAX_S", 20.0),
            coalesce_requests=_env_bool("LESSONGEN_COALESCE", False),
        )

    def retry_policy(self) -> RetryPolicy:
        return RetryPolicy(
            max_attempts=self.max_attempts,
            base_delay_s=self.backoff_base_s,
            multiplier=self.backoff_multiplier,
            max_delay_s=self.backoff_max_s,
        )

    def cache_policy(self) -> CachePolicy:
        return CachePolicy(ttl_s=self.cache_ttl_s)

    def coalescing_policy(self) -> CoalescingPolicy:
        return CoalescingPolicy(enabled=self.coalesce_requests)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from None


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {raw!r}")
