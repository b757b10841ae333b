"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

OpenAI chat-completions transport.
"""

from __future__ import annotations

import logging
from typing import Any

import openai
from openai import AsyncOpenAI

from ..errors import FailureReason, RemoteCallError
from ..settings import GeneratorSettings
from ..types import CompletionRequest

logger = logging.getLogger("lessongen.clients.openai")


class OpenAIChatTransport:
    """Concrete transport using `openai.AsyncOpenAI` chat completions."""

    def __init__(self, settings: GeneratorSettings, *, client: Any | None = None) -> None:
        self.settings = settings
        self._client = client

    @property
    def provider_id(self) -> str:
        return "openai"

    async def complete(self, request: CompletionRequest) -> str | None:
        """Dispatch one request and return the first choice's text, if any."""
        client = self._build_client()
        try:
            response = await client.chat.completions.create(**request.to_payload())
        except RemoteCallError:
            raise
        except Exception as error:
            raise to_remote_error(error) from error
        return first_choice_text(response)

    def _build_client(self) -> Any:
        """Construct or return the cached AsyncOpenAI client."""
        if self._client is not None:
            return self._client

        kwargs: dict[str, Any] = {"max_retries": 0, "timeout": self.settings.timeout_s}
        if self.settings.api_key:
            kwargs["api_key"] = self.settings.api_key
        if self.settings.api_base_url:
            kwargs["base_url"] = self.settings.api_base_url

        try:
            self._client = AsyncOpenAI(**kwargs)
        except openai.OpenAIError as error:
            # Raised when no key is configured anywhere.
            raise RemoteCallError(
                f"Missing API key: {error}",
                reason=FailureReason.CONFIGURATION,
            ) from error
        return self._client


def first_choice_text(response: Any) -> str | None:
    """Read `choices[0].message.content`, tolerating absent fields."""
    choices = getattr(response, "choices", None) or []
    if not choices:
        return None
    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None)
    if isinstance(content, str):
        return content
    return None


def to_remote_error(error: Exception) -> RemoteCallError:
    """Convert an SDK exception into a tagged `RemoteCallError`."""
    if isinstance(error, RemoteCallError):
        return error
    if isinstance(error, openai.APITimeoutError):
        return RemoteCallError(str(error) or "Request timed out", status=408, reason=FailureReason.TIMEOUT)
    if isinstance(error, openai.APIConnectionError):
        return RemoteCallError(str(error), reason=FailureReason.CONNECTION)
    if isinstance(error, openai.APIStatusError):
        return RemoteCallError(
            error.message or str(error),
            status=error.status_code,
            reason=FailureReason.HTTP_STATUS,
        )
    logger.debug("Unrecognized transport failure %s", type(error).__name__)
    return RemoteCallError(str(error), reason=FailureReason.UNKNOWN)
