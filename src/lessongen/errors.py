"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Error types raised by the content generation runtime.

Failures are tagged once at the remote-call boundary as `RemoteCallError`
and classified once, after retries, into one `ContentGenerationError`
subclass that callers handle.
"""

from __future__ import annotations

from enum import Enum


class LessongenError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(LessongenError):
    """Raised when settings or catalog configuration is invalid."""


class UnknownRequestKindError(LessongenError, ValueError):
    """Raised when a request kind has no registered prompt template."""


class FailureReason(str, Enum):
    """Structured reason attached to a failed remote call."""

    HTTP_STATUS = "http_status"
    TIMEOUT = "timeout"
    CONNECTION = "connection"
    CONFIGURATION = "configuration"
    NO_CONTENT = "no_content"
    UNKNOWN = "unknown"


class RemoteCallError(LessongenError):
    """One failed attempt against the completion API."""

    def __init__(
        self,
        message: str,
        *,
        status: int | None = None,
        reason: FailureReason = FailureReason.UNKNOWN,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.reason = reason

    def __repr__(self) -> str:
        return (
            f"RemoteCallError(message={self.message!r}, "
            f"status={self.status!r}, reason={self.reason.value!r})"
        )


class ErrorKind(str, Enum):
    """User-facing failure taxonomy."""

    INVALID_CREDENTIAL = "invalid_credential"
    RATE_LIMITED = "rate_limited"
    QUOTA_EXCEEDED = "quota_exceeded"
    GENERIC = "generic"


USER_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.INVALID_CREDENTIAL: "Invalid API key; check configuration.",
    ErrorKind.RATE_LIMITED: "Rate limit reached; try again later.",
    ErrorKind.QUOTA_EXCEEDED: "Quota exceeded; check billing or upgrade.",
    ErrorKind.GENERIC: "Failed to generate content; please retry.",
}


class ContentGenerationError(LessongenError):
    """Classified terminal failure of one `generate` call."""

    kind: ErrorKind = ErrorKind.GENERIC

    def __init__(self, cause: RemoteCallError | None = None) -> None:
        super().__init__(USER_MESSAGES[self.kind])
        self.cause = cause

    @property
    def user_message(self) -> str:
        return USER_MESSAGES[self.kind]


class InvalidCredentialError(ContentGenerationError):
    """The API credential is missing or rejected."""

    kind = ErrorKind.INVALID_CREDENTIAL


class RateLimitedError(ContentGenerationError):
    """The remote service kept answering 429 until retries ran out."""

    kind = ErrorKind.RATE_LIMITED


class QuotaExceededError(ContentGenerationError):
    """The account has no remaining quota."""

    kind = ErrorKind.QUOTA_EXCEEDED


class GenerationFailedError(ContentGenerationError):
    """Any other unrecoverable failure, including empty responses."""

    kind = ErrorKind.GENERIC


def classify_failure(error: BaseException) -> ContentGenerationError:
    """Map an underlying failure into the four-kind taxonomy; first match wins."""
    if isinstance(error, ContentGenerationError):
        return error
    if isinstance(error, RemoteCallError):
        remote = error
    else:
        remote = RemoteCallError(str(error), reason=FailureReason.UNKNOWN)

    message = remote.message or ""
    if "API key" in message:
        return InvalidCredentialError(remote)
    if remote.status == 429:
        return RateLimitedError(remote)
    if "quota" in message:
        return QuotaExceededError(remote)
    return GenerationFailedError(remote)
