"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

This module defines the request and result types shared by the runtime.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field

Role = Literal["system", "user"]
ContentType: TypeAlias = Literal["explanation", "example", "question", "summary"]


class RequestKind(str, Enum):
    """Style of generation requested; each kind maps to one prompt template."""

    EXPLAIN_SIMPLY = "explain-simply"
    VISUAL_GUIDE = "visual-guide"
    INTERACTIVE_PRACTICE = "interactive-practice"
    REAL_APPLICATIONS = "real-applications"
    DEEP_DIVE = "deep-dive"
    EXAM_MASTERY = "exam-mastery"
    CONCEPT_MAP = "concept-map"
    COMMON_MISTAKES = "common-mistakes"
    FOLLOW_UP = "follow-up"
    FOLLOW_UP_ANSWER = "follow-up-answer"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class ChatMessage:
    """One chat message sent to the completion API."""

    role: Role
    content: str

    def to_payload(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass(frozen=True, slots=True)
class CompletionRequest:
    """Opaque request object handed to the resilient fetcher."""

    model: str
    messages: tuple[ChatMessage, ...] = field(default_factory=tuple)
    temperature: float = 0.7
    max_tokens: int = 2000

    def to_payload(self) -> dict[str, Any]:
        """Build the chat-completions wire payload."""
        return {
            "model": self.model,
            "messages": [message.to_payload() for message in self.messages],
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }


class FollowUpQuestion(BaseModel):
    """One suggested next question produced by the `follow-up` kind."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    question: str
    content_type: ContentType = Field(default="explanation", alias="contentType")
    topic_id: str | None = Field(default=None, alias="topicId")
