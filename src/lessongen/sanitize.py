"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Post-processing of raw completion text before it is cached.
"""

from __future__ import annotations

import json
import logging
import re

from pydantic import ValidationError

from .types import FollowUpQuestion, RequestKind

logger = logging.getLogger("lessongen.sanitize")

EMPTY_JSON_ARRAY = "[]"

_CODE_FENCE_RE = re.compile(r"```[\s\S]*?```")


def strip_code_fences(text: str) -> str:
    """Remove fenced blocks and surrounding whitespace; headings and LaTeX stay."""
    return _CODE_FENCE_RE.sub("", text).strip()


def extract_json_array(text: str) -> str:
    """
    Return the substring between the first `[` and the last `]`.

    Falls back to `"[]"` when no bracketed span exists or it does not parse
    as a JSON array.
    """
    start = text.find("[")
    end = text.rfind("]")
    if start < 0 or end < start:
        return EMPTY_JSON_ARRAY
    candidate = text[start : end + 1]
    try:
        parsed = json.loads(candidate)
    except (ValueError, RecursionError):
        return EMPTY_JSON_ARRAY
    if not isinstance(parsed, list):
        return EMPTY_JSON_ARRAY
    return candidate


def sanitize(text: str, kind: RequestKind | str) -> str:
    """Normalize raw completion text for one request kind."""
    out = strip_code_fences(text)
    if RequestKind(kind) is RequestKind.FOLLOW_UP:
        array_text = extract_json_array(out)
        if array_text == EMPTY_JSON_ARRAY and out != EMPTY_JSON_ARRAY:
            logger.debug("Follow-up payload was not a JSON array; degrading to []")
        return array_text
    return out


def parse_follow_up_questions(text: str) -> list[FollowUpQuestion]:
    """Read a sanitized follow-up array; malformed items are skipped."""
    try:
        rows = json.loads(extract_json_array(text))
    except (ValueError, RecursionError):
        return []

    questions: list[FollowUpQuestion] = []
    for row in rows:
        if not isinstance(row, dict):
            continue
        try:
            questions.append(FollowUpQuestion.model_validate(row))
        except ValidationError as exc:
            logger.debug("Skipping malformed follow-up item %r: %s", row, exc)
    return questions
