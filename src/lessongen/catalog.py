"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Static prompt catalog keyed by request kind.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .errors import ConfigurationError, UnknownRequestKindError
from .types import RequestKind

TOPIC_PLACEHOLDER = "%TOPIC%"

DEFAULT_SYSTEM_INSTRUCTION = (
    "You are an expert IIT-JEE tutor. Always output in Markdown with headings, "
    "bullet lists, and LaTeX only."
)


@dataclass(frozen=True, slots=True)
class PromptTemplate:
    """Template text with `%TOPIC%` placeholders plus its system instruction."""

    template_text: str
    system_instruction: str = DEFAULT_SYSTEM_INSTRUCTION

    def render(self, topic: str) -> str:
        """Substitute the literal topic for every placeholder."""
        return self.template_text.replace(TOPIC_PLACEHOLDER, topic)


class PromptCatalog(Mapping[RequestKind, PromptTemplate]):
    """Immutable kind -> template mapping built once at startup."""

    def __init__(self, templates: Mapping[RequestKind | str, PromptTemplate]) -> None:
        rows: dict[RequestKind, PromptTemplate] = {}
        for key, template in templates.items():
            kind = coerce_kind(key)
            if TOPIC_PLACEHOLDER not in template.template_text:
                raise ConfigurationError(
                    f"Template for '{kind.value}' has no {TOPIC_PLACEHOLDER} placeholder"
                )
            rows[kind] = template
        self._templates = MappingProxyType(rows)

    def __getitem__(self, kind: RequestKind | str) -> PromptTemplate:
        resolved = coerce_kind(kind)
        try:
            return self._templates[resolved]
        except KeyError:
            raise UnknownRequestKindError(
                f"No prompt template registered for '{resolved.value}'"
            ) from None

    def __contains__(self, kind: object) -> bool:
        if not isinstance(kind, (RequestKind, str)):
            return False
        try:
            return coerce_kind(kind) in self._templates
        except UnknownRequestKindError:
            return False

    def __iter__(self) -> Iterator[RequestKind]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    def with_overrides(
        self, overrides: Mapping[RequestKind | str, PromptTemplate]
    ) -> "PromptCatalog":
        """Return a new catalog with some templates replaced."""
        merged: dict[RequestKind | str, PromptTemplate] = dict(self._templates)
        for key, template in overrides.items():
            merged[coerce_kind(key)] = template
        return PromptCatalog(merged)


def coerce_kind(kind: RequestKind | str) -> RequestKind:
    if isinstance(kind, RequestKind):
        return kind
    try:
        return RequestKind(kind)
    except ValueError:
        raise UnknownRequestKindError(f"Unknown request kind '{kind}'") from None


_TEMPLATES: dict[RequestKind, str] = {
    RequestKind.EXPLAIN_SIMPLY: """
Generate an IIT-JEE–style explanation of **%TOPIC%**. Use exactly this Markdown outline:

## Overview
A concise definition and why it matters.

## Analogy
A simple real-world analogy.

## Core Concepts
- Concept: description
(3–5 bullet points)

## Formula & Derivation
Use display math:
$$
\\mathcal{E} = -\\frac{d\\Phi}{dt}
$$
Explain each symbol below.

## Examples
1. First example with step-by-step solution.
2. Second illustrative example.

## Takeaways
- Key point 1
- Key point 2

Return only the raw Markdown, with `##` headings, `-` bullets, numbered lists, and `$$…$$` math. No extra formatting instructions.
""",
    RequestKind.VISUAL_GUIDE: """
Guide '%TOPIC%' through a mental diagram in Markdown:

## Visual Summary
…

## Elements
…

## Flow
…

## Sketch
…

## Formula Notes
…

Return raw Markdown only.
""",
    RequestKind.INTERACTIVE_PRACTICE: """
Create an interactive practice session for '%TOPIC%':

## Warm-up
…

## Problems
1. Easy: …
2. Medium: …
3. Hard: …

## Formula Review
…

## Reflection
…

Return raw Markdown only.
""",
    RequestKind.REAL_APPLICATIONS: """
List 4–6 real-world applications of '%TOPIC%' in Markdown:

## Application 1
…

## Application 2
…

…

Return raw Markdown only.
""",
    RequestKind.DEEP_DIVE: """
Deep dive into '%TOPIC%':

## Theory
…

## Math
Use inline equations like $E=mc^2$.

## Edge Cases
…

## Research
…

Return raw Markdown only.
""",
    RequestKind.EXAM_MASTERY: """
Exam mastery for '%TOPIC%':

## Syllabus
…

## Formulas
…

## Questions
…

## Strategies
…

## Pitfalls
…

Return raw Markdown only.
""",
    RequestKind.CONCEPT_MAP: """
Concept map for '%TOPIC%':

## Prerequisites
…

## Related Topics
…

## Advanced Uses
…

## Study Path
…

Return raw Markdown only.
""",
    RequestKind.COMMON_MISTAKES: """
Top 5 misconceptions in '%TOPIC%':

1. Mistake: …
   - Why wrong: …
   - Correction: …

… repeat for each …

Return raw Markdown only.
""",
    RequestKind.FOLLOW_UP: """
Return a pure JSON array of 5 follow-up questions for '%TOPIC%'.
Example: [{"id":"q1","question":"…","contentType":"explanation"},…]
Allowed contentType values: explanation, example, question, summary.
No Markdown, no code fences.
""",
    RequestKind.FOLLOW_UP_ANSWER: """
Answer a follow-up question on '%TOPIC%':

## Explanation
…

## Formula
…

## Example
…

## Resources
…

Return raw Markdown only.
""",
}

DEFAULT_CATALOG = PromptCatalog(
    {kind: PromptTemplate(text.strip()) for kind, text in _TEMPLATES.items()}
)
