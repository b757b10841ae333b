"""
explain_topic.py: minimal lessongen example.

Generates one explanation plus follow-up questions for a topic; the second
explanation call is served from the in-memory cache.

Usage:
    export OPENAI_API_KEY=sk-...
    python examples/explain_topic.py "Ohm's Law"
"""

import sys

from lessongen import ContentGenerationError, RequestKind, create_content_orchestrator


async def main(topic: str) -> None:
    orchestrator = create_content_orchestrator()

    try:
        print(await orchestrator.generate(topic, RequestKind.EXPLAIN_SIMPLY))
        for question in await orchestrator.follow_up_questions(topic):
            print(f"- [{question.content_type}] {question.question}")
    except ContentGenerationError as exc:
        print(exc.user_message)
        return

    # Cached: no second remote call.
    await orchestrator.generate(topic, RequestKind.EXPLAIN_SIMPLY)


if __name__ == "__main__":
    import asyncio

    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "Ohm's Law"))
