from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field

import pytest

from lessongen.errors import FailureReason, RemoteCallError
from lessongen.runtime import ResilientFetcher, RetryPolicy, call_with_retry
from lessongen.types import ChatMessage, CompletionRequest


def run_async(coro):
    return asyncio.run(coro)


class _RecordingSleep:
    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


@dataclass
class _ScriptedTransport:
    """Replays queued outcomes; an Exception instance is raised, anything else returned."""

    outcomes: list = field(default_factory=list)
    calls: int = 0

    @property
    def provider_id(self) -> str:
        return "scripted"

    async def complete(self, request):
        _ = request
        self.calls += 1
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def _request() -> CompletionRequest:
    return CompletionRequest(
        model="gpt-4o-mini",
        messages=(ChatMessage(role="user", content="hi"),),
    )


def test_delay_schedule_doubles_and_caps():
    policy = RetryPolicy()
    assert [policy.delay_for(i) for i in range(5)] == [2.0, 4.0, 8.0, 16.0, 20.0]


def test_rate_limited_call_exhausts_five_attempts():
    sleep = _RecordingSleep()
    transport = _ScriptedTransport([RemoteCallError("slow down", status=429)])
    fetcher = ResilientFetcher(transport, sleep=sleep)

    with pytest.raises(RemoteCallError) as info:
        run_async(fetcher.call(_request()))

    assert info.value.status == 429
    assert transport.calls == 5
    assert sleep.delays == [2.0, 4.0, 8.0, 16.0]
    assert sleep.delays == sorted(sleep.delays)
    assert all(delay <= fetcher.retry_policy.max_delay_s for delay in sleep.delays)


def test_non_retryable_status_short_circuits():
    sleep = _RecordingSleep()
    transport = _ScriptedTransport([RemoteCallError("bad request", status=400)])
    fetcher = ResilientFetcher(transport, sleep=sleep)

    with pytest.raises(RemoteCallError) as info:
        run_async(fetcher.call(_request()))

    assert info.value.status == 400
    assert transport.calls == 1
    assert sleep.delays == []


@pytest.mark.parametrize("status", [408, 500, 502, 503, 504])
def test_transient_statuses_are_retried(status):
    sleep = _RecordingSleep()
    transport = _ScriptedTransport([RemoteCallError("flaky", status=status), "recovered"])
    fetcher = ResilientFetcher(transport, sleep=sleep)

    assert run_async(fetcher.call(_request())) == "recovered"
    assert transport.calls == 2
    assert sleep.delays == [2.0]


def test_empty_payload_is_non_retryable_no_content():
    sleep = _RecordingSleep()
    transport = _ScriptedTransport([None])
    fetcher = ResilientFetcher(transport, sleep=sleep)

    with pytest.raises(RemoteCallError) as info:
        run_async(fetcher.call(_request()))

    assert info.value.reason is FailureReason.NO_CONTENT
    assert info.value.message == "No content returned"
    assert transport.calls == 1
    assert sleep.delays == []


def test_unexpected_exception_is_tagged_unknown():
    transport = _ScriptedTransport([RuntimeError("boom")])
    fetcher = ResilientFetcher(transport, sleep=_RecordingSleep())

    with pytest.raises(RemoteCallError) as info:
        run_async(fetcher.call(_request()))

    assert info.value.reason is FailureReason.UNKNOWN
    assert isinstance(info.value.__cause__, RuntimeError)


def test_custom_policy_limits_attempts():
    sleep = _RecordingSleep()
    calls = 0

    async def always_503():
        nonlocal calls
        calls += 1
        raise RemoteCallError("unavailable", status=503)

    policy = RetryPolicy(max_attempts=2, base_delay_s=0.5, max_delay_s=1.0)
    with pytest.raises(RemoteCallError):
        run_async(call_with_retry(always_503, policy=policy, sleep=sleep))

    assert calls == 2
    assert sleep.delays == [0.5]


def test_policy_rejects_zero_attempts():
    with pytest.raises(ValueError):
        RetryPolicy(max_attempts=0)


def test_retry_warning_names_the_transport(caplog):
    transport = _ScriptedTransport([RemoteCallError("unavailable", status=503), "ok"])
    fetcher = ResilientFetcher(transport, sleep=_RecordingSleep())

    with caplog.at_level(logging.WARNING, logger="lessongen.runtime.retry"):
        assert run_async(fetcher.call(_request())) == "ok"

    messages = [r.getMessage() for r in caplog.records if r.name == "lessongen.runtime.retry"]
    assert len(messages) == 1
    assert messages[0].startswith("scripted call failed (attempt 1/5, status=503)")
