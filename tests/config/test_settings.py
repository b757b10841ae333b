from __future__ import annotations

import logging

import pytest

from lessongen import GeneratorSettings, create_content_orchestrator
from lessongen.errors import ConfigurationError

_ENV_NAMES = [
    "OPENAI_API_KEY",
    "LESSONGEN_API_BASE_URL",
    "LESSONGEN_MODEL",
    "LESSONGEN_TEMPERATURE",
    "LESSONGEN_MAX_TOKENS",
    "LESSONGEN_TIMEOUT_S",
    "LESSONGEN_CACHE_TTL_S",
    "LESSONGEN_MAX_ATTEMPTS",
    "LESSONGEN_BACKOFF_BASE_S",
    "LESSONGEN_BACKOFF_MULTIPLIER",
    "LESSONGEN_BACKOFF_MAX_S",
    "LESSONGEN_COALESCE",
]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_defaults_match_reference_values(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    settings = GeneratorSettings.from_env()

    assert settings.api_key == "sk-test"
    assert settings.model == "gpt-4o-mini"
    assert settings.temperature == 0.7
    assert settings.max_tokens == 2000
    assert settings.cache_ttl_s == 86400.0

    policy = settings.retry_policy()
    assert policy.max_attempts == 5
    assert policy.base_delay_s == 2.0
    assert policy.multiplier == 2.0
    assert policy.max_delay_s == 20.0
    assert settings.coalescing_policy().enabled is False


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("LESSONGEN_MODEL", "gpt-4.1-mini")
    monkeypatch.setenv("LESSONGEN_MAX_ATTEMPTS", "3")
    monkeypatch.setenv("LESSONGEN_CACHE_TTL_S", "60")
    monkeypatch.setenv("LESSONGEN_COALESCE", "true")

    settings = GeneratorSettings.from_env()
    assert settings.model == "gpt-4.1-mini"
    assert settings.retry_policy().max_attempts == 3
    assert settings.cache_policy().ttl_s == 60.0
    assert settings.coalescing_policy().enabled is True


def test_missing_api_key_is_logged_not_raised(caplog):
    with caplog.at_level(logging.ERROR, logger="lessongen.settings"):
        settings = GeneratorSettings.from_env()

    assert settings.api_key is None
    assert any("API key is missing" in record.getMessage() for record in caplog.records)

    orchestrator = create_content_orchestrator(settings)
    assert orchestrator.model == "gpt-4o-mini"


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("LESSONGEN_TEMPERATURE", "warm"),
        ("LESSONGEN_MAX_TOKENS", "2k"),
        ("LESSONGEN_COALESCE", "maybe"),
    ],
)
def test_malformed_values_raise_configuration_error(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigurationError, match=name):
        GeneratorSettings.from_env()
