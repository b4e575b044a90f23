"""Unit tests for AniListSettings."""

import pytest

from anilist_client.config import DEFAULT_API_URL, AniListSettings, get_settings
from anilist_client.retry import RetryPolicy

ENV_VARS = [
    "ANILIST_API_URL",
    "ANILIST_TOKEN",
    "ANILIST_TIMEOUT_SECONDS",
    "ANILIST_MAX_RETRIES",
    "ANILIST_BASE_DELAY",
    "ANILIST_EXPONENTIAL_BACKOFF",
    "ANILIST_MAX_DELAY",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestAniListSettings:
    def test_defaults(self):
        settings = AniListSettings(_env_file=None)

        assert settings.api_url == DEFAULT_API_URL
        assert settings.token is None
        assert settings.timeout_seconds == 30.0
        assert settings.max_retries == 3
        assert settings.base_delay == 1.0
        assert settings.exponential_backoff is True
        assert settings.max_delay == 30.0

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("ANILIST_TOKEN", "env-token")
        monkeypatch.setenv("ANILIST_MAX_RETRIES", "5")
        monkeypatch.setenv("ANILIST_EXPONENTIAL_BACKOFF", "false")

        settings = AniListSettings(_env_file=None)

        assert settings.token == "env-token"
        assert settings.max_retries == 5
        assert settings.exponential_backoff is False

    def test_invalid_timeout_rejected(self):
        with pytest.raises(ValueError):
            AniListSettings(_env_file=None, timeout_seconds=0)

    def test_retry_policy(self):
        settings = AniListSettings(
            _env_file=None, max_retries=1, base_delay=0.2, max_delay=2.0
        )

        policy = settings.retry_policy()

        assert policy == RetryPolicy(
            max_retries=1, base_delay=0.2, exponential_backoff=True, max_delay=2.0
        )


class TestGetSettings:
    def test_cached(self):
        assert get_settings() is get_settings()

    def test_cache_clear_rereads_environment(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("ANILIST_API_URL", "https://example.test/graphql")
        get_settings.cache_clear()

        second = get_settings()

        assert second is not first
        assert second.api_url == "https://example.test/graphql"
