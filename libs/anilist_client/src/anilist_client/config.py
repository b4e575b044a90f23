"""
AniList client configuration.

Values are read from the environment (prefix ``ANILIST_``) or a ``.env`` file.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

if TYPE_CHECKING:
    from anilist_client.retry import RetryPolicy

DEFAULT_API_URL = "https://graphql.anilist.co"


class AniListSettings(BaseSettings):
    """Connection, authentication and retry settings for the AniList client."""

    model_config = SettingsConfigDict(
        env_prefix="ANILIST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_url: str = Field(
        default=DEFAULT_API_URL, description="AniList GraphQL endpoint URL"
    )
    token: str | None = Field(
        default=None, description="OAuth access token sent as a Bearer header"
    )
    timeout_seconds: float = Field(
        default=30.0, gt=0, description="Total timeout for one HTTP round trip"
    )

    # Retry defaults used by retry_policy()
    max_retries: int = Field(
        default=3, ge=0, description="Retries after a rate-limited attempt"
    )
    base_delay: float = Field(
        default=1.0, ge=0, description="Initial backoff delay in seconds"
    )
    exponential_backoff: bool = Field(
        default=True, description="Double the delay after each retry"
    )
    max_delay: float = Field(
        default=30.0, ge=0, description="Upper bound on the backoff delay in seconds"
    )

    def retry_policy(self) -> "RetryPolicy":
        """Build a RetryPolicy from the retry fields."""
        from anilist_client.retry import RetryPolicy

        return RetryPolicy(
            max_retries=self.max_retries,
            base_delay=self.base_delay,
            exponential_backoff=self.exponential_backoff,
            max_delay=self.max_delay,
        )


@lru_cache
def get_settings() -> AniListSettings:
    """Get cached AniListSettings instance populated from environment variables.

    Environment variables are automatically read by Pydantic BaseSettings:
        ANILIST_API_URL (default: "https://graphql.anilist.co")
        ANILIST_TOKEN (default: unset)
        ANILIST_TIMEOUT_SECONDS (default: 30.0)
        ANILIST_MAX_RETRIES (default: 3)
        ANILIST_BASE_DELAY (default: 1.0)
        ANILIST_EXPONENTIAL_BACKOFF (default: true)
        ANILIST_MAX_DELAY (default: 30.0)

    Note:
        Uses @lru_cache for singleton pattern. For testing, call
        get_settings.cache_clear() to reset the cache.
    """
    return AniListSettings()
