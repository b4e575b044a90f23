"""Typed async client for the AniList GraphQL API.

This library contains:
- AniListClient: one-request dispatcher with bearer-token auth
- An exception hierarchy covering network, decode, GraphQL, auth and rate-limit failures
- retry_with_backoff: retry loop for rate-limited calls
- Endpoint façades and pydantic models for anime, manga, characters, staff,
  studios, users and airing schedules
"""

from .client import AniListClient, RateLimitStatus
from .config import AniListSettings, get_settings
from .exceptions import (
    AniListAccessDenied,
    AniListAPIError,
    AniListAuthenticationRequired,
    AniListBadRequest,
    AniListBurstLimit,
    AniListDecodeError,
    AniListGraphQLError,
    AniListNetworkError,
    AniListNotFound,
    AniListRateLimited,
    AniListRateLimitError,
    AniListRateLimitSimple,
    AniListServerError,
)
from .retry import RetryPolicy, calculate_delay, rate_limit_delay, retry_with_backoff

__all__ = [
    "AniListAPIError",
    "AniListAccessDenied",
    "AniListAuthenticationRequired",
    "AniListBadRequest",
    "AniListBurstLimit",
    "AniListClient",
    "AniListDecodeError",
    "AniListGraphQLError",
    "AniListNetworkError",
    "AniListNotFound",
    "AniListRateLimitError",
    "AniListRateLimitSimple",
    "AniListRateLimited",
    "AniListServerError",
    "AniListSettings",
    "RateLimitStatus",
    "RetryPolicy",
    "calculate_delay",
    "get_settings",
    "rate_limit_delay",
    "retry_with_backoff",
]
