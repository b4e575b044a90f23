"""Retry utility for rate-limited AniList calls with exponential backoff."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from pydantic import BaseModel, ConfigDict, Field

from anilist_client.exceptions import (
    AniListBurstLimit,
    AniListRateLimited,
    AniListRateLimitError,
)

T = TypeVar("T")

logger = logging.getLogger(__name__)

# Placeholders used when rebuilding a RateLimit error after the last retry.
EXHAUSTED_LIMIT = 90
EXHAUSTED_REMAINING = 0


class RetryPolicy(BaseModel):
    """Retry configuration for retry_with_backoff. Durations are in seconds."""

    model_config = ConfigDict(frozen=True)

    max_retries: int = Field(default=3, ge=0, description="0 disables retrying")
    base_delay: float = Field(default=1.0, ge=0)
    exponential_backoff: bool = True
    max_delay: float = Field(default=30.0, ge=0)


def _sleep_for(error: AniListRateLimited, delay: float, policy: RetryPolicy) -> float:
    """Return how long to wait before retrying after ``error``."""
    if isinstance(error, AniListRateLimitError) and error.retry_after > 0:
        # Server-provided wait takes precedence over the configured backoff
        return float(error.retry_after)
    if isinstance(error, AniListBurstLimit):
        return min(delay * 2, policy.max_delay)
    return min(delay, policy.max_delay)


def _exhausted(error: AniListRateLimited) -> AniListRateLimited:
    if isinstance(error, AniListRateLimitError):
        return AniListRateLimitError(
            limit=EXHAUSTED_LIMIT,
            remaining=EXHAUSTED_REMAINING,
            reset_at=0,
            retry_after=error.retry_after,
        )
    return error


async def retry_with_backoff(
    operation: Callable[[], Awaitable[T]],
    policy: RetryPolicy | None = None,
    on_retry: Callable[..., None] | None = None,
) -> T:
    """Execute an async operation, retrying rate-limit failures with backoff.

    Only ``AniListRateLimitError``, ``AniListRateLimitSimple`` and
    ``AniListBurstLimit`` are retried. Every other exception propagates on
    first occurrence. The operation is invoked at most
    ``policy.max_retries + 1`` times.

    Args:
        operation: Zero-argument callable returning an awaitable; it is
            re-invoked for every attempt, so it must be safe to repeat.
        policy: Retry configuration (default: RetryPolicy()).
        on_retry: Optional callback called before each sleep with
            (attempt, max_retries, error, delay)

    Returns:
        Result of the operation if successful

    Raises:
        AniListRateLimited: The last rate-limit error once retries are exhausted.
            A RateLimit error is rebuilt with placeholder limit/remaining values,
            keeping only retry_after from the last response.
        AniListAPIError: Any non rate-limit error, unchanged.

    Example:
        >>> anime = await retry_with_backoff(
        ...     lambda: client.anime().get_by_id(16498),
        ...     RetryPolicy(max_retries=5),
        ... )
    """
    if policy is None:
        policy = RetryPolicy()

    attempts = 0
    delay = policy.base_delay

    while True:
        try:
            return await operation()
        except AniListRateLimited as e:
            if attempts >= policy.max_retries:
                logger.error(f"Rate limited after {attempts + 1} attempts. Giving up.")
                exhausted = _exhausted(e)
                if exhausted is e:
                    raise
                raise exhausted from e

            sleep_for = _sleep_for(e, delay, policy)
            logger.warning(
                f"{e} Retrying in {sleep_for:.2f} seconds... "
                f"(attempt {attempts + 1}/{policy.max_retries})"
            )
            if on_retry:
                on_retry(
                    attempt=attempts + 1,
                    max_retries=policy.max_retries,
                    error=e,
                    delay=sleep_for,
                )

            await asyncio.sleep(sleep_for)

            attempts += 1
            if policy.exponential_backoff:
                delay = min(delay * 2, policy.max_delay)


async def rate_limit_delay(seconds: float) -> None:
    """Sleep between requests to stay under the rate limit."""
    await asyncio.sleep(seconds)


def calculate_delay(remaining: int, reset_in_seconds: float) -> float:
    """Suggest a pause before the next request given the remaining quota.

    Args:
        remaining: Requests left in the current window (X-RateLimit-Remaining).
        reset_in_seconds: Seconds until the window resets.

    Returns:
        Delay in seconds: the full reset wait when the quota is exhausted,
        2.0 below 10 remaining, 1.0 below 30, otherwise 0.5.
    """
    if remaining == 0:
        return float(reset_in_seconds)
    if remaining < 10:
        return 2.0
    if remaining < 30:
        return 1.0
    return 0.5
