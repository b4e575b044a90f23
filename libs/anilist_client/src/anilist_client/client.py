"""
AniList GraphQL client.

Performs one HTTP POST per call and turns the response into either the
GraphQL ``data`` object or a typed ``AniListAPIError``.
"""

import asyncio
import json
import logging
from collections.abc import Mapping
from types import TracebackType
from typing import Any, Dict, Optional, Type

import aiohttp
from pydantic import BaseModel, ConfigDict

from anilist_client.config import DEFAULT_API_URL, AniListSettings, get_settings
from anilist_client.endpoints import (
    ActivityEndpoint,
    AiringEndpoint,
    AnimeEndpoint,
    CharacterEndpoint,
    ForumEndpoint,
    MangaEndpoint,
    NotificationEndpoint,
    RecommendationEndpoint,
    ReviewEndpoint,
    StaffEndpoint,
    StudioEndpoint,
    UserEndpoint,
)
from anilist_client.exceptions import (
    AniListAccessDenied,
    AniListAuthenticationRequired,
    AniListBadRequest,
    AniListBurstLimit,
    AniListDecodeError,
    AniListGraphQLError,
    AniListNetworkError,
    AniListNotFound,
    AniListRateLimitError,
    AniListRateLimitSimple,
    AniListServerError,
)

logger = logging.getLogger(__name__)

RATE_LIMIT_HEADER = "X-RateLimit-Limit"
RATE_LIMIT_REMAINING_HEADER = "X-RateLimit-Remaining"
RATE_LIMIT_RESET_HEADER = "X-RateLimit-Reset"
RETRY_AFTER_HEADER = "Retry-After"

# Fallbacks for rate-limit headers that are present but not integers.
# These are guesses about AniList's usual values, not documented behaviour.
DEFAULT_RATE_LIMIT = 90
DEFAULT_REMAINING = 0
DEFAULT_RESET_AT = 0
DEFAULT_RETRY_AFTER = 60

BURST_LIMIT_PHRASES = ("rate limit", "too many requests")


class RateLimitStatus(BaseModel):
    """Last rate-limit headers seen on any response."""

    model_config = ConfigDict(frozen=True)

    limit: Optional[int] = None
    remaining: Optional[int] = None
    reset_at: Optional[int] = None


def _parse_int(value: Optional[str], default: Optional[int]) -> Optional[int]:
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


def _join_graphql_errors(errors: Any) -> str:
    if isinstance(errors, list):
        messages = []
        for error in errors:
            message = error.get("message") if isinstance(error, dict) else None
            messages.append(message if isinstance(message, str) else "Unknown error")
        return ", ".join(messages)
    return json.dumps(errors)


async def _read_text(response: Any, default: str) -> str:
    try:
        text: str = await response.text()
    except (aiohttp.ClientError, UnicodeDecodeError):
        return default
    return text


class AniListClient:
    """Client for the AniList GraphQL API.

    Holds an optional bearer token and a reusable aiohttp session. The session
    is created lazily for the running event loop and recreated if the loop
    changes. A caller-provided session is used as-is and never closed here.

    Example:
        >>> async with AniListClient() as client:
        ...     trending = await client.anime().get_trending(1, 10)
    """

    def __init__(
        self,
        token: Optional[str] = None,
        *,
        api_url: str = DEFAULT_API_URL,
        timeout_seconds: float = 30.0,
        session: Optional[aiohttp.ClientSession] = None,
    ) -> None:
        self.api_url = api_url
        self._token = token
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self.session: Optional[aiohttp.ClientSession] = session
        self._owns_session = session is None
        self._session_event_loop: Optional[asyncio.AbstractEventLoop] = None
        self.rate_limit = RateLimitStatus()

    @classmethod
    def with_token(cls, token: str, **kwargs: Any) -> "AniListClient":
        """Create an authenticated client."""
        return cls(token, **kwargs)

    @classmethod
    def from_settings(
        cls, settings: Optional[AniListSettings] = None
    ) -> "AniListClient":
        """Create a client from AniListSettings (environment by default)."""
        settings = settings or get_settings()
        return cls(
            settings.token,
            api_url=settings.api_url,
            timeout_seconds=settings.timeout_seconds,
        )

    # Token management

    def set_token(self, token: str) -> None:
        self._token = token

    def clear_token(self) -> None:
        self._token = None

    def has_token(self) -> bool:
        return self._token is not None

    # Endpoint accessors

    def anime(self) -> AnimeEndpoint:
        return AnimeEndpoint(self)

    def manga(self) -> MangaEndpoint:
        return MangaEndpoint(self)

    def character(self) -> CharacterEndpoint:
        return CharacterEndpoint(self)

    def staff(self) -> StaffEndpoint:
        return StaffEndpoint(self)

    def studio(self) -> StudioEndpoint:
        return StudioEndpoint(self)

    def user(self) -> UserEndpoint:
        return UserEndpoint(self)

    def airing(self) -> AiringEndpoint:
        return AiringEndpoint(self)

    def forum(self) -> ForumEndpoint:
        return ForumEndpoint(self)

    def activity(self) -> ActivityEndpoint:
        return ActivityEndpoint(self)

    def review(self) -> ReviewEndpoint:
        return ReviewEndpoint(self)

    def recommendation(self) -> RecommendationEndpoint:
        return RecommendationEndpoint(self)

    def notification(self) -> NotificationEndpoint:
        return NotificationEndpoint(self)

    async def _get_session(self) -> aiohttp.ClientSession:
        if not self._owns_session:
            if self.session is None:
                raise RuntimeError("Failed to initialize AniList session")
            return self.session

        current_loop = asyncio.get_running_loop()
        session = self.session
        if session is None or self._session_event_loop is not current_loop:
            # Publish the new session before awaiting, so concurrent callers reuse it
            old_session = session
            session = aiohttp.ClientSession(timeout=self._timeout)
            self.session = session
            self._session_event_loop = current_loop
            logger.debug("AniList session created for current event loop")
            if old_session is not None:
                try:
                    await old_session.close()
                except Exception:
                    logger.debug(
                        "Ignoring error while closing old session", exc_info=True
                    )
        return session

    def _record_rate_limit(self, headers: Mapping[str, str]) -> None:
        if RATE_LIMIT_REMAINING_HEADER not in headers and RATE_LIMIT_HEADER not in headers:
            return
        self.rate_limit = RateLimitStatus(
            limit=_parse_int(headers.get(RATE_LIMIT_HEADER), self.rate_limit.limit),
            remaining=_parse_int(
                headers.get(RATE_LIMIT_REMAINING_HEADER), self.rate_limit.remaining
            ),
            reset_at=_parse_int(
                headers.get(RATE_LIMIT_RESET_HEADER), self.rate_limit.reset_at
            ),
        )

    async def query(
        self, query: str, variables: Optional[Mapping[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Send one GraphQL request to the AniList API and return its ``data`` object.

        No retrying, sleeping or caching happens here; wrap the call in
        ``retry_with_backoff`` to recover from rate limiting.

        Parameters:
            query (str): GraphQL query or mutation text.
            variables (Optional[Mapping[str, Any]]): JSON-compatible variables.
                Omitted from the request body when None.

        Returns:
            Dict[str, Any]: The response's top-level ``data`` object (empty if
            absent or null).

        Raises:
            AniListBadRequest: HTTP 400.
            AniListAuthenticationRequired: HTTP 401.
            AniListAccessDenied: HTTP 403.
            AniListNotFound: HTTP 404.
            AniListRateLimitError: HTTP 429 with all four rate-limit headers.
            AniListRateLimitSimple: HTTP 429 with any rate-limit header missing.
            AniListServerError: 5xx or any other non-2xx status.
            AniListDecodeError: 2xx body that is not valid JSON, is not a JSON
                object, or whose ``data`` is neither an object nor null.
            AniListBurstLimit: 2xx body whose GraphQL errors mention rate limiting.
            AniListGraphQLError: 2xx body with any other GraphQL errors.
            AniListNetworkError: Connection, timeout or other transport failure.
        """
        body: Dict[str, Any] = {"query": query}
        if variables is not None:
            body["variables"] = dict(variables)

        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        token = self._token
        if token is not None:
            headers["Authorization"] = f"Bearer {token}"

        session = await self._get_session()
        logger.debug(f"POST {self.api_url} (variables: {sorted(body.get('variables', {}))})")
        try:
            async with session.post(
                self.api_url, json=body, headers=headers
            ) as response:
                self._record_rate_limit(response.headers)
                return await self._handle_response(response)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.exception("AniList API request failed")
            raise AniListNetworkError(str(e) or type(e).__name__) from e

    async def _handle_response(self, response: Any) -> Dict[str, Any]:
        status: int = response.status

        if 200 <= status < 300:
            return await self._handle_body(response)
        if status == 400:
            raise AniListBadRequest(await _read_text(response, "Bad Request"))
        if status == 401:
            raise AniListAuthenticationRequired()
        if status == 403:
            raise AniListAccessDenied()
        if status == 404:
            raise AniListNotFound()
        if status == 429:
            raise self._rate_limit_error(response.headers)
        if 500 <= status < 600:
            raise AniListServerError(status, await _read_text(response, "Server Error"))
        raise AniListServerError(status, await _read_text(response, "Unknown Error"))

    @staticmethod
    def _rate_limit_error(
        headers: Mapping[str, str],
    ) -> AniListRateLimitError | AniListRateLimitSimple:
        values = [
            headers.get(name)
            for name in (
                RATE_LIMIT_HEADER,
                RATE_LIMIT_REMAINING_HEADER,
                RATE_LIMIT_RESET_HEADER,
                RETRY_AFTER_HEADER,
            )
        ]
        if any(value is None for value in values):
            logger.warning("Rate limit exceeded (no rate-limit headers)")
            return AniListRateLimitSimple()

        limit, remaining, reset_at, retry_after = values
        error = AniListRateLimitError(
            limit=_parse_int(limit, DEFAULT_RATE_LIMIT),
            remaining=_parse_int(remaining, DEFAULT_REMAINING),
            reset_at=_parse_int(reset_at, DEFAULT_RESET_AT),
            retry_after=_parse_int(retry_after, DEFAULT_RETRY_AFTER),
        )
        logger.warning(str(error))
        return error

    async def _handle_body(self, response: Any) -> Dict[str, Any]:
        try:
            payload = json.loads(await response.text())
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise AniListDecodeError(str(e)) from e
        if not isinstance(payload, dict):
            raise AniListDecodeError(
                f"expected a JSON object, got {type(payload).__name__}"
            )

        if "errors" in payload:
            message = _join_graphql_errors(payload["errors"])
            lowered = message.lower()
            # AniList sometimes reports burst limiting inside a 200 body
            if any(phrase in lowered for phrase in BURST_LIMIT_PHRASES):
                logger.warning(f"AniList burst limit: {message}")
                raise AniListBurstLimit()
            logger.error(f"AniList GraphQL errors: {message}")
            raise AniListGraphQLError(message)

        data = payload.get("data")
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise AniListDecodeError(
                f"expected 'data' to be an object, got {type(data).__name__}"
            )
        return data

    async def close(self) -> None:
        if self.session is not None and self._owns_session:
            await self.session.close()
            self.session = None
            self._session_event_loop = None

    async def __aenter__(self) -> "AniListClient":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        await self.close()
