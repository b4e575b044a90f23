"""Exceptions raised by the AniList client.

Every failed call raises exactly one subclass of ``AniListAPIError``.
"""


class AniListAPIError(Exception):
    """Base exception for AniList API errors."""


class AniListNetworkError(AniListAPIError):
    """Raised when the request fails at the transport level."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Network error: {message}")


class AniListDecodeError(AniListAPIError):
    """Raised when a response body or payload cannot be decoded."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"JSON parsing error: {message}")


class AniListGraphQLError(AniListAPIError):
    """Raised when AniList API returns GraphQL errors in response."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"GraphQL error: {message}")


class AniListAuthenticationRequired(AniListAPIError):
    """Raised on HTTP 401."""

    def __init__(self) -> None:
        super().__init__(
            "Authentication required. Please provide a valid access token."
        )


class AniListAccessDenied(AniListAPIError):
    """Raised on HTTP 403."""

    def __init__(self) -> None:
        super().__init__("Access denied. Check your token permissions.")


class AniListNotFound(AniListAPIError):
    """Raised on HTTP 404."""

    def __init__(self) -> None:
        super().__init__("Not found")


class AniListBadRequest(AniListAPIError):
    """Raised on HTTP 400, carrying the response body text."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Bad request: {message}")


class AniListRateLimited(AniListAPIError):
    """Base class for the rate-limit conditions the retry engine recovers from."""


class AniListRateLimitError(AniListRateLimited):
    """Raised on HTTP 429 when all rate-limit headers are present."""

    def __init__(
        self, limit: int, remaining: int, reset_at: int, retry_after: int
    ) -> None:
        self.limit = limit
        self.remaining = remaining
        self.reset_at = reset_at
        self.retry_after = retry_after
        super().__init__(
            f"Rate limit exceeded. Limit: {limit}, Remaining: {remaining}, "
            f"Reset at: {reset_at}, Retry after: {retry_after} seconds"
        )


class AniListRateLimitSimple(AniListRateLimited):
    """Raised on HTTP 429 when rate-limit headers are missing."""

    def __init__(self) -> None:
        super().__init__("Rate limit exceeded (simple). Try again in a few moments.")


class AniListBurstLimit(AniListRateLimited):
    """Raised when a 2xx body reports rate limiting through GraphQL errors."""

    def __init__(self) -> None:
        super().__init__("Burst limit exceeded. Please slow down your requests.")


class AniListServerError(AniListAPIError):
    """Raised on 5xx or any other unrecognised non-2xx status."""

    def __init__(self, status: int, message: str) -> None:
        self.status = status
        self.message = message
        super().__init__(f"Server error: {status} - {message}")
