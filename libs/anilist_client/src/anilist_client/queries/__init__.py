"""GraphQL documents used by the endpoint façades, grouped by entity."""

from . import (
    activity,
    airing,
    anime,
    character,
    forum,
    manga,
    notification,
    recommendation,
    review,
    staff,
    studio,
    user,
)

__all__ = [
    "activity",
    "airing",
    "anime",
    "character",
    "forum",
    "manga",
    "notification",
    "recommendation",
    "review",
    "staff",
    "studio",
    "user",
]
