"""Pydantic data shapes for AniList GraphQL payloads."""

from .character import Character, CharacterImage, CharacterName
from .media import (
    AiringMedia,
    AiringSchedule,
    Anime,
    FuzzyDate,
    Manga,
    MediaCoverImage,
    MediaFormat,
    MediaSeason,
    MediaSource,
    MediaStatus,
    MediaTitle,
    MediaTrailer,
    Studio,
    StudioConnection,
    StudioEdge,
)
from .social import (
    Activity,
    ActivityReply,
    ActivityType,
    MediaType,
    Notification,
    NotificationType,
    Recommendation,
    RecommendationRating,
    Review,
    ReviewRating,
    SocialMedia,
    SocialUser,
    TextActivity,
    Thread,
    ThreadCategory,
    ThreadComment,
)
from .staff import Staff, StaffImage, StaffName
from .user import (
    MediaList,
    MediaListMedia,
    MediaListStatus,
    User,
    UserAvatar,
    UserStatistics,
    UserStatisticsType,
)

__all__ = [
    "Activity",
    "ActivityReply",
    "ActivityType",
    "AiringMedia",
    "AiringSchedule",
    "Anime",
    "Character",
    "CharacterImage",
    "CharacterName",
    "FuzzyDate",
    "Manga",
    "MediaCoverImage",
    "MediaFormat",
    "MediaList",
    "MediaListMedia",
    "MediaListStatus",
    "MediaSeason",
    "MediaSource",
    "MediaStatus",
    "MediaTitle",
    "MediaTrailer",
    "MediaType",
    "Notification",
    "NotificationType",
    "Recommendation",
    "RecommendationRating",
    "Review",
    "ReviewRating",
    "SocialMedia",
    "SocialUser",
    "Staff",
    "StaffImage",
    "StaffName",
    "Studio",
    "StudioConnection",
    "StudioEdge",
    "TextActivity",
    "Thread",
    "ThreadCategory",
    "ThreadComment",
    "User",
    "UserAvatar",
    "UserStatistics",
    "UserStatisticsType",
]
