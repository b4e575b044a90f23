from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel

from .media import FuzzyDate, MediaCoverImage, MediaTitle


class MediaListStatus(str, Enum):
    CURRENT = "CURRENT"
    PLANNING = "PLANNING"
    COMPLETED = "COMPLETED"
    DROPPED = "DROPPED"
    PAUSED = "PAUSED"
    REPEATING = "REPEATING"


class UserAvatar(BaseModel):
    # SCALARS
    large: Optional[str] = None
    medium: Optional[str] = None


class UserStatisticsType(BaseModel):
    # SCALARS
    chaptersRead: Optional[int] = None
    count: Optional[int] = None
    episodesWatched: Optional[int] = None
    meanScore: Optional[float] = None
    minutesWatched: Optional[int] = None
    standardDeviation: Optional[float] = None
    volumesRead: Optional[int] = None


class UserStatistics(BaseModel):
    # OBJECTS
    anime: Optional[UserStatisticsType] = None
    manga: Optional[UserStatisticsType] = None


class User(BaseModel):
    # SCALARS
    about: Optional[str] = None
    bannerImage: Optional[str] = None
    createdAt: Optional[int] = None
    donatorBadge: Optional[str] = None
    donatorTier: Optional[int] = None
    id: int
    isBlocked: Optional[bool] = None
    isFollower: Optional[bool] = None
    isFollowing: Optional[bool] = None
    name: str
    siteUrl: Optional[str] = None
    unreadNotificationCount: Optional[int] = None
    updatedAt: Optional[int] = None
    # ARRAYS
    moderatorRoles: Optional[List[str]] = None
    # OBJECTS
    avatar: Optional[UserAvatar] = None
    statistics: Optional[UserStatistics] = None


class MediaListMedia(BaseModel):
    # SCALARS
    averageScore: Optional[int] = None
    chapters: Optional[int] = None
    episodes: Optional[int] = None
    format: Optional[str] = None
    id: int
    season: Optional[str] = None
    seasonYear: Optional[int] = None
    status: Optional[str] = None
    volumes: Optional[int] = None
    # ARRAYS
    genres: Optional[List[str]] = None
    # OBJECTS
    coverImage: Optional[MediaCoverImage] = None
    title: Optional[MediaTitle] = None


class MediaList(BaseModel):
    # SCALARS
    createdAt: Optional[int] = None
    hiddenFromStatusLists: Optional[bool] = None
    id: int
    mediaId: int
    notes: Optional[str] = None
    priority: Optional[int] = None
    private: Optional[bool] = None
    progress: Optional[int] = None
    progressVolumes: Optional[int] = None
    repeat: Optional[int] = None
    score: Optional[float] = None
    status: Optional[MediaListStatus] = None
    updatedAt: Optional[int] = None
    userId: int
    # OBJECTS
    advancedScores: Optional[Any] = None
    completedAt: Optional[FuzzyDate] = None
    customLists: Optional[Any] = None
    media: Optional[MediaListMedia] = None
    startedAt: Optional[FuzzyDate] = None
