from enum import Enum
from typing import List, Optional

from pydantic import BaseModel

# Field names follow the AniList schema (camelCase).
# Fields are sorted by type (scalar, array, object) and then alphabetically.


class MediaFormat(str, Enum):
    TV = "TV"
    TV_SHORT = "TV_SHORT"
    MOVIE = "MOVIE"
    SPECIAL = "SPECIAL"
    OVA = "OVA"
    ONA = "ONA"
    MUSIC = "MUSIC"
    MANGA = "MANGA"
    NOVEL = "NOVEL"
    ONE_SHOT = "ONE_SHOT"


class MediaStatus(str, Enum):
    FINISHED = "FINISHED"
    RELEASING = "RELEASING"
    NOT_YET_RELEASED = "NOT_YET_RELEASED"
    CANCELLED = "CANCELLED"
    HIATUS = "HIATUS"


class MediaSeason(str, Enum):
    WINTER = "WINTER"
    SPRING = "SPRING"
    SUMMER = "SUMMER"
    FALL = "FALL"


class MediaSource(str, Enum):
    ORIGINAL = "ORIGINAL"
    MANGA = "MANGA"
    LIGHT_NOVEL = "LIGHT_NOVEL"
    VISUAL_NOVEL = "VISUAL_NOVEL"
    VIDEO_GAME = "VIDEO_GAME"
    OTHER = "OTHER"
    NOVEL = "NOVEL"
    DOUJINSHI = "DOUJINSHI"
    ANIME = "ANIME"
    WEB_NOVEL = "WEB_NOVEL"
    LIVE_ACTION = "LIVE_ACTION"
    GAME = "GAME"
    COMIC = "COMIC"
    MULTIMEDIA_PROJECT = "MULTIMEDIA_PROJECT"
    PICTURE_BOOK = "PICTURE_BOOK"


class MediaTitle(BaseModel):
    # SCALARS
    english: Optional[str] = None
    native: Optional[str] = None
    romaji: Optional[str] = None
    userPreferred: Optional[str] = None


class FuzzyDate(BaseModel):
    # SCALARS
    day: Optional[int] = None
    month: Optional[int] = None
    year: Optional[int] = None


class MediaCoverImage(BaseModel):
    # SCALARS
    color: Optional[str] = None
    extraLarge: Optional[str] = None
    large: Optional[str] = None
    medium: Optional[str] = None


class MediaTrailer(BaseModel):
    # SCALARS
    id: Optional[str] = None
    site: Optional[str] = None
    thumbnail: Optional[str] = None


class Studio(BaseModel):
    # SCALARS
    favourites: Optional[int] = None
    id: int
    isAnimationStudio: Optional[bool] = None
    isFavourite: Optional[bool] = None
    name: str
    siteUrl: Optional[str] = None


class StudioEdge(BaseModel):
    # SCALARS
    isMain: bool = False
    # OBJECTS
    node: Optional[Studio] = None


class StudioConnection(BaseModel):
    # ARRAYS
    edges: Optional[List[StudioEdge]] = None
    nodes: Optional[List[Studio]] = None


class AiringMedia(BaseModel):
    # SCALARS
    id: int
    # OBJECTS
    coverImage: Optional[MediaCoverImage] = None
    title: Optional[MediaTitle] = None


class AiringSchedule(BaseModel):
    # SCALARS
    airingAt: int
    episode: int
    id: int
    mediaId: int
    timeUntilAiring: int
    # OBJECTS
    media: Optional[AiringMedia] = None


class Anime(BaseModel):
    # SCALARS
    averageScore: Optional[int] = None
    bannerImage: Optional[str] = None
    countryOfOrigin: Optional[str] = None
    description: Optional[str] = None
    duration: Optional[int] = None
    episodes: Optional[int] = None
    favourites: Optional[int] = None
    format: Optional[MediaFormat] = None
    hashtag: Optional[str] = None
    id: int
    isAdult: Optional[bool] = None
    meanScore: Optional[int] = None
    popularity: Optional[int] = None
    season: Optional[MediaSeason] = None
    seasonYear: Optional[int] = None
    siteUrl: Optional[str] = None
    source: Optional[MediaSource] = None
    status: Optional[MediaStatus] = None
    updatedAt: Optional[int] = None
    # ARRAYS
    genres: Optional[List[str]] = None
    # OBJECTS
    coverImage: Optional[MediaCoverImage] = None
    endDate: Optional[FuzzyDate] = None
    nextAiringEpisode: Optional[AiringSchedule] = None
    startDate: Optional[FuzzyDate] = None
    studios: Optional[StudioConnection] = None
    title: Optional[MediaTitle] = None
    trailer: Optional[MediaTrailer] = None


class Manga(BaseModel):
    # SCALARS
    averageScore: Optional[int] = None
    bannerImage: Optional[str] = None
    chapters: Optional[int] = None
    countryOfOrigin: Optional[str] = None
    description: Optional[str] = None
    favourites: Optional[int] = None
    format: Optional[MediaFormat] = None
    hashtag: Optional[str] = None
    id: int
    isAdult: Optional[bool] = None
    meanScore: Optional[int] = None
    popularity: Optional[int] = None
    siteUrl: Optional[str] = None
    source: Optional[MediaSource] = None
    status: Optional[MediaStatus] = None
    updatedAt: Optional[int] = None
    volumes: Optional[int] = None
    # ARRAYS
    genres: Optional[List[str]] = None
    # OBJECTS
    coverImage: Optional[MediaCoverImage] = None
    endDate: Optional[FuzzyDate] = None
    startDate: Optional[FuzzyDate] = None
    title: Optional[MediaTitle] = None
