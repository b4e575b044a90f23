from enum import Enum
from typing import List, Optional

from pydantic import BaseModel

from .media import MediaCoverImage, MediaFormat, MediaTitle
from .user import UserAvatar

# Social payloads are often partial (mutations select a handful of fields),
# so only ids and names are required.


class MediaType(str, Enum):
    ANIME = "ANIME"
    MANGA = "MANGA"


class ActivityType(str, Enum):
    TEXT = "TEXT"
    ANIME_LIST = "ANIME_LIST"
    MANGA_LIST = "MANGA_LIST"
    MESSAGE = "MESSAGE"
    MEDIA_LIST = "MEDIA_LIST"


class ReviewRating(str, Enum):
    NO_VOTE = "NO_VOTE"
    UP_VOTE = "UP_VOTE"
    DOWN_VOTE = "DOWN_VOTE"


class RecommendationRating(str, Enum):
    NO_RATING = "NO_RATING"
    RATE_UP = "RATE_UP"
    RATE_DOWN = "RATE_DOWN"


class NotificationType(str, Enum):
    ACTIVITY_MESSAGE = "ACTIVITY_MESSAGE"
    ACTIVITY_REPLY = "ACTIVITY_REPLY"
    FOLLOWING = "FOLLOWING"
    ACTIVITY_MENTION = "ACTIVITY_MENTION"
    THREAD_COMMENT_MENTION = "THREAD_COMMENT_MENTION"
    THREAD_SUBSCRIBED = "THREAD_SUBSCRIBED"
    THREAD_COMMENT_REPLY = "THREAD_COMMENT_REPLY"
    AIRING = "AIRING"
    ACTIVITY_LIKE = "ACTIVITY_LIKE"
    ACTIVITY_REPLY_LIKE = "ACTIVITY_REPLY_LIKE"
    THREAD_LIKE = "THREAD_LIKE"
    THREAD_COMMENT_LIKE = "THREAD_COMMENT_LIKE"
    ACTIVITY_REPLY_SUBSCRIBED = "ACTIVITY_REPLY_SUBSCRIBED"
    RELATED_MEDIA_ADDITION = "RELATED_MEDIA_ADDITION"
    MEDIA_DATA_CHANGE = "MEDIA_DATA_CHANGE"
    MEDIA_MERGE = "MEDIA_MERGE"
    MEDIA_DELETION = "MEDIA_DELETION"


class SocialUser(BaseModel):
    """Author summary embedded in threads, reviews, activities and notifications."""

    # SCALARS
    donatorBadge: Optional[str] = None
    donatorTier: Optional[int] = None
    id: int
    name: str
    # ARRAYS
    moderatorRoles: Optional[List[str]] = None
    # OBJECTS
    avatar: Optional[UserAvatar] = None


class SocialMedia(BaseModel):
    """Media summary embedded in reviews, recommendations, activities and notifications."""

    # SCALARS
    averageScore: Optional[int] = None
    bannerImage: Optional[str] = None
    format: Optional[MediaFormat] = None
    id: int
    siteUrl: Optional[str] = None
    type: Optional[MediaType] = None
    # OBJECTS
    coverImage: Optional[MediaCoverImage] = None
    title: Optional[MediaTitle] = None


class ThreadCategory(BaseModel):
    id: int
    name: str


class Thread(BaseModel):
    # SCALARS
    body: Optional[str] = None
    createdAt: Optional[int] = None
    id: int
    isLiked: Optional[bool] = None
    isLocked: Optional[bool] = None
    isSticky: Optional[bool] = None
    isSubscribed: Optional[bool] = None
    likeCount: Optional[int] = None
    repliedAt: Optional[int] = None
    replyCommentId: Optional[int] = None
    replyCount: Optional[int] = None
    replyUserId: Optional[int] = None
    siteUrl: Optional[str] = None
    title: Optional[str] = None
    updatedAt: Optional[int] = None
    userId: Optional[int] = None
    viewCount: Optional[int] = None
    # ARRAYS
    categories: Optional[List[ThreadCategory]] = None
    # OBJECTS
    replyUser: Optional[SocialUser] = None
    user: Optional[SocialUser] = None


class ThreadComment(BaseModel):
    # SCALARS
    comment: Optional[str] = None
    createdAt: Optional[int] = None
    id: int
    isLiked: Optional[bool] = None
    likeCount: Optional[int] = None
    siteUrl: Optional[str] = None
    threadId: Optional[int] = None
    updatedAt: Optional[int] = None
    userId: Optional[int] = None
    # OBJECTS
    user: Optional[SocialUser] = None


class Review(BaseModel):
    # SCALARS
    body: Optional[str] = None
    createdAt: Optional[int] = None
    id: int
    mediaId: Optional[int] = None
    mediaType: Optional[MediaType] = None
    private: Optional[bool] = None
    rating: Optional[int] = None
    ratingAmount: Optional[int] = None
    score: Optional[int] = None
    siteUrl: Optional[str] = None
    summary: Optional[str] = None
    updatedAt: Optional[int] = None
    userId: Optional[int] = None
    userRating: Optional[ReviewRating] = None
    # OBJECTS
    media: Optional[SocialMedia] = None
    user: Optional[SocialUser] = None


class Recommendation(BaseModel):
    # SCALARS
    id: int
    rating: Optional[int] = None
    userRating: Optional[RecommendationRating] = None
    # OBJECTS
    media: Optional[SocialMedia] = None
    mediaRecommendation: Optional[SocialMedia] = None
    user: Optional[SocialUser] = None


class Activity(BaseModel):
    """Any activity kind. Text, list and message fields are None for other kinds."""

    # SCALARS
    createdAt: Optional[int] = None
    id: int
    isLiked: Optional[bool] = None
    isLocked: Optional[bool] = None
    isPinned: Optional[bool] = None
    isPrivate: Optional[bool] = None
    isSubscribed: Optional[bool] = None
    likeCount: Optional[int] = None
    message: Optional[str] = None
    progress: Optional[str] = None
    replyCount: Optional[int] = None
    siteUrl: Optional[str] = None
    status: Optional[str] = None
    text: Optional[str] = None
    type: Optional[ActivityType] = None
    userId: Optional[int] = None
    # OBJECTS
    media: Optional[SocialMedia] = None
    messenger: Optional[SocialUser] = None
    recipient: Optional[SocialUser] = None
    user: Optional[SocialUser] = None


class TextActivity(BaseModel):
    # SCALARS
    createdAt: Optional[int] = None
    id: int
    isLiked: Optional[bool] = None
    isPinned: Optional[bool] = None
    likeCount: Optional[int] = None
    replyCount: Optional[int] = None
    siteUrl: Optional[str] = None
    text: Optional[str] = None
    userId: Optional[int] = None
    # OBJECTS
    user: Optional[SocialUser] = None


class ActivityReply(BaseModel):
    # SCALARS
    activityId: Optional[int] = None
    createdAt: Optional[int] = None
    id: int
    isLiked: Optional[bool] = None
    likeCount: Optional[int] = None
    text: Optional[str] = None
    userId: Optional[int] = None
    # OBJECTS
    user: Optional[SocialUser] = None


class Notification(BaseModel):
    # SCALARS
    animeId: Optional[int] = None
    createdAt: Optional[int] = None
    episode: Optional[int] = None
    id: int
    type: Optional[NotificationType] = None
    userId: Optional[int] = None
    # ARRAYS
    contexts: Optional[List[str]] = None
    # OBJECTS
    media: Optional[SocialMedia] = None
    user: Optional[SocialUser] = None
