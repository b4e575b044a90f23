"""Per-entity façades over AniListClient.query."""

from .activity import ActivityEndpoint
from .airing import AiringEndpoint
from .anime import AnimeEndpoint
from .character import CharacterEndpoint
from .forum import ForumEndpoint
from .manga import MangaEndpoint
from .notification import NotificationEndpoint
from .recommendation import RecommendationEndpoint
from .review import ReviewEndpoint
from .staff import StaffEndpoint
from .studio import StudioEndpoint
from .user import UserEndpoint

__all__ = [
    "ActivityEndpoint",
    "AiringEndpoint",
    "AnimeEndpoint",
    "CharacterEndpoint",
    "ForumEndpoint",
    "MangaEndpoint",
    "NotificationEndpoint",
    "RecommendationEndpoint",
    "ReviewEndpoint",
    "StaffEndpoint",
    "StudioEndpoint",
    "UserEndpoint",
]
