import logging
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from anilist_client import queries
from anilist_client.exceptions import AniListBadRequest
from anilist_client.models import FuzzyDate, MediaList, MediaListStatus, User

from .base import BaseEndpoint, extract, page_variables

logger = logging.getLogger(__name__)

_PAGE_USERS = ("Page", "users")


class UserEndpoint(BaseEndpoint):
    """User profiles, social actions and list editing.

    ``get_current_user``, ``get_current_user_anime_list`` and every mutation
    need an authenticated client; AniList answers 401 otherwise.
    """

    async def get_current_user(self) -> User:
        return await self._fetch_one(
            User, queries.user.GET_CURRENT_USER, None, ("Viewer",)
        )

    async def get_current_user_anime_list(
        self, status: Optional[Union[MediaListStatus, str]] = None
    ) -> List[MediaList]:
        """
        Fetch the authenticated user's anime list entries, flattened across all lists.

        Parameters:
            status (Optional[Union[MediaListStatus, str]]): Only return entries with
                this list status (case-insensitive, e.g. "current").

        Returns:
            List[MediaList]: Entries from every custom and status list. Entries that
            do not validate are skipped and logged.
        """
        viewer = await self.get_current_user()
        variables: Dict[str, Any] = {"type": "ANIME", "userId": viewer.id}
        if status is not None:
            variables["status"] = MediaListStatus(
                status.upper() if isinstance(status, str) else status
            ).value

        lists = await self._fetch(
            queries.user.GET_CURRENT_USER_ANIME_LIST,
            variables,
            ("MediaListCollection", "lists"),
        )

        entries: List[MediaList] = []
        for media_list in lists or []:
            for entry in extract(media_list, ("entries",)) or []:
                try:
                    entries.append(MediaList.model_validate(entry))
                except ValidationError:
                    logger.warning("Skipping invalid media list entry", exc_info=True)
        return entries

    async def get_by_id(self, id: int) -> User:
        return await self._fetch_one(User, queries.user.GET_BY_ID, {"id": id}, ("User",))

    async def get_by_name(self, name: str) -> User:
        return await self._fetch_one(
            User, queries.user.GET_BY_NAME, {"name": name}, ("User",)
        )

    async def search(self, search: str, page: int, per_page: int) -> List[User]:
        return await self._fetch_list(
            User,
            queries.user.SEARCH,
            page_variables(page, per_page, search=search),
            _PAGE_USERS,
        )

    async def get_most_anime_watched(self, page: int, per_page: int) -> List[User]:
        return await self._fetch_list(
            User,
            queries.user.GET_MOST_ANIME_WATCHED,
            page_variables(page, per_page),
            _PAGE_USERS,
        )

    async def get_most_manga_read(self, page: int, per_page: int) -> List[User]:
        return await self._fetch_list(
            User,
            queries.user.GET_MOST_MANGA_READ,
            page_variables(page, per_page),
            _PAGE_USERS,
        )

    async def toggle_follow(self, user_id: int) -> User:
        return await self._fetch_one(
            User, queries.user.TOGGLE_FOLLOW, {"userId": user_id}, ("ToggleFollow",)
        )

    async def toggle_favorite(
        self, anime_id: Optional[int] = None, manga_id: Optional[int] = None
    ) -> bool:
        """Toggle an anime and/or manga favourite. Returns True if AniList acknowledged it."""
        if anime_id is None and manga_id is None:
            raise AniListBadRequest("Either anime_id or manga_id must be provided")

        variables: Dict[str, Any] = {}
        if anime_id is not None:
            variables["animeId"] = anime_id
        if manga_id is not None:
            variables["mangaId"] = manga_id

        result = await self._fetch(
            queries.user.TOGGLE_FAVORITE, variables, ("ToggleFavourite",)
        )
        return isinstance(result, dict)

    async def update_media_list_progress(self, entry_id: int, progress: int) -> None:
        await self.client.query(
            queries.user.UPDATE_MEDIA_LIST_PROGRESS,
            {"saveMediaListEntryId": entry_id, "progress": progress},
        )

    async def update_media_list_status(
        self,
        entry_id: int,
        status: Union[MediaListStatus, str],
        completed_at: Optional[FuzzyDate] = None,
    ) -> None:
        variables: Dict[str, Any] = {
            "saveMediaListEntryId": entry_id,
            "status": MediaListStatus(
                status.upper() if isinstance(status, str) else status
            ).value,
        }
        if completed_at is not None:
            variables["completedAt"] = completed_at.model_dump()
        await self.client.query(queries.user.UPDATE_MEDIA_LIST_STATUS, variables)
