from typing import List

from anilist_client import queries
from anilist_client.models import Studio

from .base import BaseEndpoint, page_variables

_PAGE_STUDIOS = ("Page", "studios")


class StudioEndpoint(BaseEndpoint):
    async def get_popular(self, page: int, per_page: int) -> List[Studio]:
        return await self._fetch_list(
            Studio, queries.studio.GET_POPULAR, page_variables(page, per_page), _PAGE_STUDIOS
        )

    async def get_by_id(self, id: int) -> Studio:
        return await self._fetch_one(
            Studio, queries.studio.GET_BY_ID, {"id": id}, ("Studio",)
        )

    async def search(self, search: str, page: int, per_page: int) -> List[Studio]:
        return await self._fetch_list(
            Studio,
            queries.studio.SEARCH,
            page_variables(page, per_page, search=search),
            _PAGE_STUDIOS,
        )

    async def get_most_favorited(self, page: int, per_page: int) -> List[Studio]:
        return await self._fetch_list(
            Studio,
            queries.studio.GET_MOST_FAVORITED,
            page_variables(page, per_page),
            _PAGE_STUDIOS,
        )

    async def toggle_favorite(self, studio_id: int) -> Studio:
        """Toggle the viewer's favourite flag on a studio. Requires a token."""
        return await self._fetch_one(
            Studio,
            queries.studio.TOGGLE_FAVORITE,
            {"studioId": studio_id},
            ("ToggleFavourite", "studios", "nodes", 0),
        )
