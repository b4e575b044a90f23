from typing import List

from anilist_client import queries
from anilist_client.models import Manga

from .base import BaseEndpoint, page_variables

_PAGE_MEDIA = ("Page", "media")


class MangaEndpoint(BaseEndpoint):
    async def get_popular(self, page: int, per_page: int) -> List[Manga]:
        return await self._fetch_list(
            Manga, queries.manga.GET_POPULAR, page_variables(page, per_page), _PAGE_MEDIA
        )

    async def get_trending(self, page: int, per_page: int) -> List[Manga]:
        return await self._fetch_list(
            Manga, queries.manga.GET_TRENDING, page_variables(page, per_page), _PAGE_MEDIA
        )

    async def get_by_id(self, id: int) -> Manga:
        return await self._fetch_one(
            Manga, queries.manga.GET_BY_ID, {"id": id}, ("Media",)
        )

    async def search(self, search: str, page: int, per_page: int) -> List[Manga]:
        return await self._fetch_list(
            Manga,
            queries.manga.SEARCH,
            page_variables(page, per_page, search=search),
            _PAGE_MEDIA,
        )

    async def get_top_rated(self, page: int, per_page: int) -> List[Manga]:
        return await self._fetch_list(
            Manga, queries.manga.GET_TOP_RATED, page_variables(page, per_page), _PAGE_MEDIA
        )

    async def get_releasing(self, page: int, per_page: int) -> List[Manga]:
        return await self._fetch_list(
            Manga, queries.manga.GET_RELEASING, page_variables(page, per_page), _PAGE_MEDIA
        )

    async def get_completed(self, page: int, per_page: int) -> List[Manga]:
        return await self._fetch_list(
            Manga, queries.manga.GET_COMPLETED, page_variables(page, per_page), _PAGE_MEDIA
        )
