from typing import List, Union

from anilist_client import queries
from anilist_client.models import Anime, MediaSeason

from .base import BaseEndpoint, page_variables

_PAGE_MEDIA = ("Page", "media")


class AnimeEndpoint(BaseEndpoint):
    """Anime lookups. All of these are public and need no token."""

    async def get_popular(self, page: int, per_page: int) -> List[Anime]:
        return await self._fetch_list(
            Anime, queries.anime.GET_POPULAR, page_variables(page, per_page), _PAGE_MEDIA
        )

    async def get_trending(self, page: int, per_page: int) -> List[Anime]:
        return await self._fetch_list(
            Anime, queries.anime.GET_TRENDING, page_variables(page, per_page), _PAGE_MEDIA
        )

    async def get_by_id(self, id: int) -> Anime:
        return await self._fetch_one(
            Anime, queries.anime.GET_BY_ID, {"id": id}, ("Media",)
        )

    async def search(self, search: str, page: int, per_page: int) -> List[Anime]:
        return await self._fetch_list(
            Anime,
            queries.anime.SEARCH,
            page_variables(page, per_page, search=search),
            _PAGE_MEDIA,
        )

    async def get_by_season(
        self,
        season: Union[MediaSeason, str],
        year: int,
        page: int,
        per_page: int,
    ) -> List[Anime]:
        """Anime from one broadcast season, most popular first.

        ``season`` accepts a MediaSeason or its name in any case ("fall").
        """
        season_name = MediaSeason(season.upper() if isinstance(season, str) else season)
        return await self._fetch_list(
            Anime,
            queries.anime.GET_BY_SEASON,
            page_variables(page, per_page, season=season_name.value, seasonYear=year),
            _PAGE_MEDIA,
        )

    async def get_top_rated(self, page: int, per_page: int) -> List[Anime]:
        return await self._fetch_list(
            Anime, queries.anime.GET_TOP_RATED, page_variables(page, per_page), _PAGE_MEDIA
        )

    async def get_airing(self, page: int, per_page: int) -> List[Anime]:
        return await self._fetch_list(
            Anime, queries.anime.GET_AIRING, page_variables(page, per_page), _PAGE_MEDIA
        )
