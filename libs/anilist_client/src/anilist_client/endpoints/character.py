from typing import List

from anilist_client import queries
from anilist_client.models import Character

from .base import BaseEndpoint, page_variables

_PAGE_CHARACTERS = ("Page", "characters")


class CharacterEndpoint(BaseEndpoint):
    async def get_popular(self, page: int, per_page: int) -> List[Character]:
        return await self._fetch_list(
            Character,
            queries.character.GET_POPULAR,
            page_variables(page, per_page),
            _PAGE_CHARACTERS,
        )

    async def get_by_id(self, id: int) -> Character:
        return await self._fetch_one(
            Character, queries.character.GET_BY_ID, {"id": id}, ("Character",)
        )

    async def search(self, search: str, page: int, per_page: int) -> List[Character]:
        return await self._fetch_list(
            Character,
            queries.character.SEARCH,
            page_variables(page, per_page, search=search),
            _PAGE_CHARACTERS,
        )

    async def get_today_birthday(self, page: int, per_page: int) -> List[Character]:
        return await self._fetch_list(
            Character,
            queries.character.GET_TODAY_BIRTHDAY,
            page_variables(page, per_page),
            _PAGE_CHARACTERS,
        )

    async def get_most_favorited(self, page: int, per_page: int) -> List[Character]:
        return await self._fetch_list(
            Character,
            queries.character.GET_MOST_FAVORITED,
            page_variables(page, per_page),
            _PAGE_CHARACTERS,
        )
