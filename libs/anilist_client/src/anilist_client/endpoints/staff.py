from typing import List

from anilist_client import queries
from anilist_client.models import Staff

from .base import BaseEndpoint, page_variables

_PAGE_STAFF = ("Page", "staff")


class StaffEndpoint(BaseEndpoint):
    async def get_popular(self, page: int, per_page: int) -> List[Staff]:
        return await self._fetch_list(
            Staff, queries.staff.GET_POPULAR, page_variables(page, per_page), _PAGE_STAFF
        )

    async def get_by_id(self, id: int) -> Staff:
        return await self._fetch_one(
            Staff, queries.staff.GET_BY_ID, {"id": id}, ("Staff",)
        )

    async def search(self, search: str, page: int, per_page: int) -> List[Staff]:
        return await self._fetch_list(
            Staff,
            queries.staff.SEARCH,
            page_variables(page, per_page, search=search),
            _PAGE_STAFF,
        )

    async def get_today_birthday(self, page: int, per_page: int) -> List[Staff]:
        return await self._fetch_list(
            Staff,
            queries.staff.GET_TODAY_BIRTHDAY,
            page_variables(page, per_page),
            _PAGE_STAFF,
        )

    async def get_most_favorited(self, page: int, per_page: int) -> List[Staff]:
        return await self._fetch_list(
            Staff,
            queries.staff.GET_MOST_FAVORITED,
            page_variables(page, per_page),
            _PAGE_STAFF,
        )
