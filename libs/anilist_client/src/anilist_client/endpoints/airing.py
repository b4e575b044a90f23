import time
from typing import List, Optional

from anilist_client import queries
from anilist_client.models import AiringSchedule

from .base import BaseEndpoint, decode, page_variables

_PAGE_SCHEDULES = ("Page", "airingSchedules")
SECONDS_PER_DAY = 86400


def _now() -> int:
    return int(time.time())


class AiringEndpoint(BaseEndpoint):
    """Airing schedule lookups. Timestamps are Unix seconds (UTC)."""

    async def get_upcoming_episodes(
        self, page: int, per_page: int
    ) -> List[AiringSchedule]:
        return await self._fetch_list(
            AiringSchedule,
            queries.airing.GET_UPCOMING_EPISODES,
            page_variables(page, per_page, airingAtGreater=_now(), sort=["TIME"]),
            _PAGE_SCHEDULES,
        )

    async def get_today_episodes(
        self, page: int, per_page: int
    ) -> List[AiringSchedule]:
        start_of_day = _now() // SECONDS_PER_DAY * SECONDS_PER_DAY
        return await self._fetch_list(
            AiringSchedule,
            queries.airing.GET_TODAY_EPISODES,
            page_variables(
                page,
                per_page,
                airingAtGreater=start_of_day,
                airingAtLesser=start_of_day + SECONDS_PER_DAY,
                sort=["TIME"],
            ),
            _PAGE_SCHEDULES,
        )

    async def get_recently_aired(
        self, page: int, per_page: int
    ) -> List[AiringSchedule]:
        return await self._fetch_list(
            AiringSchedule,
            queries.airing.GET_RECENTLY_AIRED,
            page_variables(page, per_page, airingAtLesser=_now(), sort=["TIME_DESC"]),
            _PAGE_SCHEDULES,
        )

    async def get_schedule_for_media(
        self, media_id: int, page: int, per_page: int
    ) -> List[AiringSchedule]:
        return await self._fetch_list(
            AiringSchedule,
            queries.airing.GET_SCHEDULE_FOR_MEDIA,
            page_variables(page, per_page, mediaId=media_id, sort=["TIME"]),
            _PAGE_SCHEDULES,
        )

    async def get_schedule_by_id(self, id: int) -> AiringSchedule:
        return await self._fetch_one(
            AiringSchedule,
            queries.airing.GET_SCHEDULE_BY_ID,
            {"id": id},
            ("AiringSchedule",),
        )

    async def get_episodes_in_range(
        self, start_timestamp: int, end_timestamp: int, page: int, per_page: int
    ) -> List[AiringSchedule]:
        return await self._fetch_list(
            AiringSchedule,
            queries.airing.GET_EPISODES_IN_RANGE,
            page_variables(
                page,
                per_page,
                airingAtGreater=start_timestamp,
                airingAtLesser=end_timestamp,
                sort=["TIME"],
            ),
            _PAGE_SCHEDULES,
        )

    async def get_next_episode(self, media_id: int) -> Optional[AiringSchedule]:
        """Next scheduled episode for a media, or None if nothing is scheduled."""
        schedules = await self._fetch(
            queries.airing.GET_NEXT_EPISODE,
            {"mediaId": media_id, "airingAtGreater": _now()},
            _PAGE_SCHEDULES,
        )
        if not isinstance(schedules, list) or not schedules:
            return None
        return decode(AiringSchedule, schedules[0])
