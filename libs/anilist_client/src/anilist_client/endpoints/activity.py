from typing import List

from anilist_client import queries
from anilist_client.models import Activity, ActivityReply, TextActivity

from .base import BaseEndpoint, page_variables

_PAGE_ACTIVITIES = ("Page", "activities")


class ActivityEndpoint(BaseEndpoint):
    """Activity feeds and replies.

    The following feed and every mutation need an authenticated client.
    """

    async def get_recent_activities(self, page: int, per_page: int) -> List[Activity]:
        return await self._fetch_list(
            Activity,
            queries.activity.GET_RECENT_ACTIVITIES,
            page_variables(page, per_page),
            _PAGE_ACTIVITIES,
        )

    async def get_following_activities(
        self, page: int, per_page: int
    ) -> List[Activity]:
        return await self._fetch_list(
            Activity,
            queries.activity.GET_FOLLOWING_ACTIVITIES,
            page_variables(page, per_page),
            _PAGE_ACTIVITIES,
        )

    async def get_user_activities(
        self, user_id: int, page: int, per_page: int
    ) -> List[Activity]:
        return await self._fetch_list(
            Activity,
            queries.activity.GET_USER_ACTIVITIES,
            page_variables(page, per_page, userId=user_id),
            _PAGE_ACTIVITIES,
        )

    async def get_text_activities(self, page: int, per_page: int) -> List[TextActivity]:
        return await self._fetch_list(
            TextActivity,
            queries.activity.GET_TEXT_ACTIVITIES,
            page_variables(page, per_page),
            _PAGE_ACTIVITIES,
        )

    async def get_activity_by_id(self, id: int) -> Activity:
        return await self._fetch_one(
            Activity, queries.activity.GET_ACTIVITY_BY_ID, {"id": id}, ("Activity",)
        )

    async def get_activity_replies(
        self, activity_id: int, page: int, per_page: int
    ) -> List[ActivityReply]:
        return await self._fetch_list(
            ActivityReply,
            queries.activity.GET_ACTIVITY_REPLIES,
            page_variables(page, per_page, activityId=activity_id),
            ("Page", "activityReplies"),
        )

    async def create_text_activity(self, text: str) -> TextActivity:
        return await self._fetch_one(
            TextActivity,
            queries.activity.CREATE_TEXT_ACTIVITY,
            {"text": text},
            ("SaveTextActivity",),
        )

    async def post_activity_reply(self, activity_id: int, text: str) -> ActivityReply:
        return await self._fetch_one(
            ActivityReply,
            queries.activity.REPLY_TO_ACTIVITY,
            {"activityId": activity_id, "text": text},
            ("SaveActivityReply",),
        )

    async def toggle_activity_like(self, id: int) -> Activity:
        return await self._fetch_one(
            Activity,
            queries.activity.TOGGLE_LIKE,
            {"id": id, "type": "ACTIVITY"},
            ("ToggleLikeV2",),
        )

    async def toggle_activity_reply_like(self, id: int) -> ActivityReply:
        return await self._fetch_one(
            ActivityReply,
            queries.activity.TOGGLE_ACTIVITY_REPLY_LIKE,
            {"id": id, "type": "ACTIVITY_REPLY"},
            ("ToggleLikeV2",),
        )

    async def delete_activity(self, id: int) -> bool:
        """Delete one of the viewer's activities. Returns AniList's ``deleted`` flag."""
        deleted = await self._fetch(
            queries.activity.DELETE_ACTIVITY, {"id": id}, ("DeleteActivity", "deleted")
        )
        return deleted is True
