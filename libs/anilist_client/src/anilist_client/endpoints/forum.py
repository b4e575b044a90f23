from typing import Any, Dict, List, Optional

from anilist_client import queries
from anilist_client.models import Thread, ThreadComment

from .base import BaseEndpoint, page_variables

_PAGE_THREADS = ("Page", "threads")


class ForumEndpoint(BaseEndpoint):
    """Forum threads and comments. Creating, commenting and liking need a token."""

    async def get_recent_threads(self, page: int, per_page: int) -> List[Thread]:
        return await self._fetch_list(
            Thread,
            queries.forum.GET_RECENT_THREADS,
            page_variables(page, per_page),
            _PAGE_THREADS,
        )

    async def get_thread_by_id(self, id: int) -> Thread:
        return await self._fetch_one(
            Thread, queries.forum.GET_THREAD_BY_ID, {"id": id}, ("Thread",)
        )

    async def search_threads(self, search: str, page: int, per_page: int) -> List[Thread]:
        return await self._fetch_list(
            Thread,
            queries.forum.SEARCH_THREADS,
            page_variables(page, per_page, search=search),
            _PAGE_THREADS,
        )

    async def get_thread_comments(
        self, thread_id: int, page: int, per_page: int
    ) -> List[ThreadComment]:
        return await self._fetch_list(
            ThreadComment,
            queries.forum.GET_THREAD_COMMENTS,
            page_variables(page, per_page, threadId=thread_id),
            ("Page", "threadComments"),
        )

    async def create_thread(
        self, title: str, body: str, categories: Optional[List[int]] = None
    ) -> Thread:
        variables: Dict[str, Any] = {"title": title, "body": body}
        if categories is not None:
            variables["categories"] = list(categories)
        return await self._fetch_one(
            Thread, queries.forum.CREATE_THREAD, variables, ("SaveThread",)
        )

    async def post_comment(self, thread_id: int, comment: str) -> ThreadComment:
        return await self._fetch_one(
            ThreadComment,
            queries.forum.COMMENT_ON_THREAD,
            {"threadId": thread_id, "comment": comment},
            ("SaveThreadComment",),
        )

    async def toggle_thread_like(self, id: int) -> Thread:
        return await self._fetch_one(
            Thread,
            queries.forum.TOGGLE_THREAD_LIKE,
            {"id": id, "type": "THREAD"},
            ("ToggleLikeV2",),
        )

    async def toggle_comment_like(self, id: int) -> ThreadComment:
        return await self._fetch_one(
            ThreadComment,
            queries.forum.LIKE_THREAD_COMMENT,
            {"id": id, "type": "THREAD_COMMENT"},
            ("ToggleLikeV2",),
        )
