from typing import List, Union

from anilist_client import queries
from anilist_client.models import Notification, NotificationType

from .base import BaseEndpoint, page_variables

_PAGE_NOTIFICATIONS = ("Page", "notifications")


class NotificationEndpoint(BaseEndpoint):
    """The viewer's notifications. Every call needs an authenticated client."""

    async def get_notifications(self, page: int, per_page: int) -> List[Notification]:
        return await self._fetch_list(
            Notification,
            queries.notification.GET_NOTIFICATIONS,
            page_variables(page, per_page),
            _PAGE_NOTIFICATIONS,
        )

    async def get_unread_count(self) -> int:
        count = await self._fetch(
            queries.notification.GET_UNREAD_COUNT,
            None,
            ("Viewer", "unreadNotificationCount"),
        )
        return count if isinstance(count, int) else 0

    async def get_notifications_by_type(
        self,
        notification_type: Union[NotificationType, str],
        page: int,
        per_page: int,
    ) -> List[Notification]:
        type_name = NotificationType(
            notification_type.upper()
            if isinstance(notification_type, str)
            else notification_type
        )
        return await self._fetch_list(
            Notification,
            queries.notification.GET_NOTIFICATIONS_BY_TYPE,
            page_variables(page, per_page, type=[type_name.value]),
            _PAGE_NOTIFICATIONS,
        )

    async def mark_notifications_as_read(self) -> bool:
        """Reset the viewer's unread notification count.

        AniList has no per-notification read flag; reading with
        ``resetNotificationCount`` clears the whole counter.
        """
        page = await self._fetch(
            queries.notification.MARK_NOTIFICATIONS_AS_READ, None, ("Page",)
        )
        return isinstance(page, dict)
