from .fields import NOTIFICATION_FIELDS

GET_NOTIFICATIONS = f"""
query ($page: Int, $perPage: Int) {{
  Page(page: $page, perPage: $perPage) {{
    notifications {{ {NOTIFICATION_FIELDS} }}
  }}
}}
"""

GET_NOTIFICATIONS_BY_TYPE = f"""
query ($page: Int, $perPage: Int, $type: [NotificationType]) {{
  Page(page: $page, perPage: $perPage) {{
    notifications(type_in: $type) {{ {NOTIFICATION_FIELDS} }}
  }}
}}
"""

GET_UNREAD_COUNT = """
query {
  Viewer { id unreadNotificationCount }
}
"""

# Reading notifications with resetNotificationCount clears the unread counter.
MARK_NOTIFICATIONS_AS_READ = """
query {
  Page(page: 1, perPage: 1) {
    notifications(resetNotificationCount: true) {
      ... on AiringNotification { id }
    }
  }
}
"""
