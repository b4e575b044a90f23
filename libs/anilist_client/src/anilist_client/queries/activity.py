from .fields import ACTIVITY_FIELDS, ACTIVITY_REPLY_FIELDS, TEXT_ACTIVITY_FIELDS


def _activities(arguments: str, params: str = "", fields: str = ACTIVITY_FIELDS) -> str:
    return f"""
    query ($page: Int, $perPage: Int{params}) {{
      Page(page: $page, perPage: $perPage) {{
        activities({arguments}) {{ {fields} }}
      }}
    }}
    """


GET_RECENT_ACTIVITIES = _activities("sort: ID_DESC")
GET_FOLLOWING_ACTIVITIES = _activities("isFollowing: true, sort: ID_DESC")
GET_USER_ACTIVITIES = _activities("userId: $userId, sort: ID_DESC", ", $userId: Int")
GET_TEXT_ACTIVITIES = _activities(
    "type: TEXT, sort: ID_DESC", fields=f"... on TextActivity {{ {TEXT_ACTIVITY_FIELDS} }}"
)

GET_ACTIVITY_BY_ID = f"""
query ($id: Int) {{
  Activity(id: $id) {{ {ACTIVITY_FIELDS} }}
}}
"""

GET_ACTIVITY_REPLIES = f"""
query ($activityId: Int, $page: Int, $perPage: Int) {{
  Page(page: $page, perPage: $perPage) {{
    activityReplies(activityId: $activityId) {{ {ACTIVITY_REPLY_FIELDS} }}
  }}
}}
"""

CREATE_TEXT_ACTIVITY = f"""
mutation ($text: String) {{
  SaveTextActivity(text: $text) {{ {TEXT_ACTIVITY_FIELDS} }}
}}
"""

REPLY_TO_ACTIVITY = f"""
mutation ($activityId: Int, $text: String) {{
  SaveActivityReply(activityId: $activityId, text: $text) {{ {ACTIVITY_REPLY_FIELDS} }}
}}
"""

TOGGLE_LIKE = """
mutation ($id: Int, $type: LikeableType) {
  ToggleLikeV2(id: $id, type: $type) {
    ... on TextActivity { id type likeCount isLiked siteUrl }
    ... on ListActivity { id type likeCount isLiked siteUrl }
    ... on MessageActivity { id type likeCount isLiked siteUrl }
  }
}
"""

TOGGLE_ACTIVITY_REPLY_LIKE = """
mutation ($id: Int, $type: LikeableType) {
  ToggleLikeV2(id: $id, type: $type) {
    ... on ActivityReply { id activityId likeCount isLiked }
  }
}
"""

DELETE_ACTIVITY = """
mutation ($id: Int) {
  DeleteActivity(id: $id) { deleted }
}
"""
