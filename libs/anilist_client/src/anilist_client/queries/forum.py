from .fields import THREAD_COMMENT_FIELDS, THREAD_FIELDS


def _threads(arguments: str, params: str = "") -> str:
    return f"""
    query ($page: Int, $perPage: Int{params}) {{
      Page(page: $page, perPage: $perPage) {{
        threads({arguments}) {{ {THREAD_FIELDS} }}
      }}
    }}
    """


GET_RECENT_THREADS = _threads("sort: UPDATED_AT_DESC")
SEARCH_THREADS = _threads("search: $search, sort: SEARCH_MATCH", ", $search: String")

GET_THREAD_BY_ID = f"""
query ($id: Int) {{
  Thread(id: $id) {{ {THREAD_FIELDS} }}
}}
"""

GET_THREAD_COMMENTS = f"""
query ($threadId: Int, $page: Int, $perPage: Int) {{
  Page(page: $page, perPage: $perPage) {{
    threadComments(threadId: $threadId) {{ {THREAD_COMMENT_FIELDS} }}
  }}
}}
"""

CREATE_THREAD = f"""
mutation ($title: String, $body: String, $categories: [Int]) {{
  SaveThread(title: $title, body: $body, categories: $categories) {{ {THREAD_FIELDS} }}
}}
"""

COMMENT_ON_THREAD = f"""
mutation ($threadId: Int, $comment: String) {{
  SaveThreadComment(threadId: $threadId, comment: $comment) {{ {THREAD_COMMENT_FIELDS} }}
}}
"""

TOGGLE_THREAD_LIKE = """
mutation ($id: Int, $type: LikeableType) {
  ToggleLikeV2(id: $id, type: $type) {
    ... on Thread { id title likeCount isLiked siteUrl }
  }
}
"""

LIKE_THREAD_COMMENT = """
mutation ($id: Int, $type: LikeableType) {
  ToggleLikeV2(id: $id, type: $type) {
    ... on ThreadComment { id threadId likeCount isLiked siteUrl }
  }
}
"""
