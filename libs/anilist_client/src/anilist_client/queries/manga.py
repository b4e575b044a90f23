from .fields import MANGA_FIELDS


def _page(arguments: str, params: str = "") -> str:
    return f"""
    query ($page: Int, $perPage: Int{params}) {{
      Page(page: $page, perPage: $perPage) {{
        media({arguments}) {{ {MANGA_FIELDS} }}
      }}
    }}
    """


GET_POPULAR = _page("type: MANGA, sort: POPULARITY_DESC")
GET_TRENDING = _page("type: MANGA, sort: TRENDING_DESC")
GET_TOP_RATED = _page("type: MANGA, sort: SCORE_DESC")
GET_RELEASING = _page("type: MANGA, status: RELEASING, sort: POPULARITY_DESC")
GET_COMPLETED = _page("type: MANGA, status: FINISHED, sort: SCORE_DESC")
SEARCH = _page("search: $search, type: MANGA", ", $search: String")

GET_BY_ID = f"""
query ($id: Int) {{
  Media(id: $id, type: MANGA) {{ {MANGA_FIELDS} }}
}}
"""
