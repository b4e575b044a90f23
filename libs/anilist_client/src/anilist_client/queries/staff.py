from .fields import STAFF_FIELDS


def _page(arguments: str, params: str = "") -> str:
    return f"""
    query ($page: Int, $perPage: Int{params}) {{
      Page(page: $page, perPage: $perPage) {{
        staff({arguments}) {{ {STAFF_FIELDS} }}
      }}
    }}
    """


GET_POPULAR = _page("sort: [FAVOURITES_DESC, RELEVANCE]")
GET_MOST_FAVORITED = _page("sort: FAVOURITES_DESC")
GET_TODAY_BIRTHDAY = _page("isBirthday: true, sort: FAVOURITES_DESC")
SEARCH = _page("search: $search", ", $search: String")

GET_BY_ID = f"""
query ($id: Int) {{
  Staff(id: $id) {{ {STAFF_FIELDS} }}
}}
"""
