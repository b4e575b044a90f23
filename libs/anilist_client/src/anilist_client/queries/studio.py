from .fields import STUDIO_FIELDS


def _page(arguments: str, params: str = "") -> str:
    return f"""
    query ($page: Int, $perPage: Int{params}) {{
      Page(page: $page, perPage: $perPage) {{
        studios({arguments}) {{ {STUDIO_FIELDS} }}
      }}
    }}
    """


GET_POPULAR = _page("sort: [FAVOURITES_DESC, NAME]")
GET_MOST_FAVORITED = _page("sort: FAVOURITES_DESC")
SEARCH = _page("search: $search", ", $search: String")

GET_BY_ID = f"""
query ($id: Int) {{
  Studio(id: $id) {{ {STUDIO_FIELDS} }}
}}
"""

TOGGLE_FAVORITE = f"""
mutation ($studioId: Int) {{
  ToggleFavourite(studioId: $studioId) {{
    studios {{ nodes {{ {STUDIO_FIELDS} }} }}
  }}
}}
"""
