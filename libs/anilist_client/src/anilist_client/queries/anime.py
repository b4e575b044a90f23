from .fields import ANIME_FIELDS


def _page(arguments: str, params: str = "") -> str:
    return f"""
    query ($page: Int, $perPage: Int{params}) {{
      Page(page: $page, perPage: $perPage) {{
        media({arguments}) {{ {ANIME_FIELDS} }}
      }}
    }}
    """


GET_POPULAR = _page("type: ANIME, sort: POPULARITY_DESC")
GET_TRENDING = _page("type: ANIME, sort: TRENDING_DESC")
GET_TOP_RATED = _page("type: ANIME, sort: SCORE_DESC")
GET_AIRING = _page("type: ANIME, status: RELEASING, sort: POPULARITY_DESC")
SEARCH = _page("search: $search, type: ANIME", ", $search: String")
GET_BY_SEASON = _page(
    "season: $season, seasonYear: $seasonYear, type: ANIME, sort: POPULARITY_DESC",
    ", $season: MediaSeason, $seasonYear: Int",
)

GET_BY_ID = f"""
query ($id: Int) {{
  Media(id: $id, type: ANIME) {{ {ANIME_FIELDS} }}
}}
"""
