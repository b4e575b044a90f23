from .fields import RECOMMENDATION_FIELDS


def _page(arguments: str, params: str = "") -> str:
    return f"""
    query ($page: Int, $perPage: Int{params}) {{
      Page(page: $page, perPage: $perPage) {{
        recommendations({arguments}) {{ {RECOMMENDATION_FIELDS} }}
      }}
    }}
    """


GET_RECENT_RECOMMENDATIONS = _page("sort: ID_DESC")
GET_TOP_RATED_RECOMMENDATIONS = _page("sort: RATING_DESC")
GET_RECOMMENDATIONS_FOR_MEDIA = _page(
    "mediaId: $mediaId, sort: RATING_DESC", ", $mediaId: Int"
)

GET_RECOMMENDATION_BY_ID = f"""
query ($id: Int) {{
  Recommendation(id: $id) {{ {RECOMMENDATION_FIELDS} }}
}}
"""

# AniList identifies a recommendation by its media pair when saving or rating.
SAVE_RECOMMENDATION = f"""
mutation ($mediaId: Int, $mediaRecommendationId: Int, $rating: RecommendationRating) {{
  SaveRecommendation(
    mediaId: $mediaId
    mediaRecommendationId: $mediaRecommendationId
    rating: $rating
  ) {{ {RECOMMENDATION_FIELDS} }}
}}
"""
