from .fields import REVIEW_FIELDS


def _page(arguments: str, params: str = "") -> str:
    return f"""
    query ($page: Int, $perPage: Int{params}) {{
      Page(page: $page, perPage: $perPage) {{
        reviews({arguments}) {{ {REVIEW_FIELDS} }}
      }}
    }}
    """


GET_RECENT_REVIEWS = _page("sort: CREATED_AT_DESC")
GET_TOP_RATED_REVIEWS = _page("sort: RATING_DESC")
GET_REVIEWS_FOR_MEDIA = _page("mediaId: $mediaId, sort: RATING_DESC", ", $mediaId: Int")
GET_REVIEWS_BY_USER = _page("userId: $userId, sort: CREATED_AT_DESC", ", $userId: Int")

GET_REVIEW_BY_ID = f"""
query ($id: Int) {{
  Review(id: $id) {{ {REVIEW_FIELDS} }}
}}
"""

SAVE_REVIEW = f"""
mutation (
  $mediaId: Int
  $body: String
  $summary: String
  $score: Int
  $private: Boolean
) {{
  SaveReview(
    mediaId: $mediaId
    body: $body
    summary: $summary
    score: $score
    private: $private
  ) {{ {REVIEW_FIELDS} }}
}}
"""

RATE_REVIEW = f"""
mutation ($reviewId: Int, $rating: ReviewRating) {{
  RateReview(reviewId: $reviewId, rating: $rating) {{ {REVIEW_FIELDS} }}
}}
"""

DELETE_REVIEW = """
mutation ($id: Int) {
  DeleteReview(id: $id) { deleted }
}
"""
