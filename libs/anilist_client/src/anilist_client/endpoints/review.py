from typing import Any, Dict, List, Optional, Union

from anilist_client import queries
from anilist_client.models import Review, ReviewRating

from .base import BaseEndpoint, page_variables

_PAGE_REVIEWS = ("Page", "reviews")


class ReviewEndpoint(BaseEndpoint):
    async def get_recent_reviews(self, page: int, per_page: int) -> List[Review]:
        return await self._fetch_list(
            Review,
            queries.review.GET_RECENT_REVIEWS,
            page_variables(page, per_page),
            _PAGE_REVIEWS,
        )

    async def get_reviews_for_media(
        self, media_id: int, page: int, per_page: int
    ) -> List[Review]:
        return await self._fetch_list(
            Review,
            queries.review.GET_REVIEWS_FOR_MEDIA,
            page_variables(page, per_page, mediaId=media_id),
            _PAGE_REVIEWS,
        )

    async def get_reviews_by_user(
        self, user_id: int, page: int, per_page: int
    ) -> List[Review]:
        return await self._fetch_list(
            Review,
            queries.review.GET_REVIEWS_BY_USER,
            page_variables(page, per_page, userId=user_id),
            _PAGE_REVIEWS,
        )

    async def get_review_by_id(self, id: int) -> Review:
        return await self._fetch_one(
            Review, queries.review.GET_REVIEW_BY_ID, {"id": id}, ("Review",)
        )

    async def get_top_rated_reviews(self, page: int, per_page: int) -> List[Review]:
        return await self._fetch_list(
            Review,
            queries.review.GET_TOP_RATED_REVIEWS,
            page_variables(page, per_page),
            _PAGE_REVIEWS,
        )

    async def save_review(
        self,
        media_id: int,
        body: str,
        summary: Optional[str] = None,
        score: Optional[int] = None,
        private: Optional[bool] = None,
    ) -> Review:
        """Create or update the viewer's review of a media. Requires a token."""
        variables: Dict[str, Any] = {"mediaId": media_id, "body": body}
        if summary is not None:
            variables["summary"] = summary
        if score is not None:
            variables["score"] = score
        if private is not None:
            variables["private"] = private
        return await self._fetch_one(
            Review, queries.review.SAVE_REVIEW, variables, ("SaveReview",)
        )

    async def rate_review(
        self, review_id: int, rating: Union[ReviewRating, str]
    ) -> Review:
        rating_name = ReviewRating(rating.upper() if isinstance(rating, str) else rating)
        return await self._fetch_one(
            Review,
            queries.review.RATE_REVIEW,
            {"reviewId": review_id, "rating": rating_name.value},
            ("RateReview",),
        )

    async def delete_review(self, id: int) -> bool:
        deleted = await self._fetch(
            queries.review.DELETE_REVIEW, {"id": id}, ("DeleteReview", "deleted")
        )
        return deleted is True
