from typing import Any, Dict, List, Optional, Union

from anilist_client import queries
from anilist_client.exceptions import AniListDecodeError
from anilist_client.models import Recommendation, RecommendationRating

from .base import BaseEndpoint, page_variables

_PAGE_RECOMMENDATIONS = ("Page", "recommendations")


def _rating_name(rating: Union[RecommendationRating, int]) -> str:
    """Map 1 / -1 / anything else to RATE_UP / RATE_DOWN / NO_RATING."""
    if isinstance(rating, RecommendationRating):
        return rating.value
    if rating == 1:
        return RecommendationRating.RATE_UP.value
    if rating == -1:
        return RecommendationRating.RATE_DOWN.value
    return RecommendationRating.NO_RATING.value


class RecommendationEndpoint(BaseEndpoint):
    async def get_recent_recommendations(
        self, page: int, per_page: int
    ) -> List[Recommendation]:
        return await self._fetch_list(
            Recommendation,
            queries.recommendation.GET_RECENT_RECOMMENDATIONS,
            page_variables(page, per_page),
            _PAGE_RECOMMENDATIONS,
        )

    async def get_recommendations_for_media(
        self, media_id: int, page: int, per_page: int
    ) -> List[Recommendation]:
        return await self._fetch_list(
            Recommendation,
            queries.recommendation.GET_RECOMMENDATIONS_FOR_MEDIA,
            page_variables(page, per_page, mediaId=media_id),
            _PAGE_RECOMMENDATIONS,
        )

    async def get_top_rated_recommendations(
        self, page: int, per_page: int
    ) -> List[Recommendation]:
        return await self._fetch_list(
            Recommendation,
            queries.recommendation.GET_TOP_RATED_RECOMMENDATIONS,
            page_variables(page, per_page),
            _PAGE_RECOMMENDATIONS,
        )

    async def get_recommendation_by_id(self, id: int) -> Recommendation:
        return await self._fetch_one(
            Recommendation,
            queries.recommendation.GET_RECOMMENDATION_BY_ID,
            {"id": id},
            ("Recommendation",),
        )

    async def save_recommendation(
        self,
        media_id: int,
        media_recommendation_id: int,
        rating: Optional[Union[RecommendationRating, int]] = None,
    ) -> Recommendation:
        """
        Recommend ``media_recommendation_id`` to fans of ``media_id``. Requires a token.

        Parameters:
            media_id (int): Media the recommendation is attached to.
            media_recommendation_id (int): Media being recommended.
            rating (Optional[Union[RecommendationRating, int]]): Viewer's vote;
                1 rates up, -1 rates down, any other int clears the vote.
        """
        variables: Dict[str, Any] = {
            "mediaId": media_id,
            "mediaRecommendationId": media_recommendation_id,
        }
        if rating is not None:
            variables["rating"] = _rating_name(rating)
        return await self._fetch_one(
            Recommendation,
            queries.recommendation.SAVE_RECOMMENDATION,
            variables,
            ("SaveRecommendation",),
        )

    async def rate_recommendation(
        self, recommendation_id: int, rating: Union[RecommendationRating, int]
    ) -> Recommendation:
        """Vote on an existing recommendation, looked up by id first."""
        existing = await self.get_recommendation_by_id(recommendation_id)
        if existing.media is None or existing.mediaRecommendation is None:
            raise AniListDecodeError(
                f"recommendation {recommendation_id} has no media pair"
            )
        return await self.save_recommendation(
            existing.media.id, existing.mediaRecommendation.id, rating
        )
