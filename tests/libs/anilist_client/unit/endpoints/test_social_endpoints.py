"""Unit tests for the forum, activity, review, recommendation and notification endpoints."""

import pytest

from anilist_client import queries
from anilist_client.exceptions import AniListDecodeError
from anilist_client.models import ActivityType, NotificationType, ReviewRating


class TestForumEndpoint:
    @pytest.mark.asyncio
    async def test_get_recent_threads(self, stub_client, mock_query):
        mock_query.return_value = {
            "Page": {
                "threads": [
                    {
                        "id": 1,
                        "title": "Weekly discussion",
                        "categories": [{"id": 7, "name": "Anime"}],
                        "user": {"id": 2, "name": "poster"},
                    }
                ]
            }
        }

        threads = await stub_client.forum().get_recent_threads(1, 10)

        mock_query.assert_awaited_once_with(
            queries.forum.GET_RECENT_THREADS, {"page": 1, "perPage": 10}
        )
        assert threads[0].categories[0].name == "Anime"
        assert threads[0].user.name == "poster"

    @pytest.mark.asyncio
    async def test_get_thread_comments(self, stub_client, mock_query):
        mock_query.return_value = {
            "Page": {"threadComments": [{"id": 9, "threadId": 1, "comment": "hi"}]}
        }

        comments = await stub_client.forum().get_thread_comments(1, 1, 25)

        mock_query.assert_awaited_once_with(
            queries.forum.GET_THREAD_COMMENTS, {"page": 1, "perPage": 25, "threadId": 1}
        )
        assert comments[0].comment == "hi"

    @pytest.mark.asyncio
    async def test_create_thread_omits_categories_when_none(self, stub_client, mock_query):
        mock_query.return_value = {"SaveThread": {"id": 3, "title": "t"}}

        thread = await stub_client.forum().create_thread("t", "body")

        mock_query.assert_awaited_once_with(
            queries.forum.CREATE_THREAD, {"title": "t", "body": "body"}
        )
        assert thread.id == 3

    @pytest.mark.asyncio
    async def test_create_thread_with_categories(self, stub_client, mock_query):
        mock_query.return_value = {"SaveThread": {"id": 3}}

        await stub_client.forum().create_thread("t", "body", [1, 2])

        assert mock_query.call_args.args[1]["categories"] == [1, 2]

    @pytest.mark.asyncio
    async def test_post_comment(self, stub_client, mock_query):
        mock_query.return_value = {"SaveThreadComment": {"id": 4, "comment": "nice"}}

        comment = await stub_client.forum().post_comment(1, "nice")

        mock_query.assert_awaited_once_with(
            queries.forum.COMMENT_ON_THREAD, {"threadId": 1, "comment": "nice"}
        )
        assert comment.id == 4

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method, likeable_type",
        [("toggle_thread_like", "THREAD"), ("toggle_comment_like", "THREAD_COMMENT")],
    )
    async def test_toggle_likes_send_likeable_type(
        self, stub_client, mock_query, method, likeable_type
    ):
        mock_query.return_value = {"ToggleLikeV2": {"id": 5, "isLiked": True}}

        result = await getattr(stub_client.forum(), method)(5)

        assert mock_query.call_args.args[1] == {"id": 5, "type": likeable_type}
        assert result.isLiked is True


class TestActivityEndpoint:
    @pytest.mark.asyncio
    async def test_get_user_activities(self, stub_client, mock_query):
        mock_query.return_value = {
            "Page": {
                "activities": [
                    {"id": 1, "type": "TEXT", "text": "hello", "likeCount": 3},
                    {
                        "id": 2,
                        "type": "ANIME_LIST",
                        "status": "watched episode",
                        "progress": "5",
                        "media": {"id": 21, "type": "ANIME"},
                    },
                ]
            }
        }

        activities = await stub_client.activity().get_user_activities(42, 1, 20)

        mock_query.assert_awaited_once_with(
            queries.activity.GET_USER_ACTIVITIES, {"page": 1, "perPage": 20, "userId": 42}
        )
        assert activities[0].type == ActivityType.TEXT
        assert activities[1].media.id == 21

    @pytest.mark.asyncio
    async def test_get_activity_by_id(self, stub_client, mock_query):
        mock_query.return_value = {"Activity": {"id": 8, "type": "MESSAGE", "message": "yo"}}

        activity = await stub_client.activity().get_activity_by_id(8)

        mock_query.assert_awaited_once_with(queries.activity.GET_ACTIVITY_BY_ID, {"id": 8})
        assert activity.message == "yo"

    @pytest.mark.asyncio
    async def test_get_activity_replies(self, stub_client, mock_query):
        mock_query.return_value = {"Page": {"activityReplies": [{"id": 1, "activityId": 8}]}}

        replies = await stub_client.activity().get_activity_replies(8, 1, 5)

        assert mock_query.call_args.args[1] == {"page": 1, "perPage": 5, "activityId": 8}
        assert replies[0].activityId == 8

    @pytest.mark.asyncio
    async def test_create_text_activity(self, stub_client, mock_query):
        mock_query.return_value = {"SaveTextActivity": {"id": 9, "text": "status"}}

        activity = await stub_client.activity().create_text_activity("status")

        mock_query.assert_awaited_once_with(
            queries.activity.CREATE_TEXT_ACTIVITY, {"text": "status"}
        )
        assert activity.text == "status"

    @pytest.mark.asyncio
    async def test_post_activity_reply(self, stub_client, mock_query):
        mock_query.return_value = {"SaveActivityReply": {"id": 10, "text": "agreed"}}

        await stub_client.activity().post_activity_reply(9, "agreed")

        assert mock_query.call_args.args[1] == {"activityId": 9, "text": "agreed"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method, likeable_type",
        [
            ("toggle_activity_like", "ACTIVITY"),
            ("toggle_activity_reply_like", "ACTIVITY_REPLY"),
        ],
    )
    async def test_toggle_likes_send_likeable_type(
        self, stub_client, mock_query, method, likeable_type
    ):
        mock_query.return_value = {"ToggleLikeV2": {"id": 5, "likeCount": 1}}

        result = await getattr(stub_client.activity(), method)(5)

        assert mock_query.call_args.args[1] == {"id": 5, "type": likeable_type}
        assert result.likeCount == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload, expected",
        [
            ({"DeleteActivity": {"deleted": True}}, True),
            ({"DeleteActivity": {"deleted": False}}, False),
            ({"DeleteActivity": None}, False),
        ],
    )
    async def test_delete_activity(self, stub_client, mock_query, payload, expected):
        mock_query.return_value = payload

        assert await stub_client.activity().delete_activity(9) is expected
        mock_query.assert_awaited_once_with(queries.activity.DELETE_ACTIVITY, {"id": 9})


class TestReviewEndpoint:
    @pytest.mark.asyncio
    async def test_get_reviews_for_media(self, stub_client, mock_query):
        mock_query.return_value = {
            "Page": {
                "reviews": [
                    {
                        "id": 1,
                        "mediaId": 21,
                        "mediaType": "ANIME",
                        "score": 90,
                        "userRating": "UP_VOTE",
                    }
                ]
            }
        }

        reviews = await stub_client.review().get_reviews_for_media(21, 1, 10)

        mock_query.assert_awaited_once_with(
            queries.review.GET_REVIEWS_FOR_MEDIA, {"page": 1, "perPage": 10, "mediaId": 21}
        )
        assert reviews[0].userRating == ReviewRating.UP_VOTE

    @pytest.mark.asyncio
    async def test_save_review_sends_only_given_fields(self, stub_client, mock_query):
        mock_query.return_value = {"SaveReview": {"id": 2}}

        await stub_client.review().save_review(21, "long body", score=80)

        mock_query.assert_awaited_once_with(
            queries.review.SAVE_REVIEW, {"mediaId": 21, "body": "long body", "score": 80}
        )

    @pytest.mark.asyncio
    async def test_rate_review_normalises_rating(self, stub_client, mock_query):
        mock_query.return_value = {"RateReview": {"id": 2, "rating": 10}}

        review = await stub_client.review().rate_review(2, "up_vote")

        mock_query.assert_awaited_once_with(
            queries.review.RATE_REVIEW, {"reviewId": 2, "rating": "UP_VOTE"}
        )
        assert review.rating == 10

    @pytest.mark.asyncio
    async def test_delete_review(self, stub_client, mock_query):
        mock_query.return_value = {"DeleteReview": {"deleted": True}}

        assert await stub_client.review().delete_review(2) is True


class TestRecommendationEndpoint:
    @pytest.mark.asyncio
    async def test_get_recommendations_for_media(self, stub_client, mock_query):
        mock_query.return_value = {
            "Page": {
                "recommendations": [
                    {"id": 1, "rating": 12, "mediaRecommendation": {"id": 30, "format": "TV"}}
                ]
            }
        }

        result = await stub_client.recommendation().get_recommendations_for_media(21, 1, 5)

        mock_query.assert_awaited_once_with(
            queries.recommendation.GET_RECOMMENDATIONS_FOR_MEDIA,
            {"page": 1, "perPage": 5, "mediaId": 21},
        )
        assert result[0].mediaRecommendation.id == 30

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "rating, expected", [(1, "RATE_UP"), (-1, "RATE_DOWN"), (0, "NO_RATING")]
    )
    async def test_save_recommendation_maps_rating(
        self, stub_client, mock_query, rating, expected
    ):
        mock_query.return_value = {"SaveRecommendation": {"id": 1}}

        await stub_client.recommendation().save_recommendation(21, 30, rating)

        assert mock_query.call_args.args[1] == {
            "mediaId": 21,
            "mediaRecommendationId": 30,
            "rating": expected,
        }

    @pytest.mark.asyncio
    async def test_save_recommendation_without_rating(self, stub_client, mock_query):
        mock_query.return_value = {"SaveRecommendation": {"id": 1}}

        await stub_client.recommendation().save_recommendation(21, 30)

        assert "rating" not in mock_query.call_args.args[1]

    @pytest.mark.asyncio
    async def test_rate_recommendation_resolves_media_pair(self, stub_client, mock_query):
        mock_query.side_effect = [
            {"Recommendation": {"id": 5, "media": {"id": 21}, "mediaRecommendation": {"id": 30}}},
            {"SaveRecommendation": {"id": 5, "userRating": "RATE_DOWN"}},
        ]

        result = await stub_client.recommendation().rate_recommendation(5, -1)

        first, second = mock_query.call_args_list
        assert first.args == (queries.recommendation.GET_RECOMMENDATION_BY_ID, {"id": 5})
        assert second.args == (
            queries.recommendation.SAVE_RECOMMENDATION,
            {"mediaId": 21, "mediaRecommendationId": 30, "rating": "RATE_DOWN"},
        )
        assert result.id == 5

    @pytest.mark.asyncio
    async def test_rate_recommendation_without_media_pair(self, stub_client, mock_query):
        mock_query.return_value = {"Recommendation": {"id": 5, "media": None}}

        with pytest.raises(AniListDecodeError):
            await stub_client.recommendation().rate_recommendation(5, 1)

        assert mock_query.await_count == 1


class TestNotificationEndpoint:
    @pytest.mark.asyncio
    async def test_get_notifications(self, stub_client, mock_query):
        mock_query.return_value = {
            "Page": {
                "notifications": [
                    {
                        "id": 1,
                        "type": "AIRING",
                        "episode": 5,
                        "contexts": ["Episode ", " of ", " aired."],
                        "media": {"id": 21},
                    },
                    {"id": 2, "type": "FOLLOWING", "user": {"id": 3, "name": "fan"}},
                ]
            }
        }

        notifications = await stub_client.notification().get_notifications(1, 10)

        mock_query.assert_awaited_once_with(
            queries.notification.GET_NOTIFICATIONS, {"page": 1, "perPage": 10}
        )
        assert notifications[0].type == NotificationType.AIRING
        assert notifications[1].user.name == "fan"

    @pytest.mark.asyncio
    async def test_get_notifications_by_type_sends_list(self, stub_client, mock_query):
        mock_query.return_value = {"Page": {"notifications": []}}

        await stub_client.notification().get_notifications_by_type("airing", 1, 10)

        assert mock_query.call_args.args[1] == {
            "page": 1,
            "perPage": 10,
            "type": ["AIRING"],
        }

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload, expected",
        [
            ({"Viewer": {"id": 1, "unreadNotificationCount": 4}}, 4),
            ({"Viewer": {"id": 1, "unreadNotificationCount": None}}, 0),
            ({"Viewer": None}, 0),
        ],
    )
    async def test_get_unread_count(self, stub_client, mock_query, payload, expected):
        mock_query.return_value = payload

        assert await stub_client.notification().get_unread_count() == expected
        mock_query.assert_awaited_once_with(queries.notification.GET_UNREAD_COUNT, None)

    @pytest.mark.asyncio
    async def test_mark_notifications_as_read(self, stub_client, mock_query):
        mock_query.return_value = {"Page": {"notifications": []}}

        assert await stub_client.notification().mark_notifications_as_read() is True
        mock_query.assert_awaited_once_with(
            queries.notification.MARK_NOTIFICATIONS_AS_READ, None
        )
