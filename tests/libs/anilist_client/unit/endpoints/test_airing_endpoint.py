"""Unit tests for AiringEndpoint."""

from unittest.mock import patch

import pytest

from anilist_client import queries

NOW = 1_700_050_000
START_OF_DAY = 1_700_006_400  # NOW rounded down to a multiple of 86400

SCHEDULE = {
    "id": 1,
    "airingAt": NOW + 3600,
    "episode": 5,
    "mediaId": 154587,
    "timeUntilAiring": 3600,
    "media": {"id": 154587, "title": {"romaji": "Sousou no Frieren"}},
}


@pytest.fixture(autouse=True)
def frozen_now():
    with patch("anilist_client.endpoints.airing._now", return_value=NOW):
        yield


class TestAiringEndpoint:
    @pytest.mark.asyncio
    async def test_get_upcoming_episodes(self, stub_client, mock_query):
        mock_query.return_value = {"Page": {"airingSchedules": [SCHEDULE]}}

        result = await stub_client.airing().get_upcoming_episodes(1, 10)

        mock_query.assert_awaited_once_with(
            queries.airing.GET_UPCOMING_EPISODES,
            {"page": 1, "perPage": 10, "airingAtGreater": NOW, "sort": ["TIME"]},
        )
        assert result[0].episode == 5
        assert result[0].media.title.romaji == "Sousou no Frieren"

    @pytest.mark.asyncio
    async def test_get_today_episodes_uses_utc_day_bounds(self, stub_client, mock_query):
        mock_query.return_value = {"Page": {"airingSchedules": []}}

        await stub_client.airing().get_today_episodes(1, 10)

        variables = mock_query.call_args.args[1]
        assert variables["airingAtGreater"] == START_OF_DAY
        assert variables["airingAtLesser"] == START_OF_DAY + 86400

    @pytest.mark.asyncio
    async def test_get_recently_aired_sorts_descending(self, stub_client, mock_query):
        mock_query.return_value = {"Page": {"airingSchedules": []}}

        await stub_client.airing().get_recently_aired(2, 5)

        assert mock_query.call_args.args[1] == {
            "page": 2,
            "perPage": 5,
            "airingAtLesser": NOW,
            "sort": ["TIME_DESC"],
        }

    @pytest.mark.asyncio
    async def test_get_episodes_in_range(self, stub_client, mock_query):
        mock_query.return_value = {"Page": {"airingSchedules": []}}

        await stub_client.airing().get_episodes_in_range(100, 200, 1, 50)

        variables = mock_query.call_args.args[1]
        assert (variables["airingAtGreater"], variables["airingAtLesser"]) == (100, 200)

    @pytest.mark.asyncio
    async def test_get_schedule_by_id(self, stub_client, mock_query):
        mock_query.return_value = {"AiringSchedule": SCHEDULE}

        schedule = await stub_client.airing().get_schedule_by_id(1)

        mock_query.assert_awaited_once_with(queries.airing.GET_SCHEDULE_BY_ID, {"id": 1})
        assert schedule.mediaId == 154587

    @pytest.mark.asyncio
    async def test_get_next_episode(self, stub_client, mock_query):
        mock_query.return_value = {"Page": {"airingSchedules": [SCHEDULE]}}

        schedule = await stub_client.airing().get_next_episode(154587)

        mock_query.assert_awaited_once_with(
            queries.airing.GET_NEXT_EPISODE,
            {"mediaId": 154587, "airingAtGreater": NOW},
        )
        assert schedule.episode == 5

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {"Page": {"airingSchedules": []}},
            {"Page": {"airingSchedules": None}},
            {"Page": None},
        ],
    )
    async def test_get_next_episode_none_scheduled(self, stub_client, mock_query, payload):
        mock_query.return_value = payload

        assert await stub_client.airing().get_next_episode(1) is None
