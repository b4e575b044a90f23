"""Unit tests for the command-line entry point."""

import json
from unittest.mock import patch

import pytest

from anilist_client.__main__ import main
from anilist_client.exceptions import AniListNotFound


@pytest.fixture
def run_main(stub_client, monkeypatch):
    async def _run(*argv):
        monkeypatch.setattr("sys.argv", ["anilist_client", *argv])
        with patch(
            "anilist_client.__main__.AniListClient.from_settings",
            return_value=stub_client,
        ):
            return await main()

    return _run


@pytest.mark.asyncio
async def test_fetch_by_id_writes_json(run_main, mock_query, tmp_path):
    output = tmp_path / "anime.json"
    mock_query.return_value = {"Media": {"id": 21, "episodes": 1000}}

    exit_code = await run_main("--anime-id", "21", "--output", str(output))

    assert exit_code == 0
    assert json.loads(output.read_text())["episodes"] == 1000


@pytest.mark.asyncio
async def test_search_writes_list(run_main, mock_query, tmp_path):
    output = tmp_path / "search.json"
    mock_query.return_value = {"Page": {"media": [{"id": 1}, {"id": 2}]}}

    exit_code = await run_main("--search", "one piece", "--output", str(output))

    assert exit_code == 0
    assert [a["id"] for a in json.loads(output.read_text())] == [1, 2]
    assert mock_query.call_args.args[1]["perPage"] == 5


@pytest.mark.asyncio
async def test_api_error_returns_nonzero(run_main, mock_query, tmp_path):
    output = tmp_path / "missing.json"
    mock_query.side_effect = AniListNotFound()

    exit_code = await run_main("--anime-id", "1", "--output", str(output))

    assert exit_code == 1
    assert not output.exists()
