"""Shared fixtures for AniList client unit tests."""

import json
from typing import Any, Callable, Dict, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from anilist_client.client import AniListClient


def _cm(response: Any) -> AsyncMock:
    cm = AsyncMock()
    cm.__aenter__ = AsyncMock(return_value=response)
    cm.__aexit__ = AsyncMock(return_value=None)
    return cm


def _make_response(
    status: int = 200,
    body: Any = None,
    headers: Optional[Dict[str, str]] = None,
) -> AsyncMock:
    response = AsyncMock()
    response.status = status
    response.headers = headers or {}
    text = body if isinstance(body, str) else json.dumps(body)
    response.text = AsyncMock(return_value=text)
    return response


@pytest.fixture
def make_response() -> Callable[..., AsyncMock]:
    """Factory for mock aiohttp responses. Non-string bodies are JSON-encoded."""
    return _make_response


@pytest.fixture
def mock_session() -> MagicMock:
    """A session whose ``post`` yields responses queued with ``queue``."""
    session = MagicMock()
    session.close = AsyncMock()

    def queue(*responses: Any) -> None:
        session.post = MagicMock(side_effect=[_cm(r) for r in responses])

    session.queue = queue
    return session


@pytest.fixture
def client(mock_session: MagicMock) -> AniListClient:
    return AniListClient(session=mock_session)


@pytest.fixture
def mock_query() -> AsyncMock:
    """Stand-in for ``AniListClient.query`` used by endpoint tests."""
    return AsyncMock(return_value={})


@pytest.fixture
def stub_client(mock_query: AsyncMock) -> AniListClient:
    client = AniListClient(session=MagicMock())
    client.query = mock_query
    return client
