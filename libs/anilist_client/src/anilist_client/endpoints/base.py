"""Shared plumbing for the endpoint façades."""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel, TypeAdapter, ValidationError

from anilist_client.exceptions import AniListDecodeError

if TYPE_CHECKING:
    from anilist_client.client import AniListClient

M = TypeVar("M", bound=BaseModel)


def extract(data: Any, path: Sequence[Union[str, int]]) -> Any:
    """Walk ``path`` through nested dicts/lists, returning None if any step is missing."""
    node = data
    for key in path:
        if isinstance(key, int):
            if not isinstance(node, list) or key >= len(node):
                return None
            node = node[key]
        elif isinstance(node, dict):
            node = node.get(key)
        else:
            return None
    return node


def decode(model: Type[M], value: Any) -> M:
    try:
        return model.model_validate(value)
    except ValidationError as e:
        raise AniListDecodeError(str(e)) from e


def decode_list(model: Type[M], value: Any) -> List[M]:
    try:
        return TypeAdapter(List[model]).validate_python(value)  # type: ignore[valid-type]
    except ValidationError as e:
        raise AniListDecodeError(str(e)) from e


def page_variables(page: int, per_page: int, **extra: Any) -> Dict[str, Any]:
    return {"page": page, "perPage": per_page, **extra}


class BaseEndpoint:
    """Holds the client and fetches a named subtree of a query's data."""

    def __init__(self, client: "AniListClient") -> None:
        self.client = client

    async def _fetch(
        self,
        query: str,
        variables: Optional[Dict[str, Any]],
        path: Sequence[Union[str, int]],
    ) -> Any:
        data = await self.client.query(query, variables)
        return extract(data, path)

    async def _fetch_one(
        self,
        model: Type[M],
        query: str,
        variables: Optional[Dict[str, Any]],
        path: Sequence[Union[str, int]],
    ) -> M:
        return decode(model, await self._fetch(query, variables, path))

    async def _fetch_list(
        self,
        model: Type[M],
        query: str,
        variables: Optional[Dict[str, Any]],
        path: Sequence[Union[str, int]],
    ) -> List[M]:
        return decode_list(model, await self._fetch(query, variables, path))
