#!/usr/bin/env python3
"""
Fetch AniList data from the command line.

Reads ANILIST_TOKEN and the retry settings from the environment.
"""

import argparse
import asyncio
import json
import logging
import sys

from anilist_client.client import AniListClient
from anilist_client.config import get_settings
from anilist_client.exceptions import AniListAPIError
from anilist_client.retry import retry_with_backoff

logger = logging.getLogger(__name__)


async def main() -> int:
    parser = argparse.ArgumentParser(description="Fetch anime data from AniList")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--anime-id", type=int, help="AniList ID to fetch")
    group.add_argument("--search", type=str, help="Title to search for")
    parser.add_argument("--per-page", type=int, default=5, help="Search results per page")
    parser.add_argument(
        "--output",
        type=str,
        default="anilist_output.json",
        help="Output file path",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    settings = get_settings()
    policy = settings.retry_policy()

    async with AniListClient.from_settings(settings) as client:
        try:
            if args.anime_id is not None:
                anime = await retry_with_backoff(
                    lambda: client.anime().get_by_id(args.anime_id), policy
                )
                result = anime.model_dump(mode="json")
            else:
                results = await retry_with_backoff(
                    lambda: client.anime().search(args.search, 1, args.per_page),
                    policy,
                )
                result = [anime.model_dump(mode="json") for anime in results]
        except AniListAPIError as e:
            logger.error(f"AniList request failed: {e}")
            return 1

    with open(args.output, "w", encoding="utf-8") as f:
        json.dump(result, f, indent=2, ensure_ascii=False)
    logger.info(f"Data saved to {args.output}")
    if client.rate_limit.remaining is not None:
        logger.info(f"Rate limit remaining: {client.rate_limit.remaining}")
    return 0


def run() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
