#!/usr/bin/env python
"""CLI for searching Wikipedia and discovering nearby articles."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, field_validator, model_validator

from wikiexplorer.config import create_from_config, get_default_config_path, load_config
from wikiexplorer.data import Article, Coordinate, LoadStatus, SearchStatus

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    command: Literal["search", "nearby", "history"]
    config: Path
    query: str | None = None
    lat: float | None = None
    lon: float | None = None
    radius: int | None = None
    clear: bool = False

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v

    @model_validator(mode="after")
    def check_command_arguments(self) -> "CLIArgs":
        if self.command == "search" and not (self.query and self.query.strip()):
            raise ValueError("search needs a non-empty query")
        if (self.lat is None) != (self.lon is None):
            raise ValueError("--lat and --lon must be given together")
        return self

    @property
    def center(self) -> Coordinate | None:
        if self.lat is None or self.lon is None:
            return None
        return Coordinate(lat=self.lat, lon=self.lon)


def _print_articles(articles: list[Article]) -> None:
    print(f"\nFound {len(articles)} articles:\n")
    for i, article in enumerate(articles, 1):
        print(f"{i}. {article.title}")
        if article.full_url:
            print(f"   URL: {article.full_url}")
        if article.geo:
            print(f"   Location: {article.geo.lat:.4f}, {article.geo.lon:.4f}")


async def run(args: CLIArgs) -> int:
    """Execute one command with the given configuration.

    Args:
        args: Validated CLI arguments.

    Returns:
        Process exit status.
    """
    config = load_config(args.config)
    client, search, nearby = create_from_config(config)
    logger.debug(f"Config: {args.config}")

    async with client:
        if args.command == "history":
            if args.clear:
                search.clear_recents()
                print("Search history cleared.")
            for i, term in enumerate(search.recent_searches, 1):
                print(f"{i}. {term}")
            return 0

        if args.command == "search":
            search.query = args.query or ""
            search.on_query_changed()
            await search.wait_until_settled()

            mode = search.mode
            if mode.status is SearchStatus.ERROR and mode.error is not None:
                logger.error(mode.error.description)
                if mode.error.recovery_suggestion:
                    logger.error(mode.error.recovery_suggestion)
                return 1
            search.commit_search()
            _print_articles(search.results)
            return 0

        await nearby.fetch_nearby(args.center, radius_meters=args.radius)
        state = nearby.state
        if state.status is LoadStatus.FAILED and state.error is not None:
            logger.error(state.error.description)
            if state.error.recovery_suggestion:
                logger.error(state.error.recovery_suggestion)
            return 1

        if nearby.last_fetched_center:
            center = nearby.last_fetched_center
            logger.info(f"Articles near {center.lat:.4f}, {center.lon:.4f}")
        _print_articles(state.value or [])
        return 0


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Search Wikipedia or find articles nearby.")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=False,
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    search_parser = subparsers.add_parser("search", help="Full-text article search")
    search_parser.add_argument("query", help="Search terms")

    nearby_parser = subparsers.add_parser("nearby", help="Articles around a position")
    nearby_parser.add_argument("--lat", type=float, default=None, help="Latitude of the center")
    nearby_parser.add_argument("--lon", type=float, default=None, help="Longitude of the center")
    nearby_parser.add_argument("--radius", type=int, default=None, help="Radius in meters")

    history_parser = subparsers.add_parser("history", help="Show recent searches")
    history_parser.add_argument(
        "--clear",
        action="store_true",
        default=False,
        help="Forget all recent searches",
    )

    ns = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if ns.verbose else logging.INFO,
        format="%(message)s",
    )

    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(
            command=ns.command,
            config=config_path,
            query=getattr(ns, "query", None),
            lat=getattr(ns, "lat", None),
            lon=getattr(ns, "lon", None),
            radius=getattr(ns, "radius", None),
            clear=getattr(ns, "clear", False),
        )
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        sys.exit(asyncio.run(run(args)))
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
