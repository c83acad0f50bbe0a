"""Command-line entrypoint: run one search call and print the JSON result."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Sequence

import httpx
from pydantic import ValidationError

from brave_search.config import BraveSearchSettings, get_settings
from brave_search.domain.models import SearchKind, SearchOptions
from brave_search.logging import configure_logging
from brave_search.services.exceptions import SearchClientError
from brave_search.services.search import SearchClient


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="brave-search", description=__doc__)
    parser.add_argument("kind", choices=[kind.value for kind in SearchKind])
    parser.add_argument("term")
    parser.add_argument("--language")
    parser.add_argument("--country")
    parser.add_argument("--size", type=int)
    parser.add_argument("--offset", type=int)
    parser.add_argument("--filters", help="Comma-separated result filters (web only).")
    return parser


async def run(
    argv: Sequence[str] | None = None,
    *,
    settings: BraveSearchSettings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> int:
    args = build_parser().parse_args(argv)
    if settings is None:
        try:
            settings = get_settings()
        except ValidationError as exc:
            print(f"error: invalid configuration (set BRAVE_API_KEY): {exc}", file=sys.stderr)
            return 1
    configure_logging(settings.log_level, stream=sys.stderr)

    options = SearchOptions(
        language=args.language,
        country=args.country,
        size=args.size,
        offset=args.offset,
        filters=args.filters,
    )
    async with SearchClient.from_settings(settings, http_client=http_client) as client:
        try:
            result = await client.execute(args.kind, args.term, options)
        except SearchClientError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


def main() -> None:
    sys.exit(asyncio.run(run()))


if __name__ == "__main__":
    main()
