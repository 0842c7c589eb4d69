"""Command-line entrypoint wiring the live transport to the controller."""

from __future__ import annotations

import argparse
import asyncio
from typing import Sequence

import httpx

from itunes_search.config import SearchSettings, get_settings
from itunes_search.domain.models import ResultType
from itunes_search.logging import configure_logging, logger
from itunes_search.services.search import SearchResultController
from itunes_search.services.transport import HttpxTransport, Transport

RESULT_TYPE_CHOICES = {result_type.name.lower(): result_type for result_type in ResultType}


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Search the iTunes catalog")
    parser.add_argument("term", help="Keyword(s) to search for")
    parser.add_argument(
        "--type",
        dest="result_type",
        choices=sorted(RESULT_TYPE_CHOICES),
        default=None,
        help="Catalog entity kind (default: from settings)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: from settings)",
    )
    return parser.parse_args(argv)


async def run(
    term: str,
    result_type: ResultType,
    *,
    settings: SearchSettings,
    transport: Transport | None = None,
) -> int:
    controller = SearchResultController(settings=settings)
    if transport is not None:
        outcome = await controller.perform_search(term, result_type, transport)
    else:
        async with httpx.AsyncClient() as client:
            outcome = await controller.perform_search(term, result_type, HttpxTransport(client))

    if not outcome.ok:
        print(f"Search failed ({outcome.error.kind}): {outcome.error}")
        return 1

    for result in outcome.results:
        print(f"{result.title} - {result.creator}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    configure_logging(args.log_level or settings.log_level)

    result_type = (
        RESULT_TYPE_CHOICES[args.result_type] if args.result_type else settings.default_result_type
    )
    logger.info("itunes_search_starting", environment=settings.environment, term=args.term)
    return asyncio.run(run(args.term, result_type, settings=settings))


if __name__ == "__main__":
    raise SystemExit(main())
