"""
Pokedex — Application Entrypoint

Configures structlog and runs the terminal Pokedex: one-shot search and
listing commands, or an interactive search prompt.

Run via:
    python -m src.main search pikachu
    python -m src.main list --offset 20 --limit 20
    python -m src.main                     # interactive
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Callable, Sequence

import structlog

from src.config import settings
from src.pokeapi.client import DEFAULT_LIMIT, DEFAULT_OFFSET, PokeApiClient
from src.pokeapi.errors import PokeApiFailure
from src.pokedex.card import render_card, render_failure, render_listing
from src.pokedex.session import PokedexSession

TITLE = "Pokedex"
SEARCH_HEADING = "Search Pokedex"
SEARCH_PROMPT = "Enter name or id: "


# ---------------------------------------------------------------------------
# Structlog Configuration
# ---------------------------------------------------------------------------


def _configure_logging(log_level: str = "WARNING", json_output: bool = True) -> None:
    """
    Set up structured logging on stderr, leaving stdout to the rendered cards.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        json_output: JSON lines when True, console renderer otherwise.
    """
    level = getattr(logging, log_level.upper())

    # Configure stdlib logging first (for httpx and other third-party libraries)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


# ---------------------------------------------------------------------------
# Argument Parsing
# ---------------------------------------------------------------------------


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pokedex",
        description="Search the PokeAPI catalog and show summary cards.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pokedex search pikachu
  pokedex search 25
  pokedex list --offset 20 --limit 20
  pokedex                          (interactive search)
""",
    )
    subparsers = parser.add_subparsers(dest="command")

    search = subparsers.add_parser("search", help="Show the summary card for one creature.")
    search.add_argument("query", help="Catalog id (e.g., 25) or name (e.g., pikachu).")

    listing = subparsers.add_parser("list", help="Show one page of the catalog index.")
    listing.add_argument(
        "--offset",
        type=int,
        default=DEFAULT_OFFSET,
        help=f"Index of the first entry (default: {DEFAULT_OFFSET}).",
    )
    listing.add_argument(
        "--limit",
        type=int,
        default=DEFAULT_LIMIT,
        help=f"Entries per page (default: {DEFAULT_LIMIT}).",
    )
    return parser.parse_args(argv)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


async def search_command(session: PokedexSession, query: str) -> int:
    result = await session.search(query)
    if isinstance(result, PokeApiFailure):
        print(render_failure(result), file=sys.stderr)
        return 1
    print(render_card(result))
    return 0


async def list_command(session: PokedexSession, offset: int, limit: int) -> int:
    result = await session.browse(offset=offset, limit=limit)
    if isinstance(result, PokeApiFailure):
        print(render_failure(result), file=sys.stderr)
        return 1
    print(render_listing(result, offset=offset))
    return 0


async def interactive(
    session: PokedexSession,
    prompt: Callable[[str], str] = input,
) -> int:
    """
    Prompt for queries until a blank line or EOF.

    Each query replaces the session's current result; failures are shown
    and the prompt continues.
    """
    print(TITLE)
    print(SEARCH_HEADING)

    while True:
        try:
            query = await asyncio.to_thread(prompt, SEARCH_PROMPT)
        except EOFError:
            print()
            break
        if not query.strip():
            break
        await search_command(session, query)

    return 0


# ---------------------------------------------------------------------------
# Application Startup
# ---------------------------------------------------------------------------


async def main(argv: Sequence[str] | None = None) -> int:
    """
    Parse arguments and dispatch to a command.

    Returns:
        Process exit status: 0 on success, 1 when the lookup failed.
    """
    args = parse_args(argv)
    logger = structlog.get_logger(__name__)
    logger.info("pokedex_startup", command=args.command or "interactive")

    async with PokeApiClient() as client:
        session = PokedexSession(client)

        if args.command == "search":
            return await search_command(session, args.query)
        if args.command == "list":
            return await list_command(session, args.offset, args.limit)
        return await interactive(session)


def run() -> None:
    """Console-script entry: configure logging, run, exit with the status."""
    _configure_logging(log_level=settings.LOG_LEVEL, json_output=settings.LOG_JSON)
    try:
        status = asyncio.run(main())
    except KeyboardInterrupt:
        status = 130
    sys.exit(status)


# ---------------------------------------------------------------------------
# CLI Entry
# ---------------------------------------------------------------------------


if __name__ == "__main__":
    run()
