"""
Pokedex — Search Session (caller-owned state)

Holds the only memory the application keeps: the single current result slot
and the last listing page, both replaced on the next query. Also owns the
cache mapping handed to PokeApiClient.fetch_entity, which the adapter accepts
but never consults.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

import structlog

from src.pokeapi.client import DEFAULT_LIMIT, DEFAULT_OFFSET, PokeApiClient
from src.pokeapi.errors import PokeApiFailure
from src.pokeapi.normalizer import DisplayRecord, ListingPage

logger = structlog.get_logger(__name__)


class PokedexSession:
    """
    Single-slot search state for one user.

    Usage:
        async with PokeApiClient() as client:
            session = PokedexSession(client)
            await session.search("pikachu")
            print(session.current)
    """

    def __init__(
        self,
        client: PokeApiClient,
        cache: MutableMapping[str, Any] | None = None,
    ) -> None:
        self._client = client
        self.cache: MutableMapping[str, Any] = cache if cache is not None else {}
        self.query: str | None = None
        self.current: DisplayRecord | None = None
        self.error: PokeApiFailure | None = None
        self.listing: ListingPage | None = None

    async def search(self, query: str) -> DisplayRecord | PokeApiFailure:
        """
        Look up `query` and replace the current slot with the outcome.

        Surrounding whitespace is stripped, as an input field would; nothing
        else about the query is checked locally.
        """
        self.query = query.strip()
        result = await self._client.fetch_entity(self.query, cache=self.cache)

        if isinstance(result, PokeApiFailure):
            self.current, self.error = None, result
            logger.info(
                "pokedex_session_search_failed",
                query=self.query,
                failure=type(result).__name__,
            )
        else:
            self.current, self.error = result, None
            logger.info("pokedex_session_search", query=self.query, pokemon_id=result.id)
        return result

    async def browse(
        self,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
    ) -> ListingPage | PokeApiFailure:
        """Fetch one listing page into the listing slot (cleared on failure)."""
        result = await self._client.fetch_listing(offset=offset, limit=limit)
        if isinstance(result, PokeApiFailure):
            self.listing = None
        else:
            self.listing = result
        logger.info(
            "pokedex_session_browse",
            offset=offset,
            limit=limit,
            ok=self.listing is not None,
        )
        return result
