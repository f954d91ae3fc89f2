"""
Pokedex — PokeAPI Lookup Adapter

Issues single lookups against the PokeAPI v2 catalog and classifies every
failure into the closed taxonomy in src/pokeapi/errors.py:

- fetch_entity  → GET /pokemon/{id-or-name} → DisplayRecord
- fetch_listing → GET /pokemon/?offset=&limit= → ListingPage (passthrough)

One request per call: no retries, no caching, no timeout beyond the httpx
default. Failures are returned, never raised.

Base URL: https://pokeapi.co/api/v2/
"""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any
from urllib.parse import quote

import httpx
import structlog

from src.config import settings
from src.pokeapi.errors import (
    PokeApiFailure,
    ServerResponseFailure,
    ShapeMismatch,
    TransportFailure,
    Unclassified,
)
from src.pokeapi.normalizer import DisplayRecord, ListingPage, normalize

logger = structlog.get_logger(__name__)

# ---------------------------------------------------------------------------
# API Configuration
# ---------------------------------------------------------------------------
DEFAULT_OFFSET = 0
DEFAULT_LIMIT = 20


def _path_segment(query: str) -> str:
    """Quote a query as exactly one path segment."""
    segment = quote(query, safe="")
    # "." and ".." would otherwise be resolved away as dot segments.
    if segment in (".", ".."):
        segment = segment.replace(".", "%2E")
    return segment


# ---------------------------------------------------------------------------
# API Client
# ---------------------------------------------------------------------------


class PokeApiClient:
    """
    Async adapter for the PokeAPI v2 catalog.

    Usage:
        async with PokeApiClient() as client:
            record = await client.fetch_entity("pikachu")
            page = await client.fetch_listing(offset=20, limit=20)
    """

    def __init__(
        self,
        base_url: str | None = None,
        user_agent: str | None = None,
    ) -> None:
        self._base_url = base_url or settings.POKEAPI_BASE_URL
        self._user_agent = user_agent or settings.POKEAPI_USER_AGENT
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> PokeApiClient:
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers={
                "Accept": "application/json",
                "User-Agent": self._user_agent,
            },
            follow_redirects=True,
        )
        return self

    async def __aexit__(self, *args: Any) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """
        Make one GET request and decode the JSON body.

        Returns the decoded body, or the PokeApiFailure that classifies why
        there is none.
        """
        assert self._client is not None, "Client not initialized. Use 'async with'."

        try:
            response = await self._client.get(path, params=params)
            response.raise_for_status()

        except httpx.HTTPStatusError as e:
            logger.error(
                "pokeapi_http_error",
                status_code=e.response.status_code,
                path=path,
            )
            return ServerResponseFailure(status_code=e.response.status_code)

        except httpx.TransportError as e:
            logger.error(
                "pokeapi_request_error",
                error=str(e),
                error_type=type(e).__name__,
                path=path,
            )
            return TransportFailure()

        except Exception as e:
            logger.error(
                "pokeapi_unclassified_error",
                error=str(e),
                error_type=type(e).__name__,
                path=path,
            )
            return Unclassified()

        try:
            return response.json()
        except ValueError as e:
            logger.warning(
                "pokeapi_undecodable_body",
                error=str(e),
                path=path,
                body=response.text[:100],
            )
            return ShapeMismatch()

    # -----------------------------------------------------------------------
    # Public API
    # -----------------------------------------------------------------------

    async def fetch_entity(
        self,
        query: str,
        cache: MutableMapping[str, Any] | None = None,
    ) -> DisplayRecord | PokeApiFailure:
        """
        Look up a single creature by catalog id or name.

        Args:
            query: Catalog id as text (e.g., "25") or name (e.g., "pikachu").
                Sent verbatim as one path segment; the catalog decides validity.
            cache: Caller-owned cache handed through by the UI layer. Accepted
                for call-site compatibility and never read or written here.

        Returns:
            DisplayRecord, or the PokeApiFailure describing what went wrong.
        """
        logger.info("pokeapi_fetch_entity", query=query)

        data = await self._get(f"/pokemon/{_path_segment(query)}")
        if isinstance(data, PokeApiFailure):
            return data

        result = normalize(data)
        if isinstance(result, ShapeMismatch):
            logger.warning("pokeapi_shape_mismatch", query=query)
            return result

        logger.info(
            "pokeapi_fetch_entity_complete",
            query=query,
            pokemon_id=result.id,
            pokemon_name=result.name,
            types=list(result.types),
        )
        return result

    async def fetch_listing(
        self,
        offset: int = DEFAULT_OFFSET,
        limit: int = DEFAULT_LIMIT,
    ) -> ListingPage | PokeApiFailure:
        """
        Fetch one page of the catalog's creature index.

        Args:
            offset: Index of the first entry; forwarded without bounds checks.
            limit: Page size; forwarded without bounds checks.

        Returns:
            The decoded listing payload unchanged, or a PokeApiFailure.
        """
        logger.info("pokeapi_fetch_listing", offset=offset, limit=limit)

        data = await self._get("/pokemon/", params={"offset": offset, "limit": limit})
        if isinstance(data, PokeApiFailure):
            return data

        # Passthrough: listing entries are not normalized.
        logger.info(
            "pokeapi_fetch_listing_complete",
            offset=offset,
            limit=limit,
            total=data.get("count") if isinstance(data, dict) else None,
        )
        return data
