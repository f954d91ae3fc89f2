"""Pokedex — PokeAPI adapter: lookups, normalization and failure taxonomy."""

from src.pokeapi.client import DEFAULT_LIMIT, DEFAULT_OFFSET, PokeApiClient
from src.pokeapi.errors import (
    Failure,
    PokeApiFailure,
    ServerResponseFailure,
    ShapeMismatch,
    TransportFailure,
    Unclassified,
)
from src.pokeapi.normalizer import DisplayRecord, ListingPage, ListingSummary, normalize

__all__ = [
    "DEFAULT_LIMIT",
    "DEFAULT_OFFSET",
    "DisplayRecord",
    "Failure",
    "ListingPage",
    "ListingSummary",
    "PokeApiClient",
    "PokeApiFailure",
    "ServerResponseFailure",
    "ShapeMismatch",
    "TransportFailure",
    "Unclassified",
    "normalize",
]
