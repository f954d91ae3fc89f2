"""
Pokedex — Shared pytest Fixtures & Configuration

Provides common fixtures for all test modules:
- Mocked PokeAPI routes (respx)
- Fixture payloads loaded from tests/fixtures/
- Async test support via pytest-asyncio
"""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any, Iterator

import pytest
import respx

from src.config import settings


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

pytest_plugins = ("pytest_asyncio",)

FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ---------------------------------------------------------------------------
# Mock Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def pokeapi_mock() -> Iterator[respx.MockRouter]:
    """
    respx router rooted at the configured PokeAPI base URL.

    All HTTP requests are intercepted and must be explicitly mocked.
    Prevents accidental calls to the live catalog in tests.
    """
    with respx.mock(base_url=settings.POKEAPI_BASE_URL) as mock:
        yield mock


# ---------------------------------------------------------------------------
# Fixture Loaders
# ---------------------------------------------------------------------------


def _load(name: str) -> dict[str, Any]:
    with open(FIXTURES_DIR / name) as f:
        return json.load(f)


@pytest.fixture(scope="session")
def _pikachu_payload() -> dict[str, Any]:
    return _load("pokemon_pikachu.json")


@pytest.fixture
def pikachu_payload(_pikachu_payload: dict[str, Any]) -> dict[str, Any]:
    """Detail payload for /pokemon/pikachu (deep copy, safe to mutate)."""
    return copy.deepcopy(_pikachu_payload)


@pytest.fixture(scope="session")
def pikachu_artwork_url() -> str:
    return (
        "https://raw.githubusercontent.com/PokeAPI/sprites/master/"
        "sprites/pokemon/other/official-artwork/25.png"
    )


@pytest.fixture(scope="session")
def listing_page_payload() -> dict[str, Any]:
    """Listing payload for /pokemon/?offset=20&limit=20 (count 1118)."""
    return _load("pokemon_list_offset_20.json")
