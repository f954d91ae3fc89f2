"""
Pokedex — Summary Card Rendering

Plain-text rendering of lookup results for the terminal:
- render_card     → one DisplayRecord as a summary card
- render_listing  → one ListingPage as a numbered index
- render_failure  → a PokeApiFailure as its display message
"""

from __future__ import annotations

from src.pokeapi.errors import PokeApiFailure
from src.pokeapi.normalizer import DisplayRecord, ListingPage

CARD_WIDTH = 44


def format_name(name: str) -> str:
    """Capitalize the first letter only: "mr-mime" → "Mr-mime"."""
    if not name:
        return ""
    return name[0].upper() + name[1:]


def render_card(record: DisplayRecord) -> str:
    """
    Render a DisplayRecord as a boxed summary card.

    Example:
        +------------------------------------------+
        | Pikachu                              #25 |
        +------------------------------------------+
        | Type:    electric
        | Height:  4 dm
        | Weight:  60 hg
        | Artwork: https://.../official-artwork/25.png
        |          (official pikachu artwork)
        +------------------------------------------+
    """
    border = "+" + "-" * (CARD_WIDTH - 2) + "+"
    title = format_name(record.name)
    number = f"#{record.id}"
    padding = max(CARD_WIDTH - 4 - len(title) - len(number), 1)

    lines = [
        border,
        f"| {title}{' ' * padding}{number} |",
        border,
        f"| Type:    {'/'.join(record.types) or '-'}",
        f"| Height:  {record.height} dm",
        f"| Weight:  {record.weight} hg",
        f"| Artwork: {record.image}",
        f"|          (official {record.name} artwork)",
        border,
    ]
    return "\n".join(lines)


def render_listing(page: ListingPage, offset: int = 0) -> str:
    """Render a listing page as "  21. spearow" lines plus a total footer."""
    # Listing bodies are passed through unchecked; tolerate any JSON shape.
    if not isinstance(page, dict):
        page = {}  # type: ignore[typeddict-item]
    results = page.get("results")
    if not isinstance(results, list):
        results = []

    lines = []
    for position, entry in enumerate(results, start=1):
        name = entry.get("name", "?") if isinstance(entry, dict) else "?"
        lines.append(f"{offset + position:>5}. {name}")
    lines.append(f"Showing {len(results)} of {page.get('count', '?')}")
    return "\n".join(lines)


def render_failure(failure: PokeApiFailure) -> str:
    return failure.message
