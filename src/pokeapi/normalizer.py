"""
Pokedex — PokeAPI Response Normalizer

Maps a raw `/pokemon/{id-or-name}` payload onto the small, display-ready
DisplayRecord. Extraction paths:

    id, name, height, weight
    types[*].type.name
    sprites.other["official-artwork"].front_default

Any absent field, absent nesting level or wrongly typed value yields
ShapeMismatch; a partially populated record is never produced.

normalize() is pure: no I/O, no logging, no state.
"""

from __future__ import annotations

from typing import Any, TypedDict

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError

from src.pokeapi.errors import ShapeMismatch


# ---------------------------------------------------------------------------
# Raw Payload Models (strict scalars: "4" is not an int, null is not a str)
# ---------------------------------------------------------------------------


class NamedResource(BaseModel):
    """A `{name, url}` reference as PokeAPI nests it."""
    name: StrictStr


class TypeSlot(BaseModel):
    """One entry of the `types` array."""
    type: NamedResource


class OfficialArtwork(BaseModel):
    front_default: StrictStr


class OtherSprites(BaseModel):
    official_artwork: OfficialArtwork = Field(..., alias="official-artwork")


class Sprites(BaseModel):
    other: OtherSprites


class PokemonPayload(BaseModel):
    """The subset of the detail payload the Pokedex depends on."""
    id: StrictInt
    name: StrictStr
    height: StrictInt = Field(..., description="Height in decimetres")
    weight: StrictInt = Field(..., description="Weight in hectograms")
    types: list[TypeSlot]
    sprites: Sprites


# ---------------------------------------------------------------------------
# Display Models
# ---------------------------------------------------------------------------


class DisplayRecord(BaseModel):
    """Normalized, UI-ready summary of a single creature."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Catalog id (e.g., 25)")
    name: str = Field(..., description="Catalog name (e.g., 'pikachu')")
    height: int = Field(..., description="Height in decimetres")
    weight: int = Field(..., description="Weight in hectograms")
    types: tuple[str, ...] = Field(
        ...,
        description="Type names in source order, duplicates preserved",
    )
    image: str = Field(..., description="Official artwork URL")


class ListingSummary(TypedDict):
    name: str
    url: str


class ListingPage(TypedDict):
    """Collection payload, passed through exactly as decoded."""
    count: int
    next: str | None
    previous: str | None
    results: list[ListingSummary]


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------


def normalize(payload: Any) -> DisplayRecord | ShapeMismatch:
    """
    Extract a DisplayRecord from a decoded detail payload.

    Args:
        payload: Decoded JSON body of `/pokemon/{id-or-name}`.

    Returns:
        DisplayRecord on success, ShapeMismatch when the payload is not
        shaped like a detail response.
    """
    try:
        pokemon = PokemonPayload.model_validate(payload)
    except ValidationError:
        return ShapeMismatch()

    return DisplayRecord(
        id=pokemon.id,
        name=pokemon.name,
        height=pokemon.height,
        weight=pokemon.weight,
        types=tuple(slot.type.name for slot in pokemon.types),
        image=pokemon.sprites.other.official_artwork.front_default,
    )
