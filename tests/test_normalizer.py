"""
Tests for the PokeAPI response normalizer (src/pokeapi/normalizer.py).

Covers:
- Canonical pikachu payload → DisplayRecord
- Type flattening: source order, duplicates preserved
- Missing fields / nesting levels → ShapeMismatch, never a partial record
- Wrongly typed values and non-object payloads → ShapeMismatch
- Purity: repeated calls give equal records, input is untouched
"""

from __future__ import annotations

import copy
from typing import Any

import pydantic
import pytest

from src.pokeapi.errors import ShapeMismatch
from src.pokeapi.normalizer import DisplayRecord, normalize


def _payload(
    type_names: list[str] | None = None,
    **overrides: Any,
) -> dict[str, Any]:
    """Minimal well-formed detail payload."""
    payload: dict[str, Any] = {
        "id": 6,
        "name": "charizard",
        "height": 17,
        "weight": 905,
        "types": [
            {"slot": slot, "type": {"name": name, "url": f"https://pokeapi.co/api/v2/type/{name}/"}}
            for slot, name in enumerate(type_names or ["fire", "flying"], start=1)
        ],
        "sprites": {
            "front_default": "https://example.test/6.png",
            "other": {
                "official-artwork": {"front_default": "https://example.test/artwork/6.png"},
            },
        },
    }
    payload.update(overrides)
    return payload


# ---------------------------------------------------------------------------
# Success path
# ---------------------------------------------------------------------------


def test_normalize_canonical_pikachu(
    pikachu_payload: dict[str, Any], pikachu_artwork_url: str
) -> None:
    result = normalize(pikachu_payload)

    assert result == DisplayRecord(
        id=25,
        name="pikachu",
        height=4,
        weight=60,
        types=("electric",),
        image=pikachu_artwork_url,
    )


def test_normalize_flattens_types_in_source_order() -> None:
    result = normalize(_payload(type_names=["fire", "flying"]))

    assert isinstance(result, DisplayRecord)
    assert result.types == ("fire", "flying")


def test_normalize_keeps_source_order_not_slot_order() -> None:
    """Entries are read in array order; the `slot` number is not consulted."""
    payload = _payload(type_names=["water", "ground"])
    payload["types"].reverse()

    result = normalize(payload)

    assert isinstance(result, DisplayRecord)
    assert result.types == ("ground", "water")


def test_normalize_preserves_duplicate_types() -> None:
    result = normalize(_payload(type_names=["fire", "fire", "flying"]))

    assert isinstance(result, DisplayRecord)
    assert result.types == ("fire", "fire", "flying")


def test_normalize_empty_types_list_is_valid() -> None:
    payload = _payload(id=7)
    payload["types"] = []

    result = normalize(payload)

    assert isinstance(result, DisplayRecord)
    assert result.types == ()


def test_normalize_uses_official_artwork_not_front_sprite() -> None:
    result = normalize(_payload())

    assert isinstance(result, DisplayRecord)
    assert result.image == "https://example.test/artwork/6.png"


def test_normalize_ignores_extra_fields(pikachu_payload: dict[str, Any]) -> None:
    pikachu_payload["unexpected"] = {"nested": [1, 2, 3]}
    result = normalize(pikachu_payload)
    assert isinstance(result, DisplayRecord)


# ---------------------------------------------------------------------------
# Shape mismatches
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("field", ["id", "name", "height", "weight", "types", "sprites"])
def test_normalize_missing_top_level_field(field: str) -> None:
    payload = _payload()
    del payload[field]

    assert normalize(payload) == ShapeMismatch()


@pytest.mark.parametrize(
    "path",
    [
        ("sprites", "other"),
        ("sprites", "other", "official-artwork"),
        ("sprites", "other", "official-artwork", "front_default"),
    ],
)
def test_normalize_missing_artwork_path(path: tuple[str, ...]) -> None:
    payload = _payload()
    parent = payload
    for key in path[:-1]:
        parent = parent[key]
    del parent[path[-1]]

    assert normalize(payload) == ShapeMismatch()


def test_normalize_null_artwork_is_mismatch() -> None:
    payload = _payload()
    payload["sprites"]["other"]["official-artwork"]["front_default"] = None

    assert normalize(payload) == ShapeMismatch()


def test_normalize_type_entry_without_nested_name() -> None:
    payload = _payload()
    payload["types"].append({"slot": 3, "type": {"url": "https://pokeapi.co/api/v2/type/1/"}})

    assert normalize(payload) == ShapeMismatch()


def test_normalize_type_entry_without_type_object() -> None:
    payload = _payload()
    payload["types"][0] = {"slot": 1}

    assert normalize(payload) == ShapeMismatch()


@pytest.mark.parametrize(
    "field, value",
    [
        ("id", "25"),
        ("height", "4"),
        ("weight", 60.5),
        ("id", True),
        ("name", 25),
        ("types", {"slot": 1, "type": {"name": "electric"}}),
        ("sprites", None),
    ],
)
def test_normalize_wrong_field_type(field: str, value: Any) -> None:
    """Values of the wrong JSON type are not coerced."""
    assert normalize(_payload(**{field: value})) == ShapeMismatch()


@pytest.mark.parametrize("payload", [None, [], "pikachu", 25, {}])
def test_normalize_non_detail_payload(payload: Any) -> None:
    assert normalize(payload) == ShapeMismatch()


def test_normalize_listing_payload_is_mismatch(listing_page_payload: dict[str, Any]) -> None:
    """An empty query hits the collection path; its body is not a detail record."""
    assert normalize(listing_page_payload) == ShapeMismatch()


# ---------------------------------------------------------------------------
# Purity
# ---------------------------------------------------------------------------


def test_normalize_is_idempotent(pikachu_payload: dict[str, Any]) -> None:
    first = normalize(pikachu_payload)
    second = normalize(pikachu_payload)

    assert first == second
    assert first is not second


def test_normalize_does_not_mutate_input(pikachu_payload: dict[str, Any]) -> None:
    snapshot = copy.deepcopy(pikachu_payload)
    normalize(pikachu_payload)
    assert pikachu_payload == snapshot


def test_display_record_is_frozen(pikachu_payload: dict[str, Any]) -> None:
    record = normalize(pikachu_payload)
    assert isinstance(record, DisplayRecord)

    with pytest.raises(pydantic.ValidationError):
        record.name = "raichu"  # type: ignore[misc]


def test_display_record_requires_types() -> None:
    with pytest.raises(pydantic.ValidationError):
        DisplayRecord(id=25, name="pikachu", height=4, weight=60, image="x")  # type: ignore[call-arg]


def test_normalize_types_object_instead_of_list() -> None:
    payload = _payload()
    payload["types"] = {"slot": 1, "type": {"name": "electric"}}

    assert normalize(payload) == ShapeMismatch()
