from src.pokedex.card import format_name, render_card, render_failure, render_listing
from src.pokedex.session import PokedexSession

__all__ = [
    "PokedexSession",
    "format_name",
    "render_card",
    "render_failure",
    "render_listing",
]
