"""
Pokedex — Configuration & Constants

Every endpoint, header and logging knob lives here. No hardcoded values in
the adapter or the CLI.

Usage:
    from src.config import settings
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

class Settings(BaseSettings):
    """
    Central configuration for the Pokedex.

    Loads from environment variables with fallback defaults.
    """

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    # -----------------------------------------------------------------------
    # PokeAPI (catalog service)
    # -----------------------------------------------------------------------
    POKEAPI_BASE_URL: str = "https://pokeapi.co/api/v2"
    POKEAPI_USER_AGENT: str = Field(default="pokedex/0.1.0", min_length=1)

    # -----------------------------------------------------------------------
    # Logging
    # -----------------------------------------------------------------------
    LOG_LEVEL: str = "WARNING"   # DEBUG | INFO | WARNING | ERROR
    LOG_JSON: bool = True        # False → human-readable console renderer


# Singleton instance
settings = Settings()
