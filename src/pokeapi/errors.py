"""
Pokedex — PokeAPI Failure Taxonomy

Closed set of failure kinds returned by the lookup adapter:

- TransportFailure: no response was received (DNS, connect, timeout)
- ServerResponseFailure: a response arrived with a non-2xx status
- ShapeMismatch: a 2xx body lacked required fields or was not JSON
- Unclassified: anything else

Failures are frozen value objects, not raised exceptions. Callers branch on
the concrete class and show `message` to the user.
"""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict


class PokeApiFailure(BaseModel):
    """Common base: an immutable failure with a displayable message."""

    model_config = ConfigDict(frozen=True)

    @property
    def message(self) -> str:
        return "Something went wrong"

    def __str__(self) -> str:
        return self.message


class TransportFailure(PokeApiFailure):
    """The request never received a response."""

    @property
    def message(self) -> str:
        return "Request failed to send"


class ServerResponseFailure(PokeApiFailure):
    """The catalog answered with a 4xx/5xx (any non-2xx) status."""

    status_code: int

    @property
    def message(self) -> str:
        return f"Catalog service responded with status {self.status_code}"


class ShapeMismatch(PokeApiFailure):
    """A successful response did not have the expected structure."""

    @property
    def message(self) -> str:
        return "Failed to parse response"


class Unclassified(PokeApiFailure):
    """Any failure that fits none of the other kinds."""

    @property
    def message(self) -> str:
        return "Something went wrong when processing the request"


Failure = Union[TransportFailure, ServerResponseFailure, ShapeMismatch, Unclassified]
