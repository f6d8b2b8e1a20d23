"""Provider response container for a single station."""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

RawT = TypeVar("RawT")


@dataclass(frozen=True)
class StationBoard(Generic[RawT]):
    """Raw departures for one station as returned by a backend.

    The services are provider-specific records and are only ever handed back
    to the backend that produced them for normalization.
    """

    display_name: str
    services: list[RawT] = field(default_factory=list)
