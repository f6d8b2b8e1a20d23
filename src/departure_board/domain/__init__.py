"""Domain layer - core models, ports and errors."""

from departure_board.domain.models import (
    Departure,
    FetchOptions,
    ResultSet,
    StationBoard,
    StationQuery,
)
from departure_board.domain.ports import DepartureBackend, ResultRenderer

__all__ = [
    "Departure",
    "DepartureBackend",
    "FetchOptions",
    "ResultRenderer",
    "ResultSet",
    "StationBoard",
    "StationQuery",
]
