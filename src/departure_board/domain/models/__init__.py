"""Domain models for departure boards."""

from departure_board.domain.models.departure import ON_TIME, Departure
from departure_board.domain.models.fetch_options import (
    DEFAULT_ROWS,
    FetchOptions,
    StationQuery,
)
from departure_board.domain.models.result_set import ResultSet
from departure_board.domain.models.station_board import StationBoard

__all__ = [
    "DEFAULT_ROWS",
    "ON_TIME",
    "Departure",
    "FetchOptions",
    "ResultSet",
    "StationBoard",
    "StationQuery",
]
