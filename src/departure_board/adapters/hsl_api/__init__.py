"""HSL (Digitransit) GraphQL adapters."""

from departure_board.adapters.hsl_api.hsl_departure_backend import (
    HslDeparture,
    HslDepartureBackend,
)

__all__ = ["HslDeparture", "HslDepartureBackend"]
