"""National Rail (Darwin OpenLDBWS) adapters."""

from departure_board.adapters.nationalrail_api.nationalrail_departure_backend import (
    NationalRailDepartureBackend,
)

__all__ = ["NationalRailDepartureBackend"]
