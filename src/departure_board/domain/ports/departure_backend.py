"""Departure backend port."""

from datetime import datetime
from typing import Any, Protocol

from departure_board.domain.models.departure import Departure
from departure_board.domain.models.fetch_options import FetchOptions
from departure_board.domain.models.station_board import StationBoard


class DepartureBackend(Protocol):
    """Port for one upstream transit-data provider.

    A backend is selected once per configured provider and serves every
    station of a query. It must not keep per-call state.
    """

    name: str
    timezone: str  # IANA zone of the provider's wall-clock times

    async def fetch(self, station_code: str, options: FetchOptions) -> StationBoard[Any]:
        """Fetch raw departures and the station's display name."""
        ...

    def normalize(
        self,
        raw: Any,
        station_code: str,
        display_name: str,
        reference: datetime,
    ) -> Departure:
        """Map one raw departure from this backend to a Departure."""
        ...
