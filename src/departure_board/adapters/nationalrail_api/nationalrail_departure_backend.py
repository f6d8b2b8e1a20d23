"""National Rail departure backend using the Darwin OpenLDBWS SOAP API."""

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from departure_board.adapters.nationalrail_api.constants import (
    LDBWS_ENDPOINT,
    NATIONALRAIL_TIMEZONE,
)
from departure_board.adapters.nationalrail_api.departure_parser import DepartureParser
from departure_board.adapters.nationalrail_api.http_client import NationalRailHttpClient
from departure_board.adapters.nationalrail_api.models import RailService
from departure_board.adapters.nationalrail_api.request_builder import (
    build_departure_board_request,
)
from departure_board.domain.models.departure import Departure
from departure_board.domain.models.fetch_options import FetchOptions
from departure_board.domain.models.station_board import StationBoard
from departure_board.domain.ports.departure_backend import DepartureBackend

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class NationalRailDepartureBackend(DepartureBackend):
    """Adapter for National Rail station departure boards."""

    name = "nationalrail"
    timezone = NATIONALRAIL_TIMEZONE

    def __init__(
        self,
        session: "ClientSession",
        token: str,
        timeout_seconds: float = 5,
        endpoint: str = LDBWS_ENDPOINT,
    ) -> None:
        """Initialize with an aiohttp session and Darwin access token."""
        self._token = token
        self._http_client = NationalRailHttpClient(session, timeout_seconds, endpoint)

    async def fetch(self, station_code: str, options: FetchOptions) -> StationBoard[RailService]:
        """Fetch the departure board for a station.

        Args:
            station_code: Station CRS code (e.g. "KGX").
            options: Fetch options.

        Returns:
            StationBoard with the station's location name and its train
            services followed by bus services.
        """
        envelope = build_departure_board_request(self._token, station_code, options)
        board = await self._http_client.get_departure_board(envelope)
        logger.debug(
            f"National Rail board for '{station_code}' ({board.location_name}): "
            f"{len(board.train_services)} train(s), {len(board.bus_services)} bus(es)"
        )
        return StationBoard(display_name=board.location_name, services=board.services)

    def normalize(
        self,
        raw: RailService,
        station_code: str,
        display_name: str,  # noqa: ARG002
        reference: datetime,
    ) -> Departure:
        return DepartureParser.normalize(raw, station_code, reference)
