"""HSL departure backend using the Digitransit GraphQL API."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from departure_board.adapters.hsl_api.constants import HSL_QUERY_ENDPOINT, HSL_TIMEZONE
from departure_board.adapters.hsl_api.departure_parser import DepartureParser
from departure_board.adapters.hsl_api.http_client import HslHttpClient
from departure_board.adapters.hsl_api.models import HslStopTime
from departure_board.adapters.hsl_api.query_builder import build_departures_query
from departure_board.domain.models.departure import Departure
from departure_board.domain.models.fetch_options import FetchOptions
from departure_board.domain.models.station_board import StationBoard
from departure_board.domain.ports.departure_backend import DepartureBackend

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


@dataclass(frozen=True)
class HslDeparture:
    """Raw HSL departure: a stop time plus its stop's vehicle mode."""

    stop_time: HslStopTime
    vehicle_mode: str | None


class HslDepartureBackend(DepartureBackend):
    """Adapter for HSL stop departures."""

    name = "hsl"
    timezone = HSL_TIMEZONE

    def __init__(
        self,
        session: "ClientSession",
        token: str,
        timeout_seconds: float = 5,
        endpoint: str = HSL_QUERY_ENDPOINT,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize with an aiohttp session and subscription key.

        Args:
            session: Shared aiohttp session.
            token: Digitransit subscription key.
            timeout_seconds: Timeout for each request.
            endpoint: GraphQL endpoint URL.
            clock: Returns the current time, used for the query start time.
        """
        self._http_client = HslHttpClient(session, token, timeout_seconds, endpoint)
        self._clock = clock or (lambda: datetime.now(UTC))

    async def fetch(self, station_code: str, options: FetchOptions) -> StationBoard[HslDeparture]:
        """Fetch upcoming departures for an HSL stop.

        Args:
            station_code: HSL stop id (e.g. "HSL:1220409").
            options: Fetch options.

        Returns:
            StationBoard with the stop's name and raw departures.
        """
        body = build_departures_query(station_code, options, self._clock())
        stop = await self._http_client.query_stop(body)
        logger.debug(f"HSL stop '{station_code}' resolved to '{stop.name}' ({stop.code})")
        return StationBoard(
            display_name=stop.name,
            services=[HslDeparture(st, stop.vehicle_mode) for st in stop.stop_times],
        )

    def normalize(
        self,
        raw: HslDeparture,
        station_code: str,
        display_name: str,  # noqa: ARG002
        reference: datetime,
    ) -> Departure:
        return DepartureParser.normalize(raw.stop_time, station_code, raw.vehicle_mode, reference)
