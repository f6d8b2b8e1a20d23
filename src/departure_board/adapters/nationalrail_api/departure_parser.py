"""Normalizes Darwin station board services into Departure objects."""

import re
from datetime import datetime, time

from departure_board.adapters.nationalrail_api.constants import ETD_ON_TIME, SERVICE_TYPE_CODES
from departure_board.adapters.nationalrail_api.models import RailService
from departure_board.domain.errors import ParseError
from departure_board.domain.models.departure import Departure
from departure_board.domain.sort_key import compute_sort_key

_CLOCK_PATTERN = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


class DepartureParser:
    """Maps Darwin services to canonical departures."""

    @staticmethod
    def parse_clock(value: str) -> time | None:
        """Parse an "HH:MM" string, None if it is not a time."""
        match = _CLOCK_PATTERN.match(value.strip())
        if not match:
            return None
        return time(int(match.group(1)), int(match.group(2)))

    @staticmethod
    def parse_estimate(etd: str, scheduled: time) -> tuple[time, str]:
        """Parse an estimated departure. Returns (estimated_time, status).

        Tokens other than "On time" and "HH:MM" (e.g. "Delayed", "Cancelled")
        are passed through as the status and the estimate stays scheduled.
        """
        if not etd or etd == ETD_ON_TIME:
            return scheduled, ""
        estimated = DepartureParser.parse_clock(etd)
        if estimated is None:
            return scheduled, etd
        return estimated, ""

    @staticmethod
    def normalize(service: RailService, station_code: str, reference: datetime) -> Departure:
        """Build a Departure from one service.

        Raises:
            ParseError: If the scheduled time is not "HH:MM".
        """
        scheduled = DepartureParser.parse_clock(service.std)
        if scheduled is None:
            raise ParseError(f"error parsing departure time {service.std!r} at {station_code}")

        estimated, status = DepartureParser.parse_estimate(service.etd, scheduled)

        return Departure(
            service="",
            destination=service.destination_name,
            station=station_code,
            scheduled_time=scheduled,
            estimated_time=estimated,
            platform=service.platform,
            sort_key=compute_sort_key(scheduled, reference.hour),
            mode=SERVICE_TYPE_CODES.get(service.service_type.lower(), ""),
            status=status,
        )
