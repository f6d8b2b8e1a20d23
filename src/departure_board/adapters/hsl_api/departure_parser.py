"""Normalizes HSL stop times into Departure objects."""

from datetime import datetime, time, timedelta

from departure_board.adapters.hsl_api.constants import (
    REALTIME_STATE_CANCELED,
    UNKNOWN_MODE_CODE,
    VEHICLE_MODE_CODES,
)
from departure_board.adapters.hsl_api.models import HslStopTime
from departure_board.domain.models.departure import Departure
from departure_board.domain.sort_key import compute_sort_key


class DepartureParser:
    """Maps HSL stop times to canonical departures."""

    @staticmethod
    def short_vehicle_mode(mode: str | None) -> str:
        """Short display code for a vehicle mode, "?" when unknown."""
        return VEHICLE_MODE_CODES.get((mode or "").upper(), UNKNOWN_MODE_CODE)

    @staticmethod
    def seconds_to_time(seconds: int, reference: datetime) -> time:
        """Wall-clock time for seconds since the start of the reference's local day.

        Values past midnight (>= 86400) wrap into the next day's clock.
        """
        midnight = reference.replace(hour=0, minute=0, second=0, microsecond=0)
        return (midnight + timedelta(seconds=seconds)).time()

    @staticmethod
    def normalize(
        stop_time: HslStopTime,
        station_code: str,
        vehicle_mode: str | None,
        reference: datetime,
    ) -> Departure:
        """Build a Departure from one stop time."""
        scheduled = DepartureParser.seconds_to_time(stop_time.scheduled_arrival, reference)
        if stop_time.realtime_arrival is None:
            estimated = scheduled
        else:
            estimated = DepartureParser.seconds_to_time(stop_time.realtime_arrival, reference)

        status = "Cancelled" if stop_time.realtime_state == REALTIME_STATE_CANCELED else ""

        return Departure(
            service=stop_time.route_short_name,
            destination=stop_time.headsign or "",
            station=station_code,
            scheduled_time=scheduled,
            estimated_time=estimated,
            platform="",
            sort_key=compute_sort_key(scheduled, reference.hour),
            mode=DepartureParser.short_vehicle_mode(vehicle_mode),
            status=status,
        )
