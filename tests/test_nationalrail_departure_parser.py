"""Tests for Darwin service normalization."""

from datetime import datetime, time
from zoneinfo import ZoneInfo

import pytest

from departure_board.adapters.nationalrail_api.departure_parser import DepartureParser
from departure_board.adapters.nationalrail_api.models import RailLocation, RailService
from departure_board.domain.errors import ParseError

LONDON = ZoneInfo("Europe/London")
EVENING = datetime(2024, 3, 1, 22, 0, tzinfo=LONDON)
MORNING = datetime(2024, 3, 1, 7, 0, tzinfo=LONDON)


def _service(std: str = "22:03", etd: str = "On time", **kwargs: object) -> RailService:
    return RailService(
        std=std,
        etd=etd,
        destinations=[RailLocation("Cambridge", "CBG")],
        **kwargs,  # type: ignore[arg-type]
    )


@pytest.mark.parametrize(
    ("value", "expected"),
    [("22:03", time(22, 3)), ("00:00", time(0, 0)), ("Delayed", None), ("24:10", None), ("", None)],
)
def test_parse_clock(value: str, expected: time | None) -> None:
    """Given a string, when parsing, then only valid HH:MM values become times."""
    assert DepartureParser.parse_clock(value) == expected


def test_on_time_estimate_equals_scheduled() -> None:
    """Given etd 'On time', when normalizing, then estimated equals scheduled."""
    departure = DepartureParser.normalize(_service(platform="9"), "KGX", EVENING)

    assert departure.scheduled_time == time(22, 3)
    assert departure.estimated_time == time(22, 3)
    assert departure.status == ""
    assert departure.expected == "On time"
    assert departure.platform == "9"
    assert departure.destination == "Cambridge"
    assert departure.service == ""


def test_explicit_estimate_is_parsed() -> None:
    """Given etd '22:09', when normalizing, then the estimate is that time."""
    departure = DepartureParser.normalize(_service(etd="22:09"), "KGX", EVENING)

    assert departure.estimated_time == time(22, 9)
    assert departure.expected == "22:09"


@pytest.mark.parametrize("token", ["Delayed", "Cancelled", "No report"])
def test_non_time_estimate_is_passed_through(token: str) -> None:
    """Given a non-time etd, when normalizing, then it is kept verbatim as the status."""
    departure = DepartureParser.normalize(_service(etd=token), "KGX", EVENING)

    assert departure.status == token
    assert departure.estimated_time == departure.scheduled_time
    assert departure.expected == token


def test_unparseable_scheduled_time_is_parse_error() -> None:
    """Given std that is not a time, when normalizing, then raises ParseError."""
    with pytest.raises(ParseError):
        DepartureParser.normalize(_service(std="soon"), "KGX", EVENING)


def test_station_is_requested_code_not_echoed_name() -> None:
    """Given any service, when normalizing, then station is the requested code."""
    departure = DepartureParser.normalize(_service(), "kgx", EVENING)

    assert departure.station == "kgx"


def test_bus_service_gets_bus_mode() -> None:
    """Given a bus service, when normalizing, then mode is 'B'."""
    departure = DepartureParser.normalize(_service(service_type="bus"), "KGX", EVENING)

    assert departure.mode == "B"


def test_sort_key_rolls_over_only_for_evening_reference() -> None:
    """Given a 00:10 departure, when normalizing, then only an evening query shifts it."""
    evening = DepartureParser.normalize(_service(std="00:10"), "KGX", EVENING)
    morning = DepartureParser.normalize(_service(std="00:10"), "KGX", MORNING)

    assert evening.sort_key == 24 * 60 + 10
    assert morning.sort_key == 10
    assert evening.due == morning.due == "00:10"
