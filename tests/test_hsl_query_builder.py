"""Tests for the HSL GraphQL query builder."""

from datetime import UTC, datetime

from departure_board.adapters.hsl_api.query_builder import build_departures_query
from departure_board.domain.models import DEFAULT_ROWS, FetchOptions

NOW = datetime(2024, 3, 1, 12, 0, tzinfo=UTC)


def test_when_defaults_then_only_stop_and_num_are_sent() -> None:
    """Given default options, when building, then startTime and timeRange are omitted."""
    body = build_departures_query("HSL:1220409", FetchOptions(), NOW)

    assert body["variables"] == {"stop": "HSL:1220409", "num": DEFAULT_ROWS}
    assert "$startTime" not in body["query"]
    assert "$timeRange" not in body["query"]
    assert "numberOfDepartures: $num" in body["query"]


def test_when_rows_zero_then_default_row_count_is_sent() -> None:
    """Given rows = 0, when building, then num is the default, never zero."""
    body = build_departures_query("HSL:1", FetchOptions(rows=0), NOW)

    assert body["variables"]["num"] == DEFAULT_ROWS


def test_when_offset_set_then_start_time_is_declared_and_sent() -> None:
    """Given a 30 minute offset, when building, then startTime is now + 30 minutes."""
    body = build_departures_query("HSL:1", FetchOptions(time_offset_minutes=30), NOW)

    assert body["variables"]["startTime"] == int(NOW.timestamp()) + 30 * 60
    assert "$startTime: Long" in body["query"]
    assert "startTime: $startTime" in body["query"]
    assert "timeRange" not in body["variables"]


def test_when_window_set_then_time_range_is_sent_in_seconds() -> None:
    """Given a 45 minute window, when building, then timeRange is 2700 seconds."""
    body = build_departures_query("HSL:1", FetchOptions(time_window_minutes=45), NOW)

    assert body["variables"]["timeRange"] == 45 * 60
    assert "$timeRange: Int" in body["query"]
    assert "timeRange: $timeRange" in body["query"]
    assert "startTime" not in body["variables"]


def test_builder_does_not_modify_options() -> None:
    """Given options, when building twice, then the options are unchanged."""
    options = FetchOptions(rows=0, time_offset_minutes=10)

    first = build_departures_query("HSL:1", options, NOW)
    second = build_departures_query("HSL:2", options, NOW)

    assert options == FetchOptions(rows=0, time_offset_minutes=10)
    assert first["variables"]["startTime"] == second["variables"]["startTime"]
