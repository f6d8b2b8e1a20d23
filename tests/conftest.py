"""Shared fixtures for departure board tests."""

from collections.abc import Callable
from datetime import time
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from departure_board.domain.models import Departure


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep real credentials and settings out of the tests."""
    for variable in (
        "DARWIN_TOKEN",
        "DIGITRANSIT_SUBSCRIPTION_KEY",
        "DEPARTURE_BOARD_PROVIDER",
        "DEPARTURE_BOARD_TIMEOUT",
        "DEPARTURE_BOARD_ROWS",
        "DEPARTURE_BOARD_OFFSET",
        "DEPARTURE_BOARD_WINDOW",
        "DEPARTURE_BOARD_LIMIT",
        "DEPARTURE_BOARD_JSON_OUTPUT",
        "DEPARTURE_BOARD_MAX_CONCURRENCY",
        "DEPARTURE_BOARD_LOG_LEVEL",
        "DEPARTURE_BOARD_LOG_REQUESTS",
    ):
        monkeypatch.delenv(variable, raising=False)


@pytest.fixture
def make_departure() -> Callable[..., Departure]:
    """Factory for departures with sensible defaults."""

    def _make(
        station: str = "KGX",
        scheduled: time = time(10, 0),
        estimated: time | None = None,
        sort_key: int | None = None,
        **kwargs: Any,
    ) -> Departure:
        return Departure(
            service=kwargs.pop("service", ""),
            destination=kwargs.pop("destination", "Cambridge"),
            station=station,
            scheduled_time=scheduled,
            estimated_time=estimated or scheduled,
            platform=kwargs.pop("platform", "1"),
            sort_key=(
                sort_key if sort_key is not None else scheduled.hour * 60 + scheduled.minute
            ),
            **kwargs,
        )

    return _make


@pytest.fixture
def mock_session() -> Callable[..., MagicMock]:
    """Factory for an aiohttp session whose ``post`` returns a canned response."""

    def _make(status: int = 200, text: str = "") -> MagicMock:
        response = MagicMock()
        response.status = status
        response.text = AsyncMock(return_value=text)

        session = MagicMock()
        session.post.return_value.__aenter__.return_value = response
        session.post.return_value.__aexit__.return_value = False
        return session

    return _make
