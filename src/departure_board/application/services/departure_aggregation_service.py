"""Departure aggregation service."""

import asyncio
import logging
from collections.abc import Callable, Sequence
from datetime import UTC, datetime, timedelta
from zoneinfo import ZoneInfo

from departure_board.domain.errors import ConfigurationError
from departure_board.domain.models.departure import Departure
from departure_board.domain.models.fetch_options import StationQuery
from departure_board.domain.models.result_set import ResultSet
from departure_board.domain.ports.departure_backend import DepartureBackend

logger = logging.getLogger(__name__)

DEFAULT_MAX_CONCURRENCY = 4


def _utc_now() -> datetime:
    return datetime.now(UTC)


class DepartureAggregationService:
    """Fetches, normalizes, merges and truncates departures for many stations."""

    def __init__(
        self,
        backend: DepartureBackend,
        max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize with a backend and fan-out settings.

        Args:
            backend: Backend used for every station of a pass.
            max_concurrency: Maximum number of station fetches in flight.
            clock: Returns the current timezone-aware time (for tests).
        """
        self._backend = backend
        self._max_concurrency = max(1, max_concurrency)
        self._clock = clock or _utc_now

    def _reference_time(self, offset_minutes: int) -> datetime:
        """Query reference time in the backend's timezone, shifted by the offset."""
        now = self._clock().astimezone(ZoneInfo(self._backend.timezone))
        return now + timedelta(minutes=offset_minutes)

    async def _fetch_station(
        self, query: StationQuery, reference: datetime, semaphore: asyncio.Semaphore
    ) -> tuple[list[Departure], str]:
        """Fetch and normalize one station. Returns (departures, display_name)."""
        async with semaphore:
            logger.debug(f"Fetching departures for station '{query.station_code}'")
            board = await self._backend.fetch(query.station_code, query.options)

        departures = [
            self._backend.normalize(raw, query.station_code, board.display_name, reference)
            for raw in board.services
        ]
        logger.debug(
            f"Station '{query.station_code}' ({board.display_name}): "
            f"{len(departures)} departure(s)"
        )
        return departures, board.display_name

    async def _fetch_all(
        self, queries: Sequence[StationQuery], reference: datetime
    ) -> list[tuple[list[Departure], str]]:
        """Fetch all stations concurrently, failing fast on the first error.

        Results are returned in query order regardless of completion order.
        """
        semaphore = asyncio.Semaphore(self._max_concurrency)
        tasks = [
            asyncio.create_task(self._fetch_station(q, reference, semaphore)) for q in queries
        ]
        try:
            return await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

    @staticmethod
    def _unique_queries(queries: Sequence[StationQuery]) -> list[StationQuery]:
        seen: dict[str, StationQuery] = {}
        for query in queries:
            if query.station_code in seen:
                logger.debug(f"Ignoring duplicate station '{query.station_code}'")
                continue
            seen[query.station_code] = query
        return list(seen.values())

    async def aggregate(
        self, queries: Sequence[StationQuery], limit: int | None = None
    ) -> ResultSet:
        """Build the merged result set for all queried stations.

        Args:
            queries: One query per station; must not be empty.
            limit: Total number of departures to keep. Defaults to the
                effective row count times the number of stations.

        Returns:
            ResultSet stably sorted by sort key and truncated to the limit.

        Raises:
            ConfigurationError: If no station is queried.
            DepartureBoardError: If any station's fetch fails.
        """
        unique = self._unique_queries(queries)
        if not unique:
            raise ConfigurationError("no stations")

        if limit is None or limit <= 0:
            limit = sum(q.options.effective_rows for q in unique)

        # All sort keys of one pass share a single reference hour
        offset = unique[0].options.time_offset_minutes
        results = await self._fetch_all(unique, self._reference_time(offset))

        merged: list[Departure] = []
        names: dict[str, str] = {}
        for query, (departures, display_name) in zip(unique, results, strict=True):
            merged.extend(departures)
            if display_name:
                names[query.station_code] = display_name

        # list.sort is stable: ties keep station-then-response order
        merged.sort(key=lambda d: d.sort_key)
        cap = min(limit, len(merged))

        return ResultSet(
            departures=merged[:cap],
            stations=tuple(q.station_code for q in unique),
            names=names,
            time_offset_minutes=offset,
        )
