"""Fetch options and station query value objects."""

from dataclasses import dataclass, field

DEFAULT_ROWS = 10


@dataclass(frozen=True)
class FetchOptions:
    """Per-query options shared by every station of one aggregation pass.

    Zero offset and zero window mean "not specified" and are never sent
    upstream.
    """

    rows: int = DEFAULT_ROWS
    time_offset_minutes: int = 0
    time_window_minutes: int = 0

    @property
    def effective_rows(self) -> int:
        """Row count sent to the provider; non-positive values use the default."""
        return self.rows if self.rows > 0 else DEFAULT_ROWS

    @property
    def has_offset(self) -> bool:
        return self.time_offset_minutes != 0

    @property
    def has_window(self) -> bool:
        return self.time_window_minutes != 0


@dataclass(frozen=True)
class StationQuery:
    """A single station to query with the shared fetch options."""

    station_code: str
    options: FetchOptions = field(default_factory=FetchOptions)
