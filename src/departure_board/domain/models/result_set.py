"""Result set domain model."""

from collections import Counter
from dataclasses import dataclass, field

from departure_board.domain.models.departure import Departure


@dataclass(frozen=True)
class ResultSet:
    """Ordered, truncated departures of one aggregation pass.

    ``stations`` lists every queried station code in request order, including
    stations that contributed no departures.
    """

    departures: list[Departure] = field(default_factory=list)
    stations: tuple[str, ...] = ()
    names: dict[str, str] = field(default_factory=dict)
    time_offset_minutes: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.departures

    def station_counts(self) -> dict[str, int]:
        """Number of departures contributed by each queried station."""
        tally = Counter(d.station for d in self.departures)
        counts = {code: 0 for code in self.stations}
        for code, count in tally.items():
            counts[code] = count
        return counts
