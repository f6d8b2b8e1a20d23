"""Departure domain model."""

from dataclasses import dataclass
from datetime import time

ON_TIME = "On time"


@dataclass(frozen=True)
class Departure:
    """Canonical departure record shared by all backends."""

    service: str
    destination: str
    station: str  # Station code as requested, never the provider's echoed name
    scheduled_time: time
    estimated_time: time
    platform: str
    sort_key: int
    mode: str = ""  # Short vehicle mode code (e.g. "T" for tram)
    status: str = ""  # Verbatim non-time estimate, e.g. "Delayed" or "Cancelled"

    @property
    def is_on_time(self) -> bool:
        """True when there is no status and the estimate matches to the minute."""
        if self.status:
            return False
        return (self.scheduled_time.hour, self.scheduled_time.minute) == (
            self.estimated_time.hour,
            self.estimated_time.minute,
        )

    @property
    def due(self) -> str:
        """Scheduled time formatted as HH:MM."""
        return self.scheduled_time.strftime("%H:%M")

    @property
    def expected(self) -> str:
        """Estimate as shown to users: a status token, "On time" or HH:MM."""
        if self.status:
            return self.status
        if self.is_on_time:
            return ON_TIME
        return self.estimated_time.strftime("%H:%M")
