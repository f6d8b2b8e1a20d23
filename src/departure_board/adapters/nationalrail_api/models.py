"""Raw station board records from the Darwin GetDepartureBoard response."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RailLocation:
    location_name: str
    crs: str = ""


@dataclass(frozen=True)
class RailService:
    """A train or bus service on a station board; times are "HH:MM" strings."""

    std: str
    etd: str
    destinations: list[RailLocation] = field(default_factory=list)
    platform: str = ""
    service_type: str = ""

    @property
    def destination_name(self) -> str:
        """Destination names; services that divide list every portion."""
        return " & ".join(loc.location_name for loc in self.destinations if loc.location_name)


@dataclass(frozen=True)
class StationBoardResult:
    location_name: str
    crs: str
    messages: list[str] = field(default_factory=list)
    train_services: list[RailService] = field(default_factory=list)
    bus_services: list[RailService] = field(default_factory=list)

    @property
    def services(self) -> list[RailService]:
        return [*self.train_services, *self.bus_services]
