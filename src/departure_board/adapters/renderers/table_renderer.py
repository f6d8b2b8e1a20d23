"""Fixed-width text table renderer."""

from departure_board.domain.models.departure import Departure
from departure_board.domain.models.result_set import ResultSet
from departure_board.domain.ports.result_renderer import ResultRenderer

EMPTY_MESSAGE = "no departures"


def _service_label(departure: Departure) -> str:
    return f"{departure.mode} {departure.service}".strip() if departure.service else ""


class TableRenderer(ResultRenderer):
    """Renders one line per departure below a header row."""

    def render(self, result: ResultSet) -> str:
        if result.is_empty:
            return EMPTY_MESSAGE

        station_width = max(3, *(len(d.station) for d in result.departures))
        services = [_service_label(d) for d in result.departures]
        service_width = max(len(s) for s in services)
        if service_width:
            service_width = max(3, service_width)

        def line(when: str, station: str, service: str, to: str, platform: str, etd: str) -> str:
            cells = [f"{when:<5}", f"{station:<{station_width}}"]
            if service_width:
                cells.append(f"{service:<{service_width}}")
            cells += [f"{to:<20}", f"{platform:>3}", f"{etd:>9}"]
            return " ".join(cells)

        lines = [line("When", "Sta", "Srv", "To", "Plt", "Expected")]
        for departure, service in zip(result.departures, services, strict=True):
            lines.append(
                line(
                    departure.due,
                    departure.station,
                    service,
                    departure.destination,
                    departure.platform,
                    departure.expected,
                )
            )
        return "\n".join(lines)
