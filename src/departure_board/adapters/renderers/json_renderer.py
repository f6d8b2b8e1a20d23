"""JSON document renderer."""

from pydantic import BaseModel, ConfigDict

from departure_board.domain.models.departure import Departure
from departure_board.domain.models.result_set import ResultSet
from departure_board.domain.ports.result_renderer import ResultRenderer


class DepartureDocument(BaseModel):
    """A departure as emitted in JSON; the sort key is never included."""

    model_config = ConfigDict(frozen=True)

    dst: str
    due: str
    etd: str
    sta: str
    srv: str | None = None
    pla: str | None = None

    @classmethod
    def from_departure(cls, departure: Departure) -> "DepartureDocument":
        return cls(
            dst=departure.destination,
            due=departure.due,
            etd=departure.expected,
            sta=departure.station,
            srv=departure.service or None,
            pla=departure.platform or None,
        )


class BoardDocument(BaseModel):
    """Top-level JSON output document."""

    model_config = ConfigDict(frozen=True)

    offset: int
    stations: dict[str, int]
    departures: list[DepartureDocument]
    names: list[tuple[str, str]] | None = None

    @classmethod
    def from_result(cls, result: ResultSet) -> "BoardDocument":
        names = sorted(result.names.items(), key=lambda item: (item[1], item[0]))
        return cls(
            offset=result.time_offset_minutes,
            stations=result.station_counts(),
            departures=[DepartureDocument.from_departure(d) for d in result.departures],
            names=names or None,
        )


class JsonRenderer(ResultRenderer):
    """Renders a result set as a single-line JSON document."""

    def render(self, result: ResultSet) -> str:
        return BoardDocument.from_result(result).model_dump_json(exclude_none=True)
