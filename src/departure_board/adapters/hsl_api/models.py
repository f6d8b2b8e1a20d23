"""Response schema for the HSL stop departures query."""

from pydantic import BaseModel, ConfigDict, Field


class HslRoute(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    short_name: str | None = Field(default=None, alias="shortName")


class HslTrip(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    route: HslRoute | None = None


class HslStopTime(BaseModel):
    """A single stop time; arrival values are seconds since the service day start."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    trip: HslTrip | None = None
    scheduled_arrival: int = Field(alias="scheduledArrival")
    realtime_arrival: int | None = Field(default=None, alias="realtimeArrival")
    realtime_state: str | None = Field(default=None, alias="realtimeState")
    headsign: str | None = None

    @property
    def route_short_name(self) -> str:
        if self.trip and self.trip.route and self.trip.route.short_name:
            return self.trip.route.short_name
        return ""


class HslStop(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = ""
    code: str | None = None
    vehicle_mode: str | None = Field(default=None, alias="vehicleMode")
    stop_times: list[HslStopTime] = Field(default_factory=list, alias="stoptimesWithoutPatterns")


class HslStopData(BaseModel):
    model_config = ConfigDict(frozen=True)

    stop: HslStop | None = None


class GraphError(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    message: str = ""


class HslStopResponse(BaseModel):
    """GraphQL envelope: ``{data, errors}``."""

    model_config = ConfigDict(frozen=True)

    data: HslStopData | None = None
    errors: list[GraphError] | None = None
