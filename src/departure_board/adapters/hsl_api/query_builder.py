"""GraphQL request builder for HSL stop departures."""

from datetime import datetime, timedelta
from typing import Any

from departure_board.domain.models.fetch_options import FetchOptions

_QUERY_TEMPLATE = """query (
  $stop: String!
  $num: Int{variable_declarations}
) {{
  stop(id: $stop) {{
    name
    code
    vehicleMode
    stoptimesWithoutPatterns(
      numberOfDepartures: $num{field_arguments}
    ) {{
      trip {{
        route {{
          shortName
        }}
      }}
      scheduledArrival
      realtimeArrival
      realtimeState
      headsign
    }}
  }}
}}"""


def build_departures_query(
    stop: str, options: FetchOptions, now: datetime
) -> dict[str, Any]:
    """Build the GraphQL request body for a stop's upcoming departures.

    ``startTime`` and ``timeRange`` are declared, used and sent only when the
    offset or window is non-zero.

    Args:
        stop: HSL stop id (e.g. "HSL:1220409").
        options: Fetch options; never modified.
        now: Current time, used as the base for the offset.

    Returns:
        Request body with ``query`` and ``variables`` keys.
    """
    variables: dict[str, Any] = {"stop": stop, "num": options.effective_rows}
    declarations: list[str] = []
    arguments: list[str] = []

    if options.has_offset:
        start = now + timedelta(minutes=options.time_offset_minutes)
        variables["startTime"] = int(start.timestamp())
        declarations.append("$startTime: Long")
        arguments.append("startTime: $startTime")

    if options.has_window:
        # Digitransit expects the range in seconds
        variables["timeRange"] = options.time_window_minutes * 60
        declarations.append("$timeRange: Int")
        arguments.append("timeRange: $timeRange")

    query = _QUERY_TEMPLATE.format(
        variable_declarations="".join(f"\n  {d}" for d in declarations),
        field_arguments="".join(f"\n      {a}" for a in arguments),
    )
    return {"query": query, "variables": variables}
