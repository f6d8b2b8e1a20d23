"""Constants for the HSL (Digitransit) GraphQL adapter.

API Documentation: https://digitransit.fi/en/developers/apis/1-routing-api/
"""

HSL_QUERY_ENDPOINT = "https://api.digitransit.fi/routing/v1/routers/hsl/index/graphql"
HSL_AUTH_HEADER = "digitransit-subscription-key"
HSL_TIMEZONE = "Europe/Helsinki"

# Vehicle mode -> short display code
VEHICLE_MODE_CODES = {
    "TRAM": "T",
    "METRO": "M",
    "BUS": "B",
}
UNKNOWN_MODE_CODE = "?"

REALTIME_STATE_CANCELED = "CANCELED"
