"""Constants for the National Rail Darwin OpenLDBWS adapter.

API Documentation: https://lite.realtime.nationalrail.co.uk/OpenLDBWS/
"""

LDBWS_ENDPOINT = "https://lite.realtime.nationalrail.co.uk/OpenLDBWS/ldb11.asmx"
LDBWS_CONTENT_TYPE = "text/xml"
NATIONALRAIL_TIMEZONE = "Europe/London"

SOAP_NAMESPACE = "http://www.w3.org/2003/05/soap-envelope"
TOKEN_NAMESPACE = "http://thalesgroup.com/RTTI/2013-11-28/Token/types"
LDB_NAMESPACE = "http://thalesgroup.com/RTTI/2017-10-01/ldb/"

# Estimated departure token meaning the service runs as scheduled
ETD_ON_TIME = "On time"

# Service type -> short display code; trains carry no code
SERVICE_TYPE_CODES = {
    "bus": "B",
    "ferry": "F",
}
