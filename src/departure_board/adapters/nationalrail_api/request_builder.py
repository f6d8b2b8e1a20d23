"""SOAP request builder for GetDepartureBoard."""

from xml.sax.saxutils import escape

from departure_board.adapters.nationalrail_api.constants import (
    LDB_NAMESPACE,
    SOAP_NAMESPACE,
    TOKEN_NAMESPACE,
)
from departure_board.domain.models.fetch_options import FetchOptions


def build_departure_board_request(token: str, station_code: str, options: FetchOptions) -> str:
    """Build the SOAP envelope for a station departure board.

    ``timeOffset`` and ``timeWindow`` elements are only present when the
    matching option is non-zero.

    Args:
        token: Darwin access token.
        station_code: Station CRS code (e.g. "KGX").
        options: Fetch options; never modified.

    Returns:
        The request body as a string.
    """
    optional = ""
    if options.has_offset:
        optional += f"\n\t\t\t<ldb:timeOffset>{options.time_offset_minutes}</ldb:timeOffset>"
    if options.has_window:
        optional += f"\n\t\t\t<ldb:timeWindow>{options.time_window_minutes}</ldb:timeWindow>"

    return f"""<soap:Envelope
	xmlns:soap="{SOAP_NAMESPACE}"
	xmlns:typ="{TOKEN_NAMESPACE}"
	xmlns:ldb="{LDB_NAMESPACE}">
	<soap:Header>
		<typ:AccessToken>
			<typ:TokenValue>{escape(token)}</typ:TokenValue>
		</typ:AccessToken>
	</soap:Header>
	<soap:Body>
		<ldb:GetDepartureBoardRequest>
			<ldb:numRows>{options.effective_rows}</ldb:numRows>
			<ldb:crs>{escape(station_code)}</ldb:crs>{optional}
		</ldb:GetDepartureBoardRequest>
	</soap:Body>
</soap:Envelope>
"""
