"""HTTP client for Darwin OpenLDBWS SOAP requests."""

import logging
from typing import TYPE_CHECKING

import aiohttp

from departure_board.adapters.api_request_logger import log_api_request
from departure_board.adapters.nationalrail_api.constants import (
    LDBWS_CONTENT_TYPE,
    LDBWS_ENDPOINT,
)
from departure_board.adapters.nationalrail_api.models import StationBoardResult
from departure_board.adapters.nationalrail_api.response_parser import parse_departure_board
from departure_board.domain.errors import BackendReportedError, ProtocolError, TransportError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class NationalRailHttpClient:
    """HTTP client for the OpenLDBWS endpoint."""

    def __init__(
        self,
        session: "ClientSession",
        timeout_seconds: float = 5,
        endpoint: str = LDBWS_ENDPOINT,
    ) -> None:
        """Initialize with an aiohttp session."""
        self._session = session
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._endpoint = endpoint

    async def _post(self, envelope: str) -> tuple[int, str]:
        """POST the envelope. Returns (status, body)."""
        headers = {"Content-Type": LDBWS_CONTENT_TYPE}
        log_api_request("POST", self._endpoint, headers=headers, payload=envelope)

        try:
            async with self._session.post(
                self._endpoint,
                data=envelope.encode("utf-8"),
                headers=headers,
                timeout=self._timeout,
            ) as response:
                return response.status, await response.text()
        except TimeoutError as e:
            raise TransportError("National Rail API request timed out") from e
        except aiohttp.ClientError as e:
            logger.warning(f"Error calling National Rail API: {e}")
            raise TransportError(f"National Rail API request failed: {e}") from e
        except UnicodeDecodeError as e:
            raise ProtocolError(f"National Rail response body cannot be decoded: {e}") from e

    async def get_departure_board(self, envelope: str) -> StationBoardResult:
        """Send a GetDepartureBoard request and parse the station board.

        SOAP faults are reported as BackendReportedError even though they
        arrive with an error status; any other non-200 status is a
        TransportError.
        """
        status, body = await self._post(envelope)
        if status == 200:
            return parse_departure_board(body)

        try:
            parse_departure_board(body)
        except BackendReportedError:
            logger.error(f"National Rail API returned a SOAP fault with status {status}")
            raise
        except ProtocolError:
            logger.debug("Error response body is not a SOAP envelope", exc_info=True)

        logger.error(
            f"National Rail API returned status {status} for {self._endpoint}: "
            f"{body[:500] or '(empty response body)'}"
        )
        raise TransportError(f"National Rail API returned status {status}")
