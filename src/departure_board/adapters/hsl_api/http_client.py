"""HTTP client for HSL GraphQL requests."""

import json
import logging
from typing import TYPE_CHECKING, Any

import aiohttp
from pydantic import ValidationError

from departure_board.adapters.api_request_logger import log_api_request
from departure_board.adapters.hsl_api.constants import HSL_AUTH_HEADER, HSL_QUERY_ENDPOINT
from departure_board.adapters.hsl_api.models import HslStop, HslStopResponse
from departure_board.domain.errors import BackendReportedError, ProtocolError, TransportError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class HslHttpClient:
    """HTTP client for the Digitransit GraphQL endpoint."""

    def __init__(
        self,
        session: "ClientSession",
        token: str,
        timeout_seconds: float = 5,
        endpoint: str = HSL_QUERY_ENDPOINT,
    ) -> None:
        """Initialize with an aiohttp session and subscription key."""
        self._session = session
        self._token = token
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._endpoint = endpoint

    async def _post(self, body: dict[str, Any]) -> tuple[int, str]:
        """POST the query. Returns (status, body)."""
        headers = {HSL_AUTH_HEADER: self._token, "Content-Type": "application/json"}
        log_api_request("POST", self._endpoint, headers=headers, payload=body)

        try:
            async with self._session.post(
                self._endpoint,
                data=json.dumps(body),
                headers=headers,
                timeout=self._timeout,
            ) as response:
                return response.status, await response.text()
        except TimeoutError as e:
            raise TransportError("HSL API request timed out") from e
        except aiohttp.ClientError as e:
            logger.warning(f"Error calling HSL API: {e}")
            raise TransportError(f"HSL API request failed: {e}") from e
        except UnicodeDecodeError as e:
            raise ProtocolError(f"HSL response body cannot be decoded: {e}") from e

    @staticmethod
    def parse_response(text: str) -> HslStop:
        """Decode the GraphQL envelope and return the stop.

        Raises:
            ProtocolError: If the body is not the expected JSON envelope.
            BackendReportedError: If the envelope carries errors or no stop.
        """
        try:
            envelope = HslStopResponse.model_validate_json(text)
        except ValidationError as e:
            raise ProtocolError(f"unexpected HSL response: {e}") from e

        if envelope.errors:
            messages = [error.message for error in envelope.errors]
            raise BackendReportedError(
                f"graph response includes errors: {'; '.join(messages)}", messages
            )

        if envelope.data is None or envelope.data.stop is None:
            raise BackendReportedError("stop not found")

        return envelope.data.stop

    async def query_stop(self, body: dict[str, Any]) -> HslStop:
        """Send a stop departures query and return the parsed stop.

        GraphQL errors are reported as BackendReportedError whatever the
        status; any other non-200 status is a TransportError.
        """
        status, text = await self._post(body)
        if status == 200:
            return self.parse_response(text)

        try:
            self.parse_response(text)
        except BackendReportedError as e:
            if e.messages:
                logger.error(f"HSL API returned GraphQL errors with status {status}")
                raise
        except ProtocolError:
            logger.debug("Error response body is not a GraphQL envelope", exc_info=True)

        logger.error(
            f"HSL API returned status {status} for {self._endpoint}: "
            f"{text[:500] or '(empty response body)'}"
        )
        raise TransportError(f"HSL API returned status {status}")
