"""Error taxonomy for departure board queries.

None of these errors are recovered internally: a single failing station
aborts the whole aggregation pass.
"""


class DepartureBoardError(Exception):
    """Base class for all departure board errors."""


class ConfigurationError(DepartureBoardError):
    """Missing station list, missing credential or invalid option."""


class TransportError(DepartureBoardError):
    """The HTTP call failed, timed out or returned an unexpected status."""


# Adapters report transport failures under this name as well.
UpstreamError = TransportError


class ProtocolError(DepartureBoardError):
    """The response body does not match the provider's expected format."""


class BackendReportedError(DepartureBoardError):
    """A well-formed response carried an application-level error."""

    def __init__(self, message: str, messages: list[str] | None = None) -> None:
        """Initialize with a summary and the provider's error messages."""
        super().__init__(message)
        self.messages = messages or []


class ParseError(DepartureBoardError):
    """A field expected to hold a time value could not be parsed."""
