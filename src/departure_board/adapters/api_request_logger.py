"""Utility for logging API requests when DEPARTURE_BOARD_LOG_REQUESTS is enabled."""

import json
import logging
import os
import re
from typing import Any

logger = logging.getLogger(__name__)

REDACTED = "***REDACTED***"

_SENSITIVE_HEADERS = {"authorization", "cookie", "x-api-key", "digitransit-subscription-key"}
_SOAP_TOKEN_PATTERN = re.compile(r"(<(?:\w+:)?TokenValue>)(.*?)(</(?:\w+:)?TokenValue>)", re.DOTALL)


def should_log_requests() -> bool:
    """Check if request logging is enabled via DEPARTURE_BOARD_LOG_REQUESTS."""
    return os.getenv("DEPARTURE_BOARD_LOG_REQUESTS", "").lower() == "true"


def _redact_sensitive_headers(headers: dict[str, str]) -> dict[str, str]:
    """Redact sensitive headers from logging."""
    return {k: REDACTED if k.lower() in _SENSITIVE_HEADERS else v for k, v in headers.items()}


def _redact_soap_token(payload: str) -> str:
    """Replace access token values in a SOAP envelope."""
    return _SOAP_TOKEN_PATTERN.sub(rf"\g<1>{REDACTED}\g<3>", payload)


def _format_payload(payload: Any) -> str:
    """Format payload for logging."""
    if isinstance(payload, str):
        return _redact_soap_token(payload)
    try:
        return json.dumps(payload, indent=2) if isinstance(payload, dict) else str(payload)
    except (TypeError, ValueError):
        return str(payload)


def log_api_request(
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
    payload: Any = None,
) -> None:
    """Log API request details if DEPARTURE_BOARD_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method (GET, POST, etc.).
        url: Request URL.
        headers: Request headers (credentials are redacted).
        payload: Request payload/body (SOAP tokens are redacted).
    """
    if not should_log_requests():
        return

    log_parts = [f"{method} {url}"]

    if headers:
        safe_headers = _redact_sensitive_headers(headers)
        log_parts.append(f"Headers: {json.dumps(safe_headers, indent=2)}")

    if payload is not None:
        log_parts.append(f"Payload: {_format_payload(payload)}")

    logger.info("API Request:\n" + "\n".join(log_parts))
