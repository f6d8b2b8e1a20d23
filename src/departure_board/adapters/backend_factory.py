"""Selects the departure backend for the configured provider."""

import logging
from typing import TYPE_CHECKING

from departure_board.adapters.config.app_config import AppConfig
from departure_board.adapters.hsl_api import HslDepartureBackend
from departure_board.adapters.nationalrail_api import NationalRailDepartureBackend
from departure_board.domain.ports.departure_backend import DepartureBackend

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


def create_backend(config: AppConfig, session: "ClientSession") -> DepartureBackend:
    """Create the backend for ``config.provider``.

    Raises:
        ConfigurationError: If the provider's credential is missing.
    """
    token = config.token_for_provider()
    backend: DepartureBackend
    if config.provider == "hsl":
        backend = HslDepartureBackend(session, token, timeout_seconds=config.timeout)
    else:
        backend = NationalRailDepartureBackend(session, token, timeout_seconds=config.timeout)

    logger.info(f"Using '{backend.name}' backend with {config.timeout}s timeout")
    return backend
