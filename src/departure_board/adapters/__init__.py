"""Adapters layer - external system integrations."""

from departure_board.adapters.config import AppConfig
from departure_board.adapters.hsl_api import HslDepartureBackend
from departure_board.adapters.nationalrail_api import NationalRailDepartureBackend
from departure_board.adapters.renderers import JsonRenderer, TableRenderer

__all__ = [
    "AppConfig",
    "HslDepartureBackend",
    "JsonRenderer",
    "NationalRailDepartureBackend",
    "TableRenderer",
]
