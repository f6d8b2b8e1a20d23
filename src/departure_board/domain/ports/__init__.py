"""Ports (interfaces) for the ports-and-adapters architecture."""

from departure_board.domain.ports.departure_backend import DepartureBackend
from departure_board.domain.ports.result_renderer import ResultRenderer

__all__ = [
    "DepartureBackend",
    "ResultRenderer",
]
