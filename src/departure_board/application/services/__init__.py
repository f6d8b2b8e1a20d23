"""Application services."""

from departure_board.application.services.departure_aggregation_service import (
    DepartureAggregationService,
)

__all__ = ["DepartureAggregationService"]
