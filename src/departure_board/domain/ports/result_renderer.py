"""Result renderer port."""

from typing import Protocol

from departure_board.domain.models.result_set import ResultSet


class ResultRenderer(Protocol):
    """Port for turning a result set into output text."""

    def render(self, result: ResultSet) -> str:
        """Render the result set without re-ordering it."""
        ...
