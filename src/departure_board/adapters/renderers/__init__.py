"""Output renderers."""

from departure_board.adapters.renderers.json_renderer import BoardDocument, JsonRenderer
from departure_board.adapters.renderers.table_renderer import TableRenderer

__all__ = ["BoardDocument", "JsonRenderer", "TableRenderer"]
