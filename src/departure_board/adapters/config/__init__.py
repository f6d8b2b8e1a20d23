"""Configuration adapters."""

from departure_board.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
