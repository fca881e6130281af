"""Configuration package."""

from hotel_booking.config.logging import configure_logging, get_logger
from hotel_booking.config.settings import DEFAULT_ROOMS, Settings, settings

__all__ = ["settings", "Settings", "DEFAULT_ROOMS", "configure_logging", "get_logger"]
