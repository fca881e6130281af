"""Console interface package."""

from hotel_booking.cli.session import InteractiveSession

__all__ = ["InteractiveSession"]
