"""Domain models for rooms, reservations and booking results."""

from hotel_booking.models.booking import BookingResult, BookingStatus, Quote
from hotel_booking.models.reservation import Reservation
from hotel_booking.models.room import Room

__all__ = [
    "Room",
    "Reservation",
    "Quote",
    "BookingResult",
    "BookingStatus",
]
