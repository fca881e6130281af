"""Booking services package."""

from hotel_booking.services.catalog import RoomCatalog
from hotel_booking.services.hotel_service import HotelService
from hotel_booking.services.ledger import ReservationLedger
from hotel_booking.services.reservation_ids import ReservationIdSequence

__all__ = [
    "RoomCatalog",
    "ReservationLedger",
    "ReservationIdSequence",
    "HotelService",
]
