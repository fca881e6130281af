"""Flat-file persistence package."""

from hotel_booking.exceptions import MalformedRecordError, PersistenceError
from hotel_booking.storage.flat_file_store import FlatFileStore
from hotel_booking.storage.repository import HotelRepository

__all__ = [
    "FlatFileStore",
    "HotelRepository",
    "PersistenceError",
    "MalformedRecordError",
]
