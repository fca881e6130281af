"""Custom exceptions for the hotel booking manager."""
from enum import Enum


class HotelBookingError(Exception):
    """Base exception for all hotel booking errors."""

    pass


class BookingErrorKind(str, Enum):
    """Categories of booking requests that are rejected as invalid."""

    ROOM_NOT_FOUND = "room_not_found"
    INVALID_RANGE = "invalid_range"


class BookingValidationError(HotelBookingError):
    """Raised when a booking request is malformed rather than merely unavailable."""

    kind: BookingErrorKind

    def __init__(self, message: str, kind: BookingErrorKind):
        super().__init__(message)
        self.kind = kind


class RoomNotFoundError(BookingValidationError):
    """Raised when a booking references a room that is not in the catalog."""

    def __init__(self, room_number: int):
        super().__init__(f"Room not found: {room_number}", BookingErrorKind.ROOM_NOT_FOUND)
        self.room_number = room_number


class InvalidDateRangeError(BookingValidationError):
    """Raised when check-out is not strictly after check-in."""

    def __init__(self, message: str = "Check-out must be after check-in"):
        super().__init__(message, BookingErrorKind.INVALID_RANGE)


class PersistenceError(HotelBookingError):
    """Raised when a rooms or reservations file cannot be read or written."""

    pass


class MalformedRecordError(PersistenceError):
    """Raised when a persisted line cannot be decoded (or a model cannot be encoded)."""

    def __init__(self, message: str, line_number: int | None = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
