"""Booking quote and result models.

A booking attempt ends in one of four states:

- QUOTED: the request is valid and the room is free; nothing was stored yet
- BOOKED: the reservation was stored
- UNAVAILABLE: the request is valid but the room is taken for those dates
- REJECTED: the request itself is wrong (unknown room, empty date range)

UNAVAILABLE is a normal outcome that callers may retry with another room
or dates. REJECTED carries an error kind and can be turned back into the
matching exception with ``raise_for_error()``.
"""

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from hotel_booking.exceptions import (
    BookingErrorKind,
    BookingValidationError,
    InvalidDateRangeError,
    RoomNotFoundError,
)
from hotel_booking.models.reservation import Reservation


class BookingStatus(str, Enum):
    """Outcome of a quote or booking request."""

    QUOTED = "quoted"
    BOOKED = "booked"
    UNAVAILABLE = "unavailable"
    REJECTED = "rejected"


class Quote(BaseModel):
    """Price of a prospective stay, computed without committing it."""

    room_number: int
    check_in: date
    check_out: date
    nights: int = Field(gt=0)
    price_per_night: Decimal
    total_price: Decimal

    model_config = ConfigDict(frozen=True)


class BookingResult(BaseModel):
    """Tagged result of ReservationLedger.quote() and ReservationLedger.book()."""

    status: BookingStatus
    room_number: int
    quote: Optional[Quote] = None
    reservation: Optional[Reservation] = None
    error_kind: Optional[BookingErrorKind] = None
    message: str = ""

    model_config = ConfigDict(frozen=True)

    @classmethod
    def quoted(cls, quote: Quote) -> "BookingResult":
        return cls(status=BookingStatus.QUOTED, room_number=quote.room_number, quote=quote)

    @classmethod
    def booked(cls, quote: Quote, reservation: Reservation) -> "BookingResult":
        return cls(
            status=BookingStatus.BOOKED,
            room_number=quote.room_number,
            quote=quote,
            reservation=reservation,
        )

    @classmethod
    def unavailable(cls, room_number: int) -> "BookingResult":
        return cls(
            status=BookingStatus.UNAVAILABLE,
            room_number=room_number,
            message=f"Room {room_number} is not available for those dates",
        )

    @classmethod
    def rejected(cls, room_number: int, error: BookingValidationError) -> "BookingResult":
        return cls(
            status=BookingStatus.REJECTED,
            room_number=room_number,
            error_kind=error.kind,
            message=str(error),
        )

    @property
    def is_quoted(self) -> bool:
        return self.status == BookingStatus.QUOTED

    @property
    def is_booked(self) -> bool:
        return self.status == BookingStatus.BOOKED

    @property
    def is_unavailable(self) -> bool:
        return self.status == BookingStatus.UNAVAILABLE

    @property
    def is_rejected(self) -> bool:
        return self.status == BookingStatus.REJECTED

    def raise_for_error(self) -> "BookingResult":
        """Raise the validation error behind a REJECTED result.

        Returns:
            Self, for any other status, so calls can be chained

        Raises:
            RoomNotFoundError: If the room was not in the catalog
            InvalidDateRangeError: If check-out was not after check-in
        """
        if not self.is_rejected:
            return self
        if self.error_kind == BookingErrorKind.ROOM_NOT_FOUND:
            raise RoomNotFoundError(self.room_number)
        raise InvalidDateRangeError(self.message or "Check-out must be after check-in")
