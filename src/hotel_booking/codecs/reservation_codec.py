"""Codec for converting reservations to and from comma-delimited records."""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from pydantic import ValidationError
from structlog import get_logger

from hotel_booking.codecs.fields import (
    DATE_FORMAT,
    DELIMITER,
    check_text_field,
    split_record,
)
from hotel_booking.exceptions import MalformedRecordError
from hotel_booking.models.reservation import Reservation

logger = get_logger(__name__)


class ReservationRecordCodec:
    """Encodes reservations as ``id,guestName,roomNumber,checkIn,checkOut,totalPrice`` lines."""

    FIELD_COUNT = 6

    @staticmethod
    def _parse_date(value: str, field_name: str, line_number: int | None) -> date:
        """Parse a YYYY-MM-DD date field.

        Args:
            value: Field text
            field_name: Field name for error messages
            line_number: 1-based line number for error messages

        Returns:
            Parsed date
        """
        try:
            return datetime.strptime(value, DATE_FORMAT).date()
        except ValueError as e:
            raise MalformedRecordError(
                f"invalid {field_name} date {value!r}, expected YYYY-MM-DD", line_number
            ) from e

    @staticmethod
    def encode(reservation: Reservation) -> str:
        """Convert a reservation to a record line.

        Args:
            reservation: Reservation to encode

        Returns:
            Record line without trailing newline

        Raises:
            MalformedRecordError: If the ID or guest name cannot be stored unquoted
        """
        check_text_field("reservation_id", reservation.reservation_id)
        check_text_field("guest_name", reservation.guest_name)
        return DELIMITER.join(
            [
                reservation.reservation_id,
                reservation.guest_name,
                str(reservation.room_number),
                reservation.check_in.strftime(DATE_FORMAT),
                reservation.check_out.strftime(DATE_FORMAT),
                str(reservation.total_price),
            ]
        )

    @staticmethod
    def decode(line: str, line_number: int | None = None) -> Reservation:
        """Parse a record line into a reservation.

        The line is reconstructed verbatim: the total price is taken as
        stored, not recomputed from the current room price.

        Args:
            line: Record line (surrounding whitespace is ignored)
            line_number: 1-based line number for error messages

        Returns:
            Decoded Reservation

        Raises:
            MalformedRecordError: If the line does not hold a valid reservation
        """
        (
            reservation_id,
            guest_name,
            room_text,
            check_in_text,
            check_out_text,
            total_text,
        ) = split_record(line, ReservationRecordCodec.FIELD_COUNT, line_number)

        try:
            room_number = int(room_text)
        except ValueError as e:
            raise MalformedRecordError(f"invalid room number {room_text!r}", line_number) from e

        check_in = ReservationRecordCodec._parse_date(check_in_text, "check-in", line_number)
        check_out = ReservationRecordCodec._parse_date(check_out_text, "check-out", line_number)

        try:
            total_price = Decimal(total_text)
        except InvalidOperation as e:
            raise MalformedRecordError(
                f"invalid total price {total_text!r}", line_number
            ) from e

        try:
            return Reservation(
                reservation_id=reservation_id,
                guest_name=guest_name,
                room_number=room_number,
                check_in=check_in,
                check_out=check_out,
                total_price=total_price,
            )
        except ValidationError as e:
            logger.warning(
                "Reservation record failed validation",
                line_number=line_number,
                reservation_id=reservation_id,
                error=str(e),
            )
            raise MalformedRecordError(f"invalid reservation: {e}", line_number) from e
