"""Codec for converting rooms to and from comma-delimited records."""

from decimal import Decimal, InvalidOperation

from pydantic import ValidationError
from structlog import get_logger

from hotel_booking.codecs.fields import DELIMITER, check_text_field, split_record
from hotel_booking.exceptions import MalformedRecordError
from hotel_booking.models.room import Room

logger = get_logger(__name__)


class RoomRecordCodec:
    """Encodes rooms as ``roomNumber,category,pricePerNight`` lines."""

    FIELD_COUNT = 3

    @staticmethod
    def encode(room: Room) -> str:
        """Convert a room to a record line.

        Args:
            room: Room to encode

        Returns:
            Record line without trailing newline

        Raises:
            MalformedRecordError: If the category cannot be stored unquoted
        """
        check_text_field("category", room.category)
        return DELIMITER.join(
            [str(room.room_number), room.category, str(room.price_per_night)]
        )

    @staticmethod
    def decode(line: str, line_number: int | None = None) -> Room:
        """Parse a record line into a room.

        Args:
            line: Record line (surrounding whitespace is ignored)
            line_number: 1-based line number for error messages

        Returns:
            Decoded Room

        Raises:
            MalformedRecordError: If the line does not hold a valid room
        """
        number_text, category, price_text = split_record(
            line, RoomRecordCodec.FIELD_COUNT, line_number
        )

        try:
            room_number = int(number_text)
        except ValueError as e:
            raise MalformedRecordError(
                f"invalid room number {number_text!r}", line_number
            ) from e

        try:
            price = Decimal(price_text)
        except InvalidOperation as e:
            raise MalformedRecordError(f"invalid price {price_text!r}", line_number) from e

        try:
            return Room(room_number=room_number, category=category, price_per_night=price)
        except ValidationError as e:
            logger.warning(
                "Room record failed validation",
                line_number=line_number,
                error=str(e),
            )
            raise MalformedRecordError(f"invalid room: {e}", line_number) from e
