"""Record codecs for the flat-file streams."""

from hotel_booking.codecs.reservation_codec import ReservationRecordCodec
from hotel_booking.codecs.room_codec import RoomRecordCodec

__all__ = [
    "RoomRecordCodec",
    "ReservationRecordCodec",
]
