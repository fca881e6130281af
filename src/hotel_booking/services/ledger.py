"""Reservation ledger: availability, quotes, bookings and cancellations."""

from datetime import date
from typing import Iterable

from structlog import get_logger

from hotel_booking.exceptions import (
    BookingValidationError,
    InvalidDateRangeError,
    RoomNotFoundError,
)
from hotel_booking.models import BookingResult, Quote, Reservation, Room
from hotel_booking.services.catalog import RoomCatalog
from hotel_booking.services.reservation_ids import ReservationIdSequence

logger = get_logger(__name__)


class ReservationLedger:
    """Holds confirmed reservations and decides whether new ones fit.

    Two reservations for the same room conflict when their half-open
    ranges [check_in, check_out) share at least one night. The check runs
    only when booking; reservations restored from storage are taken as-is.
    """

    def __init__(self, catalog: RoomCatalog, id_sequence: ReservationIdSequence):
        """Initialize the ledger.

        Args:
            catalog: Room catalog used to resolve room numbers and prices
            id_sequence: Source of new reservation IDs
        """
        self.catalog = catalog
        self.id_sequence = id_sequence
        self._reservations: dict[str, Reservation] = {}

    def __len__(self) -> int:
        return len(self._reservations)

    # ---------- queries ----------

    def is_available(self, room_number: int, check_in: date, check_out: date) -> bool:
        """Check that no reservation of the room overlaps [check_in, check_out).

        A stay ending on day D does not conflict with one starting on day D.
        """
        for reservation in self._reservations.values():
            if reservation.room_number != room_number:
                continue
            if reservation.overlaps(check_in, check_out):
                return False
        return True

    def search_available(self, category: str, check_in: date, check_out: date) -> list[Room]:
        """Find rooms of a category that are free for the whole range.

        Args:
            category: Category to match, case-insensitive
            check_in: First night
            check_out: Departure day

        Returns:
            Matching free rooms; empty if none match or all are taken
        """
        rooms = [
            room
            for room in self.catalog.list_rooms()
            if room.matches_category(category)
            and self.is_available(room.room_number, check_in, check_out)
        ]
        logger.debug(
            "Searched available rooms",
            category=category,
            check_in=check_in.isoformat(),
            check_out=check_out.isoformat(),
            found=len(rooms),
        )
        return rooms

    def find(self, reservation_id: str) -> Reservation | None:
        return self._reservations.get(reservation_id)

    def list_all(self) -> list[Reservation]:
        return list(self._reservations.values())

    # ---------- booking ----------

    def _validate_request(self, room_number: int, check_in: date, check_out: date) -> Room:
        """Resolve the room and check the date range.

        Returns:
            The requested room

        Raises:
            RoomNotFoundError: If the room is not in the catalog
            InvalidDateRangeError: If check-out is not after check-in
        """
        room = self.catalog.find_room(room_number)
        if room is None:
            raise RoomNotFoundError(room_number)
        if check_out <= check_in:
            raise InvalidDateRangeError()
        return room

    @staticmethod
    def _price(room: Room, check_in: date, check_out: date) -> Quote:
        nights = (check_out - check_in).days
        return Quote(
            room_number=room.room_number,
            check_in=check_in,
            check_out=check_out,
            nights=nights,
            price_per_night=room.price_per_night,
            total_price=room.price_per_night * nights,
        )

    def quote(self, room_number: int, check_in: date, check_out: date) -> BookingResult:
        """Price a stay without storing anything.

        Args:
            room_number: Requested room
            check_in: First night
            check_out: Departure day

        Returns:
            QUOTED with the price, UNAVAILABLE if the room is taken,
            or REJECTED if the request is invalid
        """
        try:
            room = self._validate_request(room_number, check_in, check_out)
        except BookingValidationError as e:
            logger.info("Quote rejected", room_number=room_number, error=str(e))
            return BookingResult.rejected(room_number, e)

        if not self.is_available(room_number, check_in, check_out):
            return BookingResult.unavailable(room_number)

        return BookingResult.quoted(self._price(room, check_in, check_out))

    def book(
        self,
        guest_name: str,
        room_number: int,
        check_in: date,
        check_out: date,
    ) -> BookingResult:
        """Book a room for a guest.

        Validation runs in a fixed order: unknown room, then empty or
        negative range, then availability. Once this method succeeds the
        reservation is stored; asking the guest for confirmation happens
        before calling it.

        Args:
            guest_name: Name of the guest
            room_number: Requested room
            check_in: First night
            check_out: Departure day

        Returns:
            BOOKED with the new reservation, UNAVAILABLE if the room is
            taken, or REJECTED with the error kind if the request is invalid
        """
        result = self.quote(room_number, check_in, check_out)
        if not result.is_quoted:
            logger.info(
                "Booking not made",
                room_number=room_number,
                status=result.status.value,
                reason=result.message,
            )
            return result

        quote = result.quote
        reservation = Reservation(
            reservation_id=self.id_sequence.allocate(),
            guest_name=guest_name,
            room_number=room_number,
            check_in=check_in,
            check_out=check_out,
            total_price=quote.total_price,
        )
        self._reservations[reservation.reservation_id] = reservation

        logger.info(
            "Reservation booked",
            reservation_id=reservation.reservation_id,
            room_number=room_number,
            nights=quote.nights,
            total_price=str(quote.total_price),
        )
        return BookingResult.booked(quote, reservation)

    def cancel(self, reservation_id: str) -> bool:
        """Remove a reservation.

        Returns:
            True if the reservation existed and was removed
        """
        removed = self._reservations.pop(reservation_id, None)
        if removed is None:
            logger.info("Cancel requested for unknown reservation", reservation_id=reservation_id)
            return False

        logger.info("Reservation cancelled", reservation_id=reservation_id)
        return True

    # ---------- bootstrap ----------

    def restore(self, reservations: Iterable[Reservation]) -> int:
        """Replace the ledger contents with persisted reservations.

        Records are stored verbatim, without overlap checks, and the ID
        sequence is advanced past every loaded ID.

        Returns:
            Number of reservations restored
        """
        loaded = {r.reservation_id: r for r in reservations}
        self.id_sequence.resync(loaded.keys())
        self._reservations = loaded
        return len(self._reservations)
