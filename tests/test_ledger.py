"""Unit tests for the room catalog and the reservation ledger."""

from datetime import date
from decimal import Decimal

import pytest

from hotel_booking.exceptions import (
    BookingErrorKind,
    InvalidDateRangeError,
    RoomNotFoundError,
)
from hotel_booking.models import BookingStatus, Room
from hotel_booking.services import ReservationIdSequence, ReservationLedger, RoomCatalog


@pytest.fixture
def catalog(room_101):
    catalog = RoomCatalog()
    catalog.add_room(room_101)
    catalog.add_room(Room(room_number=102, category="Standard", price_per_night=Decimal("2500")))
    catalog.add_room(Room(room_number=201, category="Deluxe", price_per_night=Decimal("4000")))
    return catalog


@pytest.fixture
def ledger(catalog):
    return ReservationLedger(catalog, ReservationIdSequence(prefix="R", start=1000))


class TestRoomCatalog:
    """Tests for RoomCatalog."""

    def test_add_and_find_room(self, room_101):
        catalog = RoomCatalog()
        assert catalog.is_empty()

        catalog.add_room(room_101)

        assert catalog.find_room(101) == room_101
        assert catalog.find_room(999) is None
        assert len(catalog) == 1

    def test_add_room_replaces_same_number(self, room_101):
        catalog = RoomCatalog()
        catalog.add_room(room_101)
        catalog.add_room(Room(room_number=101, category="Suite", price_per_night=Decimal("9000")))

        assert len(catalog) == 1
        assert catalog.find_room(101).category == "Suite"

    def test_list_rooms(self, catalog):
        numbers = {room.room_number for room in catalog.list_rooms()}
        assert numbers == {101, 102, 201}


class TestBooking:
    """Tests for ReservationLedger.book()."""

    def test_overlapping_and_adjacent_bookings(self, ledger):
        """Alice books, Bob overlaps and fails, Carol touches and succeeds."""
        alice = ledger.book("Alice", 101, date(2024, 1, 10), date(2024, 1, 12))
        bob = ledger.book("Bob", 101, date(2024, 1, 11), date(2024, 1, 13))
        carol = ledger.book("Carol", 101, date(2024, 1, 12), date(2024, 1, 14))

        assert alice.status == BookingStatus.BOOKED
        assert alice.reservation.total_price == Decimal("5000")
        assert bob.status == BookingStatus.UNAVAILABLE
        assert bob.reservation is None
        assert carol.status == BookingStatus.BOOKED
        assert len(ledger) == 2

    def test_total_is_nights_times_price(self, ledger):
        result = ledger.book("Dave", 201, date(2024, 3, 1), date(2024, 3, 8))

        assert result.quote.nights == 7
        assert result.reservation.total_price == Decimal("4000") * 7
        assert result.reservation.nights == 7

    def test_ids_are_prefixed_and_increasing(self, ledger):
        first = ledger.book("A", 101, date(2024, 1, 1), date(2024, 1, 2)).reservation
        second = ledger.book("B", 102, date(2024, 1, 1), date(2024, 1, 2)).reservation

        assert first.reservation_id == "R1000"
        assert second.reservation_id == "R1001"

    def test_unknown_room_is_rejected(self, ledger):
        result = ledger.book("Eve", 999, date(2024, 1, 1), date(2024, 1, 3))

        assert result.status == BookingStatus.REJECTED
        assert result.error_kind == BookingErrorKind.ROOM_NOT_FOUND
        assert len(ledger) == 0
        with pytest.raises(RoomNotFoundError):
            result.raise_for_error()

    @pytest.mark.parametrize(
        "check_in,check_out",
        [
            (date(2024, 1, 5), date(2024, 1, 5)),
            (date(2024, 1, 5), date(2024, 1, 4)),
        ],
    )
    def test_empty_or_negative_range_is_rejected(self, ledger, check_in, check_out):
        result = ledger.book("Frank", 101, check_in, check_out)

        assert result.status == BookingStatus.REJECTED
        assert result.error_kind == BookingErrorKind.INVALID_RANGE
        assert len(ledger) == 0
        with pytest.raises(InvalidDateRangeError):
            result.raise_for_error()

    def test_invalid_range_is_rejected_even_when_room_is_taken(self, ledger):
        """A malformed request is an error, not an availability outcome."""
        ledger.book("Alice", 101, date(2024, 1, 10), date(2024, 1, 12))

        result = ledger.book("Bob", 101, date(2024, 1, 11), date(2024, 1, 11))

        assert result.status == BookingStatus.REJECTED

    def test_unknown_room_checked_before_range(self, ledger):
        result = ledger.book("Gus", 999, date(2024, 1, 5), date(2024, 1, 1))

        assert result.error_kind == BookingErrorKind.ROOM_NOT_FOUND

    def test_raise_for_error_returns_self_when_booked(self, ledger):
        result = ledger.book("Hal", 101, date(2024, 1, 1), date(2024, 1, 2))

        assert result.raise_for_error() is result

    def test_other_room_is_not_affected(self, ledger):
        ledger.book("Alice", 101, date(2024, 1, 10), date(2024, 1, 12))

        result = ledger.book("Bob", 102, date(2024, 1, 10), date(2024, 1, 12))

        assert result.is_booked


class TestAvailability:
    """Tests for the half-open overlap rule."""

    @pytest.mark.parametrize(
        "check_in,check_out,available",
        [
            (date(2024, 1, 8), date(2024, 1, 10), True),  # ends on existing check-in
            (date(2024, 1, 12), date(2024, 1, 15), True),  # starts on existing check-out
            (date(2024, 1, 9), date(2024, 1, 11), False),
            (date(2024, 1, 11), date(2024, 1, 13), False),
            (date(2024, 1, 10), date(2024, 1, 12), False),
            (date(2024, 1, 1), date(2024, 1, 31), False),
            (date(2024, 1, 11), date(2024, 1, 12), False),
        ],
    )
    def test_is_available(self, ledger, check_in, check_out, available):
        ledger.book("Alice", 101, date(2024, 1, 10), date(2024, 1, 12))

        assert ledger.is_available(101, check_in, check_out) is available

    def test_overlap_is_symmetric(self, ledger, catalog):
        other = ReservationLedger(catalog, ReservationIdSequence())
        ledger.book("A", 101, date(2024, 1, 1), date(2024, 1, 3))
        other.book("B", 101, date(2024, 1, 2), date(2024, 1, 4))

        assert not ledger.is_available(101, date(2024, 1, 2), date(2024, 1, 4))
        assert not other.is_available(101, date(2024, 1, 1), date(2024, 1, 3))

    def test_search_matches_category_case_insensitively(self, ledger):
        rooms = ledger.search_available("sTaNdArD", date(2024, 1, 1), date(2024, 1, 2))

        assert {room.room_number for room in rooms} == {101, 102}

    def test_search_excludes_booked_rooms(self, ledger):
        ledger.book("Alice", 101, date(2024, 1, 10), date(2024, 1, 12))

        rooms = ledger.search_available("Standard", date(2024, 1, 11), date(2024, 1, 13))

        assert [room.room_number for room in rooms] == [102]

    def test_search_returns_empty_list_when_nothing_matches(self, ledger):
        assert ledger.search_available("Penthouse", date(2024, 1, 1), date(2024, 1, 2)) == []

    def test_search_returns_empty_list_when_all_taken(self, ledger):
        ledger.book("A", 201, date(2024, 1, 1), date(2024, 1, 5))

        assert ledger.search_available("Deluxe", date(2024, 1, 2), date(2024, 1, 3)) == []


class TestQuote:
    """Tests for ReservationLedger.quote()."""

    def test_quote_commits_nothing(self, ledger):
        result = ledger.quote(101, date(2024, 1, 10), date(2024, 1, 13))

        assert result.status == BookingStatus.QUOTED
        assert result.quote.total_price == Decimal("7500")
        assert result.reservation is None
        assert len(ledger) == 0
        assert ledger.id_sequence.next_value == 1000

    def test_quote_reports_unavailable(self, ledger):
        ledger.book("Alice", 101, date(2024, 1, 10), date(2024, 1, 12))

        assert ledger.quote(101, date(2024, 1, 11), date(2024, 1, 12)).is_unavailable


class TestCancel:
    """Tests for cancel, find and list."""

    def test_cancel_frees_the_range(self, ledger):
        booked = ledger.book("Alice", 101, date(2024, 1, 10), date(2024, 1, 12)).reservation

        assert ledger.cancel(booked.reservation_id) is True
        assert ledger.find(booked.reservation_id) is None
        assert ledger.book("Bob", 101, date(2024, 1, 10), date(2024, 1, 12)).is_booked

    def test_cancel_unknown_id_changes_nothing(self, ledger):
        ledger.book("Alice", 101, date(2024, 1, 10), date(2024, 1, 12))

        assert ledger.cancel("R9999") is False
        assert len(ledger) == 1

    def test_cancelled_ids_are_not_reused(self, ledger):
        first = ledger.book("A", 101, date(2024, 1, 1), date(2024, 1, 2)).reservation
        ledger.cancel(first.reservation_id)

        second = ledger.book("B", 101, date(2024, 1, 1), date(2024, 1, 2)).reservation

        assert second.reservation_id != first.reservation_id

    def test_failed_resync_leaves_ledger_unchanged(self, ledger, monkeypatch):
        kept = ledger.book("Alice", 101, date(2024, 1, 10), date(2024, 1, 12)).reservation
        incoming = kept.model_copy(update={"reservation_id": "R2000", "guest_name": "Bob"})

        def broken_resync(reservation_ids):
            raise ValueError("bad id")

        monkeypatch.setattr(ledger.id_sequence, "resync", broken_resync)

        with pytest.raises(ValueError):
            ledger.restore([incoming])

        assert ledger.list_all() == [kept]

    def test_find_and_list_all(self, ledger):
        booked = ledger.book("Alice", 101, date(2024, 1, 10), date(2024, 1, 12)).reservation

        assert ledger.find(booked.reservation_id) == booked
        assert ledger.list_all() == [booked]
