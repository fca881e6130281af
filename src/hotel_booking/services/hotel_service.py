"""Hotel service owning the catalog, the ledger and their persistence."""

from structlog import get_logger

from hotel_booking.config.settings import DEFAULT_ROOMS, BookingSettings, Settings
from hotel_booking.models import Room
from hotel_booking.services.catalog import RoomCatalog
from hotel_booking.services.ledger import ReservationLedger
from hotel_booking.services.reservation_ids import ReservationIdSequence
from hotel_booking.storage import HotelRepository

logger = get_logger(__name__)


class HotelService:
    """Single owner of all mutable booking state for one process.

    Built once at startup and handed to whatever serves requests, so there
    is no module-level catalog, ledger or ID counter.
    """

    def __init__(
        self,
        repository: HotelRepository,
        booking_settings: BookingSettings | None = None,
    ):
        """Initialize the service with empty state.

        Args:
            repository: Persistence for rooms and reservations
            booking_settings: ID and seeding rules. Defaults to BookingSettings().
        """
        self.repository = repository
        self.booking_settings = booking_settings or BookingSettings()
        self.catalog = RoomCatalog()
        self.id_sequence = ReservationIdSequence(
            prefix=self.booking_settings.id_prefix,
            start=self.booking_settings.id_start,
        )
        self.ledger = ReservationLedger(self.catalog, self.id_sequence)

    @classmethod
    def from_settings(cls, settings: Settings) -> "HotelService":
        """Build a service backed by the configured files."""
        return cls(
            repository=HotelRepository.from_settings(settings),
            booking_settings=settings.booking,
        )

    def load_rooms(self) -> int:
        """Replace the catalog with the persisted rooms.

        Returns:
            Number of rooms loaded

        Raises:
            PersistenceError: If the rooms file cannot be read or is malformed
        """
        rooms = self.repository.load_rooms()
        self.catalog.clear()
        for room in rooms:
            self.catalog.add_room(room)
        return len(self.catalog)

    def load_reservations(self) -> int:
        """Replace the ledger with the persisted reservations.

        Returns:
            Number of reservations loaded

        Raises:
            PersistenceError: If the reservations file cannot be read or is malformed
        """
        count = self.ledger.restore(self.repository.load_reservations())
        logger.info(
            "Reservations loaded",
            count=count,
            next_reservation_number=self.id_sequence.next_value,
        )
        return count

    def seed_default_rooms(self) -> bool:
        """Add the default rooms when the catalog is empty.

        Returns:
            True if rooms were added
        """
        if not self.catalog.is_empty():
            return False

        for room_number, category, price in DEFAULT_ROOMS:
            self.catalog.add_room(
                Room(room_number=room_number, category=category, price_per_night=price)
            )
        logger.info("Seeded default rooms", count=len(DEFAULT_ROOMS))
        return True

    def save_rooms(self) -> None:
        """Persist the catalog, overwriting the rooms file."""
        self.repository.save_rooms(self.catalog.list_rooms())

    def save_reservations(self) -> None:
        """Persist the ledger, overwriting the reservations file."""
        self.repository.save_reservations(self.ledger.list_all())
