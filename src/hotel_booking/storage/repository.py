"""Repository that persists the room catalog and the reservation ledger."""

from pathlib import Path
from typing import Callable, Iterable, TypeVar

from structlog import get_logger

from hotel_booking.codecs import ReservationRecordCodec, RoomRecordCodec
from hotel_booking.config.settings import Settings
from hotel_booking.exceptions import MalformedRecordError
from hotel_booking.models import Reservation, Room
from hotel_booking.storage.flat_file_store import FlatFileStore

logger = get_logger(__name__)

T = TypeVar("T")


class HotelRepository:
    """Loads and saves the two record streams.

    Loading is strict: a single malformed line fails the whole stream and
    nothing from it is returned. Blank lines are skipped.
    """

    def __init__(
        self,
        rooms_path: Path,
        reservations_path: Path,
        store: FlatFileStore | None = None,
    ):
        """Initialize the repository.

        Args:
            rooms_path: File holding room records
            reservations_path: File holding reservation records
            store: File store to use. Defaults to a UTF-8 FlatFileStore.
        """
        self.rooms_path = rooms_path
        self.reservations_path = reservations_path
        self.store = store or FlatFileStore()

    @classmethod
    def from_settings(cls, settings: Settings) -> "HotelRepository":
        """Build a repository for the configured file locations."""
        return cls(
            rooms_path=settings.rooms_path,
            reservations_path=settings.reservations_path,
            store=FlatFileStore(encoding=settings.storage.encoding),
        )

    def _load(self, path: Path, decode: Callable[[str, int], T], data_type: str) -> list[T]:
        records: list[T] = []
        for line_number, line in enumerate(self.store.read_lines(path), start=1):
            if not line.strip():
                continue
            try:
                records.append(decode(line, line_number))
            except MalformedRecordError as e:
                logger.error(
                    "Malformed record, aborting load",
                    data_type=data_type,
                    path=str(path),
                    line_number=line_number,
                    error=str(e),
                )
                raise

        logger.info("Loaded records", data_type=data_type, path=str(path), count=len(records))
        return records

    def _save(self, path: Path, lines: list[str], data_type: str) -> None:
        self.store.write_lines(path, lines)
        logger.info("Saved records", data_type=data_type, path=str(path), count=len(lines))

    def load_rooms(self) -> list[Room]:
        """Load all rooms.

        Returns:
            Rooms in file order; empty if the file does not exist

        Raises:
            MalformedRecordError: If any line is not a valid room record
            PersistenceError: If the file cannot be read
        """
        return self._load(self.rooms_path, RoomRecordCodec.decode, "rooms")

    def load_reservations(self) -> list[Reservation]:
        """Load all reservations.

        Returns:
            Reservations in file order; empty if the file does not exist

        Raises:
            MalformedRecordError: If any line is not a valid reservation record
            PersistenceError: If the file cannot be read
        """
        return self._load(self.reservations_path, ReservationRecordCodec.decode, "reservations")

    def save_rooms(self, rooms: Iterable[Room]) -> None:
        """Overwrite the rooms file with the given rooms.

        Every room is encoded before the file is touched, so an unencodable
        room leaves the previous file intact.
        """
        lines = [RoomRecordCodec.encode(room) for room in rooms]
        self._save(self.rooms_path, lines, "rooms")

    def save_reservations(self, reservations: Iterable[Reservation]) -> None:
        """Overwrite the reservations file with the given reservations."""
        lines = [ReservationRecordCodec.encode(reservation) for reservation in reservations]
        self._save(self.reservations_path, lines, "reservations")
