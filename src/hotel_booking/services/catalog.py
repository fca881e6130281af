"""In-memory room catalog."""

from structlog import get_logger

from hotel_booking.models import Room

logger = get_logger(__name__)


class RoomCatalog:
    """Holds the bookable rooms, keyed by room number."""

    def __init__(self) -> None:
        self._rooms: dict[int, Room] = {}

    def __len__(self) -> int:
        return len(self._rooms)

    def add_room(self, room: Room) -> None:
        """Insert a room, replacing any room with the same number."""
        if room.room_number in self._rooms:
            logger.info("Replacing room", room_number=room.room_number)
        self._rooms[room.room_number] = room

    def list_rooms(self) -> list[Room]:
        """Get all rooms. Order is not part of the contract."""
        return list(self._rooms.values())

    def find_room(self, room_number: int) -> Room | None:
        return self._rooms.get(room_number)

    def is_empty(self) -> bool:
        return not self._rooms

    def clear(self) -> None:
        self._rooms.clear()
