"""Step to load the room catalog from storage."""

from hotel_booking.exceptions import PersistenceError
from hotel_booking.services.lifecycle.base_step import LifecycleStep
from hotel_booking.services.lifecycle.context import LifecycleContext


class LoadRoomsStep(LifecycleStep):
    """Load persisted rooms into the catalog."""

    def __init__(self, required: bool = False):
        super().__init__("LoadRooms", required=required)

    def execute(self, context: LifecycleContext) -> bool:
        """Load rooms.

        A failed load leaves the catalog empty so startup can fall back to
        the default rooms.

        Args:
            context: Lifecycle context

        Returns:
            True if successful, False otherwise
        """
        try:
            count = context.service.load_rooms()
        except PersistenceError as e:
            self.logger.warning("Could not load rooms", error=str(e))
            context.add_error(self.name, f"Could not load rooms: {e}")
            return False

        context.stats["rooms_loaded"] = count
        return True
