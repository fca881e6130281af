"""Step to save the room catalog."""

from hotel_booking.exceptions import PersistenceError
from hotel_booking.services.lifecycle.base_step import LifecycleStep
from hotel_booking.services.lifecycle.context import LifecycleContext


class SaveRoomsStep(LifecycleStep):
    """Overwrite the rooms file with the current catalog."""

    def __init__(self):
        super().__init__("SaveRooms")

    def execute(self, context: LifecycleContext) -> bool:
        """Save rooms.

        Args:
            context: Lifecycle context

        Returns:
            True if successful, False otherwise
        """
        try:
            context.service.save_rooms()
        except PersistenceError as e:
            self.logger.error("Failed to save rooms", error=str(e))
            context.add_error(self.name, f"rooms: {e}")
            return False

        context.stats["rooms_saved"] = len(context.service.catalog)
        return True
