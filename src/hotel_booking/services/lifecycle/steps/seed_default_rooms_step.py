"""Step to seed the default rooms into an empty catalog."""

from hotel_booking.services.lifecycle.base_step import LifecycleStep
from hotel_booking.services.lifecycle.context import LifecycleContext


class SeedDefaultRoomsStep(LifecycleStep):
    """Add the default rooms when nothing was loaded."""

    def __init__(self):
        super().__init__("SeedDefaultRooms")

    def execute(self, context: LifecycleContext) -> bool:
        context.stats["default_rooms_seeded"] = context.service.seed_default_rooms()
        return True
