"""Step to load the reservation ledger from storage."""

from hotel_booking.exceptions import PersistenceError
from hotel_booking.services.lifecycle.base_step import LifecycleStep
from hotel_booking.services.lifecycle.context import LifecycleContext


class LoadReservationsStep(LifecycleStep):
    """Load persisted reservations and resynchronize the ID sequence."""

    def __init__(self, required: bool = False):
        super().__init__("LoadReservations", required=required)

    def execute(self, context: LifecycleContext) -> bool:
        """Load reservations.

        Args:
            context: Lifecycle context

        Returns:
            True if successful, False otherwise
        """
        try:
            count = context.service.load_reservations()
        except PersistenceError as e:
            self.logger.warning("Could not load reservations", error=str(e))
            context.add_error(self.name, f"Could not load reservations: {e}")
            return False

        context.stats["reservations_loaded"] = count
        context.stats["next_reservation_number"] = context.service.id_sequence.next_value
        return True
