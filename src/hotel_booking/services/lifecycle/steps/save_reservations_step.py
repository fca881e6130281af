"""Step to save the reservation ledger."""

from hotel_booking.exceptions import PersistenceError
from hotel_booking.services.lifecycle.base_step import LifecycleStep
from hotel_booking.services.lifecycle.context import LifecycleContext


class SaveReservationsStep(LifecycleStep):
    """Overwrite the reservations file with the current ledger."""

    def __init__(self):
        super().__init__("SaveReservations")

    def execute(self, context: LifecycleContext) -> bool:
        """Save reservations.

        Runs even when saving rooms failed, so one bad file does not lose
        the other.

        Args:
            context: Lifecycle context

        Returns:
            True if successful, False otherwise
        """
        try:
            context.service.save_reservations()
        except PersistenceError as e:
            self.logger.error("Failed to save reservations", error=str(e))
            context.add_error(self.name, f"reservations: {e}")
            return False

        context.stats["reservations_saved"] = len(context.service.ledger)
        return True
