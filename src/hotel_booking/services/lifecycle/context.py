"""Lifecycle context for sharing data between steps."""

from datetime import datetime, timezone
from typing import Any

from hotel_booking.services.hotel_service import HotelService


class LifecycleContext:
    """Context object passed to every startup or shutdown step.

    Steps read the service from it and record what they did, so the
    caller can report the outcome once the pipeline has finished.
    """

    def __init__(self, service: HotelService):
        """Initialize lifecycle context.

        Args:
            service: Hotel service the steps operate on
        """
        self.service = service
        self.start_time = datetime.now(timezone.utc)

        # Processing statistics
        self.stats: dict[str, Any] = {}

        # Errors encountered during processing
        self.errors: list[dict[str, str]] = []

        # Success flag
        self.success: bool = False

    def add_error(self, step_name: str, error_message: str) -> None:
        """Add an error to the context.

        Args:
            step_name: Name of the step where error occurred
            error_message: Error message
        """
        self.errors.append({
            "step": step_name,
            "message": error_message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        })

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def error_messages(self) -> list[str]:
        """Get the error messages in the order they were recorded."""
        return [error["message"] for error in self.errors]

    def get_results(self) -> dict[str, Any]:
        """Get final results dictionary.

        Returns:
            Dictionary containing all results and statistics
        """
        end_time = datetime.now(timezone.utc)
        duration = (end_time - self.start_time).total_seconds()

        return {
            "success": self.success,
            "start_time": self.start_time.isoformat(),
            "end_time": end_time.isoformat(),
            "duration_seconds": duration,
            "errors": self.errors,
            "stats": self.stats,
        }
