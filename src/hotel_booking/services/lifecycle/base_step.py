"""Base class for lifecycle steps."""

from abc import ABC, abstractmethod

from structlog import get_logger

from hotel_booking.services.lifecycle.context import LifecycleContext

logger = get_logger(__name__)


class LifecycleStep(ABC):
    """Abstract base class for startup and shutdown steps.

    Each step should:
    1. Implement execute() method
    2. Read the service from context
    3. Perform its work
    4. Write statistics back to context
    5. Return success boolean
    """

    def __init__(self, name: str | None = None, required: bool = False):
        """Initialize the step.

        Args:
            name: Optional custom name for the step. Defaults to class name.
            required: Whether a failure of this step stops the pipeline
        """
        self.name = name or self.__class__.__name__
        self.required = required
        self.logger = logger.bind(step=self.name)

    @abstractmethod
    def execute(self, context: LifecycleContext) -> bool:
        """Execute the step.

        Args:
            context: Lifecycle context containing the service

        Returns:
            True if step succeeded, False if failed
        """
        pass

    def run(self, context: LifecycleContext) -> bool:
        """Run the step with error handling and logging.

        Exceptions raised by execute() are recorded on the context and
        reported as a failed step.

        Args:
            context: Lifecycle context

        Returns:
            True if step succeeded, False if failed
        """
        self.logger.info("Step starting")

        try:
            success = self.execute(context)

            if success:
                self.logger.info("Step completed successfully")
            else:
                self.logger.warning("Step completed with failure")

            return success

        except Exception as e:
            self.logger.error("Step failed with exception", error=str(e), exc_info=True)
            context.add_error(self.name, str(e))
            return False

    def is_required(self) -> bool:
        """Check if this step is required for pipeline success.

        Returns:
            True if step failure should stop pipeline, False if optional
        """
        return self.required

    def get_name(self) -> str:
        return self.name
