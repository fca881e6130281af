"""Pipeline executor for startup and shutdown steps."""

from structlog import get_logger

from hotel_booking.services.lifecycle.base_step import LifecycleStep
from hotel_booking.services.lifecycle.context import LifecycleContext

logger = get_logger(__name__)


class Pipeline:
    """Pipeline for executing a sequence of lifecycle steps.

    The pipeline:
    1. Executes steps in order
    2. Passes context between steps
    3. Stops at the first failed required step
    4. Logs and skips failed optional steps
    5. Collects statistics
    """

    def __init__(self, name: str, steps: list[LifecycleStep]):
        """Initialize the pipeline.

        Args:
            name: Pipeline name for logging
            steps: List of steps to execute in order
        """
        self.name = name
        self.steps = steps
        self.logger = logger.bind(pipeline=name)

    def execute(self, context: LifecycleContext) -> LifecycleContext:
        """Execute the pipeline.

        Args:
            context: Lifecycle context

        Returns:
            Updated context with results
        """
        self.logger.info("Pipeline starting", steps=self.get_step_names())

        successful_steps = 0
        failed_steps = 0
        stopped = False

        for step in self.steps:
            step_name = step.get_name()
            self.logger.debug("Executing step", step=step_name)

            if step.run(context):
                successful_steps += 1
                continue

            failed_steps += 1
            if step.is_required():
                self.logger.error("Required step failed, stopping pipeline", step=step_name)
                stopped = True
                break

            self.logger.warning("Optional step failed, continuing pipeline", step=step_name)

        context.success = not context.has_errors()

        context.stats["pipeline"] = {
            "name": self.name,
            "total_steps": len(self.steps),
            "successful_steps": successful_steps,
            "failed_steps": failed_steps,
            "stopped": stopped,
        }

        self.logger.info(
            "Pipeline completed",
            success=context.success,
            successful_steps=successful_steps,
            failed_steps=failed_steps,
        )

        return context

    def add_step(self, step: LifecycleStep) -> "Pipeline":
        """Add a step to the pipeline.

        Args:
            step: Step to add

        Returns:
            Self for method chaining
        """
        self.steps.append(step)
        return self

    def get_step_names(self) -> list[str]:
        return [step.get_name() for step in self.steps]
