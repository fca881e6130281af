"""Factories for the startup and shutdown pipelines."""

from hotel_booking.config.settings import Settings
from hotel_booking.services.lifecycle.pipeline import Pipeline
from hotel_booking.services.lifecycle.steps import (
    LoadReservationsStep,
    LoadRoomsStep,
    SaveReservationsStep,
    SaveRoomsStep,
    SeedDefaultRoomsStep,
)


def build_startup_pipeline(settings: Settings) -> Pipeline:
    """Build the pipeline that loads state before the menu opens.

    Load steps are optional unless ``storage.fail_on_malformed`` is set, in
    which case a load failure stops startup.
    """
    strict = settings.storage.fail_on_malformed
    pipeline = Pipeline(
        "startup",
        [LoadRoomsStep(required=strict), LoadReservationsStep(required=strict)],
    )
    if settings.booking.seed_default_rooms:
        pipeline.add_step(SeedDefaultRoomsStep())
    return pipeline


def build_shutdown_pipeline() -> Pipeline:
    """Build the pipeline that saves both files on exit."""
    return Pipeline("shutdown", [SaveRoomsStep(), SaveReservationsStep()])
