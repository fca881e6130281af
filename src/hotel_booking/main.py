"""Main entry point for the hotel booking manager."""

import sys

from hotel_booking.cli import InteractiveSession
from hotel_booking.config import Settings, configure_logging, get_logger, settings
from hotel_booking.services import HotelService
from hotel_booking.services.lifecycle import LifecycleContext, build_startup_pipeline

logger = get_logger(__name__)


def main(app_settings: Settings | None = None, session_factory=InteractiveSession) -> int:
    """Load state, run the console menu and save on exit.

    Args:
        app_settings: Settings to run with. Defaults to the global settings.
        session_factory: Callable building the session from (service, settings)

    Returns:
        Process exit code
    """
    app_settings = app_settings or settings
    logger.info(
        "Starting hotel booking manager",
        rooms_path=str(app_settings.rooms_path),
        reservations_path=str(app_settings.reservations_path),
    )

    try:
        service = HotelService.from_settings(app_settings)
        startup = build_startup_pipeline(app_settings).execute(LifecycleContext(service))
        session = session_factory(service, app_settings)
        session.report_startup(startup)

        if startup.stats["pipeline"]["stopped"]:
            logger.error("Startup stopped on a load failure", errors=startup.errors)
            return 1

        logger.info("Startup complete", results=startup.get_results())
        shutdown = session.run()
        logger.info("Session finished", saved=shutdown.success)
        return 0
    except KeyboardInterrupt:
        logger.info("Stopped by user")
        return 1
    except Exception as e:
        logger.error("Fatal error in main application", error=str(e), exc_info=True)
        return 1


def run_sync() -> int:
    """Console script entry point.

    Returns:
        Exit code from main()
    """
    configure_logging()
    return main()


if __name__ == "__main__":
    sys.exit(run_sync())
