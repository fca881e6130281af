"""Interactive console session over the hotel service."""

import time
from datetime import date, datetime
from decimal import Decimal
from typing import Callable

from structlog import get_logger

from hotel_booking.codecs.fields import DATE_FORMAT, DELIMITER
from hotel_booking.config.settings import Settings, settings as default_settings
from hotel_booking.models import Reservation, Room
from hotel_booking.services import HotelService
from hotel_booking.services.lifecycle import LifecycleContext, build_shutdown_pipeline

logger = get_logger(__name__)

MENU = """
--- Hotel Reservation System ---
1) Search available rooms
2) Book a room
3) Cancel reservation
4) View reservation
5) List all rooms
6) List all reservations
0) Save & Exit"""

EXIT_OPTION = "0"


class InteractiveSession:
    """Numbered console menu driving a HotelService.

    Input and output are injected so the session can be scripted in tests:
    ``input_func`` behaves like the builtin ``input`` (prompt in, line out,
    EOFError at end of input) and ``output`` like ``print``.
    """

    def __init__(
        self,
        service: HotelService,
        settings: Settings | None = None,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.service = service
        self.settings = settings or default_settings
        self._input = input_func
        self._output = output
        self._sleep = sleep
        self._actions: dict[str, Callable[[], None]] = {
            "1": self.do_search,
            "2": self.do_book,
            "3": self.do_cancel,
            "4": self.do_view,
            "5": self.list_rooms,
            "6": self.list_reservations,
        }

    # ---------- formatting ----------

    def format_money(self, amount: Decimal) -> str:
        return f"{self.settings.booking.currency_symbol}{amount:.2f}"

    def format_room(self, room: Room) -> str:
        return (
            f"Room {room.room_number} ({room.category}) - "
            f"{self.format_money(room.price_per_night)}/night"
        )

    def format_reservation(self, reservation: Reservation) -> str:
        return (
            f"Reservation {reservation.reservation_id}: {reservation.guest_name} | "
            f"Room {reservation.room_number} | "
            f"{reservation.check_in.isoformat()} -> {reservation.check_out.isoformat()} | "
            f"{self.format_money(reservation.total_price)}"
        )

    # ---------- input helpers ----------

    def _say(self, text: str) -> None:
        self._output(text)

    def _ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def _confirm(self, prompt: str) -> bool:
        return self._ask(prompt).lower() == "y"

    def read_date(self, prompt: str) -> date:
        """Prompt until a YYYY-MM-DD date is entered."""
        while True:
            text = self._ask(prompt)
            try:
                return datetime.strptime(text, DATE_FORMAT).date()
            except ValueError:
                self._say("Bad date format, please use YYYY-MM-DD.")

    # ---------- menu actions ----------

    def do_search(self) -> None:
        category = self._ask("Enter category (Standard/Deluxe/Suite): ")
        check_in = self.read_date("Check-in date (YYYY-MM-DD): ")
        check_out = self.read_date("Check-out date (YYYY-MM-DD): ")
        if check_out <= check_in:
            self._say("Error: Check-out must be after check-in")
            return

        available = self.service.ledger.search_available(category, check_in, check_out)
        if not available:
            self._say("No rooms available for that period.")
            return

        self._say("Available rooms:")
        for room in available:
            self._say(f"  {self.format_room(room)}")

    def do_book(self) -> None:
        guest_name = self._ask("Your name: ")
        if DELIMITER in guest_name:
            self._say(f"Error: Name must not contain '{DELIMITER}'")
            return

        try:
            room_number = int(self._ask("Room number: "))
        except ValueError:
            self._say("Invalid number input.")
            return

        check_in = self.read_date("Check-in date (YYYY-MM-DD): ")
        check_out = self.read_date("Check-out date (YYYY-MM-DD): ")

        ledger = self.service.ledger
        quote_result = ledger.quote(room_number, check_in, check_out)
        if quote_result.is_unavailable:
            self._say("Room not available for those dates.")
            return
        if quote_result.is_rejected:
            self._say(f"Error: {quote_result.message}")
            return

        total = self.format_money(quote_result.quote.total_price)
        if not self._confirm(f"Total price: {total}. Proceed to payment? (y/n): "):
            self._say("Booking cancelled by user.")
            return

        self._say("Processing payment...")
        delay = self.settings.booking.payment_delay_seconds
        if delay > 0:
            self._sleep(delay)

        result = ledger.book(guest_name, room_number, check_in, check_out)
        if not result.is_booked:
            self._say(f"Booking failed: {result.message}")
            return

        self._say("Payment successful.")
        self._say(f"Booking confirmed: {result.reservation.reservation_id}")

    def do_cancel(self) -> None:
        reservation_id = self._ask("Enter reservation ID to cancel: ")
        if self.service.ledger.find(reservation_id) is None:
            self._say("Reservation not found.")
            return

        if not self._confirm(
            f"Are you sure you want to cancel reservation {reservation_id}? (y/n): "
        ):
            self._say("Cancellation aborted.")
            return

        cancelled = self.service.ledger.cancel(reservation_id)
        self._say("Cancelled." if cancelled else "Cancel failed.")

    def do_view(self) -> None:
        reservation = self.service.ledger.find(self._ask("Enter reservation ID: "))
        if reservation is None:
            self._say("Not found.")
        else:
            self._say(self.format_reservation(reservation))

    def list_rooms(self) -> None:
        self._say("All rooms:")
        for room in self.service.catalog.list_rooms():
            self._say(f"  {self.format_room(room)}")

    def list_reservations(self) -> None:
        self._say("Reservations:")
        for reservation in self.service.ledger.list_all():
            self._say(f"  {self.format_reservation(reservation)}")

    # ---------- lifecycle ----------

    def report_startup(self, context: LifecycleContext) -> None:
        """Print the load problems recorded by the startup pipeline.

        When startup continues past a failed load, the unreadable file is
        replaced by the in-memory state on Save & Exit.
        """
        for message in context.error_messages():
            self._say(message)

        if context.has_errors() and not context.stats.get("pipeline", {}).get("stopped"):
            self._say(
                "Warning: unreadable data files will be overwritten with the current "
                "data on Save & Exit."
            )

    def save_and_exit(self) -> LifecycleContext:
        """Save both files and report the outcome.

        Save failures are shown but do not change how the session ends.
        """
        context = build_shutdown_pipeline().execute(LifecycleContext(self.service))
        if context.success:
            self._say("Saved.")
        else:
            self._say(f"Save failed: {'; '.join(context.error_messages())}")
        self._say("Goodbye")
        return context

    def run(self) -> LifecycleContext:
        """Run the menu loop until option 0 or end of input.

        Returns:
            Context of the shutdown pipeline
        """
        while True:
            self._say(MENU)
            try:
                choice = self._ask("Choose: ").upper()
                if choice == EXIT_OPTION:
                    break

                action = self._actions.get(choice)
                if action is None:
                    self._say("Unknown option")
                    continue
                action()
            except EOFError:
                logger.info("End of input, exiting")
                break

        return self.save_and_exit()
