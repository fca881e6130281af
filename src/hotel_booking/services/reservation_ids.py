"""Reservation ID allocation."""

import string
from typing import Iterable

from structlog import get_logger

logger = get_logger(__name__)


class ReservationIdSequence:
    """Monotonic source of reservation IDs such as ``R1000``, ``R1001``.

    The sequence never hands out the same number twice within a process.
    Across restarts, ``resync`` must be called with every persisted ID so
    that numbering continues above the highest one on disk.
    """

    def __init__(self, prefix: str = "R", start: int = 1000):
        """Initialize the sequence.

        Args:
            prefix: Text placed before the number in every ID
            start: First number to allocate
        """
        self.prefix = prefix
        self._next_value = start

    @property
    def next_value(self) -> int:
        """Get the number the next allocation will use."""
        return self._next_value

    @staticmethod
    def numeric_suffix(reservation_id: str) -> int | None:
        """Extract the number embedded in a reservation ID.

        All ASCII digits in the ID are joined, so ``R1042`` gives 1042.

        Returns:
            The number, or None if the ID contains no digits
        """
        digits = "".join(ch for ch in reservation_id if ch in string.digits)
        return int(digits) if digits else None

    def allocate(self) -> str:
        """Return the next ID and advance the sequence."""
        reservation_id = f"{self.prefix}{self._next_value}"
        self._next_value += 1
        return reservation_id

    def resync(self, reservation_ids: Iterable[str]) -> int:
        """Advance past every number found in the given IDs.

        IDs without digits are skipped. The sequence never moves backwards.

        Args:
            reservation_ids: IDs loaded from storage

        Returns:
            The number the next allocation will use
        """
        for reservation_id in reservation_ids:
            suffix = self.numeric_suffix(reservation_id)
            if suffix is None:
                logger.warning("Reservation ID has no numeric suffix", reservation_id=reservation_id)
                continue
            self._next_value = max(self._next_value, suffix + 1)

        logger.debug("Reservation ID sequence resynchronized", next_value=self._next_value)
        return self._next_value
