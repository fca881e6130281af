"""Pydantic model for a confirmed reservation."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Reservation(BaseModel):
    """A confirmed stay of one guest in one room.

    The stay covers the half-open range [check_in, check_out): the guest
    leaves on the check-out day, so that day is free for the next arrival.
    """

    reservation_id: str = Field(min_length=1, description="Reservation ID, e.g. 'R1000'")
    guest_name: str = Field(description="Name of the guest")
    room_number: int = Field(description="Number of the reserved room (catalog lookup key)")
    check_in: date = Field(description="First night of the stay (inclusive)")
    check_out: date = Field(description="Departure day (exclusive)")
    total_price: Decimal = Field(description="Price of the whole stay")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_dates(self) -> "Reservation":
        if self.check_out <= self.check_in:
            raise ValueError(
                f"check_out ({self.check_out}) must be after check_in ({self.check_in})"
            )
        return self

    @property
    def nights(self) -> int:
        """Get the number of nights in the stay."""
        return (self.check_out - self.check_in).days

    def overlaps(self, check_in: date, check_out: date) -> bool:
        """Check if this stay overlaps the half-open range [check_in, check_out)."""
        return check_in < self.check_out and self.check_in < check_out
