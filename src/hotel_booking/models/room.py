"""Pydantic model for a bookable room."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class Room(BaseModel):
    """A bookable room, keyed by its number.

    Rooms are immutable once created; replacing one means adding a new
    Room with the same number to the catalog.
    """

    room_number: int = Field(gt=0, description="Unique room number")
    category: str = Field(min_length=1, description="Room category, e.g. 'Standard'")
    price_per_night: Decimal = Field(ge=0, description="Nightly price")

    model_config = ConfigDict(frozen=True)

    def matches_category(self, category: str) -> bool:
        """Check whether this room belongs to a category (case-insensitive)."""
        return self.category.casefold() == category.strip().casefold()
