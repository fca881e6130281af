"""Startup and shutdown steps."""

from .load_reservations_step import LoadReservationsStep
from .load_rooms_step import LoadRoomsStep
from .save_reservations_step import SaveReservationsStep
from .save_rooms_step import SaveRoomsStep
from .seed_default_rooms_step import SeedDefaultRoomsStep

__all__ = [
    "LoadRoomsStep",
    "LoadReservationsStep",
    "SeedDefaultRoomsStep",
    "SaveRoomsStep",
    "SaveReservationsStep",
]
