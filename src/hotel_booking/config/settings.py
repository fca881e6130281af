"""Application settings and configuration management."""
from decimal import Decimal
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Flat-file storage configuration."""

    data_dir: Path = Path(".")
    rooms_file: str = "rooms.csv"
    reservations_file: str = "reservations.csv"
    encoding: str = "utf-8"
    # Abort startup instead of falling back to empty data when a file cannot be loaded
    fail_on_malformed: bool = False

    model_config = SettingsConfigDict(env_prefix="STORAGE_")


class BookingSettings(BaseSettings):
    """Booking rules and presentation configuration."""

    id_prefix: str = "R"
    id_start: int = Field(default=1000, ge=0)
    currency_symbol: str = "₹"
    payment_delay_seconds: float = Field(default=0.8, ge=0)  # 0 disables the pause
    seed_default_rooms: bool = True

    model_config = SettingsConfigDict(env_prefix="BOOKING_")


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["json", "console"] = "console"
    stream: Literal["stdout", "stderr"] = "stderr"

    model_config = SettingsConfigDict(env_prefix="LOG_")


class Settings(BaseSettings):
    """Main application settings."""

    # Sub-settings
    storage: StorageSettings = StorageSettings()
    booking: BookingSettings = BookingSettings()
    logging: LoggingSettings = LoggingSettings()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def rooms_path(self) -> Path:
        """Get the full path of the rooms file."""
        return self.storage.data_dir / self.storage.rooms_file

    @property
    def reservations_path(self) -> Path:
        """Get the full path of the reservations file."""
        return self.storage.data_dir / self.storage.reservations_file


DEFAULT_ROOMS: list[tuple[int, str, Decimal]] = [
    (101, "Standard", Decimal("2500")),
    (102, "Standard", Decimal("2500")),
    (201, "Deluxe", Decimal("4000")),
    (202, "Deluxe", Decimal("4500")),
    (301, "Suite", Decimal("8000")),
]


# Global settings instance
settings = Settings()
