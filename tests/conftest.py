from decimal import Decimal
from pathlib import Path
import shutil

import pytest

from hotel_booking.config.settings import BookingSettings, Settings, StorageSettings
from hotel_booking.models import Room
from hotel_booking.services import HotelService
from hotel_booking.storage import HotelRepository


FIXTURES_DIR = Path(__file__).parent / "fixtures"


class ScriptedConsole:
    """Feeds prepared answers to a session and records what it prints."""

    def __init__(self, answers: list[str]):
        self.answers = list(answers)
        self.prompts: list[str] = []
        self.lines: list[str] = []

    def input(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def output(self, text: str = "") -> None:
        self.lines.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def app_settings(tmp_path) -> Settings:
    """Settings pointing at an empty temporary data directory, no payment pause."""
    return Settings(
        storage=StorageSettings(data_dir=tmp_path),
        booking=BookingSettings(payment_delay_seconds=0),
    )


@pytest.fixture
def repository(app_settings) -> HotelRepository:
    return HotelRepository.from_settings(app_settings)


@pytest.fixture
def service(repository, app_settings) -> HotelService:
    """Service with an empty catalog and ledger."""
    return HotelService(repository, app_settings.booking)


@pytest.fixture
def seeded_service(service) -> HotelService:
    """Service holding the five default rooms."""
    service.seed_default_rooms()
    return service


@pytest.fixture
def room_101() -> Room:
    return Room(room_number=101, category="Standard", price_per_night=Decimal("2500"))


@pytest.fixture
def copy_fixture(tmp_path):
    """Copy a fixture file into the temporary data directory under a new name."""

    def _copy(fixture_name: str, target_name: str) -> Path:
        target = tmp_path / target_name
        shutil.copy(FIXTURES_DIR / fixture_name, target)
        return target

    return _copy


@pytest.fixture
def console():
    """Factory for scripted consoles."""
    return ScriptedConsole
