"""Tests for settings and logging helpers."""

from pathlib import Path

from hotel_booking.config.logging import add_reservation_prefix
from hotel_booking.config.settings import Settings, StorageSettings


def test_reservation_prefix_added():
    event = add_reservation_prefix(None, "info", {"event": "Booked", "reservation_id": "R1000"})

    assert event["event"] == "[R1000] Booked"


def test_reservation_prefix_skipped_without_id():
    event = add_reservation_prefix(None, "info", {"event": "Saved"})

    assert event["event"] == "Saved"


def test_paths_are_joined_to_data_dir(tmp_path):
    settings = Settings(storage=StorageSettings(data_dir=tmp_path, rooms_file="r.csv"))

    assert settings.rooms_path == tmp_path / "r.csv"
    assert settings.reservations_path == tmp_path / "reservations.csv"


def test_storage_settings_read_environment(monkeypatch):
    monkeypatch.setenv("STORAGE_DATA_DIR", "/var/lib/hotel")
    monkeypatch.setenv("STORAGE_FAIL_ON_MALFORMED", "true")

    storage = StorageSettings()

    assert storage.data_dir == Path("/var/lib/hotel")
    assert storage.fail_on_malformed is True


def test_settings_fields_are_the_configured_sections():
    assert set(Settings.model_fields) == {"storage", "booking", "logging"}
