"""Tests for infrastructure settings."""

from unittest.mock import MagicMock

from finance_entries.infrastructure import settings as settings_module
from finance_entries.infrastructure.settings import EntriesSettings


def test_from_env_defaults(monkeypatch) -> None:
    """Without configuration the SQL backend creates its schema."""
    monkeypatch.delenv("ENTRY_STORE_BACKEND", raising=False)
    monkeypatch.delenv("ENTRIES_CREATE_SCHEMA", raising=False)

    settings = EntriesSettings.from_env()

    assert settings == EntriesSettings(backend="sqlalchemy", create_schema=True)


def test_from_env_normalizes_values(monkeypatch) -> None:
    """Backend names should be lowercased and falsy schema flags honored."""
    monkeypatch.setenv("ENTRY_STORE_BACKEND", "  Memory ")
    monkeypatch.setenv("ENTRIES_CREATE_SCHEMA", "no")

    settings = EntriesSettings.from_env()

    assert settings.backend == "memory"
    assert settings.create_schema is False


def test_from_env_warns_on_unknown_backend(monkeypatch) -> None:
    """Unknown backends should be kept but logged as a warning."""
    fake_logger = MagicMock()
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: fake_logger)
    monkeypatch.setenv("ENTRY_STORE_BACKEND", "mongo")

    settings = EntriesSettings.from_env()

    assert settings.backend == "mongo"
    fake_logger.warning.assert_called_once()
