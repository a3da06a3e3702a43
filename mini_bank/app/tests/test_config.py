import pytest
from pydantic import ValidationError
from sqlalchemy import text

from ..core.config import Settings
from ..core.db import engine_from_settings


class TestSettings:
    def test_default_values(self) -> None:
        settings = Settings(_env_file=None)

        assert settings.app_name == "Mini Bank API"
        assert settings.database_url == "sqlite:///mini_bank.db"
        assert settings.log_level == "INFO"
        assert settings.sqlite_busy_timeout == 30.0

    def test_reads_prefixed_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("BANK_DATABASE_URL", "sqlite:///other.db")
        monkeypatch.setenv("BANK_LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)

        assert settings.database_url == "sqlite:///other.db"
        assert settings.log_level == "DEBUG"

    def test_unknown_log_level_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="chatty")

    def test_busy_timeout_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, sqlite_busy_timeout=0)


class TestEngine:
    def test_engine_from_settings_connects(self, tmp_path) -> None:
        settings = Settings(
            _env_file=None,
            database_url=f"sqlite:///{tmp_path / 'bank.db'}",
            sqlite_busy_timeout=5,
        )
        engine = engine_from_settings(settings)

        with engine.connect() as connection:
            assert connection.execute(text("select 1")).scalar() == 1
        assert engine.url.database.endswith("bank.db")
        engine.dispose()
