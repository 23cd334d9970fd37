"""Unit tests for application settings."""

import pytest
from pydantic import ValidationError

from worksync_config.settings import Settings


def _settings(**overrides) -> Settings:
    values = {"jwt_secret_key": "test-secret", "_env_file": None}
    values.update(overrides)
    return Settings(**values)


class TestSettings:
    def test_defaults(self):
        settings = _settings()

        assert settings.database_backend == "sqlite"
        assert settings.password_hashing == "plaintext"
        assert settings.shift_overlap_policy == "allow"
        assert settings.schedule_locale == "en"
        assert settings.jwt_access_token_expire_hours == 12

    def test_in_memory_sqlite_url(self):
        settings = _settings(sqlite_path=":memory:")

        assert settings.database_url == "sqlite+aiosqlite:///:memory:"

    def test_postgres_url(self):
        settings = _settings(
            database_backend="postgresql",
            postgres_user="worksync",
            postgres_password="s3cret",
            postgres_host="db",
            postgres_db="shifts",
        )

        assert settings.database_url == (
            "postgresql+asyncpg://worksync:s3cret@db:5432/shifts"
        )

    def test_cors_origins_are_split(self):
        settings = _settings(
            api_cors_origins="http://localhost:3000, https://app.example.com",
        )

        assert settings.cors_origins == [
            "http://localhost:3000",
            "https://app.example.com",
        ]

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("", ""), ("api", "/api"), ("/api/", "/api"), (" /v1 ", "/v1")],
    )
    def test_api_prefix_is_normalized(self, raw, expected):
        assert _settings(api_prefix=raw).api_prefix == expected

    def test_unknown_overlap_policy_is_rejected(self):
        with pytest.raises(ValidationError):
            _settings(shift_overlap_policy="sometimes")

    def test_env_variables_are_read(self, monkeypatch):
        monkeypatch.setenv("SHIFT_OVERLAP_POLICY", "warn")
        monkeypatch.setenv("SCHEDULE_LOCALE", "ru")

        settings = _settings()

        assert settings.shift_overlap_policy == "warn"
        assert settings.schedule_locale == "ru"
