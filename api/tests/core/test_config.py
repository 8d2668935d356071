"""Unit tests for core.config module.

Tests cover:
- Settings model_validator checks (database URL, bcrypt cost, page sizes)
- is_sqlite property
- allowed_origins computed property with deduplication
- get_settings / clear_settings_cache lru_cache behavior
"""

import pytest
from pydantic import ValidationError

from core.config import Settings, clear_settings_cache, get_settings

PG_URL = "postgresql+asyncpg://localhost/abrigos"


@pytest.fixture(autouse=True)
def _clear_settings():
    """Clear lru_cache between tests."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.mark.unit
class TestSettingsValidation:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("PASSWORD_HASH_ROUNDS", raising=False)
        settings = Settings(database_url=PG_URL)
        assert settings.password_hash_rounds == 10
        assert settings.default_page_size == 10
        assert settings.max_page_size == 100

    def test_requires_database_url(self):
        with pytest.raises(ValidationError, match="Database configuration"):
            Settings(database_url="")

    @pytest.mark.parametrize("rounds", [3, 32])
    def test_rejects_out_of_range_hash_rounds(self, rounds):
        with pytest.raises(ValidationError, match="PASSWORD_HASH_ROUNDS"):
            Settings(database_url=PG_URL, password_hash_rounds=rounds)

    def test_rejects_default_page_size_above_max(self):
        with pytest.raises(ValidationError, match="DEFAULT_PAGE_SIZE"):
            Settings(database_url=PG_URL, default_page_size=50, max_page_size=20)

    def test_rejects_zero_page_size(self):
        with pytest.raises(ValidationError, match="DEFAULT_PAGE_SIZE"):
            Settings(database_url=PG_URL, default_page_size=0)


@pytest.mark.unit
class TestIsSqlite:
    def test_sqlite_url(self):
        assert Settings(database_url="sqlite+aiosqlite:///:memory:").is_sqlite

    def test_postgres_url(self):
        assert not Settings(database_url=PG_URL).is_sqlite


@pytest.mark.unit
class TestAllowedOrigins:
    def test_debug_adds_localhost(self):
        settings = Settings(database_url=PG_URL, debug=True, frontend_url="")
        assert "http://localhost:3000" in settings.allowed_origins
        assert "http://localhost:5173" in settings.allowed_origins

    def test_no_localhost_without_debug(self):
        settings = Settings(
            database_url=PG_URL, frontend_url="https://abrigos.example.com"
        )
        assert settings.allowed_origins == ["https://abrigos.example.com"]

    def test_deduplicates_and_strips(self):
        settings = Settings(
            database_url=PG_URL,
            frontend_url="https://a.example.com",
            cors_allowed_origins=" https://a.example.com , https://b.example.com,,",
        )
        assert settings.allowed_origins == [
            "https://a.example.com",
            "https://b.example.com",
        ]


@pytest.mark.unit
class TestGetSettings:
    def test_cached(self):
        assert get_settings() is get_settings()

    def test_clear_cache_reads_environment_again(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("MAX_PAGE_SIZE", "250")
        clear_settings_cache()
        second = get_settings()
        assert second is not first
        assert second.max_page_size == 250
