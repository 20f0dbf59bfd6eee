"""Tests for application settings."""
import pytest
from pydantic import ValidationError

from hogar.config.settings import HogarSettings, StreamlitSettings


def make_settings(**kwargs) -> HogarSettings:
    return HogarSettings(LOG_FILE=None, **kwargs)


def test_defaults():
    """Test the household defaults."""
    settings = make_settings()
    assert settings.CURRENCY_CODE == "COP"
    assert settings.TIMEZONE == "America/Bogota"
    assert settings.HOUSEHOLD_MEMBER_IDS == []
    assert settings.SUGGESTION_LIMIT == 5


def test_relative_sqlite_path_made_absolute():
    """Test relative database files resolve from the project root."""
    settings = make_settings(DB_URL="sqlite:///data/hogar.db")
    assert settings.DB_URL.startswith("sqlite:////")
    assert settings.DB_URL.endswith("data/hogar.db")


def test_memory_database_untouched():
    """Test in-memory URLs are left alone."""
    assert make_settings(DB_URL="sqlite:///:memory:").DB_URL == "sqlite:///:memory:"


def test_log_level_normalized():
    """Test log levels are upper-cased."""
    assert make_settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"


@pytest.mark.parametrize("field, value", [
    ("LOG_LEVEL", "LOUD"),
    ("LOG_FORMAT", "fancy"),
    ("TIMEZONE", "Mars/Olympus"),
    ("MAX_QUANTITY", 0),
    ("SUGGESTION_LIMIT", 0),
])
def test_invalid_values(field, value):
    """Test invalid settings are rejected."""
    with pytest.raises(ValidationError):
        make_settings(**{field: value})


def test_household_from_environment(monkeypatch):
    """Test household members can be configured as a JSON list."""
    monkeypatch.setenv("HOGAR_HOUSEHOLD_MEMBER_IDS", "[2, 3]")
    assert make_settings().HOUSEHOLD_MEMBER_IDS == [2, 3]


def test_streamlit_settings():
    """Test Streamlit layout and refresh validation."""
    assert StreamlitSettings().REFRESH_SECONDS == 5
    with pytest.raises(ValidationError):
        StreamlitSettings(LAYOUT="full")
    with pytest.raises(ValidationError):
        StreamlitSettings(REFRESH_SECONDS=-1)
