"""Configuration settings for Hogar."""
from functools import lru_cache
from pathlib import Path
from typing import List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Project root: src/hogar/config -> repository root
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent

# Default log directory
DEFAULT_LOG_DIR = PROJECT_ROOT / "logs"
DEFAULT_LOG_FILE = DEFAULT_LOG_DIR / "hogar.log"


class HogarSettings(BaseSettings):
    """Application settings with environment variable support."""

    # Database
    DB_URL: str = "sqlite:///hogar.db"
    DB_ECHO: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[Path] = DEFAULT_LOG_FILE
    LOG_FORMAT: str = "detailed"  # simple, detailed
    LOG_RETENTION_DAYS: int = 7
    LOG_ROTATION_SIZE_MB: int = 1

    # Household
    ACTIVE_USER_ID: int = 1
    ACTIVE_USER_EMAIL: str = "hogar@example.com"
    HOUSEHOLD_MEMBER_IDS: List[int] = []

    # Money
    CURRENCY_CODE: str = "COP"
    TIMEZONE: str = "America/Bogota"

    # Grocery list
    MAX_QUANTITY: float = 999
    SUGGESTION_LIMIT: int = 5

    model_config = SettingsConfigDict(
        env_prefix="HOGAR_",
        case_sensitive=False,
        env_file=PROJECT_ROOT / ".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        # Convert relative DB path to absolute path from project root
        if self.DB_URL.startswith("sqlite:///") and ":memory:" not in self.DB_URL:
            relative_path = self.DB_URL.replace("sqlite:///", "")
            if not Path(relative_path).is_absolute():
                self.DB_URL = f"sqlite:///{PROJECT_ROOT / relative_path}"

        # Ensure log file path is absolute and parent directory exists
        if self.LOG_FILE:
            if not self.LOG_FILE.is_absolute():
                self.LOG_FILE = PROJECT_ROOT / self.LOG_FILE
            self.LOG_FILE.parent.mkdir(parents=True, exist_ok=True)

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]
        v = v.upper()
        if v not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
        return v

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        valid_formats = ["simple", "detailed"]
        v = v.lower()
        if v not in valid_formats:
            raise ValueError(f"Log format must be one of: {', '.join(valid_formats)}")
        return v

    @field_validator("TIMEZONE")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"Unknown timezone: {v}")
        return v

    @field_validator("MAX_QUANTITY")
    @classmethod
    def validate_max_quantity(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Max quantity must be positive")
        return v

    @field_validator("SUGGESTION_LIMIT")
    @classmethod
    def validate_suggestion_limit(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Suggestion limit must be at least 1")
        return v


class StreamlitSettings(BaseSettings):
    """Streamlit-specific settings."""
    PAGE_TITLE: str = "Hogar"
    PAGE_ICON: str = "🏠"
    LAYOUT: str = "centered"
    REFRESH_SECONDS: int = 5  # 0 disables polling for other sessions' changes

    model_config = SettingsConfigDict(
        env_prefix="STREAMLIT_",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("LAYOUT")
    @classmethod
    def validate_layout(cls, v: str) -> str:
        valid_layouts = ["centered", "wide"]
        if v not in valid_layouts:
            raise ValueError(f"Layout must be one of: {', '.join(valid_layouts)}")
        return v

    @field_validator("REFRESH_SECONDS")
    @classmethod
    def validate_refresh(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Refresh interval cannot be negative")
        return v


@lru_cache()
def get_settings() -> HogarSettings:
    """Get cached settings instance."""
    return HogarSettings()


@lru_cache()
def get_streamlit_settings() -> StreamlitSettings:
    """Get cached Streamlit settings instance."""
    return StreamlitSettings()


def clear_settings_cache() -> None:
    """Clear all settings caches to force reload from environment."""
    get_settings.cache_clear()
    get_streamlit_settings.cache_clear()
