"""
Application settings with Pydantic v2 validation.

Loads configuration from environment variables with sensible defaults.
"""

from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Storage configuration."""

    model_config = SettingsConfigDict(env_prefix="STORAGE_")

    data_dir: Path = Path("data")
    db_name: str = "restock.db"

    # SQLite settings
    pool_size: int = 5
    busy_timeout: int = 30000  # ms

    @property
    def db_path(self) -> Path:
        return self.data_dir / self.db_name


class APISettings(BaseSettings):
    """API server configuration."""

    model_config = SettingsConfigDict(env_prefix="API_")

    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    cors_origins: list[str] = ["*"]


class ReorderConfig(BaseSettings):
    """Reorder automation and forecasting parameters."""

    model_config = SettingsConfigDict(env_prefix="REORDER_")

    # Demand forecast (months)
    forecast_window: int = Field(default=3, ge=1)
    forecast_history_months: int = Field(default=12, ge=1)
    default_forecast_periods: int = Field(default=3, ge=1)

    # Coverage report
    coverage_lookback_days: int = Field(default=30, ge=1)
    coverage_sample_size: int = Field(default=20, ge=1)
    coverage_sentinel_days: int = 999  # reported when there is stock but no demand

    # Purchase order numbering: PO-000001
    po_prefix: str = Field(default="PO", min_length=1)
    po_number_width: int = Field(default=6, ge=1)

    # Alert listing
    alert_page_size: int = Field(default=25, ge=1, le=100)


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Restock Reorder Service"
    app_version: str = "1.0.0"
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Sub-settings
    storage: StorageSettings = Field(default_factory=StorageSettings)
    api: APISettings = Field(default_factory=APISettings)
    reorder: ReorderConfig = Field(default_factory=ReorderConfig)

    @field_validator("storage", mode="before")
    @classmethod
    def ensure_data_dir(cls, v: Any) -> StorageSettings:
        if isinstance(v, dict):
            settings = StorageSettings(**v)
        else:
            settings = v or StorageSettings()
        settings.data_dir.mkdir(parents=True, exist_ok=True)
        return settings


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None
