"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
Values come from environment variables, a .env file or the defaults below.
"""

from typing import Dict, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cvd_platform.application.use_cases.prediction_use_case import (
    TransportFailurePolicy,
)
from cvd_platform.domain.entities.material import DEFAULT_MATERIAL_CODES
from cvd_platform.shared import EnumEnvironment, EnumHistoryBackend, EnumLogLevel
from cvd_platform.shared.consts import (
    HISTORY_PAGE_SIZE,
    HISTORY_RETENTION_DAYS,
    HISTORY_SLOT_KEY,
)


class AppInfoSettings(BaseSettings):
    """HTTP application settings."""

    title: str = Field(
        default="CVD Synthesis Prediction Platform", description="API title"
    )
    description: str = Field(
        default="Outcome prediction and history for CVD growth of 2D "
        "transition metal dichalcogenides",
        description="API description",
    )
    version: str = Field(default="0.1.0", description="API version")
    host: str = Field(default="127.0.0.1", description="Interface to bind")
    port: int = Field(default=8000, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="APP_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console only)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class ScoringSettings(BaseSettings):
    """Remote scoring service settings."""

    base_url: str = Field(
        default="http://127.0.0.1:5000/predict",
        description="Prediction endpoint; the material code is appended",
    )
    timeout: float = Field(
        default=5.0, gt=0, description="Request timeout in seconds"
    )
    on_transport_failure: TransportFailurePolicy = Field(
        default=TransportFailurePolicy.SIMULATE,
        description="'simulate' draws a random label, 'fail' aborts the submission",
    )
    material_codes: Dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_MATERIAL_CODES),
        description="Material tag -> remote model code (JSON object)",
    )

    model_config = SettingsConfigDict(
        env_prefix="SCORING_", case_sensitive=False, extra="ignore"
    )

    @field_validator("material_codes")
    @classmethod
    def _complete_material_codes(cls, value: Dict[str, str]) -> Dict[str, str]:
        unknown = set(value) - set(DEFAULT_MATERIAL_CODES)
        if unknown:
            raise ValueError(f"Unknown materials in material_codes: {sorted(unknown)}")
        return {**DEFAULT_MATERIAL_CODES, **value}


class HistorySettings(BaseSettings):
    """Durable history slot settings."""

    backend: EnumHistoryBackend = Field(
        default=EnumHistoryBackend.FILE, description="memory, file or mongo"
    )
    slot_key: str = Field(default=HISTORY_SLOT_KEY, description="Slot entry name")
    directory: str = Field(
        default=".cvd_history", description="Directory used by the file backend"
    )
    retention_days: int = Field(
        default=HISTORY_RETENTION_DAYS,
        gt=0,
        description="Days an entry survives after its last write",
    )
    max_bytes: int = Field(
        default=64 * 1024, gt=0, description="Largest history payload accepted"
    )
    page_size: int = Field(
        default=HISTORY_PAGE_SIZE, ge=1, description="Records per history page"
    )

    model_config = SettingsConfigDict(
        env_prefix="HISTORY_", case_sensitive=False, extra="ignore"
    )


class DatabaseSettings(BaseSettings):
    """MongoDB settings, used when the history backend is 'mongo'."""

    mongo_uri: str = Field(
        default="mongodb://localhost:27017/cvd_platform",
        description="MongoDB connection URI",
    )
    database_name: str = Field(
        default="cvd_platform", description="Name of the MongoDB database"
    )
    collection: str = Field(
        default="history_slots", description="Collection holding slot entries"
    )

    model_config = SettingsConfigDict(
        env_prefix="DB_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    app: AppInfoSettings = Field(default_factory=AppInfoSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    scoring: ScoringSettings = Field(default_factory=ScoringSettings)
    history: HistorySettings = Field(default_factory=HistorySettings)
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings per environment.
    """
    return AppSettings()
