"""
Configuration management using Pydantic Settings.
Follows Single Responsibility Principle - only handles configuration.
"""

import json
from functools import lru_cache
from typing import Annotated, Any, List, Optional

from pydantic import Field, field_validator  # type: ignore
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict  # type: ignore

from core.constants import DEFAULT_PROVIDER_URL


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Application
    app_name: str = Field(default="Anna Logica Clean", alias="APP_NAME")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")
    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=True, alias="DEBUG")

    # API Service
    api_host: str = Field(default="0.0.0.0", alias="API_HOST")
    api_port: int = Field(default=8000, alias="API_PORT")
    api_reload: bool = Field(default=True, alias="API_RELOAD")
    api_workers: int = Field(default=1, alias="API_WORKERS")
    # "*", a comma-separated list, or a JSON array
    cors_allow_origins: Annotated[List[str], NoDecode] = Field(
        default=["*"], alias="CORS_ALLOW_ORIGINS"
    )

    # Transcription provider (AWS Lambda behind API Gateway)
    # The default is a last-resort public endpoint, not a secret
    aws_api_url: str = Field(default=DEFAULT_PROVIDER_URL, alias="AWS_API_URL")
    provider_timeout_seconds: float = Field(
        default=30.0, alias="PROVIDER_TIMEOUT_SECONDS"
    )
    provider_connect_timeout_seconds: float = Field(
        default=10.0, alias="PROVIDER_CONNECT_TIMEOUT_SECONDS"
    )
    # Unset means no cap on concurrent provider connections
    provider_max_connections: Optional[int] = Field(
        default=None, alias="PROVIDER_MAX_CONNECTIONS"
    )

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    # Log format: "console" (colored, human-readable) or "json" (for log aggregation)
    log_format: str = Field(default="console", alias="LOG_FORMAT")
    # Enable/disable file logging (logs/app.log and logs/error.log)
    log_file_enabled: bool = Field(default=False, alias="LOG_FILE_ENABLED")

    @field_validator("aws_api_url")
    @classmethod
    def normalize_provider_url(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            return DEFAULT_PROVIDER_URL
        return v.rstrip("/")

    @field_validator("provider_timeout_seconds", "provider_connect_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("provider timeouts must be positive")
        return v

    @field_validator("provider_max_connections")
    @classmethod
    def validate_max_connections(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v <= 0:
            raise ValueError("provider_max_connections must be positive")
        return v

    @field_validator("cors_allow_origins", mode="before")
    @classmethod
    def parse_origins(cls, v: Any) -> Any:
        if not isinstance(v, str):
            return v
        v = v.strip()
        if v.startswith("["):
            return json.loads(v)
        origins = [origin.strip() for origin in v.split(",") if origin.strip()]
        return origins or ["*"]


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Using lru_cache to ensure single instance (Singleton pattern).
    """
    return Settings()
