"""Core configuration module."""

import json
import os

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _is_production() -> bool:
    return os.getenv("ENVIRONMENT", "development").lower() == "production"


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=(".env", "../.env"),
        case_sensitive=False,
        extra="ignore",
    )

    # API
    api_title: str = "AssetHub Management API"
    api_version: str = "0.1.0"
    api_prefix: str = "/api"
    environment: str = os.getenv("ENVIRONMENT", "development")
    testing: bool = os.getenv("TESTING", "false").lower() == "true"

    # Database
    database_url: str = "sqlite:///./assethub.db"

    # Logging
    log_level: str = "INFO"
    log_format: str | None = None  # "json", "console", or None (auto-detect based on environment)

    # CORS
    cors_origins: list[str] | str = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
    ]

    # Rate limiting
    rate_limit_storage_uri: str = "memory://"
    rate_limit_default: str = "600/minute"

    # Tenancy
    default_tenant_token: str = "default"
    default_tenant_config_path: str | None = None  # YAML engine configuration for the seeded tenant

    # Search
    default_page_size: int = 100
    max_page_size: int = 1000

    # Labels
    label_base_url: str = "http://localhost:8000"
    label_box_size: int = 10
    label_border: int = 4

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, value):
        """Accept a JSON list or a comma-separated string of origins."""
        if not value:
            return []
        if not isinstance(value, str):
            return value
        if value.lstrip().startswith("["):
            try:
                parsed = json.loads(value)
            except ValueError as exc:
                raise ValueError("CORS_ORIGINS is not a valid JSON list") from exc
            return parsed if isinstance(parsed, list) else []
        return [origin.strip() for origin in value.split(",") if origin.strip()]

    @field_validator("cors_origins", mode="after")
    @classmethod
    def validate_cors_origins(cls, value: list[str]) -> list[str]:
        """Origins must be http(s) URLs; production needs an explicit, non-wildcard list."""
        production = _is_production()
        if production and not value:
            raise ValueError("CORS_ORIGINS must list the allowed origins in production")

        for origin in value:
            if origin == "*":
                if production:
                    raise ValueError("Wildcard '*' CORS origin is not allowed in production")
            elif not origin.startswith(("http://", "https://")) or " " in origin:
                raise ValueError(f"Invalid CORS origin '{origin}'")
        return value

    @field_validator("database_url")
    @classmethod
    def guard_sqlite_in_production(cls, value: str) -> str:
        if _is_production() and value.startswith("sqlite"):
            raise ValueError("database_url must not use SQLite in production")
        return value

    @field_validator("default_page_size", "max_page_size", "label_box_size")
    @classmethod
    def require_positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError("must be a positive integer")
        return value

    @model_validator(mode="after")
    def check_page_sizes(self) -> "Settings":
        if self.default_page_size > self.max_page_size:
            raise ValueError("default_page_size must not exceed max_page_size")
        return self


settings = Settings()
