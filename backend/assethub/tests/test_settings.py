"""Tests for core settings validation."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from assethub.core.config import Settings


class TestCORSValidation:
    def test_comma_separated_origins(self):
        with patch.dict(
            os.environ,
            {
                "ENVIRONMENT": "development",
                "CORS_ORIGINS": "http://localhost:3000,https://app.example.com",
            },
        ):
            settings = Settings()
            assert settings.cors_origins == ["http://localhost:3000", "https://app.example.com"]

    def test_json_list_origins(self):
        with patch.dict(os.environ, {"CORS_ORIGINS": '["https://a.example.com"]'}):
            assert Settings().cors_origins == ["https://a.example.com"]

    def test_wildcard_allowed_in_development(self):
        with patch.dict(os.environ, {"ENVIRONMENT": "development", "CORS_ORIGINS": "*"}):
            assert Settings().cors_origins == ["*"]

    def test_wildcard_rejected_in_production(self):
        with patch.dict(
            os.environ,
            {
                "ENVIRONMENT": "production",
                "DATABASE_URL": "postgresql://user:pass@db:5432/assethub",
                "CORS_ORIGINS": "*",
            },
        ):
            with pytest.raises(ValidationError) as exc_info:
                Settings()
            assert "wildcard" in str(exc_info.value).lower()

    def test_invalid_scheme_rejected(self):
        with patch.dict(os.environ, {"CORS_ORIGINS": "ftp://files.example.com"}):
            with pytest.raises(ValidationError):
                Settings()


class TestDatabaseValidation:
    def test_sqlite_rejected_in_production(self):
        with patch.dict(
            os.environ,
            {
                "ENVIRONMENT": "production",
                "DATABASE_URL": "sqlite:///./assethub.db",
                "CORS_ORIGINS": "https://app.example.com",
            },
        ):
            with pytest.raises(ValidationError) as exc_info:
                Settings()
            assert "sqlite" in str(exc_info.value).lower()


class TestPagingSettings:
    def test_defaults(self):
        settings = Settings()

        assert settings.default_page_size == 100
        assert settings.max_page_size == 1000
        assert settings.api_prefix == "/api"

    def test_page_size_must_be_positive(self):
        with patch.dict(os.environ, {"DEFAULT_PAGE_SIZE": "0"}):
            with pytest.raises(ValidationError):
                Settings()

    def test_default_page_size_within_max(self):
        with patch.dict(os.environ, {"DEFAULT_PAGE_SIZE": "500", "MAX_PAGE_SIZE": "200"}):
            with pytest.raises(ValidationError) as exc_info:
                Settings()
            assert "max_page_size" in str(exc_info.value)
