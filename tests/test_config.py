"""
Tests for Settings loading.
"""

import pytest
from pydantic import ValidationError

from core.config import Settings, get_settings
from core.constants import DEFAULT_PROVIDER_URL


class TestSettings:
    """Tests for Settings"""

    def test_provider_url_default(self, monkeypatch):
        monkeypatch.delenv("AWS_API_URL", raising=False)

        settings = Settings(_env_file=None)

        assert settings.aws_api_url == DEFAULT_PROVIDER_URL
        assert settings.provider_timeout_seconds == 30.0

    def test_provider_url_from_environment(self, monkeypatch):
        monkeypatch.setenv("AWS_API_URL", "https://example.execute-api.eu-west-1.amazonaws.com/dev/")

        settings = Settings(_env_file=None)

        assert settings.aws_api_url == "https://example.execute-api.eu-west-1.amazonaws.com/dev"

    def test_blank_provider_url_falls_back_to_default(self, monkeypatch):
        monkeypatch.setenv("AWS_API_URL", "   ")

        settings = Settings(_env_file=None)

        assert settings.aws_api_url == DEFAULT_PROVIDER_URL

    def test_timeout_must_be_positive(self, monkeypatch):
        monkeypatch.setenv("PROVIDER_TIMEOUT_SECONDS", "0")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_service_name(self, monkeypatch):
        monkeypatch.delenv("APP_NAME", raising=False)

        assert Settings(_env_file=None).app_name == "Anna Logica Clean"

    def test_max_connections_unset_by_default(self, monkeypatch):
        monkeypatch.delenv("PROVIDER_MAX_CONNECTIONS", raising=False)

        assert Settings(_env_file=None).provider_max_connections is None

    def test_max_connections_must_be_positive(self, monkeypatch):
        monkeypatch.setenv("PROVIDER_MAX_CONNECTIONS", "0")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestCorsOrigins:
    """CORS_ALLOW_ORIGINS accepts the plain forms operators write"""

    def test_default_allows_everyone(self, monkeypatch):
        monkeypatch.delenv("CORS_ALLOW_ORIGINS", raising=False)

        assert Settings(_env_file=None).cors_allow_origins == ["*"]

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("*", ["*"]),
            ("https://app.example.com", ["https://app.example.com"]),
            (
                "https://app.example.com, https://admin.example.com",
                ["https://app.example.com", "https://admin.example.com"],
            ),
            ("https://app.example.com,,", ["https://app.example.com"]),
            (
                '["https://app.example.com", "http://localhost:3000"]',
                ["https://app.example.com", "http://localhost:3000"],
            ),
            ("", ["*"]),
        ],
    )
    def test_parses_environment_value(self, monkeypatch, raw, expected):
        monkeypatch.setenv("CORS_ALLOW_ORIGINS", raw)

        assert Settings(_env_file=None).cors_allow_origins == expected

    def test_app_starts_with_comma_separated_origins(self, monkeypatch):
        from fastapi.testclient import TestClient

        from internal.api.app import create_app

        monkeypatch.setenv("CORS_ALLOW_ORIGINS", "https://app.example.com,https://admin.example.com")

        client = TestClient(create_app())
        response = client.options(
            "/api/transcribe",
            headers={
                "Origin": "https://admin.example.com",
                "Access-Control-Request-Method": "POST",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "https://admin.example.com"
