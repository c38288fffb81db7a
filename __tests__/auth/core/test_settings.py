import pytest
from pydantic import SecretStr

from co2x.auth.core.settings import AppSettings, ClientSettings, CorsSettings, LineProviderSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "LINE_CHANNEL_ID",
        "LINE_CHANNEL_SECRET",
        "LINE_REDIRECT_URI",
        "ALLOWED_ORIGINS",
        "CO2X_CLIENT_BACKEND_URL",
        "CO2X_CLIENT_CHANNEL_ID",
        "CO2X_PORT",
    ):
        monkeypatch.delenv(name, raising=False)


def test_line_settings_defaults() -> None:
    settings = LineProviderSettings()

    assert settings.channel_id == ""
    assert settings.redirect_uri == "http://localhost:3000/callback"
    assert settings.scopes == ["profile", "openid", "email"]
    assert settings.timeout == 10.0
    assert settings.is_configured is False


def test_line_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LINE_CHANNEL_ID", "1234567890")
    monkeypatch.setenv("LINE_CHANNEL_SECRET", "shh")
    monkeypatch.setenv("LINE_REDIRECT_URI", "https://co2x.example.com/callback")

    settings = LineProviderSettings()

    assert settings.channel_id == "1234567890"
    assert isinstance(settings.channel_secret, SecretStr)
    assert settings.channel_secret.get_secret_value() == "shh"
    assert settings.redirect_uri == "https://co2x.example.com/callback"
    assert settings.is_configured is True


def test_line_settings_secret_is_not_repr() -> None:
    settings = LineProviderSettings(channel_id="id", channel_secret="very-secret")  # noqa: S106

    assert "very-secret" not in repr(settings)


def test_line_settings_missing_secret_is_not_configured() -> None:
    settings = LineProviderSettings(channel_id="id")

    assert settings.is_configured is False


def test_cors_origins_default() -> None:
    assert CorsSettings().origins == ["http://localhost:3000", "http://localhost:3001"]


def test_cors_origins_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ALLOWED_ORIGINS", " https://a.example.com , https://b.example.com,,")

    assert CorsSettings().origins == ["https://a.example.com", "https://b.example.com"]


def test_client_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CO2X_CLIENT_CHANNEL_ID", "1234567890")
    monkeypatch.setenv("CO2X_CLIENT_BACKEND_URL", "http://localhost:7071")

    settings = ClientSettings()

    assert settings.channel_id == "1234567890"
    assert settings.backend_url == "http://localhost:7071"


def test_client_settings_default_has_no_backend() -> None:
    assert ClientSettings().backend_url == ""


def test_app_settings_defaults() -> None:
    settings = AppSettings()

    assert settings.port == 7071
    assert settings.api_prefix == "/api"
    assert isinstance(settings.line, LineProviderSettings)
    assert isinstance(settings.cors, CorsSettings)
