import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from co2x.app import create_app
from co2x.auth.core.settings import AppSettings, ClientSettings, CorsSettings, LineProviderSettings
from co2x.auth.providers.line import LineOAuthProvider
from co2x.auth.session.store import MemoryStorage, SessionStore


@pytest.fixture
def line_settings() -> LineProviderSettings:
    return LineProviderSettings(
        channel_id="test-channel-id",
        channel_secret="test-channel-secret",  # noqa: S106
        redirect_uri="http://localhost:3000/callback",
    )


@pytest.fixture
def line_provider(line_settings: LineProviderSettings) -> LineOAuthProvider:
    return LineOAuthProvider(settings=line_settings)


@pytest.fixture
def cors_settings() -> CorsSettings:
    return CorsSettings(allowed_origins="http://localhost:3000, https://co2x.example.com")


@pytest.fixture
def app_settings(line_settings: LineProviderSettings, cors_settings: CorsSettings) -> AppSettings:
    return AppSettings(line=line_settings, cors=cors_settings)


@pytest.fixture
def app(app_settings: AppSettings) -> FastAPI:
    return create_app(app_settings)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def store(storage: MemoryStorage) -> SessionStore:
    return SessionStore(storage)


@pytest.fixture
def client_settings() -> ClientSettings:
    return ClientSettings(
        channel_id="test-channel-id",
        backend_url="http://backend.test",
        redirect_uri="http://localhost:3000/callback",
    )
