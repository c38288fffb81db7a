"""CO2X - LINE Login backend and session client for the WinFor.Earth demo platform."""

from co2x.app import create_app
from co2x.auth import (
    AppSettings,
    AuthSession,
    CallbackResult,
    ClientSettings,
    Co2xError,
    ConfigurationError,
    CorsSettings,
    CsrfMismatchError,
    LineLoginClient,
    LineOAuthProvider,
    LineProviderSettings,
    LineTokenResponse,
    LineUserProfile,
    MappingStorage,
    MemoryStorage,
    MissingAuthHeaderError,
    MissingCodeError,
    OAuthError,
    ProfileFetchError,
    SessionStore,
    TokenExchangeError,
    generate_state_token,
    states_match,
)

__version__ = "0.1.0"

__all__ = [
    "AppSettings",
    "AuthSession",
    "CallbackResult",
    "ClientSettings",
    "Co2xError",
    "ConfigurationError",
    "CorsSettings",
    "CsrfMismatchError",
    "LineLoginClient",
    "LineOAuthProvider",
    "LineProviderSettings",
    "LineTokenResponse",
    "LineUserProfile",
    "MappingStorage",
    "MemoryStorage",
    "MissingAuthHeaderError",
    "MissingCodeError",
    "OAuthError",
    "ProfileFetchError",
    "SessionStore",
    "TokenExchangeError",
    "__version__",
    "create_app",
    "generate_state_token",
    "states_match",
]
