"""CO2X Auth - LINE Login components."""

from co2x.auth.core.exceptions import (
    Co2xError,
    ConfigurationError,
    CsrfMismatchError,
    MissingAuthHeaderError,
    MissingCodeError,
    OAuthError,
    ProfileFetchError,
    TokenExchangeError,
)
from co2x.auth.core.settings import AppSettings, ClientSettings, CorsSettings, LineProviderSettings
from co2x.auth.providers.line import CallbackResult, LineOAuthProvider, LineTokenResponse, LineUserProfile
from co2x.auth.session import AuthSession, LineLoginClient, MappingStorage, MemoryStorage, SessionStore
from co2x.auth.utils.crypto import generate_state_token, states_match

__all__ = [  # noqa: RUF022
    # Providers
    "LineOAuthProvider",
    "LineTokenResponse",
    "LineUserProfile",
    "CallbackResult",
    # Session
    "AuthSession",
    "LineLoginClient",
    "SessionStore",
    "MemoryStorage",
    "MappingStorage",
    # Settings
    "AppSettings",
    "ClientSettings",
    "CorsSettings",
    "LineProviderSettings",
    # Exceptions
    "Co2xError",
    "ConfigurationError",
    "CsrfMismatchError",
    "MissingAuthHeaderError",
    "MissingCodeError",
    "OAuthError",
    "ProfileFetchError",
    "TokenExchangeError",
    # Utils
    "generate_state_token",
    "states_match",
]
