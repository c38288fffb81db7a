from co2x.auth.providers.line import (
    CallbackResult,
    LineOAuthProvider,
    LineTokenResponse,
    LineUserProfile,
    build_authorization_url,
    parse_bearer_token,
)

__all__ = [
    "CallbackResult",
    "LineOAuthProvider",
    "LineTokenResponse",
    "LineUserProfile",
    "build_authorization_url",
    "parse_bearer_token",
]
