import json
from typing import Any


class Co2xError(Exception):
    status_code: int = 400


class MissingCodeError(Co2xError):
    def __init__(self, message: str = "Missing authorization code") -> None:
        super().__init__(message)


class MissingAuthHeaderError(Co2xError):
    status_code = 401

    def __init__(self, message: str = "Missing authorization header") -> None:
        super().__init__(message)


class CsrfMismatchError(Co2xError):
    def __init__(self, message: str = "State mismatch - possible CSRF attack") -> None:
        super().__init__(message)


class ConfigurationError(Co2xError):
    status_code = 500


class OAuthError(Co2xError):
    """Upstream OAuth call failed. ``details`` holds the provider's error payload."""

    prefix = "oauth request failed"

    def __init__(self, details: Any = None, *, message: str | None = None) -> None:
        self.details = details
        super().__init__(message or f"{self.prefix}: {_dump(details)}")


class TokenExchangeError(OAuthError):
    prefix = "Failed to exchange code for token"


class ProfileFetchError(OAuthError):
    prefix = "Failed to fetch user profile"


def _dump(details: Any) -> str:
    try:
        return json.dumps(details)
    except (TypeError, ValueError):
        return json.dumps(str(details))
