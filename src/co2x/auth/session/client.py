from __future__ import annotations

import logging
import secrets
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import ValidationError

from co2x.auth.core.exceptions import (
    ConfigurationError,
    CsrfMismatchError,
    MissingCodeError,
    ProfileFetchError,
    TokenExchangeError,
)
from co2x.auth.providers.line import LineUserProfile, build_authorization_url
from co2x.auth.session.store import SessionStore
from co2x.auth.utils.crypto import generate_state_token, states_match

if TYPE_CHECKING:
    from collections.abc import Mapping

    from co2x.auth.core.settings import ClientSettings

logger = logging.getLogger(__name__)

PLACEHOLDER_PICTURE_URL = (
    "data:image/svg+xml,%3Csvg xmlns=%22http://www.w3.org/2000/svg%22 viewBox=%220 0 200 200%22%3E"
    "%3Ccircle cx=%22100%22 cy=%22100%22 r=%22100%22 fill=%22%2300B900%22/%3E"
    "%3Ctext x=%22100%22 y=%22120%22 font-size=%2240%22 fill=%22white%22 text-anchor=%22middle%22"
    " font-family=%22Arial%22%3ELINE%3C/text%3E%3C/svg%3E"
)


def build_placeholder_profile() -> LineUserProfile:
    """Profile used when no backend is configured. Demo only."""
    suffix = secrets.token_hex(3).upper()
    return LineUserProfile(
        user_id=f"U{secrets.token_hex(8)}",
        display_name=f"LINE User {suffix}",
        picture_url=PLACEHOLDER_PICTURE_URL,
        status_message="Using CO2X Platform",
    )


class LineLoginClient:
    """Drives LINE login from the user's side of the redirect.

    ``login`` stores a CSRF nonce and returns the authorize URL the browser must be
    sent to. ``complete_login`` checks the echoed ``state`` against that nonce and
    swaps the code for a profile through the backend.
    """

    def __init__(
        self,
        settings: ClientSettings,
        store: SessionStore | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.settings = settings
        self.store = store if store is not None else SessionStore()
        self.http_client = http_client

    @property
    def has_backend(self) -> bool:
        return bool(self.settings.backend_url.strip())

    def authorization_url(self, state: str) -> str:
        return build_authorization_url(
            client_id=self.settings.channel_id,
            redirect_uri=self.settings.redirect_uri,
            scopes=self.settings.scopes,
            state=state,
        )

    def login(self) -> str:
        if not self.settings.channel_id:
            logger.warning("LINE channel id is not configured")
            msg = "LINE authentication is not configured. Please set CO2X_CLIENT_CHANNEL_ID environment variable."
            raise ConfigurationError(msg)

        state = generate_state_token()
        self.store.save_state(state)
        url = self.authorization_url(state)
        logger.info("Redirecting to LINE OAuth")
        return url

    async def complete_login(self, query: Mapping[str, str]) -> LineUserProfile:
        code = query.get("code")
        state = query.get("state")

        # The nonce is single-use whatever happens next
        expected = self.store.pop_state()

        if not states_match(state, expected):
            logger.warning("State mismatch on LINE callback")
            raise CsrfMismatchError

        if not code:
            msg = "No authorization code received from LINE"
            raise MissingCodeError(msg)

        if self.has_backend:
            user = await self._exchange_with_backend(code)
        else:
            logger.info("No backend configured, using placeholder profile")
            user = build_placeholder_profile()

        self.store.set_user(user)
        return user

    def logout(self) -> None:
        self.store.clear()

    async def fetch_profile(self, access_token: str) -> LineUserProfile:
        data = await self._get(
            "/api/lineProfile",
            headers={"Authorization": f"Bearer {access_token}"},
            error=ProfileFetchError,
        )
        return self._parse_user(data)

    async def _exchange_with_backend(self, code: str) -> LineUserProfile:
        data = await self._get("/api/lineCallback", params={"code": code}, error=TokenExchangeError)
        return self._parse_user(data)

    def _parse_user(self, data: dict[str, Any]) -> LineUserProfile:
        if not (user := data.get("user")):
            msg = "No user data returned from backend"
            raise ProfileFetchError(data, message=msg)
        try:
            return LineUserProfile.model_validate(user)
        except ValidationError as e:
            msg = "Malformed user data returned from backend"
            raise ProfileFetchError(user, message=msg) from e

    async def _get(
        self,
        path: str,
        *,
        error: type[TokenExchangeError | ProfileFetchError],
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        url = f"{self.settings.backend_url.rstrip('/')}{path}"
        request_headers = {"Accept": "application/json", **(headers or {})}
        try:
            if self.http_client is not None:
                response = await self.http_client.get(
                    url,
                    params=params,
                    headers=request_headers,
                    timeout=self.settings.timeout,
                )
            else:
                async with httpx.AsyncClient(timeout=self.settings.timeout) as client:
                    response = await client.get(url, params=params, headers=request_headers)
        except httpx.RequestError as e:
            logger.warning("Backend request failed: %s", e)
            raise error(str(e), message=f"Backend request failed: {e}") from e

        try:
            data = response.json()
        except ValueError:
            data = {"error": response.reason_phrase}

        if not response.is_success:
            message = data.get("error") if isinstance(data, dict) else None
            raise error(data, message=message or f"Backend error: {response.status_code}")

        if not isinstance(data, dict):
            msg = "Unexpected response from backend"
            raise error(data, message=msg)
        return data
