import logging
from dataclasses import dataclass
from typing import Any, Literal
from urllib.parse import urlencode, urlparse, urlunparse

import httpx
from fastapi import APIRouter, Header
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from co2x.auth.core.exceptions import (
    Co2xError,
    MissingAuthHeaderError,
    MissingCodeError,
    OAuthError,
    ProfileFetchError,
    TokenExchangeError,
)
from co2x.auth.core.settings import LineProviderSettings

logger = logging.getLogger(__name__)


class LineTokenResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    access_token: str
    token_type: str | None = None
    expires_in: int | None = None
    refresh_token: str | None = None
    scope: str | None = None
    id_token: str | None = None


class LineUserProfile(BaseModel):
    """Normalized LINE profile. Serialized with the camelCase names LINE uses."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    user_id: str = Field(alias="userId")
    display_name: str = Field(alias="displayName")
    picture_url: str | None = Field(default=None, alias="pictureUrl")
    status_message: str | None = Field(default=None, alias="statusMessage")

    def to_public(self) -> dict[str, str]:
        return self.model_dump(by_alias=True, exclude_none=True)


@dataclass(frozen=True, slots=True, kw_only=True)
class CallbackResult:
    user: LineUserProfile
    # Upstream credential; callers must not hand this to the browser
    access_token: str


def _error_payload(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text or response.reason_phrase


def parse_bearer_token(authorization: str | None) -> str:
    if not authorization:
        raise MissingAuthHeaderError
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        msg = "Invalid authorization header"
        raise MissingAuthHeaderError(msg)
    return token.strip()


def build_authorization_url(*, client_id: str, redirect_uri: str, scopes: list[str], state: str) -> str:
    """Build the LINE authorize URL the browser is redirected to."""
    params = {
        "response_type": "code",
        "client_id": client_id,
        "redirect_uri": redirect_uri,
        "state": state,
        "scope": " ".join(scopes),
    }
    parsed = urlparse(LineOAuthProvider.AUTHORIZATION_URL)
    return urlunparse(
        (
            parsed.scheme,
            parsed.netloc,
            parsed.path,
            "",
            urlencode(params),
            "",
        ),
    )


class LineOAuthProvider:
    """LINE Login provider: authorize URL, code exchange and profile fetch."""

    AUTHORIZATION_URL = "https://access.line.me/oauth2/v2.1/authorize"
    TOKEN_URL = "https://api.line.me/oauth2/v2.1/token"  # noqa: S105
    PROFILE_URL = "https://api.line.me/v2/profile"

    def __init__(self, settings: LineProviderSettings) -> None:
        self.settings = settings

    @property
    def provider_id(self) -> Literal["line"]:
        return "line"

    def generate_authorization_url(self, state: str, redirect_uri: str | None = None) -> str:
        return build_authorization_url(
            client_id=self.settings.channel_id,
            redirect_uri=redirect_uri or self.settings.redirect_uri,
            scopes=self.settings.scopes,
            state=state,
        )

    async def exchange_code_for_token(self, code: str, redirect_uri: str | None = None) -> LineTokenResponse:
        """Exchange an authorization code for an access token.

        Authorization codes are single-use, so a failed exchange is never retried.
        """
        try:
            async with httpx.AsyncClient(timeout=self.settings.timeout) as client:
                response = await client.post(
                    self.TOKEN_URL,
                    data={
                        "grant_type": "authorization_code",
                        "code": code,
                        "redirect_uri": redirect_uri or self.settings.redirect_uri,
                        "client_id": self.settings.channel_id,
                        "client_secret": self.settings.channel_secret.get_secret_value(),
                    },
                    headers={"Content-Type": "application/x-www-form-urlencoded"},
                )
                response.raise_for_status()
                return LineTokenResponse.model_validate(response.json())
        except httpx.HTTPStatusError as e:
            raise TokenExchangeError(_error_payload(e.response)) from e
        except httpx.RequestError as e:
            raise TokenExchangeError(str(e) or type(e).__name__) from e
        except (ValueError, ValidationError) as e:
            msg = "missing required field in token response: access_token"
            raise TokenExchangeError(msg) from e

    async def get_user_profile(self, access_token: str) -> LineUserProfile:
        try:
            async with httpx.AsyncClient(timeout=self.settings.timeout) as client:
                response = await client.get(
                    self.PROFILE_URL,
                    headers={"Authorization": f"Bearer {access_token}"},
                )
                response.raise_for_status()
                return LineUserProfile.model_validate(response.json())
        except httpx.HTTPStatusError as e:
            raise ProfileFetchError(_error_payload(e.response)) from e
        except httpx.RequestError as e:
            raise ProfileFetchError(str(e) or type(e).__name__) from e
        except (ValueError, ValidationError) as e:
            msg = "malformed profile response"
            raise ProfileFetchError(msg) from e

    async def handle_callback(self, code: str | None, redirect_uri: str | None = None) -> CallbackResult:
        """Run the full code-for-profile flow. Nothing is returned unless both steps succeed."""
        if not code:
            raise MissingCodeError

        logger.info("Processing OAuth callback with code: %s...", code[:10])
        token = await self.exchange_code_for_token(code, redirect_uri)
        user = await self.get_user_profile(token.access_token)
        return CallbackResult(user=user, access_token=token.access_token)

    def get_router(self) -> APIRouter:
        router = APIRouter(tags=["auth", "line"])

        async def line_callback(code: str | None = None, state: str | None = None) -> dict[str, Any]:  # noqa: ARG001
            """Exchange the code LINE redirected back with for the user's profile."""
            try:
                result = await self.handle_callback(code)
            except Co2xError as e:
                logger.warning("OAuth callback error: %s", e)
                raise
            except Exception as e:
                logger.exception("Unexpected OAuth callback error")
                raise OAuthError(message=str(e) or "Unknown error") from e

            logger.info("Successfully authenticated user: %s", result.user.user_id)
            # The upstream access token stays server-side
            return {"success": True, "user": result.user.to_public()}

        async def line_profile(authorization: str | None = Header(default=None)) -> dict[str, Any]:  # noqa: B008
            """Fetch the profile for a bearer token supplied by the caller."""
            token = parse_bearer_token(authorization)

            logger.info("Fetching user profile")
            try:
                user = await self.get_user_profile(token)
            except Co2xError as e:
                logger.warning("Profile fetch error: %s", e)
                raise
            except Exception as e:
                logger.exception("Unexpected profile fetch error")
                raise OAuthError(message=str(e) or "Unknown error") from e

            logger.info("Successfully fetched profile for user: %s", user.user_id)
            return {"success": True, "user": user.to_public()}

        router.add_api_route("/lineCallback", line_callback, methods=["GET", "POST"])
        router.add_api_route("/lineProfile", line_profile, methods=["GET", "POST"])

        return router
