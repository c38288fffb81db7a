from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILES = (".env", ".env.local")


class LineProviderSettings(BaseSettings):
    """LINE Login channel settings loaded from ``LINE_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LINE_",
        env_file=ENV_FILES,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    channel_id: str = Field(default="")
    channel_secret: SecretStr = Field(default=SecretStr(""))
    # Must match the redirect_uri used when the browser was sent to the authorize endpoint
    redirect_uri: str = Field(default="http://localhost:3000/callback")
    scopes: list[str] = Field(default=["profile", "openid", "email"])
    timeout: float = Field(default=10.0)

    @property
    def is_configured(self) -> bool:
        return bool(self.channel_id.strip() and self.channel_secret.get_secret_value().strip())


class CorsSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=ENV_FILES,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    allowed_origins: str = Field(default="http://localhost:3000,http://localhost:3001")
    allowed_methods: list[str] = Field(default=["GET", "POST", "OPTIONS", "PUT", "DELETE"])
    allowed_headers: list[str] = Field(default=["Content-Type", "Authorization"])

    @property
    def origins(self) -> list[str]:
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


class ClientSettings(BaseSettings):
    """Settings for the login client that runs next to the user's session."""

    model_config = SettingsConfigDict(
        env_prefix="CO2X_CLIENT_",
        env_file=ENV_FILES,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    channel_id: str = Field(default="")
    # Empty means no backend is configured and a placeholder profile is used instead
    backend_url: str = Field(default="")
    redirect_uri: str = Field(default="http://localhost:3000/callback")
    scopes: list[str] = Field(default=["profile", "openid", "email"])
    timeout: float = Field(default=10.0)


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CO2X_",
        env_file=ENV_FILES,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="0.0.0.0")  # noqa: S104
    port: int = Field(default=7071)
    api_prefix: str = Field(default="/api")

    line: LineProviderSettings = Field(default_factory=LineProviderSettings)
    cors: CorsSettings = Field(default_factory=CorsSettings)
