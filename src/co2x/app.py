import logging
from datetime import UTC, datetime

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from co2x.auth.core.exceptions import Co2xError
from co2x.auth.core.settings import AppSettings
from co2x.auth.providers.line import LineOAuthProvider
from co2x.middleware import CORSPrefixMiddleware

logger = logging.getLogger(__name__)


def _timestamp() -> str:
    return datetime.now(UTC).isoformat()


def error_response(message: str, status_code: int = 400) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message, "timestamp": _timestamp()})


async def handle_co2x_error(_request: Request, exc: Exception) -> JSONResponse:
    status_code = exc.status_code if isinstance(exc, Co2xError) else 400
    return error_response(str(exc) or "Unknown error", status_code)


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """Build the LINE Login backend.

    Routes:
    - ``GET /api/lineCallback?code=...&state=...``
    - ``GET /api/lineProfile`` with ``Authorization: Bearer <token>``
    - ``GET /health``
    """
    settings = settings or AppSettings()

    if not settings.line.is_configured:
        logger.warning("LINE_CHANNEL_ID or LINE_CHANNEL_SECRET not configured")

    provider = LineOAuthProvider(settings=settings.line)

    app = FastAPI(title="CO2X LINE Login API")
    app.state.settings = settings
    app.state.provider = provider

    app.add_middleware(CORSPrefixMiddleware, settings=settings.cors)
    app.add_exception_handler(Co2xError, handle_co2x_error)
    app.include_router(provider.get_router(), prefix=settings.api_prefix)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok", "timestamp": _timestamp()}

    return app
