from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from co2x.auth.core.settings import CorsSettings


class CORSPrefixMiddleware(BaseHTTPMiddleware):
    """CORS for allow-listed origin prefixes.

    The request origin is taken from ``Origin`` and falls back to ``Referer``, so
    an allow-list entry matches any URL that starts with it. Preflight requests
    are answered with 204 directly.
    """

    def __init__(self, app: ASGIApp, settings: CorsSettings | None = None) -> None:
        super().__init__(app)
        self.settings = settings or CorsSettings()

    def is_allowed(self, origin: str | None) -> bool:
        return bool(origin) and any(origin.startswith(allowed) for allowed in self.settings.origins)

    def apply_headers(self, request: Request, response: Response) -> Response:
        origin = request.headers.get("origin") or request.headers.get("referer")
        if self.is_allowed(origin):
            response.headers["Access-Control-Allow-Origin"] = origin
            response.headers["Access-Control-Allow-Methods"] = ", ".join(self.settings.allowed_methods)
            response.headers["Access-Control-Allow-Headers"] = ", ".join(self.settings.allowed_headers)
            response.headers["Access-Control-Allow-Credentials"] = "true"
        return response

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.method == "OPTIONS":
            return self.apply_headers(request, Response(status_code=204))

        response = await call_next(request)
        return self.apply_headers(request, response)
