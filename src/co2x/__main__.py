import logging

import uvicorn

from co2x.app import create_app
from co2x.auth.core.settings import AppSettings

logger = logging.getLogger("co2x")


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    settings = AppSettings()
    app = create_app(settings)

    base = f"http://localhost:{settings.port}"
    logger.info("LINE OAuth backend listening on %s", base)
    logger.info("GET  %s%s/lineCallback?code=...&state=...", base, settings.api_prefix)
    logger.info("GET  %s%s/lineProfile", base, settings.api_prefix)
    logger.info("GET  %s/health", base)

    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
