"""Entry point for the Neighbourly API server.

Starts the FastAPI application with uvicorn.  Host and port come from
the ``HOST`` and ``PORT`` environment variables (defaults ``0.0.0.0``
and ``5000``); see ``neighbourly_api/app/core/config.py`` for the rest
of the configuration.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from neighbourly_api.app.core.config import settings
from neighbourly_api.app.main import app


async def main() -> None:
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
