"""Entry point for the Office Admin API.

Launches the API with uvicorn.  Host and port come from the
``API_HOST`` and ``API_PORT`` environment variables (defaults
``0.0.0.0`` and ``8000``); see ``office_admin_api/app/core/config.py``
for the other settings.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from office_admin_api.app.core.config import settings
from office_admin_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.api_host,
        port=settings.api_port,
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
