"""Entry point for the Pokedex API.

Starts the FastAPI application under uvicorn.  Host and port come from
``HOST`` and ``PORT`` (or ``NODE_PORT``); see
``pokedex_api.app.core.config`` for every supported variable.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from pokedex_api.app.core.config import settings
from pokedex_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_config=None,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Listening on %s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
