"""Entry point for serving the User Result API.

Starts uvicorn with the application from ``user_result_api.app.main``.
Host, port and log level come from the environment (``HOST``, ``PORT``,
``LOG_LEVEL``); see ``user_result_api.app.core.config`` for the full
list of settings.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from user_result_api.app.core.config import settings
from user_result_api.app.main import app


async def run_api() -> None:
    """Serve the API until interrupted."""
    # log_config=None keeps the handlers installed by setup_logging.
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        log_config=None,
    )
    server = Server(config)
    await server.serve()


def main() -> None:
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Shutting down")


if __name__ == "__main__":
    main()
