"""
Launcher for the Jokes API.

Serves ``jokes_api.app.main:app`` with Uvicorn on the host and port
from ``Settings`` (``HOST``/``PORT``, default ``0.0.0.0:4000``).
Installed as the ``jokes-api`` console script; ``python run.py`` from
a checkout does the same.
"""

import asyncio
import logging
from typing import Optional

from uvicorn import Config, Server

from .core.config import Settings, settings as default_settings


def build_config(settings: Optional[Settings] = None) -> Config:
    """Uvicorn configuration for the given (or module level) settings."""
    settings = settings or default_settings
    return Config(
        app="jokes_api.app.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )


async def run_api(settings: Optional[Settings] = None) -> None:
    """Serve the API until interrupted."""
    server = Server(build_config(settings))
    await server.serve()


def main() -> None:
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
    except Exception:
        logging.exception("Jokes API stopped with an error")
        raise
