"""
Basic logging configuration for the application.

The ``setup_logging`` function configures the root logger with a
console and optional file handler.  ``AccessLogMiddleware`` writes one
line per request in the compact "tiny" format::

    GET /jokes/random 200 98 - 0.412 ms
"""

import logging
import time
from pathlib import Path
from typing import List, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

access_logger = logging.getLogger("jokes_api.access")


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Send store, error and access messages to the console.

    Runs once per process: ``create_app`` calls it on every build,
    and later calls (or a root logger already set up by uvicorn) leave
    the existing handlers alone.

    Parameters
    ----------
    level : str
        Name of the minimum level to emit, e.g. ``"debug"`` or
        ``"WARNING"``.  Unknown names fall back to INFO.
    logfile : Optional[str]
        Also append the same lines to this file (``LOG_FILE``).
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Log method, path, status, body length and response time."""

    async def dispatch(self, request: Request, call_next) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        access_logger.info(
            "%s %s %s %s - %.3f ms",
            request.method,
            request.url.path,
            response.status_code,
            response.headers.get("content-length", "-"),
            elapsed_ms,
        )
        return response
