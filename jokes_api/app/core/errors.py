"""
Error taxonomy for the Jokes API.

Services raise ``BadRequestError`` or ``NotFoundError``; the handler
registered by ``create_app`` turns them into HTTP responses.  Most
failures are rendered as ``{"outcome": "failure", "message": ...}``
JSON, optionally with extra diagnostic keys such as ``soughtId``.  A
few routes answer with a plain text body instead, which is requested
with ``plain=True``.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse, Response

logger = logging.getLogger(__name__)


class JokesAPIError(Exception):
    """Base class for failures reported to the client."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, *, plain: bool = False, **extra: Any) -> None:
        super().__init__(message)
        self.message = message
        self.plain = plain
        self.extra = extra

    def to_response(self) -> Response:
        if self.plain:
            return PlainTextResponse(self.message, status_code=self.status_code)
        body = {"outcome": "failure", "message": self.message}
        body.update(self.extra)
        return JSONResponse(body, status_code=self.status_code)


class BadRequestError(JokesAPIError):
    """Malformed or missing required input."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(JokesAPIError):
    """A referenced joke does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


async def jokes_api_error_handler(request: Request, exc: JokesAPIError) -> Response:
    logger.warning(
        "%s %s failed with %s: %s", request.method, request.url.path, exc.status_code, exc.message
    )
    return exc.to_response()


def register_error_handlers(app: FastAPI) -> None:
    """Install the handler rendering ``JokesAPIError`` subclasses."""
    app.add_exception_handler(JokesAPIError, jokes_api_error_handler)
