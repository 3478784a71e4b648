"""
Miscellaneous endpoints for testing and exploration.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from jokes_api.app.services.joke_service import format_time

router = APIRouter()

GREETING = (
    "Hello - this is a jokes API server.  "
    "Try /jokes or /jokes/random or /api-docs for documentation."
)


@router.get("/", response_class=PlainTextResponse, summary="root route - welcome")
async def root() -> str:
    """Return a plaintext greeting listing some common routes."""
    return GREETING


@router.get("/time", response_class=PlainTextResponse, summary="get the current time where the server is running")
async def get_time() -> str:
    return format_time()
