"""
Top‑level router.

Aggregates the endpoint routers.  The joke routes live under
``/jokes``; the miscellaneous routes sit at the root.
"""

from fastapi import APIRouter

from .endpoints import jokes, misc

router = APIRouter()

router.include_router(misc.router, tags=["Misc"])
router.include_router(jokes.router, prefix="/jokes", tags=["Jokes"])
