"""
Top‑level package for the Jokes API.

All functionality lives in submodules under ``app``; run the server
with ``python run.py`` or ``uvicorn jokes_api.app.main:app``.
"""

__all__ = []
