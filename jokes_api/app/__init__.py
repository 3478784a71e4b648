"""
Application package initializer.

The package is split into ``core`` (configuration, logging, errors),
``schemas`` (pydantic models), ``services`` (the joke store) and
``api`` (routers).  ``main`` assembles them into the FastAPI app.
"""

from .main import app, create_app  # noqa: F401
