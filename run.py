"""Entry point for the Jokes API server.

Launches the FastAPI application with Uvicorn.  Host and port are
read from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``4000``); see ``jokes_api/app/core/config.py`` for
the other supported variables.  After ``pip install`` the same
launcher is available as the ``jokes-api`` command.

Usage:
    python run.py
"""
from jokes_api.app.server import main


if __name__ == "__main__":
    main()
