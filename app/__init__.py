# app/__init__.py
"""
Package entrypoint for the Hayam Wiki API.

This lets us run:
    uvicorn app:app --port 3000

The router/static front is a separate process:
    uvicorn app.router.main:app --port 8080
"""

from .main import app

__all__ = ["app"]
