"""
API Interface - FastAPI REST API.

Serves the GitHub login flow and the shared chat storage endpoints.
"""

from .main import app, create_app

__all__ = ["app", "create_app"]
