"""
API Routes.
"""

from . import health, login, share

__all__ = ["health", "login", "share"]
