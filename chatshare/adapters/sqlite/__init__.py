"""
SQLite Adapter - Object store for shared chats.
"""

from .store import SQLiteObjectStore

__all__ = ["SQLiteObjectStore"]
