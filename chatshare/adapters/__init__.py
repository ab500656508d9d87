"""
Adapters - External service integrations.

All external calls are wrapped here to isolate domains from third-party changes.
"""

from .github import GitHubClient, GitHubConfig, UserProfile
from .sqlite import SQLiteObjectStore

__all__ = [
    "GitHubClient",
    "GitHubConfig",
    "UserProfile",
    "SQLiteObjectStore",
]
