"""
GitHub Adapter - OAuth identity provider client.

This is the ONLY place that calls the GitHub API.
"""

from .client import GitHubClient
from .models import GitHubConfig, UserProfile

__all__ = [
    "GitHubClient",
    "GitHubConfig",
    "UserProfile",
]
