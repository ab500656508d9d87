"""
CLI Interface - Command-line tools for ChatShare.

Provides commands for:
- Running the API server
- Creating the object store
- Minting and inspecting session tokens
- Checking share quotas
"""

from .main import app, main

__all__ = ["app", "main"]
