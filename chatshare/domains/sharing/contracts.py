"""
Sharing Contracts - Interfaces for the sharing domain.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .models import ObjectInfo, StoredObject


@runtime_checkable
class ObjectStore(Protocol):
    """Contract for key-addressed blob storage."""

    async def list(self, prefix: str) -> list[ObjectInfo]:
        """
        List objects whose key starts with a prefix.

        Args:
            prefix: Key prefix, e.g. ``alice/``

        Returns:
            Listing entries with upload timestamps
        """
        ...

    async def get(self, key: str) -> StoredObject | None:
        """Get an object, or None if absent."""
        ...

    async def put(self, key: str, body: bytes, content_type: str) -> ObjectInfo:
        """Create or overwrite an object."""
        ...

    async def delete(self, key: str) -> None:
        """Delete an object. Deleting an absent key is not an error."""
        ...
