"""
Sharing Models - Data types for the sharing domain.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class ShareKey(BaseModel):
    """Composite key of a shared object: ``owner/object_id``."""

    owner: str = Field(..., min_length=1)
    object_id: str = Field(..., min_length=1)

    @property
    def path(self) -> str:
        """Store key for this object."""
        return f"{self.owner}/{self.object_id}"

    @property
    def prefix(self) -> str:
        """Store prefix covering everything the owner has shared."""
        return f"{self.owner}/"


class ObjectInfo(BaseModel):
    """Listing entry for a stored object."""

    key: str
    size: int = 0
    etag: str
    uploaded: datetime

    @property
    def http_etag(self) -> str:
        """ETag in its quoted HTTP header form."""
        return f'"{self.etag}"'


class StoredObject(ObjectInfo):
    """Stored object with its body and content type."""

    content_type: str = "application/octet-stream"
    body: bytes = b""


class QuotaState(BaseModel):
    """Share counts for one owner, derived from a store listing."""

    total: int = 0
    recent: int = 0


class ShareResult(BaseModel):
    """Outcome of a successful mutating share operation."""

    message: str
    set_cookies: list[str] = Field(default_factory=list)
