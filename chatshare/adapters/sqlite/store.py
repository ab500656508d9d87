"""
SQLite Object Store - Shared chat blobs with upload timestamps.

Features:
- Async operations via aiosqlite
- Prefix listing for per-owner quota checks
- MD5 ETags and content-type metadata per object
"""

from __future__ import annotations

import hashlib
import logging
from datetime import datetime, timezone
from pathlib import Path

import aiosqlite

from chatshare.domains.sharing.models import ObjectInfo, StoredObject

logger = logging.getLogger(__name__)

__all__ = ["SQLiteObjectStore"]


class SQLiteObjectStore:
    """
    SQLite-backed object store.

    Example:
        >>> store = SQLiteObjectStore("data/chatshare.db")
        >>> await store.initialize()
        >>> await store.put("alice/123", b'{"messages": []}', "application/json")
        >>> [info.key for info in await store.list("alice/")]
        ['alice/123']
    """

    def __init__(self, db_path: str | Path) -> None:
        """
        Initialize store.

        Args:
            db_path: Path to SQLite database file
        """
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._connection: aiosqlite.Connection | None = None

    async def _get_connection(self) -> aiosqlite.Connection:
        """Get or create database connection."""
        if self._connection is None:
            self._connection = await aiosqlite.connect(str(self.db_path))
            self._connection.row_factory = aiosqlite.Row
        return self._connection

    async def initialize(self) -> None:
        """Initialize database schema."""
        conn = await self._get_connection()

        await conn.executescript("""
            CREATE TABLE IF NOT EXISTS objects (
                key TEXT PRIMARY KEY,
                body BLOB NOT NULL,
                content_type TEXT NOT NULL,
                etag TEXT NOT NULL,
                size INTEGER NOT NULL,
                uploaded TEXT NOT NULL
            );
        """)

        await conn.commit()
        logger.info("Object store initialized: %s", self.db_path)

    async def list(self, prefix: str) -> list[ObjectInfo]:
        """List objects whose key starts with prefix, ordered by key."""
        conn = await self._get_connection()

        # substr avoids LIKE wildcard escaping for user-supplied prefixes
        cursor = await conn.execute(
            """
            SELECT key, etag, size, uploaded FROM objects
            WHERE substr(key, 1, ?) = ?
            ORDER BY key
            """,
            (len(prefix), prefix),
        )
        rows = await cursor.fetchall()

        return [
            ObjectInfo(
                key=row["key"],
                etag=row["etag"],
                size=row["size"],
                uploaded=datetime.fromisoformat(row["uploaded"]),
            )
            for row in rows
        ]

    async def get(self, key: str) -> StoredObject | None:
        """Get object by key."""
        conn = await self._get_connection()

        cursor = await conn.execute("SELECT * FROM objects WHERE key = ?", (key,))
        row = await cursor.fetchone()

        if row is None:
            return None
        return StoredObject(
            key=row["key"],
            body=row["body"],
            content_type=row["content_type"],
            etag=row["etag"],
            size=row["size"],
            uploaded=datetime.fromisoformat(row["uploaded"]),
        )

    async def put(
        self,
        key: str,
        body: bytes,
        content_type: str,
        uploaded: datetime | None = None,
    ) -> ObjectInfo:
        """
        Create or overwrite an object.

        Args:
            key: Object key
            body: Object bytes
            content_type: Stored Content-Type
            uploaded: Upload time (defaults to now)

        Returns:
            Listing entry for the written object
        """
        conn = await self._get_connection()

        info = ObjectInfo(
            key=key,
            etag=hashlib.md5(body).hexdigest(),
            size=len(body),
            uploaded=uploaded or datetime.now(timezone.utc),
        )
        await conn.execute(
            """
            INSERT INTO objects (key, body, content_type, etag, size, uploaded)
            VALUES (?, ?, ?, ?, ?, ?)
            ON CONFLICT(key) DO UPDATE SET
                body = excluded.body,
                content_type = excluded.content_type,
                etag = excluded.etag,
                size = excluded.size,
                uploaded = excluded.uploaded
            """,
            (
                key,
                body,
                content_type,
                info.etag,
                info.size,
                info.uploaded.isoformat(),
            ),
        )

        await conn.commit()
        return info

    async def delete(self, key: str) -> None:
        """Delete object by key."""
        conn = await self._get_connection()
        await conn.execute("DELETE FROM objects WHERE key = ?", (key,))
        await conn.commit()

    async def close(self) -> None:
        """Close database connection."""
        if self._connection:
            await self._connection.close()
            self._connection = None
