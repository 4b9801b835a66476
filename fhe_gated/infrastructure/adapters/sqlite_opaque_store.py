"""SQLite-backed opaque store.

Persists the key->bytes store in a local SQLite file so communities
survive across CLI invocations. Each operation opens its own connection
inside a worker thread (asyncio.to_thread), keeping the event loop free
and avoiding cross-thread connection sharing.

Example:
    store = SQLiteOpaqueStore("./communities.db")
    await store.set("community_keys", b"[]")
    payload = await store.get("community_keys")
"""

from __future__ import annotations

import asyncio
import sqlite3
from pathlib import Path

import structlog

from fhe_gated.application.ports.opaque_store import OpaqueStoreProtocol


class SQLiteOpaqueStore(OpaqueStoreProtocol):
    """SQLite database implementing the opaque key->bytes store.

    Attributes:
        path: Path to SQLite database file.
    """

    SCHEMA = """
    CREATE TABLE IF NOT EXISTS entries (
        key TEXT PRIMARY KEY,
        value BLOB NOT NULL
    );
    """

    def __init__(self, path: str | Path) -> None:
        """Initialize the store.

        Args:
            path: Path to SQLite database file. Created on first use.
        """
        self.path = Path(path)

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self.path))
        conn.executescript(self.SCHEMA)
        return conn

    def _get_sync(self, key: str) -> bytes:
        conn = self._connect()
        try:
            row = conn.execute(
                "SELECT value FROM entries WHERE key = ?", (key,)
            ).fetchone()
        finally:
            conn.close()
        if row is None:
            return b""
        return bytes(row[0])

    def _set_sync(self, key: str, value: bytes) -> None:
        conn = self._connect()
        try:
            conn.execute(
                "INSERT INTO entries (key, value) VALUES (?, ?) "
                "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                (key, sqlite3.Binary(value)),
            )
            conn.commit()
        finally:
            conn.close()

    def _is_available_sync(self) -> bool:
        try:
            conn = self._connect()
            try:
                conn.execute("SELECT 1").fetchone()
            finally:
                conn.close()
        except sqlite3.Error as e:
            structlog.get_logger().warning(
                "sqlite_store_unavailable", path=str(self.path), error=str(e)
            )
            return False
        return True

    async def get(self, key: str) -> bytes:
        """Read the payload stored under a key (b"" if absent)."""
        return await asyncio.to_thread(self._get_sync, key)

    async def set(self, key: str, value: bytes) -> None:
        """Write a payload under a key, replacing any previous value."""
        await asyncio.to_thread(self._set_sync, key, value)

    async def is_available(self) -> bool:
        """Check that the database file can be opened and queried."""
        return await asyncio.to_thread(self._is_available_sync)
