"""Opaque store stub implementation.

This module provides an in-memory stub implementation of
OpaqueStoreProtocol for development and testing purposes.

Every operation first awaits asyncio.sleep(latency_seconds), so even with
zero latency each call yields to the event loop. This lets concurrent
callers interleave the way they would against a remote store.
"""

from __future__ import annotations

import asyncio
from enum import Enum, auto

from fhe_gated.application.ports.opaque_store import OpaqueStoreProtocol


class OpaqueStoreOperation(Enum):
    """Operations that can be recorded on the stub (for testing)."""

    GET = auto()
    SET = auto()
    IS_AVAILABLE = auto()


class OpaqueStoreStub(OpaqueStoreProtocol):
    """In-memory stub implementation of OpaqueStoreProtocol.

    NOT suitable for production use.

    Attributes:
        _data: Dictionary mapping keys to stored bytes.
        _available: Value reported by is_available().
        _latency_seconds: Delay awaited before every operation.
        _get_failures: Keys whose reads raise the mapped exception.
        _set_failures: Keys whose writes raise the mapped exception.
        _operations: List of operations for test verification.
    """

    def __init__(
        self,
        *,
        available: bool = True,
        latency_seconds: float = 0.0,
    ) -> None:
        """Initialize the stub with empty storage.

        Args:
            available: Value reported by is_available().
            latency_seconds: Delay awaited before every operation.
        """
        self._data: dict[str, bytes] = {}
        self._available = available
        self._latency_seconds = latency_seconds
        self._get_failures: dict[str, Exception] = {}
        self._set_failures: dict[str, Exception] = {}
        self._operations: list[tuple[OpaqueStoreOperation, str]] = []

    async def get(self, key: str) -> bytes:
        """Read the payload stored under a key (b"" if absent)."""
        await asyncio.sleep(self._latency_seconds)
        self._operations.append((OpaqueStoreOperation.GET, key))
        if key in self._get_failures:
            raise self._get_failures[key]
        return self._data.get(key, b"")

    async def set(self, key: str, value: bytes) -> None:
        """Write a payload under a key."""
        await asyncio.sleep(self._latency_seconds)
        self._operations.append((OpaqueStoreOperation.SET, key))
        if key in self._set_failures:
            raise self._set_failures[key]
        self._data[key] = bytes(value)

    async def is_available(self) -> bool:
        """Report the configured availability."""
        await asyncio.sleep(self._latency_seconds)
        self._operations.append((OpaqueStoreOperation.IS_AVAILABLE, ""))
        return self._available

    # Test helper methods

    def set_available(self, available: bool) -> None:
        """Change the availability reported by is_available()."""
        self._available = available

    def fail_get(self, key: str, error: Exception) -> None:
        """Make reads of a key raise an error."""
        self._get_failures[key] = error

    def fail_set(self, key: str, error: Exception) -> None:
        """Make writes of a key raise an error."""
        self._set_failures[key] = error

    def clear_failures(self) -> None:
        """Remove all injected failures."""
        self._get_failures.clear()
        self._set_failures.clear()

    def inject(self, key: str, value: bytes) -> None:
        """Store a payload directly, bypassing latency and the operation log."""
        self._data[key] = bytes(value)

    def peek(self, key: str) -> bytes:
        """Read a payload directly, bypassing latency and the operation log."""
        return self._data.get(key, b"")

    def keys(self) -> list[str]:
        """Get all stored keys."""
        return list(self._data.keys())

    def get_operations(self) -> list[tuple[OpaqueStoreOperation, str]]:
        """Get list of operations for test verification.

        Returns:
            List of (operation, key) tuples.
        """
        return self._operations.copy()

    def clear(self) -> None:
        """Clear all stored data and state (for testing)."""
        self._data.clear()
        self._operations.clear()
        self.clear_failures()
        self._available = True
