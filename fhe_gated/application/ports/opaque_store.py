"""Opaque store port.

This module defines the contract of the generic key->bytes store that
holds the community index and records. The store has no notion of
communities; the registry's storage convention is layered on top.

Developer Golden Rules:
1. ZERO-LENGTH IS ABSENT - get() returns b"" for missing keys, never raises for them
2. AWAIT WRITES - set() completes before any dependent read is issued
3. NO TRANSACTIONS - each set() is independent; there is no compare-and-swap
"""

from __future__ import annotations

from typing import Protocol


class OpaqueStoreProtocol(Protocol):
    """Protocol for the opaque key->bytes store.

    Methods:
        get: Read the bytes stored under a key
        set: Write bytes under a key
        is_available: Report whether the store is reachable
    """

    async def get(self, key: str) -> bytes:
        """Read the payload stored under a key.

        Args:
            key: Storage key.

        Returns:
            Stored bytes, or b"" if nothing is stored under the key.
        """
        ...

    async def set(self, key: str, value: bytes) -> None:
        """Write a payload under a key, replacing any previous value.

        Args:
            key: Storage key.
            value: Payload bytes.
        """
        ...

    async def is_available(self) -> bool:
        """Check whether the store can currently serve reads and writes.

        Returns:
            True if reachable, False otherwise.
        """
        ...
