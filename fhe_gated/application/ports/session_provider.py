"""Wallet session port.

Wallet connection and account selection happen outside this package;
services only ask whether a session is present and which account it
belongs to.
"""

from __future__ import annotations

from typing import Protocol


class SessionProviderProtocol(Protocol):
    """Protocol exposing the connected wallet account."""

    def current_account(self) -> str | None:
        """Return the connected account address, or None if disconnected."""
        ...
