"""Wallet session errors."""

from __future__ import annotations

from fhe_gated.domain.exceptions import GatedCommunityError


class NoSessionError(GatedCommunityError):
    """Raised when an operation requires a connected wallet but none is present."""

    def __init__(self, message: str = "no session") -> None:
        super().__init__(message)
