"""Static wallet session adapter.

Wallet connection and account selection happen outside this package; the
caller hands over the selected account (for the CLI, via --account or
FHE_GATED_ACCOUNT).
"""

from __future__ import annotations

from fhe_gated.application.ports.session_provider import SessionProviderProtocol


class StaticSessionProvider(SessionProviderProtocol):
    """Session holding an externally selected account.

    Attributes:
        _account: Connected account, or None when disconnected.
    """

    def __init__(self, account: str | None = None) -> None:
        self._account = account or None

    def current_account(self) -> str | None:
        return self._account

    def connect(self, account: str) -> None:
        """Switch to a newly selected account."""
        self._account = account or None

    def disconnect(self) -> None:
        self._account = None
