"""Time authority port.

Record ids and creation timestamps are derived from this port rather than
from the host clock, so tests can freeze and move time.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class TimeAuthorityProtocol(ABC):
    """Source of wall-clock and monotonic time.

    For production:
        SystemTimeAuthority from fhe_gated/infrastructure/adapters/

    For testing:
        FakeTimeAuthority from tests/helpers/fake_time_authority.py
    """

    @abstractmethod
    def utcnow(self) -> datetime:
        """Return the current timezone-aware UTC time."""
        ...

    @abstractmethod
    def monotonic(self) -> float:
        """Return a monotonic clock reading in seconds.

        Only differences between readings are meaningful.
        """
        ...

    def unix_seconds(self) -> int:
        """Current time as integer Unix seconds (community created_at)."""
        return int(self.utcnow().timestamp())

    def unix_millis(self) -> int:
        """Current time as integer Unix milliseconds (record id prefix)."""
        return int(self.utcnow().timestamp() * 1000)
