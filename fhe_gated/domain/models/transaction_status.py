"""Transaction status models for user-visible operation progress.

A status is ephemeral: one is created per user-initiated operation and
lives only until it auto-reverts to idle or is superseded by the next
operation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TransactionState(Enum):
    """Lifecycle states of a transaction status.

    States:
        IDLE: Nothing is displayed
        PENDING: An operation is in flight
        SUCCESS: The latest operation succeeded
        ERROR: The latest operation failed
    """

    IDLE = "idle"
    PENDING = "pending"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class TransactionStatus:
    """The currently displayed operation status.

    Attributes:
        state: Lifecycle state.
        message: Human-readable progress or result text.
        token: Operation token that produced this status (0 for the initial idle).
    """

    state: TransactionState = TransactionState.IDLE
    message: str = ""
    token: int = 0

    @property
    def visible(self) -> bool:
        """Whether the status banner should be shown."""
        return self.state is not TransactionState.IDLE

    @property
    def is_resolved(self) -> bool:
        """Whether the status is a final outcome awaiting auto-revert."""
        return self.state in (TransactionState.SUCCESS, TransactionState.ERROR)

    @classmethod
    def idle(cls, token: int = 0) -> TransactionStatus:
        """Create an idle status."""
        return cls(state=TransactionState.IDLE, message="", token=token)
