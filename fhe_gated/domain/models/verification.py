"""Access verification outcome models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class VerificationOutcome(Enum):
    """Outcome of an access verification. Never indeterminate."""

    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class VerificationResult:
    """Result of verifying access to a community.

    Attributes:
        community_id: Id of the community that was checked.
        outcome: SUCCESS or FAILURE.
        reason: Failure reason, empty on success.
    """

    community_id: str
    outcome: VerificationOutcome
    reason: str = ""

    @property
    def granted(self) -> bool:
        """Whether access was granted."""
        return self.outcome is VerificationOutcome.SUCCESS

    @classmethod
    def success(cls, community_id: str) -> VerificationResult:
        return cls(community_id=community_id, outcome=VerificationOutcome.SUCCESS)

    @classmethod
    def failure(cls, community_id: str, reason: str) -> VerificationResult:
        return cls(
            community_id=community_id,
            outcome=VerificationOutcome.FAILURE,
            reason=reason,
        )
