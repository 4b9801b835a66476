"""Access verifier port."""

from __future__ import annotations

from typing import Protocol

from fhe_gated.domain.models.verification import VerificationResult


class AccessVerifierProtocol(Protocol):
    """Protocol for verifying membership access to a community."""

    async def verify(self, community_id: str) -> VerificationResult:
        """Verify access to a community.

        Always resolves within bounded time to exactly one of SUCCESS or
        FAILURE; never raises.

        Args:
            community_id: Id of the community.

        Returns:
            The verification result.
        """
        ...
