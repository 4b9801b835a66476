"""Community registry port.

Defines the caller-facing contract of the registry. Both operations
always resolve: failures are logged (list_all) or reported through the
transaction status (create), never raised.
"""

from __future__ import annotations

from typing import Protocol

from fhe_gated.domain.models.community import CommunityDraft, CommunityRecord


class CommunityRegistryProtocol(Protocol):
    """Protocol for enumerating and creating communities.

    Methods:
        list_all: Load every indexed community, newest first
        create: Store a new community and append it to the index
    """

    @property
    def is_refreshing(self) -> bool:
        """Whether a list_all() call is in flight."""
        ...

    async def list_all(self) -> list[CommunityRecord]:
        """Load all communities reachable through the index.

        Returns:
            Communities sorted by created_at descending. Empty when the
            index is absent, the store is unavailable, or nothing decodes.
        """
        ...

    async def create(self, draft: CommunityDraft) -> CommunityRecord | None:
        """Create a community.

        Args:
            draft: Caller input.

        Returns:
            The created record, or None if the operation failed.
        """
        ...
