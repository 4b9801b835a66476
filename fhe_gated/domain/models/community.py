"""Community domain models.

A community is an NFT-gated group whose record is stored once and never
updated. Sensitive access policy fields are never stored in the clear:
they are carried as an opaque protected payload produced by the payload
protector.

Developer Golden Rules:
1. IMMUTABILITY - All models are frozen dataclasses
2. OPAQUE PAYLOAD - protected_payload is stored and displayed, never decoded
3. ORDERING - created_at is the sole sort key (most recent first)
"""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_ACCESS_RULES = "NFT ownership required"
DEFAULT_VERIFICATION_METHOD = "FHE-based proof"


@dataclass(frozen=True)
class AccessPolicy:
    """Plaintext access policy that gets protected before storage.

    Attributes:
        access_rules: Human-readable membership rule.
        verification_method: Tag naming how membership is proven.
    """

    access_rules: str = DEFAULT_ACCESS_RULES
    verification_method: str = DEFAULT_VERIFICATION_METHOD


@dataclass(frozen=True)
class CommunityDraft:
    """Caller input for creating a community.

    Attributes:
        name: Display name (required, non-blank).
        description: Display description (may be empty).
        nft_contract: Identifier of the NFT contract gating membership.
        policy: Plaintext access policy to protect.
    """

    name: str
    description: str = ""
    nft_contract: str = ""
    policy: AccessPolicy = field(default_factory=AccessPolicy)

    def __post_init__(self) -> None:
        """Validate draft fields."""
        if not self.name or not self.name.strip():
            raise ValueError("Community name cannot be empty")


@dataclass(frozen=True, eq=True)
class CommunityRecord:
    """A stored community.

    Attributes:
        id: Unique key of the record within the registry.
        name: Display name.
        description: Display description.
        nft_contract: Identifier of the NFT contract gating membership.
        protected_payload: Opaque blob produced by the payload protector.
        created_at: Creation time as integer Unix seconds.
    """

    id: str
    name: str
    description: str
    nft_contract: str
    protected_payload: str
    created_at: int

    def __post_init__(self) -> None:
        """Validate record fields."""
        if not self.id:
            raise ValueError("Community record id cannot be empty")


def sort_newest_first(records: list[CommunityRecord]) -> list[CommunityRecord]:
    """Order records by creation time, most recent first.

    The sort is stable, so records sharing a timestamp keep their index order.
    """
    return sorted(records, key=lambda record: record.created_at, reverse=True)
