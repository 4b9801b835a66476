"""Domain models for FHE Gated.

Contains value objects and domain models that represent
core business concepts. These models are immutable and
contain no infrastructure dependencies.
"""

from fhe_gated.domain.models.community import (
    AccessPolicy,
    CommunityDraft,
    CommunityRecord,
    sort_newest_first,
)
from fhe_gated.domain.models.transaction_status import (
    TransactionState,
    TransactionStatus,
)
from fhe_gated.domain.models.verification import (
    VerificationOutcome,
    VerificationResult,
)

__all__: list[str] = [
    "AccessPolicy",
    "CommunityDraft",
    "CommunityRecord",
    "TransactionState",
    "TransactionStatus",
    "VerificationOutcome",
    "VerificationResult",
    "sort_newest_first",
]
