"""Application services - Use case orchestration.

Available services:
- CommunityRegistryService: Enumerate and create communities over the opaque store
- AccessVerifierService: Session, availability and proof checks for access
- TransactionStatusTracker: Auto-reverting progress status with supersession
"""

from fhe_gated.application.services.access_verifier_service import (
    AccessVerifierService,
)
from fhe_gated.application.services.community_registry_service import (
    CommunityRegistryService,
)
from fhe_gated.application.services.transaction_status_tracker import (
    TransactionStatusTracker,
)

__all__: list[str] = [
    "AccessVerifierService",
    "CommunityRegistryService",
    "TransactionStatusTracker",
]
