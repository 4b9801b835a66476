"""Domain errors for FHE Gated.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from GatedCommunityError.
"""

from fhe_gated.domain.errors.codec import CodecError, IndexDecodeError, RecordDecodeError
from fhe_gated.domain.errors.session import NoSessionError
from fhe_gated.domain.errors.store import StoreUnavailableError
from fhe_gated.domain.errors.user_rejected import (
    UserRejectedError,
    describe_failure,
    is_user_rejection,
)

__all__: list[str] = [
    "CodecError",
    "IndexDecodeError",
    "NoSessionError",
    "RecordDecodeError",
    "StoreUnavailableError",
    "UserRejectedError",
    "describe_failure",
    "is_user_rejection",
]
