"""Codec errors for index and community record payloads.

Decode failures are isolated per item by the registry: a malformed
record is skipped, and a malformed index is treated as empty when a new
community is appended.
"""

from __future__ import annotations

from fhe_gated.domain.exceptions import GatedCommunityError


class CodecError(GatedCommunityError):
    """Base class for payload encoding/decoding failures."""


class IndexDecodeError(CodecError):
    """Raised when the index payload is not a JSON array of strings.

    Attributes:
        reason: Underlying parse failure description.
    """

    def __init__(self, reason: str) -> None:
        """Initialize index decode error.

        Args:
            reason: Underlying parse failure description.
        """
        self.reason = reason
        super().__init__(f"Error parsing community keys: {reason}")


class RecordDecodeError(CodecError):
    """Raised when a community record payload cannot be decoded.

    Attributes:
        record_id: Id of the record whose payload was malformed.
        reason: Underlying parse failure description.
    """

    def __init__(self, record_id: str, reason: str) -> None:
        """Initialize record decode error.

        Args:
            record_id: Id of the record whose payload was malformed.
            reason: Underlying parse failure description.
        """
        self.record_id = record_id
        self.reason = reason
        super().__init__(f"Error parsing community data for {record_id}: {reason}")
