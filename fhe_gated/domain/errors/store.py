"""Opaque store availability errors."""

from __future__ import annotations

from fhe_gated.domain.exceptions import GatedCommunityError


class StoreUnavailableError(GatedCommunityError):
    """Raised when the opaque store reports that it is not reachable.

    Operations abort before any mutation when this is raised, so nothing
    is created or loaded.

    Attributes:
        operation: Name of the operation that was aborted.
    """

    def __init__(self, operation: str = "") -> None:
        """Initialize store unavailable error.

        Args:
            operation: Name of the aborted operation (optional).
        """
        self.operation = operation
        super().__init__("Contract not available")
