"""Payload protector port.

Turns a plaintext access policy into an opaque protected payload. The
registry depends only on this interface, so the placeholder encoding can
be replaced by a real privacy-preserving scheme without touching it.
"""

from __future__ import annotations

from typing import Protocol

from fhe_gated.domain.models.community import AccessPolicy


class PayloadProtectorProtocol(Protocol):
    """Protocol for protecting sensitive community fields.

    Implementations MUST be pure: deterministic given input, no side effects.
    """

    def protect(self, policy: AccessPolicy) -> str:
        """Protect an access policy.

        Args:
            policy: Plaintext access policy.

        Returns:
            Opaque protected payload string.
        """
        ...
