"""
Domain layer - Pure business logic for FHE Gated.

This layer contains:
- Domain models (community records, transaction status, verification outcomes)
- Domain services (record codec, community filtering)
- Domain exceptions

CRITICAL: This layer must NOT import from application or infrastructure.
Only stdlib and typing imports are allowed.
"""

from fhe_gated.domain.exceptions import GatedCommunityError

__all__: list[str] = ["GatedCommunityError"]
