"""Application ports - Abstract interfaces for infrastructure adapters.

This module defines the contracts that infrastructure adapters must implement.
Ports enable dependency inversion and make the application layer testable.

Available ports:
- OpaqueStoreProtocol: Generic key->bytes store (get/set/is_available)
- SessionProviderProtocol: Connected wallet account
- PayloadProtectorProtocol: Placeholder-encryption of access policies
- TimeAuthorityProtocol: Timestamps
- CommunityRegistryProtocol: Enumerate and create communities
- AccessVerifierProtocol: Verify membership access
"""

from fhe_gated.application.ports.access_verifier import AccessVerifierProtocol
from fhe_gated.application.ports.community_registry import CommunityRegistryProtocol
from fhe_gated.application.ports.opaque_store import OpaqueStoreProtocol
from fhe_gated.application.ports.payload_protector import PayloadProtectorProtocol
from fhe_gated.application.ports.session_provider import SessionProviderProtocol
from fhe_gated.application.ports.time_authority import TimeAuthorityProtocol

__all__: list[str] = [
    "AccessVerifierProtocol",
    "CommunityRegistryProtocol",
    "OpaqueStoreProtocol",
    "PayloadProtectorProtocol",
    "SessionProviderProtocol",
    "TimeAuthorityProtocol",
]
