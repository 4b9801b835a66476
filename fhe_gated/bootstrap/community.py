"""Bootstrap wiring for community registry dependencies.

Lazily builds process-wide singletons. Defaults are the in-memory store
stub and a disconnected session; entry points (the CLI) and tests
override them with the set_* functions before first use.
"""

from __future__ import annotations

from fhe_gated.application.ports.access_verifier import AccessVerifierProtocol
from fhe_gated.application.ports.community_registry import CommunityRegistryProtocol
from fhe_gated.application.ports.opaque_store import OpaqueStoreProtocol
from fhe_gated.application.ports.session_provider import SessionProviderProtocol
from fhe_gated.application.ports.time_authority import TimeAuthorityProtocol
from fhe_gated.application.services.access_verifier_service import (
    AccessVerifierService,
)
from fhe_gated.application.services.community_registry_service import (
    CommunityRegistryService,
)
from fhe_gated.application.services.transaction_status_tracker import (
    TransactionStatusTracker,
)
from fhe_gated.config.community_config import (
    RegistryConfig,
    StatusDisplayConfig,
    VerifierConfig,
)
from fhe_gated.infrastructure.adapters.static_session import StaticSessionProvider
from fhe_gated.infrastructure.adapters.system_time_authority import SystemTimeAuthority
from fhe_gated.infrastructure.stubs.opaque_store_stub import OpaqueStoreStub

_opaque_store: OpaqueStoreProtocol | None = None
_session_provider: SessionProviderProtocol | None = None
_time_authority: TimeAuthorityProtocol | None = None
_status_tracker: TransactionStatusTracker | None = None
_community_registry: CommunityRegistryProtocol | None = None
_access_verifier: AccessVerifierProtocol | None = None


def get_opaque_store() -> OpaqueStoreProtocol:
    """Get opaque store instance."""
    global _opaque_store
    if _opaque_store is None:
        _opaque_store = OpaqueStoreStub()
    return _opaque_store


def set_opaque_store(store: OpaqueStoreProtocol) -> None:
    """Set custom opaque store (CLI or testing override)."""
    global _opaque_store
    _opaque_store = store


def get_session_provider() -> SessionProviderProtocol:
    """Get wallet session provider instance."""
    global _session_provider
    if _session_provider is None:
        _session_provider = StaticSessionProvider()
    return _session_provider


def set_session_provider(session: SessionProviderProtocol) -> None:
    """Set custom session provider (CLI or testing override)."""
    global _session_provider
    _session_provider = session


def get_time_authority() -> TimeAuthorityProtocol:
    """Get time authority instance."""
    global _time_authority
    if _time_authority is None:
        _time_authority = SystemTimeAuthority()
    return _time_authority


def set_time_authority(time_authority: TimeAuthorityProtocol) -> None:
    """Set custom time authority (testing override)."""
    global _time_authority
    _time_authority = time_authority


def get_status_tracker() -> TransactionStatusTracker:
    """Get the shared transaction status tracker."""
    global _status_tracker
    if _status_tracker is None:
        _status_tracker = TransactionStatusTracker(StatusDisplayConfig.from_environment())
    return _status_tracker


def get_community_registry() -> CommunityRegistryProtocol:
    """Get community registry service instance."""
    global _community_registry
    if _community_registry is None:
        _community_registry = CommunityRegistryService(
            store=get_opaque_store(),
            status_tracker=get_status_tracker(),
            session=get_session_provider(),
            time_authority=get_time_authority(),
            config=RegistryConfig.from_environment(),
        )
    return _community_registry


def set_community_registry(registry: CommunityRegistryProtocol) -> None:
    """Set custom community registry (testing override)."""
    global _community_registry
    _community_registry = registry


def get_access_verifier() -> AccessVerifierProtocol:
    """Get access verifier service instance."""
    global _access_verifier
    if _access_verifier is None:
        _access_verifier = AccessVerifierService(
            store=get_opaque_store(),
            status_tracker=get_status_tracker(),
            session=get_session_provider(),
            config=VerifierConfig.from_environment(),
        )
    return _access_verifier


def set_access_verifier(verifier: AccessVerifierProtocol) -> None:
    """Set custom access verifier (testing override)."""
    global _access_verifier
    _access_verifier = verifier


def reset_community_services() -> None:
    """Reset all community singletons."""
    global _opaque_store, _session_provider, _time_authority
    global _status_tracker, _community_registry, _access_verifier
    _opaque_store = None
    _session_provider = None
    _time_authority = None
    _status_tracker = None
    _community_registry = None
    _access_verifier = None
