"""
Pytest configuration and shared fixtures for FHE Gated tests.

Testing Standards:
- All async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Time-dependent tests use FakeTimeAuthority
- Status auto-revert tests use TEST_STATUS_DISPLAY_CONFIG (tens of milliseconds)
"""

from collections.abc import Iterator

import pytest
import structlog

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
    TEST_STATUS_DISPLAY_CONFIG,
    TEST_VERIFIER_CONFIG,
)
from fhe_gated.infrastructure.adapters.static_session import StaticSessionProvider
from fhe_gated.infrastructure.stubs.opaque_store_stub import OpaqueStoreStub
from tests.helpers import FakeTimeAuthority

TEST_ACCOUNT = "0x1111111111111111111111111111111111111111"


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Restore default structlog configuration after each test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from fhe_gated import __version__

    return __version__


@pytest.fixture
def fake_time_authority() -> FakeTimeAuthority:
    """Time authority frozen at 2026-01-01T00:00:00 UTC."""
    return FakeTimeAuthority()


@pytest.fixture
def store() -> OpaqueStoreStub:
    """Empty, available in-memory opaque store."""
    return OpaqueStoreStub()


@pytest.fixture
def session() -> StaticSessionProvider:
    """Session with a connected wallet."""
    return StaticSessionProvider(TEST_ACCOUNT)


@pytest.fixture
def status_tracker() -> TransactionStatusTracker:
    """Status tracker with short auto-revert intervals."""
    return TransactionStatusTracker(TEST_STATUS_DISPLAY_CONFIG)


@pytest.fixture
def registry(
    store: OpaqueStoreStub,
    status_tracker: TransactionStatusTracker,
    session: StaticSessionProvider,
    fake_time_authority: FakeTimeAuthority,
) -> CommunityRegistryService:
    """Registry wired to the in-memory store and a connected session."""
    return CommunityRegistryService(
        store=store,
        status_tracker=status_tracker,
        session=session,
        time_authority=fake_time_authority,
    )


@pytest.fixture
def verifier(
    store: OpaqueStoreStub,
    status_tracker: TransactionStatusTracker,
    session: StaticSessionProvider,
) -> AccessVerifierService:
    """Access verifier with a 10ms simulated proof latency."""
    return AccessVerifierService(
        store=store,
        status_tracker=status_tracker,
        session=session,
        config=TEST_VERIFIER_CONFIG,
    )
