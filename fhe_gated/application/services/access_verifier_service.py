"""Access verifier service.

Drives the membership check for a community through three steps:

1. Session check - a connected wallet is required (immediate failure)
2. Availability check - the store must be reachable
3. Proof step - placeholder: waits a fixed simulated latency, then succeeds

Only step 3 is meant to be replaced by a real ownership proof, so it is
injected as a ProofStrategy. verify() always resolves to exactly one of
SUCCESS or FAILURE and reports progress through the transaction status
tracker.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable

from fhe_gated.application.ports.opaque_store import OpaqueStoreProtocol
from fhe_gated.application.ports.session_provider import SessionProviderProtocol
from fhe_gated.application.services.base import LoggingMixin
from fhe_gated.application.services.transaction_status_tracker import (
    TransactionStatusTracker,
)
from fhe_gated.config.community_config import DEFAULT_VERIFIER_CONFIG, VerifierConfig
from fhe_gated.domain.errors.session import NoSessionError
from fhe_gated.domain.errors.store import StoreUnavailableError
from fhe_gated.domain.errors.user_rejected import UNKNOWN_ERROR_MESSAGE, describe_failure
from fhe_gated.domain.models.verification import VerificationResult

VERIFY_PENDING_MESSAGE = "Verifying NFT ownership with FHE..."
VERIFY_SUCCESS_MESSAGE = "FHE verification successful! Access granted."
VERIFY_FAILURE_PREFIX = "Verification failed"

# (community_id, account) -> completes on success, raises on failure
ProofStrategy = Callable[[str, str], Awaitable[None]]


class AccessVerifierService(LoggingMixin):
    """Verifies that the connected wallet may access a community.

    Attributes:
        _store: Opaque store whose availability gates verification.
        _status: Transaction status tracker.
        _session: Connected wallet session.
        _config: Verifier timing.
        _prove: Proof step (simulated latency by default).
    """

    log_component = "verifier"

    def __init__(
        self,
        store: OpaqueStoreProtocol,
        status_tracker: TransactionStatusTracker,
        session: SessionProviderProtocol,
        config: VerifierConfig | None = None,
        proof: ProofStrategy | None = None,
    ) -> None:
        """Initialize the access verifier.

        Args:
            store: Opaque store.
            status_tracker: Tracker that verify() reports progress through.
            session: Connected wallet session provider.
            config: Verifier timing (defaults to 2s simulated latency).
            proof: Replacement proof step. Defaults to the simulated proof.
        """
        self._store = store
        self._status = status_tracker
        self._session = session
        self._config = config or DEFAULT_VERIFIER_CONFIG
        self._prove = proof or self._simulated_proof
        self._init_logger()

    async def verify(self, community_id: str) -> VerificationResult:
        """Verify access to a community.

        Args:
            community_id: Id of the community.

        Returns:
            SUCCESS if every step passed, FAILURE with a reason otherwise.
        """
        token = self._status.begin(VERIFY_PENDING_MESSAGE)
        log = self._log_operation("verify", community_id=community_id)

        try:
            await self._run_checks(community_id)
        except Exception as e:
            message = describe_failure(e, VERIFY_FAILURE_PREFIX)
            log.warning("access_verification_failed", error=str(e), status_message=message)
            self._status.fail(token, message)
            return VerificationResult.failure(community_id, str(e) or UNKNOWN_ERROR_MESSAGE)

        log.info("access_verified")
        self._status.succeed(token, VERIFY_SUCCESS_MESSAGE)
        return VerificationResult.success(community_id)

    async def _run_checks(self, community_id: str) -> None:
        account = self._session.current_account()
        if not account:
            raise NoSessionError()
        if not await self._store.is_available():
            raise StoreUnavailableError("verify")
        await self._prove(community_id, account)

    async def _simulated_proof(self, community_id: str, account: str) -> None:
        # Placeholder: no ownership check is performed
        await asyncio.sleep(self._config.simulated_latency_seconds)
