"""Community registry service.

Maintains community records and the index that makes them enumerable
inside an opaque key->bytes store.

Storage convention:
    <index_key>                  -> JSON array of record ids (append-only)
    <record_key_prefix><id>      -> JSON community record

Known limitations (accepted, covered by tests):
- create() is not transactional. The record is written before the index,
  so a failed index write leaves an orphan record: reachable by key,
  absent from enumeration, never a dangling index entry.
- Concurrent create() calls race on the index read-modify-write. The last
  write wins and the other id is dropped from the index (its record
  becomes an orphan). Callers needing strong consistency must serialize
  their own calls.

Developer Golden Rules:
1. NEVER RAISE - list_all() logs and degrades, create() reports via status
2. ISOLATE - one bad record never fails a listing
3. RECORD BEFORE INDEX - preserve write ordering in create()
4. SEQUENTIAL - no internal parallelism; each step awaits its predecessor
"""

from __future__ import annotations

import secrets
from collections.abc import Callable

import structlog

from fhe_gated.application.ports.opaque_store import OpaqueStoreProtocol
from fhe_gated.application.ports.payload_protector import PayloadProtectorProtocol
from fhe_gated.application.ports.session_provider import SessionProviderProtocol
from fhe_gated.application.ports.time_authority import TimeAuthorityProtocol
from fhe_gated.application.services.base import LoggingMixin
from fhe_gated.application.services.transaction_status_tracker import (
    TransactionStatusTracker,
)
from fhe_gated.config.community_config import DEFAULT_REGISTRY_CONFIG, RegistryConfig
from fhe_gated.domain.errors.codec import IndexDecodeError, RecordDecodeError
from fhe_gated.domain.errors.session import NoSessionError
from fhe_gated.domain.errors.store import StoreUnavailableError
from fhe_gated.domain.errors.user_rejected import describe_failure
from fhe_gated.domain.exceptions import GatedCommunityError
from fhe_gated.domain.models.community import (
    CommunityDraft,
    CommunityRecord,
    sort_newest_first,
)
from fhe_gated.domain.services.record_codec import (
    PlaceholderPayloadProtector,
    decode_index,
    decode_record,
    encode_index,
    encode_record,
)

CREATE_PENDING_MESSAGE = "Encrypting community data with FHE..."
CREATE_SUCCESS_MESSAGE = "Community created with FHE protection!"
CREATE_FAILURE_PREFIX = "Creation failed"
NO_WALLET_MESSAGE = "Please connect wallet first"

# Attempts at drawing an id whose key is still free
MAX_ID_ATTEMPTS = 5

_BASE36_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"

RefreshListener = Callable[[bool], None]


class CommunityRegistryService(LoggingMixin):
    """Registry of NFT-gated communities over an opaque store.

    Attributes:
        _store: Opaque key->bytes store.
        _status: Transaction status tracker surfacing create() progress.
        _session: Connected wallet session.
        _time: Time authority for ids and creation timestamps.
        _protector: Payload protector for access policies.
        _config: Storage convention.
        _refreshing: Whether a list_all() call is in flight.
    """

    log_component = "registry"

    def __init__(
        self,
        store: OpaqueStoreProtocol,
        status_tracker: TransactionStatusTracker,
        session: SessionProviderProtocol,
        time_authority: TimeAuthorityProtocol,
        payload_protector: PayloadProtectorProtocol | None = None,
        config: RegistryConfig | None = None,
    ) -> None:
        """Initialize the registry service.

        Args:
            store: Opaque key->bytes store.
            status_tracker: Tracker that create() reports progress through.
            session: Connected wallet session provider.
            time_authority: Source of timestamps.
            payload_protector: Policy protector (placeholder by default).
            config: Storage convention (defaults to community_keys/community_).
        """
        self._store = store
        self._status = status_tracker
        self._session = session
        self._time = time_authority
        self._protector = payload_protector or PlaceholderPayloadProtector()
        self._config = config or DEFAULT_REGISTRY_CONFIG
        self._refreshing = False
        self._refresh_listeners: list[RefreshListener] = []
        self._init_logger()

    # =========================================================================
    # Refreshing signal
    # =========================================================================

    @property
    def is_refreshing(self) -> bool:
        """Whether a list_all() call is in flight."""
        return self._refreshing

    def subscribe_refreshing(self, listener: RefreshListener) -> Callable[[], None]:
        """Register a callback invoked when the refreshing flag changes.

        Args:
            listener: Callable receiving the new flag value.

        Returns:
            A callable that removes the listener.
        """
        self._refresh_listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._refresh_listeners:
                self._refresh_listeners.remove(listener)

        return unsubscribe

    def _set_refreshing(self, value: bool) -> None:
        self._refreshing = value
        for listener in list(self._refresh_listeners):
            listener(value)

    # =========================================================================
    # Listing
    # =========================================================================

    async def list_all(self) -> list[CommunityRecord]:
        """Load all communities reachable through the index.

        The index is read on every call; nothing is cached.

        Returns:
            Communities sorted by created_at descending. Empty when the store
            is unavailable, the index is absent or corrupt, or no record
            decodes.
        """
        log = self._log_operation("list_all")
        self._set_refreshing(True)
        try:
            records = await self._load_all(log)
        except Exception:
            log.exception("community_listing_failed")
            return []
        finally:
            self._set_refreshing(False)

        log.info("communities_loaded", count=len(records))
        return records

    async def _load_all(self, log: structlog.BoundLogger) -> list[CommunityRecord]:
        if not await self._store.is_available():
            log.error("store_unavailable")
            return []

        payload = await self._store.get(self._config.index_key)
        try:
            ids = decode_index(payload)
        except IndexDecodeError as e:
            log.error("index_decode_failed", reason=e.reason)
            return []

        records: list[CommunityRecord] = []
        # dict.fromkeys keeps the first occurrence of a duplicated id
        for record_id in dict.fromkeys(ids):
            record = await self._load_record(record_id, log)
            if record is not None:
                records.append(record)
        return sort_newest_first(records)

    async def _load_record(
        self, record_id: str, log: structlog.BoundLogger
    ) -> CommunityRecord | None:
        try:
            payload = await self._store.get(self._config.record_key(record_id))
        except Exception as e:
            log.warning("community_record_read_failed", record_id=record_id, error=str(e))
            return None

        if not payload:
            log.warning("community_record_missing", record_id=record_id)
            return None

        try:
            return decode_record(payload, record_id)
        except RecordDecodeError as e:
            log.warning("community_record_skipped", record_id=record_id, reason=e.reason)
            return None

    # =========================================================================
    # Creation
    # =========================================================================

    async def create(self, draft: CommunityDraft) -> CommunityRecord | None:
        """Create a community and append it to the index.

        Progress is reported through the transaction status tracker:
        pending while writing, then success or error.

        Args:
            draft: Caller input.

        Returns:
            The created record, or None if the operation failed.
        """
        token = self._status.begin(CREATE_PENDING_MESSAGE)
        log = self._log_operation("create", community_name=draft.name)

        try:
            record = await self._write_community(draft, log)
        except NoSessionError as e:
            log.warning("community_creation_rejected", reason=str(e))
            self._status.fail(token, str(e))
            return None
        except Exception as e:
            message = describe_failure(e, CREATE_FAILURE_PREFIX)
            log.error("community_creation_failed", error=str(e), status_message=message)
            self._status.fail(token, message)
            return None

        log.info("community_created", record_id=record.id, created_at=record.created_at)
        self._status.succeed(token, CREATE_SUCCESS_MESSAGE)
        return record

    async def _write_community(
        self, draft: CommunityDraft, log: structlog.BoundLogger
    ) -> CommunityRecord:
        if not self._session.current_account():
            raise NoSessionError(NO_WALLET_MESSAGE)
        if not await self._store.is_available():
            raise StoreUnavailableError("create")

        protected_payload = self._protector.protect(draft.policy)
        record = CommunityRecord(
            id=await self._derive_fresh_id(),
            name=draft.name,
            description=draft.description,
            nft_contract=draft.nft_contract,
            protected_payload=protected_payload,
            created_at=self._time.unix_seconds(),
        )

        await self._store.set(self._config.record_key(record.id), encode_record(record))
        log.debug("community_record_written", record_id=record.id)

        ids = await self._read_index_for_append(log)
        ids.append(record.id)
        await self._store.set(self._config.index_key, encode_index(ids))
        log.debug("community_index_written", index_size=len(ids))

        return record

    async def _read_index_for_append(self, log: structlog.BoundLogger) -> list[str]:
        payload = await self._store.get(self._config.index_key)
        try:
            return decode_index(payload)
        except IndexDecodeError as e:
            # Append-only recovery: a corrupt index must not block creation
            log.error("index_decode_failed_resetting", reason=e.reason)
            return []

    # =========================================================================
    # Id derivation
    # =========================================================================

    def derive_unique_id(self) -> str:
        """Derive a new record id.

        Format: "<unix millis>-<random base36>", e.g. "1767225600000-k3x9q2a".
        Collisions are astronomically unlikely but not impossible.

        Returns:
            A new record id.
        """
        millis = self._time.unix_millis()
        suffix = "".join(
            secrets.choice(_BASE36_ALPHABET)
            for _ in range(self._config.id_random_length)
        )
        return f"{millis}-{suffix}"

    async def _derive_fresh_id(self) -> str:
        for _ in range(MAX_ID_ATTEMPTS):
            record_id = self.derive_unique_id()
            if not await self._store.get(self._config.record_key(record_id)):
                return record_id
        raise GatedCommunityError("Could not derive a unique community id")
