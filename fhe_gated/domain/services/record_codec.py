"""Record codec for the community registry storage convention.

Everything the registry keeps in the opaque store is UTF-8 JSON:

    community_keys          -> ["<id>", "<id>", ...]
    community_<id>          -> {"id", "name", "description", "nftContract",
                                "data", "timestamp"}

"data" carries the protected payload. Records written before the "id"
field existed are still readable because the id is always supplied from
the storage key when decoding.

Developer Golden Rules:
1. ZERO-LENGTH IS EMPTY - b"" decodes to an empty index without parsing
2. ROUND-TRIP - decode(encode(x)) == x for indexes and records
3. OPAQUE - protect_payload output is never decoded by this package
"""

from __future__ import annotations

import base64
import json
from collections.abc import Sequence
from typing import Any

from fhe_gated.domain.errors.codec import IndexDecodeError, RecordDecodeError
from fhe_gated.domain.models.community import AccessPolicy, CommunityRecord

PROTECTED_PAYLOAD_PREFIX = "FHE-"

_JSON_SEPARATORS = (",", ":")


def _dumps(obj: object) -> bytes:
    # ASCII escaping keeps lone surrogates encodable
    return json.dumps(obj, separators=_JSON_SEPARATORS).encode("utf-8")


def encode_index(ids: Sequence[str]) -> bytes:
    """Encode the index of record ids.

    Args:
        ids: Record ids in insertion order.

    Returns:
        UTF-8 JSON array payload.
    """
    return _dumps(list(ids))


def decode_index(payload: bytes) -> list[str]:
    """Decode the index of record ids.

    Args:
        payload: Raw bytes read from the index key. Zero-length means absent.

    Returns:
        Record ids in insertion order.

    Raises:
        IndexDecodeError: If the payload is not a JSON array of strings.
    """
    if len(payload) == 0:
        return []

    try:
        ids = json.loads(payload.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as e:
        raise IndexDecodeError(str(e)) from e

    if not isinstance(ids, list):
        raise IndexDecodeError(f"expected a JSON array, got {type(ids).__name__}")
    if not all(isinstance(entry, str) for entry in ids):
        raise IndexDecodeError("index entries must be strings")
    return ids


def encode_record(record: CommunityRecord) -> bytes:
    """Encode a community record.

    Args:
        record: The record to encode.

    Returns:
        UTF-8 JSON object payload.
    """
    return _dumps(
        {
            "id": record.id,
            "name": record.name,
            "description": record.description,
            "nftContract": record.nft_contract,
            "data": record.protected_payload,
            "timestamp": record.created_at,
        }
    )


def _require_str(data: dict[str, Any], key: str, record_id: str) -> str:
    value = data.get(key, "")
    if not isinstance(value, str):
        raise RecordDecodeError(record_id, f"field '{key}' must be a string")
    return value


def _require_timestamp(data: dict[str, Any], record_id: str) -> int:
    value = data.get("timestamp")
    # bool is an int subclass
    if isinstance(value, bool):
        raise RecordDecodeError(record_id, "field 'timestamp' must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise RecordDecodeError(record_id, "field 'timestamp' must be an integer")


def decode_record(payload: bytes, record_id: str | None = None) -> CommunityRecord:
    """Decode a community record.

    Args:
        payload: Raw bytes read from the record key.
        record_id: Id taken from the storage key. Takes precedence over any
            id stored inside the payload.

    Returns:
        The decoded CommunityRecord.

    Raises:
        RecordDecodeError: If the payload is empty, not a JSON object, or
            has missing or mistyped fields.
    """
    label = record_id or "<unknown>"
    if len(payload) == 0:
        raise RecordDecodeError(label, "empty payload")

    try:
        data = json.loads(payload.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as e:
        raise RecordDecodeError(label, str(e)) from e

    if not isinstance(data, dict):
        raise RecordDecodeError(label, f"expected a JSON object, got {type(data).__name__}")

    resolved_id = record_id if record_id is not None else data.get("id")
    if not isinstance(resolved_id, str) or not resolved_id:
        raise RecordDecodeError(label, "record id is missing")

    if not isinstance(data.get("name"), str):
        raise RecordDecodeError(resolved_id, "field 'name' is missing")

    return CommunityRecord(
        id=resolved_id,
        name=data["name"],
        description=_require_str(data, "description", resolved_id),
        nft_contract=_require_str(data, "nftContract", resolved_id),
        protected_payload=_require_str(data, "data", resolved_id),
        created_at=_require_timestamp(data, resolved_id),
    )


def protect_payload(policy: AccessPolicy) -> str:
    """Produce the placeholder-protected payload for an access policy.

    Pure and deterministic. The output is an opaque string; nothing in this
    package decodes it.

    Args:
        policy: Plaintext access policy.

    Returns:
        "FHE-" followed by the base64 of the policy JSON.
    """
    plaintext = _dumps(
        {
            "accessRules": policy.access_rules,
            "verificationMethod": policy.verification_method,
        }
    )
    return PROTECTED_PAYLOAD_PREFIX + base64.b64encode(plaintext).decode("ascii")


class PlaceholderPayloadProtector:
    """PayloadProtectorProtocol implementation backed by protect_payload.

    NOT a cryptographic primitive. Stands in until a real privacy-preserving
    scheme is available.
    """

    def protect(self, policy: AccessPolicy) -> str:
        return protect_payload(policy)
