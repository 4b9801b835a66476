"""Infrastructure stubs for development and testing.

Available stubs:
- OpaqueStoreStub: In-memory key->bytes store with latency, availability
  toggling and per-key failure injection

WARNING: These stubs are NOT for production use.
Production implementations are in fhe_gated/infrastructure/adapters/.
"""

from fhe_gated.infrastructure.stubs.opaque_store_stub import (
    OpaqueStoreOperation,
    OpaqueStoreStub,
)

__all__: list[str] = [
    "OpaqueStoreOperation",
    "OpaqueStoreStub",
]
