"""Production adapters implementing application ports.

Available adapters:
- SQLiteOpaqueStore: File-backed opaque key->bytes store
- StaticSessionProvider: Externally selected wallet account
- SystemTimeAuthority: Host clock
"""

from fhe_gated.infrastructure.adapters.sqlite_opaque_store import SQLiteOpaqueStore
from fhe_gated.infrastructure.adapters.static_session import StaticSessionProvider
from fhe_gated.infrastructure.adapters.system_time_authority import SystemTimeAuthority

__all__: list[str] = [
    "SQLiteOpaqueStore",
    "StaticSessionProvider",
    "SystemTimeAuthority",
]
