"""
FHE Gated - Private NFT-gated communities

Community records live inside a generic opaque key->bytes store. An
append-only index of record ids makes the otherwise keyed-only store
enumerable, and sensitive access policy fields are carried as an opaque
placeholder-encrypted payload.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
