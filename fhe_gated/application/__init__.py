"""
Application layer - Use cases and orchestration for FHE Gated.

This layer contains:
- Application services (registry, access verifier, transaction status)
- Port definitions (abstract interfaces for infrastructure)

IMPORT RULES:
- CAN import from: domain, config
- CANNOT import from: infrastructure (except observability for logging)
"""
