"""
Infrastructure layer - External adapters for FHE Gated.

This layer contains:
- SQLite opaque store adapter
- System clock and wallet session adapters
- In-memory stubs for development and testing
- Structured logging (structlog) and correlation ids

IMPORT RULES:
- CAN import from: domain, application
- Implements ports defined in application layer
"""
