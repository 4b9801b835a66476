"""Configuration module for FHE Gated.

Available Configurations:
- RegistryConfig: Index key, record key prefix, id generation
- StatusDisplayConfig: Auto-revert intervals of the transaction status
- VerifierConfig: Simulated proof latency
"""

from fhe_gated.config.community_config import (
    DEFAULT_REGISTRY_CONFIG,
    DEFAULT_STATUS_DISPLAY_CONFIG,
    DEFAULT_VERIFIER_CONFIG,
    TEST_STATUS_DISPLAY_CONFIG,
    TEST_VERIFIER_CONFIG,
    RegistryConfig,
    StatusDisplayConfig,
    VerifierConfig,
)

__all__ = [
    "RegistryConfig",
    "StatusDisplayConfig",
    "VerifierConfig",
    "DEFAULT_REGISTRY_CONFIG",
    "DEFAULT_STATUS_DISPLAY_CONFIG",
    "DEFAULT_VERIFIER_CONFIG",
    "TEST_STATUS_DISPLAY_CONFIG",
    "TEST_VERIFIER_CONFIG",
]
