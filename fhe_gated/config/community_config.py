"""Community registry configuration.

This module defines configuration for the registry storage convention,
status display timing and the simulated verification latency, with
environment variable overrides.

Environment Variables (Registry):
- FHE_GATED_INDEX_KEY: Well-known key of the index payload (default: community_keys)
- FHE_GATED_RECORD_KEY_PREFIX: Prefix of per-record keys (default: community_)
- FHE_GATED_ID_RANDOM_LENGTH: Random base36 characters per id (default: 7)

Environment Variables (Status display):
- FHE_GATED_SUCCESS_DISPLAY_SECONDS: Success banner lifetime (default: 2.0)
- FHE_GATED_ERROR_DISPLAY_SECONDS: Error banner lifetime (default: 3.0)

Environment Variables (Verifier):
- FHE_GATED_VERIFY_LATENCY_SECONDS: Simulated proof latency (default: 2.0)
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_float_env(key: str, default: float) -> float:
    """Get float environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed float value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _get_str_env(key: str, default: str) -> str:
    value = os.environ.get(key)
    return value if value else default


@dataclass(frozen=True)
class RegistryConfig:
    """Storage convention for the community registry.

    Attributes:
        index_key: Well-known key holding the serialized index.
        record_key_prefix: Prefix concatenated with a record id to form its key.
        id_random_length: Number of random base36 characters in generated ids.
    """

    index_key: str = "community_keys"
    record_key_prefix: str = "community_"
    id_random_length: int = 7

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.index_key:
            raise ValueError("index_key cannot be empty")
        if not self.record_key_prefix:
            raise ValueError("record_key_prefix cannot be empty")
        if self.index_key == self.record_key_prefix:
            raise ValueError("index_key must differ from record_key_prefix")
        if self.id_random_length < 4:
            raise ValueError(
                f"id_random_length must be at least 4, got {self.id_random_length}"
            )

    def record_key(self, record_id: str) -> str:
        """Derive the storage key of a record from its id."""
        return f"{self.record_key_prefix}{record_id}"

    @classmethod
    def from_environment(cls) -> RegistryConfig:
        """Create config from environment variables with defaults.

        Returns:
            RegistryConfig with values from environment or defaults.
        """
        return cls(
            index_key=_get_str_env("FHE_GATED_INDEX_KEY", "community_keys"),
            record_key_prefix=_get_str_env("FHE_GATED_RECORD_KEY_PREFIX", "community_"),
            id_random_length=_get_int_env("FHE_GATED_ID_RANDOM_LENGTH", 7),
        )


@dataclass(frozen=True)
class StatusDisplayConfig:
    """How long resolved statuses stay visible before reverting to idle.

    Attributes:
        success_display_seconds: Lifetime of a success status. Default: 2.0.
        error_display_seconds: Lifetime of an error status. Default: 3.0.
    """

    success_display_seconds: float = 2.0
    error_display_seconds: float = 3.0

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.success_display_seconds < 0:
            raise ValueError(
                "success_display_seconds must be non-negative, "
                f"got {self.success_display_seconds}"
            )
        if self.error_display_seconds < 0:
            raise ValueError(
                "error_display_seconds must be non-negative, "
                f"got {self.error_display_seconds}"
            )

    @classmethod
    def from_environment(cls) -> StatusDisplayConfig:
        """Create config from environment variables with defaults."""
        return cls(
            success_display_seconds=_get_float_env(
                "FHE_GATED_SUCCESS_DISPLAY_SECONDS", 2.0
            ),
            error_display_seconds=_get_float_env("FHE_GATED_ERROR_DISPLAY_SECONDS", 3.0),
        )


@dataclass(frozen=True)
class VerifierConfig:
    """Access verifier timing.

    Attributes:
        simulated_latency_seconds: Fixed latency of the placeholder proof step.
                                   Bounds the duration of every verification.
    """

    simulated_latency_seconds: float = 2.0

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.simulated_latency_seconds < 0:
            raise ValueError(
                "simulated_latency_seconds must be non-negative, "
                f"got {self.simulated_latency_seconds}"
            )

    @classmethod
    def from_environment(cls) -> VerifierConfig:
        """Create config from environment variables with defaults."""
        return cls(
            simulated_latency_seconds=_get_float_env(
                "FHE_GATED_VERIFY_LATENCY_SECONDS", 2.0
            ),
        )


# Pre-defined configurations

DEFAULT_REGISTRY_CONFIG = RegistryConfig()
DEFAULT_STATUS_DISPLAY_CONFIG = StatusDisplayConfig()
DEFAULT_VERIFIER_CONFIG = VerifierConfig()

# Testing configs with short timings for unit tests
TEST_STATUS_DISPLAY_CONFIG = StatusDisplayConfig(
    success_display_seconds=0.02,
    error_display_seconds=0.03,
)
TEST_VERIFIER_CONFIG = VerifierConfig(simulated_latency_seconds=0.01)
