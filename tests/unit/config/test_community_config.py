"""Unit tests for registry, status display and verifier configuration."""

from __future__ import annotations

import pytest

from fhe_gated.config import (
    DEFAULT_REGISTRY_CONFIG,
    DEFAULT_STATUS_DISPLAY_CONFIG,
    DEFAULT_VERIFIER_CONFIG,
    RegistryConfig,
    StatusDisplayConfig,
    VerifierConfig,
)


class TestRegistryConfig:
    """Tests for RegistryConfig."""

    def test_defaults(self) -> None:
        assert DEFAULT_REGISTRY_CONFIG.index_key == "community_keys"
        assert DEFAULT_REGISTRY_CONFIG.record_key_prefix == "community_"
        assert DEFAULT_REGISTRY_CONFIG.id_random_length == 7

    def test_record_key(self) -> None:
        """Record keys are the prefix followed by the id."""
        assert DEFAULT_REGISTRY_CONFIG.record_key("123-abc") == "community_123-abc"

    def test_index_key_equal_to_prefix_rejected(self) -> None:
        with pytest.raises(ValueError, match="must differ"):
            RegistryConfig(index_key="x_", record_key_prefix="x_")

    def test_short_random_length_rejected(self) -> None:
        with pytest.raises(ValueError, match="at least 4"):
            RegistryConfig(id_random_length=3)

    def test_empty_keys_rejected(self) -> None:
        with pytest.raises(ValueError):
            RegistryConfig(index_key="")
        with pytest.raises(ValueError):
            RegistryConfig(record_key_prefix="")

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FHE_GATED_INDEX_KEY", "groups")
        monkeypatch.setenv("FHE_GATED_RECORD_KEY_PREFIX", "group_")
        monkeypatch.setenv("FHE_GATED_ID_RANDOM_LENGTH", "10")
        config = RegistryConfig.from_environment()
        assert config.index_key == "groups"
        assert config.record_key("a") == "group_a"
        assert config.id_random_length == 10

    def test_from_environment_ignores_invalid_int(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("FHE_GATED_ID_RANDOM_LENGTH", "seven")
        assert RegistryConfig.from_environment().id_random_length == 7


class TestStatusDisplayConfig:
    """Tests for StatusDisplayConfig."""

    def test_defaults(self) -> None:
        """Success shows for 2s, errors for 3s."""
        assert DEFAULT_STATUS_DISPLAY_CONFIG.success_display_seconds == 2.0
        assert DEFAULT_STATUS_DISPLAY_CONFIG.error_display_seconds == 3.0

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError):
            StatusDisplayConfig(success_display_seconds=-1)
        with pytest.raises(ValueError):
            StatusDisplayConfig(error_display_seconds=-0.5)

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FHE_GATED_SUCCESS_DISPLAY_SECONDS", "0.5")
        monkeypatch.setenv("FHE_GATED_ERROR_DISPLAY_SECONDS", "1.5")
        config = StatusDisplayConfig.from_environment()
        assert config.success_display_seconds == 0.5
        assert config.error_display_seconds == 1.5


class TestVerifierConfig:
    """Tests for VerifierConfig."""

    def test_default_latency(self) -> None:
        assert DEFAULT_VERIFIER_CONFIG.simulated_latency_seconds == 2.0

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            VerifierConfig(simulated_latency_seconds=-1)

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FHE_GATED_VERIFY_LATENCY_SECONDS", "0")
        assert VerifierConfig.from_environment().simulated_latency_seconds == 0.0
