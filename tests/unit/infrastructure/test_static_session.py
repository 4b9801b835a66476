"""Unit tests for StaticSessionProvider and SystemTimeAuthority."""

from __future__ import annotations

from datetime import timezone

from fhe_gated.infrastructure.adapters.static_session import StaticSessionProvider
from fhe_gated.infrastructure.adapters.system_time_authority import SystemTimeAuthority
from tests.helpers import FakeTimeAuthority


class TestStaticSessionProvider:
    """Tests for StaticSessionProvider."""

    def test_no_account_by_default(self) -> None:
        assert StaticSessionProvider().current_account() is None

    def test_empty_account_is_disconnected(self) -> None:
        assert StaticSessionProvider("").current_account() is None

    def test_connect_and_disconnect(self) -> None:
        session = StaticSessionProvider()
        session.connect("0xabc")
        assert session.current_account() == "0xabc"

        session.disconnect()
        assert session.current_account() is None


class TestSystemTimeAuthority:
    """Tests for SystemTimeAuthority."""

    def test_utcnow_is_timezone_aware(self) -> None:
        assert SystemTimeAuthority().utcnow().tzinfo == timezone.utc

    def test_monotonic_never_decreases(self) -> None:
        clock = SystemTimeAuthority()
        first = clock.monotonic()
        assert clock.monotonic() >= first

    def test_unix_helpers_agree(self) -> None:
        clock = FakeTimeAuthority()
        clock.set_unix(1767225600)
        clock.advance(0.25)

        assert clock.unix_seconds() == 1767225600
        assert clock.unix_millis() == 1767225600250
