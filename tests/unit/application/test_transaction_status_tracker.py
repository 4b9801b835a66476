"""Unit tests for TransactionStatusTracker.

Covers the idle -> pending -> success|error -> idle cycle, automatic
revert timing, supersession by newer operations and listener delivery.
"""

from __future__ import annotations

import asyncio

import pytest

from fhe_gated.application.services.transaction_status_tracker import (
    TransactionStatusTracker,
)
from fhe_gated.config.community_config import StatusDisplayConfig
from fhe_gated.domain.models.transaction_status import (
    TransactionState,
    TransactionStatus,
)


class TestTrackerTransitions:
    """Tests for begin/succeed/fail transitions."""

    def test_starts_idle(self, status_tracker: TransactionStatusTracker) -> None:
        assert status_tracker.current.state is TransactionState.IDLE
        assert status_tracker.token == 0

    @pytest.mark.asyncio
    async def test_begin_sets_pending_with_new_token(
        self, status_tracker: TransactionStatusTracker
    ) -> None:
        first = status_tracker.begin("working")
        second = status_tracker.begin("working again")

        assert second == first + 1
        assert status_tracker.current == TransactionStatus(
            state=TransactionState.PENDING, message="working again", token=second
        )

    @pytest.mark.asyncio
    async def test_succeed(self, status_tracker: TransactionStatusTracker) -> None:
        token = status_tracker.begin("working")

        assert status_tracker.succeed(token, "done")
        assert status_tracker.current.state is TransactionState.SUCCESS
        assert status_tracker.current.message == "done"

    @pytest.mark.asyncio
    async def test_fail(self, status_tracker: TransactionStatusTracker) -> None:
        token = status_tracker.begin("working")

        assert status_tracker.fail(token, "broken")
        assert status_tracker.current.state is TransactionState.ERROR
        assert status_tracker.current.message == "broken"

    @pytest.mark.asyncio
    async def test_resolving_twice_is_rejected(
        self, status_tracker: TransactionStatusTracker
    ) -> None:
        """Only a pending status can be resolved."""
        token = status_tracker.begin("working")
        status_tracker.succeed(token, "done")

        assert not status_tracker.fail(token, "late failure")
        assert status_tracker.current.state is TransactionState.SUCCESS


class TestTrackerAutoRevert:
    """Tests for the timed return to idle."""

    @pytest.mark.asyncio
    async def test_success_reverts_to_idle(
        self, status_tracker: TransactionStatusTracker
    ) -> None:
        token = status_tracker.begin("working")
        status_tracker.succeed(token, "done")

        await asyncio.sleep(0.06)

        assert status_tracker.current.state is TransactionState.IDLE
        assert not status_tracker.current.visible

    @pytest.mark.asyncio
    async def test_error_reverts_to_idle(
        self, status_tracker: TransactionStatusTracker
    ) -> None:
        token = status_tracker.begin("working")
        status_tracker.fail(token, "broken")

        await asyncio.sleep(0.08)

        assert status_tracker.current.state is TransactionState.IDLE

    @pytest.mark.asyncio
    async def test_error_stays_visible_longer_than_success(self) -> None:
        config = StatusDisplayConfig(success_display_seconds=0.05, error_display_seconds=0.5)
        ok = TransactionStatusTracker(config)
        ko = TransactionStatusTracker(config)
        ok.succeed(ok.begin("a"), "ok")
        ko.fail(ko.begin("b"), "ko")

        await asyncio.sleep(0.2)

        assert ok.current.state is TransactionState.IDLE
        assert ko.current.state is TransactionState.ERROR

    @pytest.mark.asyncio
    async def test_pending_never_reverts_on_its_own(
        self, status_tracker: TransactionStatusTracker
    ) -> None:
        status_tracker.begin("working")

        await asyncio.sleep(0.08)

        assert status_tracker.current.state is TransactionState.PENDING


class TestTrackerSupersession:
    """A newer operation always wins over an older one."""

    @pytest.mark.asyncio
    async def test_new_operation_cancels_pending_revert(
        self, status_tracker: TransactionStatusTracker
    ) -> None:
        """Starting B while A's success is displayed keeps B's pending status."""
        first = status_tracker.begin("A")
        status_tracker.succeed(first, "A done")
        second = status_tracker.begin("B")

        await asyncio.sleep(0.08)

        assert status_tracker.current == TransactionStatus(
            state=TransactionState.PENDING, message="B", token=second
        )

    @pytest.mark.asyncio
    async def test_stale_resolution_is_ignored(
        self, status_tracker: TransactionStatusTracker
    ) -> None:
        first = status_tracker.begin("A")
        second = status_tracker.begin("B")

        assert not status_tracker.fail(first, "A failed late")
        assert status_tracker.current.token == second
        assert status_tracker.current.state is TransactionState.PENDING

    @pytest.mark.asyncio
    async def test_newer_resolution_gets_full_display_time(self) -> None:
        config = StatusDisplayConfig(success_display_seconds=0.1, error_display_seconds=0.1)
        tracker = TransactionStatusTracker(config)
        tracker.succeed(tracker.begin("A"), "A done")
        await asyncio.sleep(0.07)
        tracker.fail(tracker.begin("B"), "B failed")

        # A's revert would have fired by now
        await asyncio.sleep(0.05)

        assert tracker.current.state is TransactionState.ERROR
        assert tracker.current.message == "B failed"


class TestTrackerListeners:
    """Tests for transition listeners."""

    @pytest.mark.asyncio
    async def test_listener_sees_full_cycle(
        self, status_tracker: TransactionStatusTracker
    ) -> None:
        seen: list[TransactionState] = []
        status_tracker.subscribe(lambda status: seen.append(status.state))

        status_tracker.succeed(status_tracker.begin("working"), "done")
        await asyncio.sleep(0.06)

        assert seen == [
            TransactionState.PENDING,
            TransactionState.SUCCESS,
            TransactionState.IDLE,
        ]

    @pytest.mark.asyncio
    async def test_unsubscribe(self, status_tracker: TransactionStatusTracker) -> None:
        seen: list[TransactionStatus] = []
        unsubscribe = status_tracker.subscribe(seen.append)
        unsubscribe()

        status_tracker.begin("working")

        assert seen == []

    @pytest.mark.asyncio
    async def test_failing_listener_does_not_break_tracker(
        self, status_tracker: TransactionStatusTracker
    ) -> None:
        def broken(status: TransactionStatus) -> None:
            raise RuntimeError("listener bug")

        seen: list[TransactionStatus] = []
        status_tracker.subscribe(broken)
        status_tracker.subscribe(seen.append)

        status_tracker.begin("working")

        assert status_tracker.current.state is TransactionState.PENDING
        assert len(seen) == 1
