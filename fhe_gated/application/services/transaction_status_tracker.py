"""Transaction status tracker.

Single "current status" slot driving the user-visible progress banner.

State machine:
    idle/pending/success/error --begin--> pending
    pending --succeed--> success --(success_display_seconds)--> idle
    pending --fail-----> error   --(error_display_seconds)----> idle

Every begin() issues a new, monotonically increasing token. Resolutions
and scheduled reverts carry the token of the operation that produced
them and are discarded when that token is no longer current, so the
latest operation always wins without relying on timer cancellation.
The pending timer handle is still cancelled on supersession to keep the
loop tidy.

The tracker must be driven from within a running asyncio event loop.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable

from fhe_gated.application.services.base import LoggingMixin
from fhe_gated.config.community_config import (
    DEFAULT_STATUS_DISPLAY_CONFIG,
    StatusDisplayConfig,
)
from fhe_gated.domain.models.transaction_status import (
    TransactionState,
    TransactionStatus,
)

StatusListener = Callable[[TransactionStatus], None]


class TransactionStatusTracker(LoggingMixin):
    """Cyclic idle -> pending -> success|error -> idle status machine.

    Attributes:
        _config: Auto-revert intervals.
        _status: The currently displayed status.
        _token: Token of the most recent operation.
        _revert_handle: Timer of the scheduled auto-revert, if any.
        _listeners: Callbacks notified on every transition.
    """

    log_component = "status"

    def __init__(self, config: StatusDisplayConfig | None = None) -> None:
        """Initialize the tracker in the idle state.

        Args:
            config: Auto-revert intervals. Defaults to 2s success / 3s error.
        """
        self._config = config or DEFAULT_STATUS_DISPLAY_CONFIG
        self._status = TransactionStatus.idle()
        self._token = 0
        self._revert_handle: asyncio.TimerHandle | None = None
        self._listeners: list[StatusListener] = []
        self._init_logger()

    @property
    def current(self) -> TransactionStatus:
        """The currently displayed status."""
        return self._status

    @property
    def token(self) -> int:
        """Token of the most recent operation (0 before any operation)."""
        return self._token

    def subscribe(self, listener: StatusListener) -> Callable[[], None]:
        """Register a callback invoked on every transition.

        Args:
            listener: Callable receiving the new status.

        Returns:
            A callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def begin(self, message: str) -> int:
        """Start a new operation, superseding whatever is displayed.

        Args:
            message: Progress text to display.

        Returns:
            Token identifying this operation.
        """
        self._token += 1
        self._cancel_revert()
        self._publish(
            TransactionStatus(
                state=TransactionState.PENDING, message=message, token=self._token
            )
        )
        return self._token

    def succeed(self, token: int, message: str) -> bool:
        """Resolve an operation as successful.

        Args:
            token: Token returned by begin().
            message: Result text to display.

        Returns:
            True if applied, False if the operation was superseded.
        """
        return self._resolve(
            token,
            TransactionState.SUCCESS,
            message,
            self._config.success_display_seconds,
        )

    def fail(self, token: int, message: str) -> bool:
        """Resolve an operation as failed.

        Args:
            token: Token returned by begin().
            message: Error text to display.

        Returns:
            True if applied, False if the operation was superseded.
        """
        return self._resolve(
            token,
            TransactionState.ERROR,
            message,
            self._config.error_display_seconds,
        )

    def _resolve(
        self,
        token: int,
        state: TransactionState,
        message: str,
        display_seconds: float,
    ) -> bool:
        log = self._log_operation("resolve", token=token, state=state.value)

        if token != self._token:
            log.debug("stale_resolution_ignored", current_token=self._token)
            return False
        if self._status.state is not TransactionState.PENDING:
            log.warning("resolution_without_pending", current_state=self._status.state.value)
            return False

        self._publish(TransactionStatus(state=state, message=message, token=token))
        loop = asyncio.get_running_loop()
        self._revert_handle = loop.call_later(display_seconds, self._revert, token)
        return True

    def _revert(self, token: int) -> None:
        if token != self._token:
            return
        self._revert_handle = None
        self._publish(TransactionStatus.idle(token))

    def _cancel_revert(self) -> None:
        if self._revert_handle is not None:
            self._revert_handle.cancel()
            self._revert_handle = None

    def _publish(self, status: TransactionStatus) -> None:
        self._status = status
        for listener in list(self._listeners):
            try:
                listener(status)
            except Exception:
                self._log.exception(
                    "status_listener_failed",
                    state=status.state.value,
                    token=status.token,
                )
