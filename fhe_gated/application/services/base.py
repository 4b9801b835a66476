"""Structured logging for application services.

Usage:
    class CommunityRegistryService(LoggingMixin):
        log_component = "registry"

        def __init__(self, store: OpaqueStoreProtocol) -> None:
            self._store = store
            self._init_logger()

        async def list_all(self) -> list[CommunityRecord]:
            log = self._log_operation("list_all")
            log.info("communities_loaded", count=3)
"""

from typing import ClassVar

import structlog

from fhe_gated.infrastructure.observability.correlation import get_correlation_id


class LoggingMixin:
    """Mixin binding service, component and operation context to log entries.

    Attributes:
        log_component: Component tag of the service ("registry", "status",
            "verifier"). Set by subclasses.
        _log: Logger bound with the service class name and component.
    """

    log_component: ClassVar[str] = "service"

    _log: structlog.BoundLogger

    def _init_logger(self) -> None:
        """Bind the service logger. Call once from __init__."""
        self._log = structlog.get_logger().bind(
            service=type(self).__name__,
            component=self.log_component,
        )

    def _log_operation(self, operation: str, **context: object) -> structlog.BoundLogger:
        """Create a logger scoped to one operation.

        Args:
            operation: Operation name (e.g. "create").
            **context: Extra key/values bound to every entry.

        Returns:
            Logger bound with the operation name, the correlation id of the
            current command (when one is bound) and the given context.
        """
        correlation_id = get_correlation_id()
        if correlation_id:
            context["correlation_id"] = correlation_id
        return self._log.bind(operation=operation, **context)
