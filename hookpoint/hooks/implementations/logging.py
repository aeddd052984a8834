"""Structured logging hook implementation."""

from collections.abc import Iterable
from typing import Any

from hookpoint.core.logging import get_logger

from ..events import HookEvent, HookPoint, hook_name_of
from ..registry import HookRegistry


class LoggingHook:
    """Structured logging for hook events"""

    def __init__(self, logger: Any | None = None, include_data: bool = False):
        """Initialize logging hook.

        Args:
            logger: Optional structlog logger instance. If None, creates a new one.
            include_data: Whether to include the event payload in log lines
        """
        self.logger = logger or get_logger(__name__)
        self.include_data = include_data
        self._name = "logging_hook"

    @property
    def name(self) -> str:
        """Hook name for debugging"""
        return self._name

    def install(
        self,
        registry: HookRegistry,
        hook_names: Iterable[str | HookPoint] | None = None,
    ) -> None:
        """Register this hook on ``hook_names`` (default: every HookPoint)."""
        for hook_name in hook_names if hook_names is not None else HookPoint:
            registry.register(hook_name, self)

    def __call__(self, event: HookEvent) -> None:
        """Log event with structured context."""
        log_data: dict[str, Any] = {"hook_event": event.event_type}
        if self.include_data and event.data is not None:
            log_data["data"] = event.data

        if event.event_type == hook_name_of(HookPoint.ERROR):
            self.logger.error("hook_event_error", **log_data)
        else:
            self.logger.info("hook_event", **log_data)
