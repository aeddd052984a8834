"""Hook emission manager for hookpoint.

This module provides the HookManager class which host applications use to emit
events at lifecycle points. It builds the event payload, hands it to the
registry for dispatch, and offers an asyncio entry point that keeps blocking
handlers off the event loop.
"""

import asyncio
from collections.abc import Callable
from typing import Any, TypeVar

from hookpoint.config.hooks import HookSettings
from hookpoint.config.logging import setup_logging_from_settings
from hookpoint.config.settings import Settings
from hookpoint.core.logging import get_logger, is_configured

from .events import HookEvent, HookPoint, hook_name_of
from .implementations.logging import LoggingHook
from .registry import HookHandler, HookRegistry
from .sinks import StructlogSink


H = TypeVar("H", bound=HookHandler)


def build_registry(hook_settings: HookSettings) -> HookRegistry:
    """Create a registry wired for ``[hooks]`` settings."""
    registry = HookRegistry(
        diagnostic_sink=StructlogSink(
            include_traceback=hook_settings.include_traceback
        ),
        log_registrations=hook_settings.log_registrations,
    )
    if hook_settings.log_events:
        LoggingHook(include_data=hook_settings.log_event_data).install(registry)
    return registry


class HookManager:
    """Emits events to the handlers held by a HookRegistry.

    The manager owns no handler state of its own; any number of managers may
    share one registry.
    """

    def __init__(
        self,
        registry: HookRegistry | None = None,
        settings: Settings | None = None,
    ):
        """Initialize the hook manager.

        Args:
            registry: The hook registry to dispatch through
            settings: Settings used to build a new registry when ``registry``
                is omitted. Defaults to ``Settings()``. Ignored when a
                registry is given.
        """
        self._logger = get_logger(__name__)
        if registry is None:
            settings = settings or Settings()
            registry = build_registry(settings.hooks)
            self._logger.debug(
                "hook_registry_created",
                log_events=settings.hooks.log_events,
                hooks=registry.registered_hooks(),
            )
        self._registry = registry

    @property
    def registry(self) -> HookRegistry:
        return self._registry

    def register(self, hook_name: str | HookPoint, handler: HookHandler) -> None:
        self._registry.register(hook_name, handler)

    def on(self, hook_name: str | HookPoint) -> Callable[[H], H]:
        """Decorator registering a function for ``hook_name``.

        The decorated function is returned unchanged.
        """

        def decorator(handler: H) -> H:
            self._registry.register(hook_name, handler)
            return handler

        return decorator

    def emit(self, hook_name: str | HookPoint, data: Any | None = None) -> HookEvent:
        """Emit an event to all handlers registered for ``hook_name``.

        Args:
            hook_name: The hook point to trigger
            data: Optional JSON-like payload

        Returns:
            The event that was dispatched
        """
        event = HookEvent(event_type=hook_name_of(hook_name), data=data)
        self._registry.trigger(hook_name, event)
        return event

    async def emit_async(
        self, hook_name: str | HookPoint, data: Any | None = None
    ) -> HookEvent:
        """Emit from asyncio code, running handlers in a worker thread."""
        if not self._registry.has_handlers(hook_name):
            return HookEvent(event_type=hook_name_of(hook_name), data=data)
        return await asyncio.to_thread(self.emit, hook_name, data)


def create_hook_manager(settings: Settings | None = None) -> HookManager:
    """Build a manager configured from ``settings``.

    Logging is set up from ``settings.logging`` unless structlog has already
    been configured by the host.
    """
    settings = settings or Settings()
    if not is_configured():
        setup_logging_from_settings(settings.logging)
    return HookManager(settings=settings)
