"""Central, thread-safe registry of hook handlers."""

import copy
import threading
from collections.abc import Callable
from typing import Any

from hookpoint.core.logging import get_logger

from .events import HookEvent, HookPoint, hook_name_of
from .sinks import DiagnosticSink, HandlerFault, StructlogSink, safe_str


HookHandler = Callable[[HookEvent], Any]


def handler_name_of(handler: Any) -> str:
    """Best-effort readable name for a handler in diagnostics. Never raises."""
    for attr in ("__qualname__", "name"):
        try:
            name = getattr(handler, attr, None)
        except Exception:
            continue
        if isinstance(name, str) and name:
            return name
    return type(handler).__name__


class HookRegistry:
    """Maps hook names to ordered handler lists and dispatches events to them.

    Every operation may be called from any thread. A single lock guards the
    name-to-handlers mapping and is only held while that mapping is read or
    changed; handlers always run with the lock released, so they may register
    handlers or trigger other hooks themselves.

    A handler that raises is reported to the diagnostic sink and dispatch
    continues with the next handler. ``trigger`` never propagates handler
    failures to its caller.
    """

    def __init__(
        self,
        diagnostic_sink: DiagnosticSink | None = None,
        log_registrations: bool = False,
    ) -> None:
        self._hooks: dict[str, list[HookHandler]] = {}
        self._lock = threading.Lock()
        self._logger = get_logger(__name__)
        self._sink: DiagnosticSink = (
            diagnostic_sink
            if diagnostic_sink is not None
            else StructlogSink(self._logger)
        )
        self._log_registrations = log_registrations

    @property
    def diagnostic_sink(self) -> DiagnosticSink:
        return self._sink

    def register(self, hook_name: str | HookPoint, handler: HookHandler) -> None:
        """Register a handler for a hook point.

        Multiple handlers can be registered for the same hook. They are
        called in registration order. Registering the same callable twice
        makes it run twice.
        """
        name = hook_name_of(hook_name)
        with self._lock:
            self._hooks.setdefault(name, []).append(handler)
            count = len(self._hooks[name])
        if self._log_registrations:
            self._logger.debug(
                "hook_registered",
                hook_name=name,
                handler=handler_name_of(handler),
                handler_count=count,
            )

    def trigger(self, hook_name: str | HookPoint, event: HookEvent) -> None:
        """Trigger all handlers registered for a hook point.

        The handler list is snapshotted when the call starts; handlers
        registered while it runs are picked up by later triggers. Each
        handler receives its own deep copy of ``event``.
        """
        name = hook_name_of(hook_name)
        with self._lock:
            handlers = tuple(self._hooks.get(name, ()))

        for handler in handlers:
            try:
                handler(copy.deepcopy(event))
            except Exception as e:
                self._report(name, event, handler, e)

    def handler_count(self, hook_name: str | HookPoint) -> int:
        """Get the count of handlers registered for a hook."""
        with self._lock:
            return len(self._hooks.get(hook_name_of(hook_name), ()))

    def has_handlers(self, hook_name: str | HookPoint) -> bool:
        """Check if a hook has any registered handlers."""
        with self._lock:
            return hook_name_of(hook_name) in self._hooks

    def registered_hooks(self) -> list[str]:
        """Names that currently have at least one handler, sorted."""
        with self._lock:
            return sorted(self._hooks)

    def clear(self, hook_name: str | HookPoint) -> None:
        """Clear all handlers for a specific hook."""
        with self._lock:
            self._hooks.pop(hook_name_of(hook_name), None)

    def clear_all(self) -> None:
        """Clear all hooks."""
        with self._lock:
            self._hooks.clear()

    def _report(
        self,
        hook_name: str,
        event: HookEvent,
        handler: HookHandler,
        error: Exception,
    ) -> None:
        # Never raises, even for unprintable handler names or exceptions
        fault = HandlerFault(
            hook_name=hook_name,
            event_type=safe_str(getattr(event, "event_type", "")),
            handler_name=handler_name_of(handler),
            error=error,
        )
        try:
            self._sink(fault)
        except Exception as sink_error:
            self._logger.error(
                "hook_diagnostic_sink_failed",
                hook_name=hook_name,
                fault=fault.describe(),
                error=safe_str(sink_error),
                exc_info=sink_error,
            )
