"""Diagnostic sinks receiving handler faults from the registry.

A sink is any callable accepting a :class:`HandlerFault`. The registry calls
its sink once per failed handler invocation, from the thread that called
``trigger``, so sinks must be safe to call from any thread.
"""

import threading
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from hookpoint.core.logging import get_logger


def safe_str(value: object) -> str:
    """str() that never raises; falls back to a placeholder naming the type."""
    try:
        return str(value)
    except Exception:
        return f"<unprintable {type(value).__name__}>"


@dataclass(frozen=True)
class HandlerFault:
    """A failure raised inside a handler body during ``trigger``."""

    hook_name: str
    event_type: str
    handler_name: str
    error: BaseException
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def error_type(self) -> str:
        return type(self.error).__name__

    def describe(self) -> str:
        """Human-readable one-line description naming the hook."""
        return (
            f"Hook handler {self.handler_name} for '{self.hook_name}' failed: "
            f"{self.error_type}: {safe_str(self.error)}"
        )


DiagnosticSink = Callable[[HandlerFault], None]


class StructlogSink:
    """Reports handler faults as structured error log lines."""

    def __init__(self, logger: Any | None = None, include_traceback: bool = True):
        """Initialize the sink.

        Args:
            logger: Optional structlog logger. If None, creates a new one.
            include_traceback: Attach the exception to the log record
        """
        self._logger = logger or get_logger(__name__)
        self._include_traceback = include_traceback

    def __call__(self, fault: HandlerFault) -> None:
        log_data: dict[str, Any] = {
            "hook_name": fault.hook_name,
            "handler": fault.handler_name,
            "event_type": fault.event_type,
            "error_type": fault.error_type,
            "error": safe_str(fault.error),
        }
        if self._include_traceback:
            log_data["exc_info"] = fault.error
        self._logger.error("hook_handler_failed", **log_data)


class CollectingSink:
    """Keeps handler faults in memory, in the order they were reported."""

    def __init__(self) -> None:
        self._faults: list[HandlerFault] = []
        self._lock = threading.Lock()

    def __call__(self, fault: HandlerFault) -> None:
        with self._lock:
            self._faults.append(fault)

    @property
    def faults(self) -> list[HandlerFault]:
        with self._lock:
            return list(self._faults)

    def clear(self) -> None:
        with self._lock:
            self._faults.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._faults)

    def __iter__(self) -> Iterator[HandlerFault]:
        return iter(self.faults)


class FanOutSink:
    """Forwards each fault to several sinks in order."""

    def __init__(self, *sinks: DiagnosticSink):
        self._sinks = sinks

    @property
    def sinks(self) -> tuple[DiagnosticSink, ...]:
        return self._sinks

    def __call__(self, fault: HandlerFault) -> None:
        for sink in self._sinks:
            sink(fault)
