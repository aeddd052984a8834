"""Hook system for hookpoint.

This package provides an in-process, thread-safe hook registry that lets
unrelated parts of an application observe lifecycle milestones without the
emitting code knowing about the observers.

Key components:
- HookEvent: Event payload passed to handlers
- HookPoint: Enumeration of well-known hook names
- HookRegistry: Thread-safe registry that stores and dispatches handlers
- HookManager: Facade for emitting events from host code
- HandlerFault: Record of a handler failure, delivered to diagnostic sinks
"""

from .events import HookEvent, HookPoint
from .manager import HookManager, create_hook_manager
from .registry import HookHandler, HookRegistry
from .sinks import CollectingSink, FanOutSink, HandlerFault, StructlogSink


__all__ = [
    "CollectingSink",
    "FanOutSink",
    "HandlerFault",
    "HookEvent",
    "HookHandler",
    "HookManager",
    "HookPoint",
    "HookRegistry",
    "StructlogSink",
    "create_hook_manager",
]
