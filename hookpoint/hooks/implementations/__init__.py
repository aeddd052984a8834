"""Built-in hook implementations.

- LoggingHook: Structured logging of every event it is registered for
"""

from .logging import LoggingHook


__all__ = ["LoggingHook"]
