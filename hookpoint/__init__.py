from ._version import __version__
from .hooks import HookEvent, HookManager, HookPoint, HookRegistry


__all__ = ["HookEvent", "HookManager", "HookPoint", "HookRegistry", "__version__"]
