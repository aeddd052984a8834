"""Event definitions for the hook system."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any


class HookPoint(str, Enum):
    """Well-known hook names emitted by host applications.

    The registry treats hook names as opaque strings; these members are a
    shared convention, not an enforced set.
    """

    # Conversation Lifecycle
    CONVERSATION_START = "conversation_start"
    CONVERSATION_END = "conversation_end"

    # Turn Lifecycle
    USER_INPUT = "user_input"
    RESPONSE_START = "response_start"
    RESPONSE_COMPLETE = "response_complete"
    TURN_COMPLETE = "turn_complete"

    # Tool Invocation
    TOOL_BEFORE = "tool_before"
    TOOL_AFTER = "tool_after"

    # Failures
    ERROR = "error"


def hook_name_of(hook_name: "str | HookPoint") -> str:
    """Normalize a hook name so enum members and plain strings share a key."""
    if isinstance(hook_name, Enum):
        return str(hook_name.value)
    return hook_name


@dataclass(frozen=True)
class HookEvent:
    """Event payload passed to hook handlers.

    Attributes:
        event_type: Event type identifier
        data: Optional JSON-like payload; ``None`` means no payload
    """

    event_type: str = ""
    data: Any | None = None

    @classmethod
    def new(cls, event_type: "str | HookPoint") -> "HookEvent":
        """Create an event without a payload."""
        return cls(event_type=hook_name_of(event_type))

    def with_data(self, data: Any) -> "HookEvent":
        """Return a copy of this event carrying ``data``."""
        return replace(self, data=data)

    @property
    def has_data(self) -> bool:
        return self.data is not None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the ``{event_type, data}`` wire shape."""
        result: dict[str, Any] = {"event_type": self.event_type}
        if self.data is not None:
            result["data"] = self.data
        return result
