"""Hook system configuration settings."""

from pydantic import BaseModel, Field


class HookSettings(BaseModel):
    """Controls diagnostics and built-in observers of the hook system."""

    include_traceback: bool = Field(
        default=True,
        description="Attach the exception traceback to handler fault diagnostics",
    )

    log_registrations: bool = Field(
        default=False,
        description="Emit a debug log line every time a handler is registered",
    )

    log_events: bool = Field(
        default=False,
        description="Install the built-in logging hook on every well-known hook point",
    )

    log_event_data: bool = Field(
        default=False,
        description="Include event payloads in lines written by the built-in logging hook",
    )
