"""structlog configuration shared by the library and its host applications."""

import logging
import sys
from pathlib import Path
from typing import Any

import structlog
from structlog.typing import Processor


def _shared_processors(json_logs: bool) -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(
            fmt="iso" if json_logs else "%H:%M:%S", utc=json_logs
        ),
        structlog.processors.StackInfoRenderer(),
    ]


def _json_formatter(shared: list[Processor]) -> structlog.stdlib.ProcessorFormatter:
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ],
    )


LOG_FORMATS = ("auto", "rich", "json", "plain")


def resolve_log_format(json_logs: bool = False, log_format: str | None = None) -> str:
    """Pick the concrete console format.

    An explicit ``log_format`` wins over ``json_logs``. ``auto`` selects
    ``rich`` when stderr is a terminal and ``plain`` otherwise.
    """
    if log_format is None:
        return "json" if json_logs else "rich"
    log_format = log_format.lower()
    if log_format not in LOG_FORMATS:
        raise ValueError(
            f"Invalid log format: {log_format}. Must be one of {list(LOG_FORMATS)}"
        )
    if log_format == "auto":
        return "rich" if sys.stderr.isatty() else "plain"
    return log_format


def _console_formatter(
    log_format: str, shared: list[Processor]
) -> structlog.stdlib.ProcessorFormatter:
    if log_format == "json":
        return _json_formatter(shared)

    if log_format == "rich":
        renderer = structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.RichTracebackFormatter(show_locals=False),
        )
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=False,
            exception_formatter=structlog.dev.plain_traceback,
        )
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def setup_logging(
    json_logs: bool = False,
    log_level_name: str = "INFO",
    log_file: str | Path | None = None,
    log_format: str | None = None,
) -> structlog.stdlib.BoundLogger:
    """Configure structlog and the stdlib root logger.

    Console output goes to stderr in one of the ``LOG_FORMATS``: JSON lines,
    structlog's colored console renderer with rich tracebacks, or the same
    renderer without colors and with plain tracebacks. When ``log_file`` is
    given, every record is additionally written to it as JSON lines.

    Handlers installed by a previous call are closed and replaced.

    Args:
        json_logs: Render console output as JSON (ignored when ``log_format`` is set)
        log_level_name: Name of the minimum level to emit
        log_file: Optional path of a JSON log file
        log_format: One of ``LOG_FORMATS``

    Returns:
        A logger bound to this module, ready for use
    """
    level = logging.getLevelName(log_level_name.upper())
    if not isinstance(level, int):
        level = logging.INFO

    console_format = resolve_log_format(json_logs, log_format)
    shared = _shared_processors(console_format == "json")

    structlog.configure(
        processors=[
            *shared,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(_console_formatter(console_format, shared))

    handlers: list[logging.Handler] = [console_handler]

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(_json_formatter(_shared_processors(True)))
        handlers.append(file_handler)

    logging.basicConfig(level=level, handlers=handlers, force=True)

    return get_logger(__name__)


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Get a structlog logger, optionally pre-bound with context values."""
    return structlog.get_logger(name, **initial_values)


def is_configured() -> bool:
    return structlog.is_configured()
