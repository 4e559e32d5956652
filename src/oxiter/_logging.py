"""Structured logging for oxiter.

oxiter never configures logging on import. ``oxiter.init(log_level=...)`` or
``configure_logging`` installs a structlog pipeline whose ProcessorFormatter
also renders stdlib records from the host application, so both kinds of
output look the same.

Iterators log only trace events (``fuse.tripped``, ``iterator.drained``), at
DEBUG, and only when ``IterConfig.trace`` is on and a log level is set.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
    'trace',
]

type LogHook = Callable[[dict[str, Any]], None]

_log_hooks: list[LogHook] = []


def _run_hooks(_logger: Any, _method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Processor handing a copy of each event to the registered hooks."""
    for hook in _log_hooks:
        try:
            hook(event_dict.copy())
        except Exception:  # noqa: BLE001, S112
            continue  # a failing hook must not break logging
    return event_dict


def _pre_chain() -> list[Any]:
    """Processors applied to both structlog events and stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
        _run_hooks,
    ]


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> None:
    """Route structlog and stdlib logging through one stderr handler.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: Emit JSON lines if True, colored console output otherwise.
    """
    structlog.configure(
        processors=[
            *_pre_chain(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Return a structlog logger, usually ``get_logger(__name__)``."""
    return structlog.get_logger(name)


def trace(logger: Any, event: str, **fields: Any) -> None:
    """Log ``event`` at DEBUG on ``logger`` if tracing is enabled.

    Trace events need a log level as well: with ``log_level=None`` logging
    was never configured, and oxiter stays silent.
    """
    from oxiter._config import get_config

    config = get_config()
    if config.trace and config.log_level is not None:
        logger.debug(event, **fields)


def add_log_hook(hook: LogHook) -> None:
    """Register a callable that receives a copy of every log event dict.

    Hooks are handy in tests and for counting trace events; an exception
    raised by a hook is ignored.

    Hooks run inside the processor chain installed by ``configure_logging``
    (or ``init`` with a log level). Until then no event reaches them.
    """
    _log_hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    """Remove a previously registered hook; unknown hooks are ignored."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    """Remove all registered log hooks."""
    _log_hooks.clear()
