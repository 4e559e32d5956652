"""Library configuration: IterConfig, init, get_config."""

from __future__ import annotations

import os
from dataclasses import dataclass

from oxiter._logging import configure_logging, get_logger

__all__ = [
    'IterConfig',
    'get_config',
    'init',
    'reset',
]

logger = get_logger(__name__)

_TRUE_VALUES = frozenset({'1', 'true', 'yes', 'on'})
_FALSE_VALUES = frozenset({'', '0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class IterConfig:
    """Configuration for oxiter.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        trace: Emit DEBUG trace events when fuses trip and terminal
            operations drain an iterator.
    """

    log_level: str | None = None
    trace: bool = False


_DEFAULT = IterConfig()

# Global configuration (set by init())
_config: IterConfig | None = None


def _detect_log_level() -> str | None:
    """Read OXITER_LOG_LEVEL; empty or unset means silent."""
    level = os.environ.get('OXITER_LOG_LEVEL', '').strip()
    return level.upper() or None


def _detect_trace() -> bool:
    """Read OXITER_TRACE as a boolean flag."""
    raw = os.environ.get('OXITER_TRACE', '').strip().lower()
    if raw in _TRUE_VALUES:
        return True
    if raw not in _FALSE_VALUES:
        logger.warning('unknown OXITER_TRACE value, tracing disabled', value=raw)
    return False


def init(
    log_level: str | None = None,
    trace: bool | None = None,
) -> IterConfig:
    """Initialize oxiter with the given configuration.

    Unset arguments are resolved from the environment (``OXITER_LOG_LEVEL``,
    ``OXITER_TRACE``).

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = environment,
            then silent.
        trace: Enable trace events. None = environment, then off.

    Returns:
        The IterConfig that was set.

    Example:
        ```python
        import oxiter

        oxiter.init(log_level='DEBUG', trace=True)
        oxiter.from_iter([1, 2]).fuse().count()
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level.upper() if log_level is not None else _detect_log_level()
    resolved_trace = trace if trace is not None else _detect_trace()

    _config = IterConfig(log_level=resolved_level, trace=resolved_trace)

    if resolved_level is not None:
        configure_logging(resolved_level)
        logger.debug('oxiter initialized', log_level=resolved_level, trace=resolved_trace)

    return _config


def get_config() -> IterConfig:
    """Return the current configuration.

    Unlike a runtime that must be started, oxiter works uninitialized: the
    default IterConfig (silent, no trace) is returned until ``init`` is called.
    """
    if _config is None:
        return _DEFAULT
    return _config


def reset() -> None:
    """Forget the configuration set by ``init``."""
    global _config  # noqa: PLW0603
    _config = None
