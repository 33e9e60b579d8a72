"""Structured logging for someval tooling.

The value types never log. The conformance checker emits structlog events
through the stdlib ``someval`` logger, which carries only a NullHandler until
the host application either configures its own handlers or calls
``configure_logging``. Neither the root logger nor the global structlog
configuration is touched.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Any

__all__ = [
    'LOGGER_NAME',
    'configure_logging',
    'get_logger',
]

LOGGER_NAME = 'someval'

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def _get_processors() -> list[Any]:
    """Processors for checker events, ending in the stdlib hand-off."""
    import structlog

    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """Render someval events on their own handler.

    Replaces any handler previously installed on the ``someval`` logger and
    stops propagation, so events are rendered once here rather than again by
    the host's root handlers.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON lines. If False, use console output.
        stream: Where to write; defaults to stderr.

    Returns:
        The configured ``someval`` stdlib logger.
    """
    import structlog

    if json_output:
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False
    return logger


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger bound to a stdlib logger under ``someval``.

    Args:
        name: Dotted logger name; must be ``someval`` or one of its children.
            Defaults to ``someval``.

    Raises:
        ValueError: If the name is outside the ``someval`` hierarchy.
    """
    import structlog

    name = name or LOGGER_NAME
    if name != LOGGER_NAME and not name.startswith(LOGGER_NAME + '.'):
        raise ValueError(f'logger {name!r} is not under {LOGGER_NAME!r}')
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_get_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
