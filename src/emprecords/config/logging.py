"""Logging setup for the emprecords CLI and embedding applications.

Record services log structured events through ``structlog`` (for example
``benefits_replaced``). The audit interceptor, unit of work and validation
pipeline log through stdlib ``logging``. Both paths end on one stderr
handler, so ``-v`` shows audit and validation debug lines next to the
service events. ``--log-json`` switches that handler to one JSON object per
line.
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "emprecords"

# SQL echo and driver chatter stay at WARNING even with -v.
QUIET_LOGGERS = ("sqlalchemy.engine", "aiosqlite")


def _shared_processors() -> list[structlog.types.Processor]:
    """Processors applied to structlog events and foreign stdlib records alike."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route emprecords logging to stderr.

    Safe to call more than once; the root handler is replaced, not stacked.

    Args:
        verbose: DEBUG for the ``emprecords`` logger tree, WARNING otherwise.
        log_json: JSON lines instead of the console renderer.
    """
    shared = _shared_processors()
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
