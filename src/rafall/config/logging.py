"""structlog setup for the rafall CLI.

Every record, whether emitted through structlog or a plain stdlib
logger, ends up on one stderr handler carrying ``event``, ``level``,
``logger`` and an ISO ``timestamp``. ``--log-json`` switches the
renderer from console text to one JSON object per line.
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route rafall's log records to stderr.

    Args:
        verbose: Show ``rafall.*`` DEBUG records. Otherwise WARNING and up.
        log_json: Render JSON lines instead of console text.
    """
    chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    # Replace rather than add, so repeated calls never stack handlers.
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger("rafall").setLevel(logging.DEBUG if verbose else logging.WARNING)
