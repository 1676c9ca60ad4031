"""structlog configuration for assetpub.

Two output modes, both on stderr so stdout stays clean for results:
- Human (default): structlog console renderer, colored on a TTY
- JSON (--log-json): one JSON object per line
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "assetpub"


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route structlog and stdlib logging through one stderr handler.

    Args:
        verbose: Show DEBUG records from ``assetpub.*``. Otherwise WARNING+.
        log_json: Render JSON lines instead of console text.

    Safe to call repeatedly; the root handler is replaced, not stacked.
    """
    shared = _shared_processors()

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
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
                renderer,
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
    # pluggy traces every hook call at DEBUG.
    logging.getLogger("pluggy").setLevel(logging.WARNING)
