"""
structlog rendering for wdigraph log records.

Library modules log through plain stdlib loggers under the "wdigraph"
namespace, so nothing is printed until configure_logging() installs a
handler. The handler renders every record with structlog, either as a
console line or as one JSON object per line, on stderr.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAMESPACE = "wdigraph"


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(verbose: bool = False, log_json: bool = False) -> None:
    """
    Install a single structlog-formatted stderr handler on the root logger.

    Args:
        verbose: emit wdigraph DEBUG events (every graph mutation). When False,
            only WARNING and above.
        log_json: use the JSON renderer instead of the console renderer.
    """
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(log_json),
        ],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(LOGGER_NAMESPACE).setLevel(logging.DEBUG if verbose else logging.WARNING)
