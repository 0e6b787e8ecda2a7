"""Route structlog and stdlib logging through one stderr handler.

Service modules log with ``logging.getLogger(__name__)`` and telemetry logs
with ``structlog.get_logger``; both end up in the same
``ProcessorFormatter`` so a run produces one consistent stream, either
console lines or JSON objects (``--log-json``). Query output on stdout is
never touched.
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.types import Processor

PACKAGE_LOGGER = "rosterq"


def _pre_chain() -> list[Processor]:
    """Processors applied to every record, structlog or stdlib."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _final_renderer(log_json: bool) -> Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def _stderr_handler(formatter: logging.Formatter) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    return handler


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """(Re)install the rosterq log pipeline.

    Safe to call more than once: the root logger always ends with exactly
    one handler. Third-party loggers stay at WARNING; the ``rosterq``
    logger drops to DEBUG under ``verbose``.
    """
    pre_chain = _pre_chain()

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _final_renderer(log_json),
        ],
    )

    root = logging.getLogger()
    root.handlers[:] = [_stderr_handler(formatter)]
    root.setLevel(logging.WARNING)
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
