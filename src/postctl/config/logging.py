"""Log formatting for postctl.

Modules log through stdlib ``logging.getLogger(__name__)``. structlog only
formats the records: keys passed via ``extra=`` and the context bound by
:func:`bind_command` become structured fields on every line.

Everything goes to stderr so stdout stays reserved for results:
- console lines by default (colored on a TTY)
- JSON lines with ``--log-json``
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import structlog

PACKAGE_LOGGER = "postctl"


def _pre_chain(*, log_json: bool) -> list[structlog.types.Processor]:
    chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if log_json:
        # The console renderer prints tracebacks itself.
        chain.append(structlog.processors.format_exc_info)
    return chain


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Install a single structlog-formatted stderr handler on the root logger.

    ``postctl.*`` loggers emit DEBUG when *verbose*, otherwise WARNING;
    third-party loggers stay at WARNING either way. Safe to call repeatedly.
    """
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer(sort_keys=True)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(log_json=log_json),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)


def bind_command(command: str | None, *, site_root: Path | None = None) -> None:
    """Tag every following log line with the running subcommand and site."""
    structlog.contextvars.clear_contextvars()
    if command:
        structlog.contextvars.bind_contextvars(command=command)
    if site_root is not None:
        structlog.contextvars.bind_contextvars(site=str(site_root))
