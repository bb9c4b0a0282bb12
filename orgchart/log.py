"""Logging setup for the command line entry point."""

from __future__ import annotations

import logging

from orgchart.settings import DEFAULT_LOG_FORMAT


def configure_logging(level: str = "WARNING", fmt: str = DEFAULT_LOG_FORMAT) -> None:
    """Send ``orgchart`` diagnostics to stderr at ``level``.

    Library modules only ask for loggers with ``logging.getLogger(__name__)``
    and never attach handlers themselves; this is called once by the CLI.
    """

    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(format=fmt)
    logging.getLogger("orgchart").setLevel(level)


__all__ = ["configure_logging"]
