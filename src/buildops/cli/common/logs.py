"""Logging setup for the CLI.

Core modules only create loggers; handlers are installed here so that
`--verbose` surfaces the resolver's debug trace on stderr.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_stderr = Console(stderr=True)


def configure_logging(verbose: bool) -> None:
    """Route `buildops` log records to a Rich handler on stderr."""
    handler = RichHandler(console=_stderr, show_path=False, show_time=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    logger = logging.getLogger("buildops")
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
