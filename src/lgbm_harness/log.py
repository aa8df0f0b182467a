"""Logging setup for command-line use.

Library modules only create loggers under ``lgbm_harness``; handlers are
installed here, by the CLI.
"""

from __future__ import annotations

import logging

import lightgbm as lgb
from rich.console import Console
from rich.logging import RichHandler

__all__: list[str] = [
    "NATIVE_LOGGER_NAME",
    "configure_logging",
]

NATIVE_LOGGER_NAME = "lgbm_harness.native"


def configure_logging(*, verbose: bool = False, console: Console | None = None) -> logging.Logger:
    """Install a Rich handler on the package logger.

    LightGBM's native log lines are redirected into ``lgbm_harness.native`` so
    they share the same handler and level.

    Args:
        verbose: Log at DEBUG instead of INFO.
        console: Console to render to. Defaults to stderr.

    Returns:
        The configured package logger.
    """
    root = logging.getLogger("lgbm_harness")
    root.setLevel(logging.DEBUG if verbose else logging.INFO)

    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=verbose,
        rich_tracebacks=verbose,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)
    root.propagate = False

    lgb.register_logger(logging.getLogger(NATIVE_LOGGER_NAME))
    return root
