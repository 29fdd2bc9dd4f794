"""Logging helpers for applications that embed weighted-digraph.

The library itself only emits DEBUG records through module-level loggers and
never configures handlers. This module provides a Rich console handler for
applications that want those records on screen.
"""

from __future__ import annotations

import logging
from typing import Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

PROJECT_PREFIX = "weighted_digraph"

# handler -> project logger level before trace_mutations() attached it
_saved_levels: dict[logging.Handler, int] = {}


def config_console_handler(color: bool = True) -> RichHandler:
    """Configure and return a debug RichHandler for console output.

    The handler writes to stderr, accepts DEBUG records and includes the
    logger name and source file/line of each record.

    Args:
        color: Enable color output when True.

    Returns:
        RichHandler: Configured handler suitable to attach to a logger.
    """
    ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]
    color_system: ColorSystem | None = "auto" if color else None

    console = Console(color_system=color_system, stderr=True)

    handler = RichHandler(
        level=logging.DEBUG,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=True,
        enable_link_path=True,
    )
    handler.setFormatter(logging.Formatter(fmt="%(asctime)s %(name)s: %(message)s"))
    return handler


def trace_mutations(color: bool = True) -> RichHandler:
    """Print every graph mutation to stderr.

    Attaches a console handler to the project logger and lowers its level to
    DEBUG, so `add`, `set` and `remove` calls on any graph are echoed with
    their arguments. Detach with `stop_tracing()`.

    Args:
        color: Enable color output when True.

    Returns:
        RichHandler: The attached handler.
    """
    handler = config_console_handler(color=color)
    project_logger = logging.getLogger(PROJECT_PREFIX)
    _saved_levels[handler] = project_logger.level
    project_logger.addHandler(handler)
    project_logger.setLevel(logging.DEBUG)
    return handler


def stop_tracing(handler: logging.Handler) -> None:
    """Detach a handler returned by `trace_mutations()`.

    The project logger gets back the level it had before tracing started.
    """
    project_logger = logging.getLogger(PROJECT_PREFIX)
    project_logger.removeHandler(handler)
    project_logger.setLevel(_saved_levels.pop(handler, logging.NOTSET))
    handler.close()
