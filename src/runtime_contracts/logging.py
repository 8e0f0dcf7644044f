"""Logging helpers for applications embedding runtime-contracts.

The package itself only ever logs through ``logging.getLogger(__name__)``
and installs a :class:`logging.NullHandler`, so nothing is printed unless the
embedding application asks for it. This module offers a Rich console handler
for applications (and debugging sessions) that want to see contract failures
as they are produced.
"""

from __future__ import annotations

import logging
from typing import Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

from runtime_contracts.config import get_log_level

PROJECT_PREFIX = "runtime_contracts"

# Handlers attached by enable_console_logging, and the package logger level
# that was in place before the first of them was attached.
_console_handlers: list[logging.Handler] = []
_base_level: int = logging.NOTSET


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler for console output.

    The handler writes to stderr. In debug mode the handler is set to DEBUG
    and includes timestamps, logger names and source file/line information.

    Args:
        level: Minimum level for console output (overridden to DEBUG in debug_mode).
        debug_mode: When True, enable debug formatting (show_path, timestamps).
        color: Enable color output when True.

    Returns:
        RichHandler: Configured handler.
    """

    ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]
    color_system: ColorSystem | None = "auto" if color else None

    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    fmt = "%(message)s" if not debug_mode else "%(asctime)s %(name)s: %(message)s"
    handler.setFormatter(logging.Formatter(fmt=fmt))

    return handler


def _sync_package_level(package_logger: logging.Logger) -> None:
    """Lower the package logger just enough for every attached console handler."""
    levels = [h.level for h in _console_handlers]
    if _base_level != logging.NOTSET:
        levels.append(_base_level)
    package_logger.setLevel(min(levels) if levels else logging.NOTSET)


def enable_console_logging(
    level: int | None = None, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Attach a console handler to the package logger.

    The package logger's level is lowered to the handler's level if needed.
    The level the application had set is restored once the last such handler
    is removed with `disable_console_logging`.

    Args:
        level: Minimum level to show. Defaults to `RUNTIME_CONTRACTS_LOG_LEVEL`
            (WARNING when unset). Contract failures are logged at DEBUG.
        debug_mode: Passed through to `config_console_handler`.
        color: Passed through to `config_console_handler`.

    Returns:
        RichHandler: The attached handler, for later `disable_console_logging`.
    """
    global _base_level  # pylint: disable=global-statement

    if level is None:
        level = get_log_level()
    handler = config_console_handler(level=level, debug_mode=debug_mode, color=color)
    package_logger = logging.getLogger(PROJECT_PREFIX)
    if not _console_handlers:
        _base_level = package_logger.level
    _console_handlers.append(handler)
    package_logger.addHandler(handler)
    _sync_package_level(package_logger)
    return handler


def disable_console_logging(handler: logging.Handler) -> None:
    """Detach and close a handler added by `enable_console_logging`."""
    package_logger = logging.getLogger(PROJECT_PREFIX)
    package_logger.removeHandler(handler)
    if handler in _console_handlers:
        _console_handlers.remove(handler)
        if _console_handlers:
            _sync_package_level(package_logger)
        else:
            package_logger.setLevel(_base_level)
    handler.close()
