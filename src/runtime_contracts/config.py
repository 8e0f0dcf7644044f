"""Configuration utilities for runtime-contracts.

This module centralizes the few constants and environment-driven settings the
package reads.
"""

import logging
import os

from runtime_contracts.errors import InvalidLogLevelError

LOG_LEVEL_ENV = "RUNTIME_CONTRACTS_LOG_LEVEL"  # pragma: no mutate
DEFAULT_LOG_LEVEL = logging.WARNING

FAILURE_PREFIX = "contract validation failed: "  # pragma: no mutate


def parse_log_level(value: str) -> int:
    """Convert a level name (or numeric string) into a logging level.

    Args:
        value: A standard level name such as ``"debug"`` or ``"WARNING"``
            (case-insensitive), or an integer string such as ``"10"``.

    Returns:
        The numeric logging level.

    Raises:
        InvalidLogLevelError: If ``value`` is neither a known name nor an integer.
    """
    text = value.strip()
    if text.isdecimal():
        return int(text)
    if not isinstance(lvl := logging.getLevelName(text.upper()), int):
        raise InvalidLogLevelError(value)
    return lvl


def get_log_level() -> int:
    """Get the package console log level from the environment.

    Returns:
        The level named by `RUNTIME_CONTRACTS_LOG_LEVEL`, or WARNING when the
        variable is unset or empty.

    Raises:
        InvalidLogLevelError: If the variable holds an unknown level.
    """
    if not (value := os.environ.get(LOG_LEVEL_ENV, "").strip()):
        return DEFAULT_LOG_LEVEL
    return parse_log_level(value)
