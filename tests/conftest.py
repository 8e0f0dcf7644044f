"""Global pytest fixtures for runtime-contracts."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from runtime_contracts.logging import PROJECT_PREFIX, disable_console_logging


@pytest.fixture
def restore_package_logger() -> Iterator[None]:
    """Put the package logger's handlers and level back after each test.

    Logging tests attach console handlers; a failing assertion must not leak
    them into later tests.
    """
    package_logger = logging.getLogger(PROJECT_PREFIX)
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield
    for handler in list(package_logger.handlers):
        if handler not in handlers:
            disable_console_logging(handler)
    package_logger.setLevel(level)
