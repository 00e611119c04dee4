"""Shared fixtures for CLI command tests."""

import logging
from collections.abc import Generator

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def restore_logging() -> Generator[None]:
    """Undo the logging setup done by the fluentval group callback."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    package_logger = logging.getLogger("fluentval")
    package_level = package_logger.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    package_logger.setLevel(package_level)
