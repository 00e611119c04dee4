"""Unit tests for fluentval.lib.logging_config."""

import logging
from collections.abc import Generator

import pytest

from fluentval.lib.logging_config import get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_logging() -> Generator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    package_logger = logging.getLogger("fluentval")
    package_level = package_logger.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    package_logger.setLevel(package_level)


@pytest.mark.unit
class TestSetupLogging:
    """Tests for setup_logging()."""

    @pytest.mark.parametrize(
        "verbose,quiet,expected",
        [
            (False, False, logging.WARNING),
            (True, False, logging.DEBUG),
            (False, True, logging.ERROR),
            (True, True, logging.DEBUG),
        ],
    )
    def test_levels(self, verbose: bool, quiet: bool, expected: int) -> None:
        setup_logging(verbose=verbose, quiet=quiet)
        assert logging.getLogger("fluentval").level == expected
        assert logging.getLogger().level == expected


@pytest.mark.unit
class TestGetLogger:
    def test_returns_named_logger(self) -> None:
        assert get_logger("fluentval.x").name == "fluentval.x"


@pytest.mark.unit
class TestCheckLogging:
    """Failed checks and finished chains are logged at DEBUG."""

    def test_failed_check_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        from fluentval.validator import Validator

        with caplog.at_level(logging.DEBUG, logger="fluentval.validator"):
            Validator().validate("x", "code").min_length(3).is_valid()
        assert "Check 'min_length' failed for 'code'" in caplog.text
        assert "Validation finished: invalid (1 error(s))" in caplog.text
