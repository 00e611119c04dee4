"""Tests for the exception hierarchy in fluentval.lib.errors."""

from fluentval.lib.errors import (
    ConfigError,
    FileNotFoundError,
    FluentValError,
    RuleSyntaxError,
    UnknownCheckError,
)


class TestFluentValError:
    """Tests for base FluentValError exception."""

    def test_creates_with_message(self) -> None:
        """Test that FluentValError can be created with a message."""
        error = FluentValError("Test error message")
        assert str(error) == "Test error message"

    def test_is_exception(self) -> None:
        """Test that FluentValError is an Exception subclass."""
        assert isinstance(FluentValError("Test"), Exception)


class TestConfigError:
    """Tests for ConfigError exception."""

    def test_formats_message_with_field(self) -> None:
        """Test that ConfigError formats messages with field information."""
        error = ConfigError("default_label", "cannot be blank")
        assert str(error) == "Configuration error in 'default_label': cannot be blank"
        assert error.field == "default_label"
        assert error.message == "cannot be blank"

    def test_is_fluentval_error(self) -> None:
        assert isinstance(ConfigError("f", "m"), FluentValError)


class TestFileNotFoundError:
    """Tests for the settings FileNotFoundError."""

    def test_includes_path_and_message(self) -> None:
        error = FileNotFoundError("/tmp/fluentval.yml", "Check the path.")
        assert "/tmp/fluentval.yml" in str(error)
        assert "Check the path." in str(error)
        assert error.path == "/tmp/fluentval.yml"

    def test_is_fluentval_error(self) -> None:
        assert isinstance(FileNotFoundError("p", "m"), FluentValError)


class TestUnknownCheckError:
    """Tests for UnknownCheckError exception."""

    def test_lists_available_checks(self) -> None:
        error = UnknownCheckError("isPhone", ["min", "max"])
        assert str(error) == "Unknown check 'isPhone'. Available checks: min, max"
        assert error.available == ["min", "max"]

    def test_without_available_checks(self) -> None:
        error = UnknownCheckError("isPhone")
        assert str(error) == "Unknown check 'isPhone'"
        assert error.available == []


class TestRuleSyntaxError:
    """Tests for RuleSyntaxError exception."""

    def test_includes_rule(self) -> None:
        error = RuleSyntaxError("min:abc", "'abc' is not a number")
        assert str(error) == "Invalid rule 'min:abc': 'abc' is not a number"
        assert error.rule == "min:abc"
        assert isinstance(error, FluentValError)
