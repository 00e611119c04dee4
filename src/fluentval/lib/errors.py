"""Custom exception hierarchy for fluentval configuration and check lookup.

Validation failures are never raised: a failing check records a message on
the Validator. The exceptions below cover faults in how the library is used
or configured.
"""


class FluentValError(Exception):
    """Base exception for all fluentval errors.

    All fluentval-specific exceptions inherit from this class, enabling
    callers to catch library faults with a single except clause.
    """

    pass


class ConfigError(FluentValError):
    """Exception raised for configuration errors.

    Raised when a settings file cannot be parsed or when its contents do not
    satisfy the settings model.

    Attributes:
        field: The configuration field (or stage) that caused the error
        message: Human-readable error message describing the issue
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize ConfigError with field and message.

        Args:
            field: Configuration field name where error occurred
            message: Descriptive error message
        """
        self.field = field
        self.message = message
        super().__init__(f"Configuration error in '{field}': {message}")


class FileNotFoundError(FluentValError):
    """Exception raised when a settings file is not found.

    Attributes:
        path: Path to the file that was not found
        message: Human-readable error message
    """

    def __init__(self, path: str, message: str) -> None:
        """Initialize FileNotFoundError with path and message.

        Args:
            path: Path to the file that was not found
            message: Descriptive error message, optionally with suggestions
        """
        self.path = path
        self.message = message
        super().__init__(f"File not found: {path}\n{message}")


class UnknownCheckError(FluentValError):
    """Exception raised when a check name is not in the registry.

    Attributes:
        name: The check name as given by the caller
        available: Registered check names at the time of the lookup
    """

    def __init__(self, name: str, available: list[str] | None = None) -> None:
        """Create an unknown-check error listing the registered names."""
        self.name = name
        self.available = available or []
        message = f"Unknown check '{name}'"
        if self.available:
            message += f". Available checks: {', '.join(self.available)}"
        super().__init__(message)


class RuleSyntaxError(FluentValError):
    """Exception raised when a command line rule cannot be parsed.

    Attributes:
        rule: The raw rule text
        message: Description of what is wrong with it
    """

    def __init__(self, rule: str, message: str) -> None:
        """Create a rule syntax error with the offending rule text."""
        self.rule = rule
        self.message = message
        super().__init__(f"Invalid rule '{rule}': {message}")
