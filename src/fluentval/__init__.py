"""fluentval - chainable validation of single values.

Set a value with ``validate()``, chain checks such as ``min()``,
``max_length()`` or ``is_email()``, then call ``is_valid()``::

    from fluentval import Validator

    v = Validator()
    v.validate("info@example.com", "email").required().is_email().is_valid()

Main features:
- Range, length, equality and pattern checks
- Message templates overridable per instance or from fluentval.yml
- A registry for adding custom checks
- A ``fluentval`` command line for checking values from the shell
"""

from fluentval.checks import available_checks, register_check
from fluentval.lib.errors import (
    ConfigError,
    FluentValError,
    RuleSyntaxError,
    UnknownCheckError,
)
from fluentval.messages import DEFAULT_MESSAGES, format_message
from fluentval.validator import Validator

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Validator",
    "register_check",
    "available_checks",
    "format_message",
    "DEFAULT_MESSAGES",
    "FluentValError",
    "ConfigError",
    "UnknownCheckError",
    "RuleSyntaxError",
]
