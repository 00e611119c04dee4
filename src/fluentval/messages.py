"""Default error message templates and the placeholder formatter.

Templates use positional placeholders: ``{0}`` is the check's argument
(threshold, expected value or list) and ``{1}`` is the label of the value
being validated.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

PLACEHOLDER_RE = re.compile(r"\{(\d+)\}")

# Used for checks registered at runtime that have no template of their own.
FALLBACK_TEMPLATE = "{1} is invalid"

DEFAULT_MESSAGES: Mapping[str, str] = MappingProxyType(
    {
        "max": "{1} integer value must not exceed {0}",
        "min": "{1} integer value must be at least {0}",
        "exact": "{1} integer value must be exactly {0}",
        "max_length": "{1} must not exceed {0} characters in length",
        "min_length": "{1} must be at least {0} characters in length",
        "exact_length": "{1} must be exactly {0} characters in length",
        "required": "required {1} is empty or undefined",
        "match": "{1} does not match: {0}",
        "match_array": "{1} does not match any of: {0}",
        "no_match": "{1} must not match: {0}",
        "no_match_array": "{1} must not match any of: {0}",
        "is_alpha": "{1} must contain only alphabetical characters",
        "is_numeric": "{1} must contain only numbers",
        "is_alpha_numeric": "{1} must contain only alpha-numeric characters",
        "is_alpha_dash": (
            "{1} must contain only alpha-numeric characters, "
            "underscores, and dashes"
        ),
        "is_integer": "{1} must contain an integer",
        "is_hex": "{1} must contain a valid hex value",
        "is_base64": "{1} must contain a base64 string",
        "is_ip": "{1} must contain a valid IP",
        "is_email": "{1} must contain a valid email address",
        "is_url": "{1} must contain a valid URL",
        "no_whitespace": "must not use whitespace character in {1}",
        "is_json": "{1} is not a valid JSON string",
    }
)


def render_argument(arg: Any) -> Any:
    """Render list-like check arguments as ``a, b, c``; pass others through."""
    if isinstance(arg, (list, tuple, set, frozenset)):
        return ", ".join(str(item) for item in arg)
    return arg


def format_message(template: str, *args: Any) -> str:
    """Fill ``{N}`` placeholders in ``template`` with positional arguments.

    Placeholders whose index is out of range, or whose argument is None,
    are left in the output unchanged.

    Args:
        template: Message template, e.g. ``"{1} must be at least {0}"``
        *args: Values for ``{0}``, ``{1}``, ...

    Returns:
        The formatted message

    Example:
        >>> format_message("{1} must be at least {0}", 16, "age")
        'age must be at least 16'
        >>> format_message("{1} needs {2}", None, "age")
        'age needs {2}'
    """

    def _substitute(match: re.Match[str]) -> str:
        index = int(match.group(1))
        if index < len(args) and args[index] is not None:
            return str(args[index])
        return match.group(0)

    return PLACEHOLDER_RE.sub(_substitute, template)
