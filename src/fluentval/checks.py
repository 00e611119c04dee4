"""Registry of named checks used by the Validator.

A check is a predicate ``(value, *args) -> Failure | None``. On success it
returns None; on failure it returns ``(message_key, argument)``, where the
argument is substituted for ``{0}`` in the message template. A check may
declare prerequisites that the Validator runs first on the same value.

New checks can be added without touching the Validator::

    @register_check("is_even", requires=("is_integer",))
    def is_even(value):
        number = to_number(value)
        if number is None or number % 2:
            return "is_even", None
        return None
"""

from __future__ import annotations

import json
import math
import operator
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from fluentval.lib.errors import UnknownCheckError
from fluentval.lib.validation import (
    ALPHA_DASH_RE,
    ALPHA_NUMERIC_RE,
    ALPHA_RE,
    BASE64_RE,
    EMAIL_RE,
    HEX_RE,
    INTEGER_RE,
    IPV4_RE,
    NUMERIC_RE,
    URL_RE,
    WHITESPACE_RE,
    as_text,
    fullmatch,
)

Failure = tuple[str, Any]
Predicate = Callable[..., Failure | None]

_CAMEL_BOUNDARY_RE = re.compile(r"([a-z0-9])([A-Z])")


@dataclass(frozen=True)
class CheckSpec:
    """A registered check.

    Attributes:
        name: Registry name (snake_case)
        predicate: Callable returning a failure tuple or None
        requires: Names of checks to run before this one
    """

    name: str
    predicate: Predicate
    requires: tuple[str, ...] = ()


CHECK_REGISTRY: dict[str, CheckSpec] = {}

CHECK_ALIASES: dict[str, str] = {"matches": "match"}

# Message names that differ from the check recording them.
MESSAGE_ALIASES: dict[str, str] = {"hex_regex": "is_hex"}


def register_check(
    name: str, *, requires: Sequence[str] = ()
) -> Callable[[Predicate], Predicate]:
    """Register a predicate under ``name``.

    Re-registering an existing name replaces the previous check.

    Args:
        name: Registry name for the check
        requires: Checks to run on the same value before this one

    Returns:
        Decorator that registers the predicate and returns it unchanged
    """

    def decorator(predicate: Predicate) -> Predicate:
        CHECK_REGISTRY[name] = CheckSpec(name, predicate, tuple(requires))
        return predicate

    return decorator


def normalize_name(name: str) -> str:
    """Convert a camelCase name (``minLength``, ``isIP``) to snake_case."""
    return _CAMEL_BOUNDARY_RE.sub(r"\1_\2", name.strip()).lower()


def resolve_check_name(name: str) -> str:
    """Normalize ``name`` and follow aliases to the registered name."""
    normalized = normalize_name(name)
    return CHECK_ALIASES.get(normalized, normalized)


def resolve_message_key(name: str) -> str:
    """Normalize a message name (``matchArray``, ``hexRegex``) to its table key."""
    normalized = resolve_check_name(name)
    return MESSAGE_ALIASES.get(normalized, normalized)


def get_check(name: str) -> CheckSpec:
    """Look up a check by snake_case, camelCase or alias name.

    Raises:
        UnknownCheckError: If no check is registered under the name
    """
    resolved = resolve_check_name(name)
    try:
        return CHECK_REGISTRY[resolved]
    except KeyError:
        raise UnknownCheckError(name, available_checks()) from None


def available_checks() -> list[str]:
    """Return registered check names in registration order."""
    return list(CHECK_REGISTRY)


# Value helpers


def to_number(value: Any) -> int | float | None:
    """Coerce a value to a number, or None when it has no numeric reading.

    Numbers pass through (NaN excluded); strings are accepted when they
    match the numeric pattern. Booleans and None are not numbers here.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return None if math.isnan(value) else value
    if isinstance(value, str) and NUMERIC_RE.fullmatch(value):
        number = float(value)
        return int(number) if number.is_integer() and "." not in value else number
    return None


def strict_equals(left: Any, right: Any) -> bool:
    """Equality that also requires identical types (``18 != 18.0 != "18"``)."""
    return type(left) is type(right) and left == right


def _is_sequence(candidate: Any) -> bool:
    return isinstance(candidate, (list, tuple, set, frozenset))


def _compare(value: Any, threshold: Any, op: Callable[[Any, Any], bool]) -> bool:
    left, right = to_number(value), to_number(threshold)
    if left is None or right is None:
        return False
    return op(left, right)


def _text_length(value: Any) -> int | None:
    text = as_text(value)
    return None if text is None else len(text)


# Range checks


@register_check("min", requires=("is_numeric",))
def check_min(value: Any, threshold: Any) -> Failure | None:
    if _compare(value, threshold, operator.ge):
        return None
    return "min", threshold


@register_check("max", requires=("is_numeric",))
def check_max(value: Any, threshold: Any) -> Failure | None:
    if _compare(value, threshold, operator.le):
        return None
    return "max", threshold


@register_check("exact", requires=("is_numeric",))
def check_exact(value: Any, target: Any) -> Failure | None:
    if _compare(value, target, operator.eq):
        return None
    return "exact", target


# Length checks


def _length_check(name: str, op: Callable[[Any, Any], bool]) -> Predicate:
    def predicate(value: Any, length: Any) -> Failure | None:
        actual = _text_length(value)
        if actual is not None and _compare(actual, length, op):
            return None
        return name, length

    predicate.__name__ = f"check_{name}"
    return register_check(name)(predicate)


check_min_length = _length_check("min_length", operator.ge)
check_max_length = _length_check("max_length", operator.le)
check_exact_length = _length_check("exact_length", operator.eq)


# Presence and equality


@register_check("required")
def check_required(value: Any) -> Failure | None:
    if value is None or value == "":
        return "required", None
    return None


@register_check("match")
def check_match(value: Any, expected: Any) -> Failure | None:
    if _is_sequence(expected):
        if any(strict_equals(value, item) for item in expected):
            return None
        return "match_array", expected
    if strict_equals(value, expected):
        return None
    return "match", expected


@register_check("no_match")
def check_no_match(value: Any, forbidden: Any) -> Failure | None:
    if _is_sequence(forbidden):
        if any(strict_equals(value, item) for item in forbidden):
            return "no_match_array", forbidden
        return None
    if strict_equals(value, forbidden):
        return "no_match", forbidden
    return None


# Pattern checks


def _pattern_check(name: str, pattern: re.Pattern[str]) -> Predicate:
    def predicate(value: Any) -> Failure | None:
        if fullmatch(pattern, value):
            return None
        return name, None

    predicate.__name__ = f"check_{name}"
    return register_check(name)(predicate)


check_is_alpha = _pattern_check("is_alpha", ALPHA_RE)
check_is_numeric = _pattern_check("is_numeric", NUMERIC_RE)
check_is_alpha_numeric = _pattern_check("is_alpha_numeric", ALPHA_NUMERIC_RE)
check_is_alpha_dash = _pattern_check("is_alpha_dash", ALPHA_DASH_RE)
check_is_integer = _pattern_check("is_integer", INTEGER_RE)
check_is_hex = _pattern_check("is_hex", HEX_RE)
check_is_base64 = _pattern_check("is_base64", BASE64_RE)
check_is_ip = _pattern_check("is_ip", IPV4_RE)
check_is_email = _pattern_check("is_email", EMAIL_RE)
check_is_url = _pattern_check("is_url", URL_RE)


@register_check("no_whitespace")
def check_no_whitespace(value: Any) -> Failure | None:
    text = as_text(value)
    if text is None or WHITESPACE_RE.search(text):
        return "no_whitespace", None
    return None


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


@register_check("is_json")
def check_is_json(value: Any) -> Failure | None:
    text = as_text(value)
    if text is None:
        return "is_json", None
    try:
        json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return "is_json", None
    return None
