"""Parsing of command line rules and values.

A rule is ``name`` or ``name:argument``. Range and length checks take a
numeric argument; ``match``/``no_match`` split a comma-separated argument
into a list. Any other argument is passed to the check as text.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any

from fluentval.checks import CheckSpec, get_check, to_number
from fluentval.lib.errors import RuleSyntaxError

NUMERIC_ARGUMENT_CHECKS = frozenset(
    {"min", "max", "exact", "min_length", "max_length", "exact_length"}
)
LIST_ARGUMENT_CHECKS = frozenset({"match", "no_match"})

VALUE_TYPES = ("str", "int", "float", "none")


@dataclass(frozen=True)
class Rule:
    """A parsed rule: registered check name and its arguments."""

    name: str
    args: tuple[Any, ...] = ()


def _arity(spec: CheckSpec) -> int:
    """Number of arguments a check takes after the value."""
    parameters = list(inspect.signature(spec.predicate).parameters.values())
    return max(len(parameters) - 1, 0)


def parse_rule(text: str) -> Rule:
    """Parse ``name[:argument]`` into a Rule.

    Args:
        text: Rule text, e.g. ``"min:16"``, ``"isEmail"``, ``"match:a,b"``

    Returns:
        The parsed Rule

    Raises:
        RuleSyntaxError: If the name is missing or the argument is wrong
        UnknownCheckError: If the name is not a registered check
    """
    raw_name, separator, raw_argument = text.partition(":")
    if not raw_name.strip():
        raise RuleSyntaxError(text, "missing check name")

    spec = get_check(raw_name)
    arity = _arity(spec)

    if not separator:
        if arity:
            raise RuleSyntaxError(text, f"'{spec.name}' requires an argument")
        return Rule(spec.name)

    if not arity:
        raise RuleSyntaxError(text, f"'{spec.name}' takes no argument")

    argument = raw_argument.strip()
    if spec.name in NUMERIC_ARGUMENT_CHECKS:
        number = to_number(argument)
        if number is None:
            raise RuleSyntaxError(text, f"'{argument}' is not a number")
        return Rule(spec.name, (number,))

    if spec.name in LIST_ARGUMENT_CHECKS and "," in argument:
        return Rule(spec.name, ([item.strip() for item in argument.split(",")],))

    return Rule(spec.name, (argument,))


def coerce_value(raw: str | None, value_type: str) -> Any:
    """Convert the command line value to the requested type.

    Args:
        raw: Value text as given on the command line
        value_type: One of ``str``, ``int``, ``float``, ``none``

    Returns:
        The converted value (None for ``none`` or a missing value)

    Raises:
        ValueError: If the text cannot be converted
    """
    if value_type == "none" or raw is None:
        return None
    if value_type == "int":
        return int(raw)
    if value_type == "float":
        return float(raw)
    return raw
