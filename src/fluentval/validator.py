"""Fluent value validator.

Usage:
    v = Validator()
    if not v.validate(age, "age").min(16).max(56).is_valid():
        print(v.get_errors())

A Validator is reusable: is_valid() finalizes the current error batch and
resets the subject, so the next validate() starts a clean chain. Instances
are not thread-safe; use one per concurrent chain.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from fluentval.checks import get_check, resolve_message_key
from fluentval.config.defaults import DEFAULT_LABEL
from fluentval.messages import (
    DEFAULT_MESSAGES,
    FALLBACK_TEMPLATE,
    format_message,
    render_argument,
)

if TYPE_CHECKING:
    from fluentval.models.config import ValidatorSettings

logger = logging.getLogger(__name__)


class Validator:
    """Chainable validator for a single value at a time.

    Attributes:
        value: Subject of the current chain (None when idle)
        label: Label of the current subject (None when idle)
        errors: Messages recorded since the last is_valid()
        last_errors: Messages finalized by the last is_valid()
        messages: This instance's message templates
    """

    def __init__(
        self,
        messages: Mapping[str, str] | None = None,
        default_label: str = DEFAULT_LABEL,
    ) -> None:
        """Create an idle validator.

        Args:
            messages: Template overrides for this instance only
            default_label: Label used when validate() is called without one
        """
        self.messages: dict[str, str] = dict(DEFAULT_MESSAGES)
        for name, template in (messages or {}).items():
            self.set_msg(name, template)
        self.default_label = default_label or DEFAULT_LABEL

        self.value: Any = None
        self.label: str | None = None
        self.errors: list[str] = []
        self.last_errors: list[str] = []

    @classmethod
    def from_settings(cls, settings: ValidatorSettings) -> Validator:
        """Build a validator from loaded settings."""
        return cls(messages=settings.messages, default_label=settings.default_label)

    # State

    def validate(self, value: Any, label: str | None = None) -> Validator:
        """Set the value to validate and start a new chain.

        Args:
            value: The subject (str, int, float or None)
            label: Name used in messages; the default label if omitted or empty

        Returns:
            This validator, for chaining
        """
        self.value = value
        self.label = label or self.default_label
        self.errors = []
        return self

    def set_msg(self, name: str, template: str) -> None:
        """Replace the template for ``name`` for subsequent checks."""
        self.messages[resolve_message_key(name)] = template

    def is_valid(self) -> bool:
        """Finalize the chain and report whether no check failed.

        The recorded messages move to ``last_errors`` and the subject is
        cleared. A second call without a new validate() returns True,
        since the batch has already been drained.
        """
        result = not self.errors

        self.last_errors = self.errors
        self.errors = []
        self.value = None
        self.label = None

        logger.debug(
            f"Validation finished: {'valid' if result else 'invalid'} "
            f"({len(self.last_errors)} error(s))"
        )
        return result

    def get_errors(self) -> list[str]:
        """Return the messages finalized by the last is_valid() call.

        An empty list means the last chain had no errors.
        """
        return list(self.last_errors)

    # Dispatch

    def check(self, name: str, *args: Any) -> Validator:
        """Run a registered check by name against the current value.

        Prerequisite checks declared by the registry run first, so ``min``
        also records the numeric-format message for a non-numeric value.

        Args:
            name: Check name (snake_case, camelCase or alias)
            *args: Check arguments

        Returns:
            This validator, for chaining

        Raises:
            UnknownCheckError: If no check is registered under ``name``
        """
        spec = get_check(name)
        for prerequisite in spec.requires:
            self.check(prerequisite)

        failure = spec.predicate(self.value, *args)
        if failure is not None:
            message_key, argument = failure
            self._record(message_key, argument)
        return self

    def _record(self, message_key: str, argument: Any) -> None:
        template = self.messages.get(message_key, FALLBACK_TEMPLATE)
        label = self.label or self.default_label
        message = format_message(template, render_argument(argument), label)
        logger.debug(f"Check '{message_key}' failed for {label!r}: {message}")
        self.errors.append(message)

    # Range checks

    def min(self, threshold: Any) -> Validator:
        """Value must be numeric and at least ``threshold``."""
        return self.check("min", threshold)

    def max(self, threshold: Any) -> Validator:
        """Value must be numeric and at most ``threshold``."""
        return self.check("max", threshold)

    def exact(self, target: Any) -> Validator:
        """Value must be numeric and equal to ``target``."""
        return self.check("exact", target)

    # Length checks

    def min_length(self, length: int) -> Validator:
        return self.check("min_length", length)

    def max_length(self, length: int) -> Validator:
        return self.check("max_length", length)

    def exact_length(self, length: int) -> Validator:
        return self.check("exact_length", length)

    # Presence and equality

    def required(self) -> Validator:
        """Value must not be None or an empty string."""
        return self.check("required")

    def match(self, expected: Any) -> Validator:
        """Value must equal ``expected`` (same type), or be one of a list of them."""
        return self.check("match", expected)

    matches = match

    def no_match(self, forbidden: Any) -> Validator:
        """Value must differ from ``forbidden``, or from every item of a list."""
        return self.check("no_match", forbidden)

    # Pattern checks

    def is_alpha(self) -> Validator:
        return self.check("is_alpha")

    def is_numeric(self) -> Validator:
        return self.check("is_numeric")

    def is_alpha_numeric(self) -> Validator:
        return self.check("is_alpha_numeric")

    def is_alpha_dash(self) -> Validator:
        return self.check("is_alpha_dash")

    def is_integer(self) -> Validator:
        return self.check("is_integer")

    def is_hex(self) -> Validator:
        return self.check("is_hex")

    def is_base64(self) -> Validator:
        return self.check("is_base64")

    def is_ip(self) -> Validator:
        """Value must be a dotted-quad IPv4 address. IPv6 is not supported."""
        return self.check("is_ip")

    def is_email(self) -> Validator:
        return self.check("is_email")

    def is_url(self) -> Validator:
        """Value must look like an http(s) URL or a bare path."""
        return self.check("is_url")

    def no_whitespace(self) -> Validator:
        return self.check("no_whitespace")

    def is_json(self) -> Validator:
        """Value must parse as JSON; the parse error is recorded, not raised."""
        return self.check("is_json")
