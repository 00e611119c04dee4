"""Regular expressions shared by the fluentval checks.

Every pattern is applied with ``fullmatch`` so anchors are implicit, and
character classes are ASCII-only (``\\d`` and ``\\w`` do not match other
Unicode digits or letters). The whitespace pattern is the exception: any
Unicode whitespace counts.
"""

from __future__ import annotations

import re
from decimal import Decimal

NUMERIC_RE = re.compile(r"-?\d*\.?\d+", re.ASCII)
ALPHA_RE = re.compile(r"[a-z]+", re.ASCII | re.IGNORECASE)
ALPHA_NUMERIC_RE = re.compile(r"[a-z0-9]+", re.ASCII | re.IGNORECASE)
ALPHA_DASH_RE = re.compile(r"[a-z0-9_-]+", re.ASCII | re.IGNORECASE)
INTEGER_RE = re.compile(r"-?[0-9]+", re.ASCII)
HEX_RE = re.compile(r"[a-f0-9]+", re.ASCII | re.IGNORECASE)

# At least one group; "=" padding only in the last one.
BASE64_RE = re.compile(
    r"(?:[A-Za-z0-9+/]{4})*"
    r"(?:[A-Za-z0-9+/]{4}|[A-Za-z0-9+/]{3}=|[A-Za-z0-9+/]{2}==)",
    re.ASCII,
)

WHITESPACE_RE = re.compile(r"\s")

_OCTET = r"(?:25[0-5]|2[0-4][0-9]|1[0-9]{2}|[0-9]{1,2})"
IPV4_RE = re.compile(rf"(?:{_OCTET}\.){{3}}{_OCTET}", re.ASCII)

EMAIL_RE = re.compile(
    r"(?P<local>[\w-]+(?:\.[\w-]+)*)"
    r"@(?P<domain>(?:[\w-]+\.)*\w[\w-]{0,66})"
    r"\.(?P<tld>[a-z]{2,6}(?:\.[a-z]{2})?)",
    re.ASCII | re.IGNORECASE,
)

# Permissive: the scheme/host part is optional, so "", "/" and ":8080/x"
# are accepted as bare paths.
URL_RE = re.compile(
    r"(?:https?://(?:\w+:?\w*@)?\S+|)"
    r"(?::[0-9]+)?"
    r"(?:/|/[\w#!:.?+=&%@\-/])?",
    re.ASCII,
)


def as_text(value: object) -> str | None:
    """Return the text a pattern check should match, or None for no value.

    Booleans render as ``true``/``false`` so they never pass numeric or
    alphabetic patterns by accident of their Python spelling. Floats render
    in fixed-point notation (``1e-05`` becomes ``0.00001``).
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return format(Decimal(repr(value)), "f")
    return str(value)


def fullmatch(pattern: re.Pattern[str], value: object) -> bool:
    """Check whether ``value`` as text matches ``pattern`` in full."""
    text = as_text(value)
    if text is None:
        return False
    return pattern.fullmatch(text) is not None
