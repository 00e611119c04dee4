"""Unit tests for the check registry and check predicates."""

from collections.abc import Generator

import pytest

from fluentval.checks import (
    CHECK_REGISTRY,
    available_checks,
    check_exact,
    check_is_json,
    check_match,
    check_min,
    check_min_length,
    check_no_match,
    check_required,
    get_check,
    normalize_name,
    register_check,
    resolve_check_name,
    resolve_message_key,
    strict_equals,
    to_number,
)
from fluentval.lib.errors import UnknownCheckError
from fluentval.validator import Validator

BUILTIN_CHECKS = [
    "min",
    "max",
    "exact",
    "min_length",
    "max_length",
    "exact_length",
    "required",
    "match",
    "no_match",
    "is_alpha",
    "is_numeric",
    "is_alpha_numeric",
    "is_alpha_dash",
    "is_integer",
    "is_hex",
    "is_base64",
    "is_ip",
    "is_email",
    "is_url",
    "no_whitespace",
    "is_json",
]


@pytest.fixture
def restore_registry() -> Generator[None]:
    """Restore CHECK_REGISTRY after tests that register checks."""
    snapshot = dict(CHECK_REGISTRY)
    yield
    CHECK_REGISTRY.clear()
    CHECK_REGISTRY.update(snapshot)


@pytest.mark.unit
class TestRegistry:
    """Tests for registration and lookup."""

    def test_all_builtin_checks_registered(self) -> None:
        assert sorted(available_checks()) == sorted(BUILTIN_CHECKS)

    @pytest.mark.parametrize("name", BUILTIN_CHECKS)
    def test_every_builtin_has_default_message(self, name: str) -> None:
        assert name in Validator().messages

    def test_range_checks_require_numeric(self) -> None:
        for name in ("min", "max", "exact"):
            assert get_check(name).requires == ("is_numeric",)

    def test_lookup_by_camel_case(self) -> None:
        assert get_check("exactLength").name == "exact_length"
        assert get_check("isIP").name == "is_ip"

    def test_lookup_alias(self) -> None:
        assert get_check("matches") is get_check("match")

    def test_unknown_check(self) -> None:
        with pytest.raises(UnknownCheckError) as exc_info:
            get_check("nope")
        assert "Unknown check 'nope'" in str(exc_info.value)
        assert "is_email" in str(exc_info.value)

    @pytest.mark.usefixtures("restore_registry")
    def test_register_custom_check(self) -> None:
        @register_check("is_even", requires=("is_integer",))
        def is_even(value):
            number = to_number(value)
            if number is None or number % 2:
                return "is_even", None
            return None

        v = Validator()
        assert v.validate(4).check("is_even").is_valid() is True
        v.validate(3, "count").check("isEven").is_valid()
        assert v.get_errors() == ["count is invalid"]
        v.validate("x", "count").check("is_even").is_valid()
        assert v.get_errors() == ["count must contain an integer", "count is invalid"]

    @pytest.mark.usefixtures("restore_registry")
    def test_custom_check_uses_own_message(self) -> None:
        @register_check("is_yes")
        def is_yes(value):
            return None if value == "yes" else ("is_yes", None)

        v = Validator(messages={"is_yes": "{1} must be yes"})
        v.validate("no", "answer").check("is_yes").is_valid()
        assert v.get_errors() == ["answer must be yes"]


@pytest.mark.unit
class TestNames:
    """Tests for name normalization."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("minLength", "min_length"),
            ("isAlphaNumeric", "is_alpha_numeric"),
            ("isIP", "is_ip"),
            ("isBase64", "is_base64"),
            ("noWhitespace", "no_whitespace"),
            ("is_email", "is_email"),
            (" min ", "min"),
        ],
    )
    def test_normalize_name(self, name: str, expected: str) -> None:
        assert normalize_name(name) == expected

    def test_resolve_alias(self) -> None:
        assert resolve_check_name("matches") == "match"
        assert resolve_check_name("noMatch") == "no_match"

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("matchArray", "match_array"),
            ("noMatchArray", "no_match_array"),
            ("hexRegex", "is_hex"),
            ("hex_regex", "is_hex"),
            ("matches", "match"),
            ("isEmail", "is_email"),
        ],
    )
    def test_resolve_message_key(self, name: str, expected: str) -> None:
        assert resolve_message_key(name) == expected


@pytest.mark.unit
class TestValueHelpers:
    """Tests for to_number and strict_equals."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (18, 18),
            (2.5, 2.5),
            ("18", 18),
            ("-3", -3),
            ("0.5", 0.5),
            (".5", 0.5),
            ("18.0", 18.0),
        ],
    )
    def test_to_number(self, value, expected) -> None:
        assert to_number(value) == expected

    @pytest.mark.parametrize("value", [None, True, "abc", "1e5", "", float("nan")])
    def test_to_number_rejects(self, value) -> None:
        assert to_number(value) is None

    def test_strict_equals(self) -> None:
        assert strict_equals("a", "a") is True
        assert strict_equals(1, 1.0) is False
        assert strict_equals(1, True) is False
        assert strict_equals("1", 1) is False


@pytest.mark.unit
class TestPredicates:
    """Predicates return None on success and (message_key, arg) on failure."""

    def test_min(self) -> None:
        assert check_min(18, 16) is None
        assert check_min(15, 16) == ("min", 16)

    def test_exact(self) -> None:
        assert check_exact(18, 18) is None
        assert check_exact(18, 19) == ("exact", 19)

    def test_min_length(self) -> None:
        assert check_min_length("abcd", 4) is None
        assert check_min_length("abc", 4) == ("min_length", 4)
        assert check_min_length(None, 0) == ("min_length", 0)

    def test_required(self) -> None:
        assert check_required("x") is None
        assert check_required("") == ("required", None)

    def test_match_keys(self) -> None:
        assert check_match("a", "b") == ("match", "b")
        assert check_match("a", ["b", "c"]) == ("match_array", ["b", "c"])
        assert check_match("b", {"b", "c"}) is None

    def test_no_match_keys(self) -> None:
        assert check_no_match("a", "a") == ("no_match", "a")
        assert check_no_match("a", ("a",)) == ("no_match_array", ("a",))
        assert check_no_match("a", "b") is None

    @pytest.mark.parametrize("value", ["1", "[]", '{"a": null}', '"text"', 42])
    def test_is_json_accepts(self, value) -> None:
        assert check_is_json(value) is None

    @pytest.mark.parametrize(
        "value",
        [None, "", "{", "{'a': 1}", "undefined", "NaN", "-Infinity", float("inf")],
    )
    def test_is_json_rejects(self, value) -> None:
        assert check_is_json(value) == ("is_json", None)
