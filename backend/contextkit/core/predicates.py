"""Primitive Predicates — single-constraint checks on one value.

Invariants:
    - All functions are PURE: no IO, no logging, no side effects
    - Return PASSED on success, a failed Outcome carrying a ValidationError
      (field == `field`) on violation; never raise for bad input
    - Length checks fail for non-strings, including MISSING and None
    - bool is not a number (True/False fail number_between)
    - Patterns must match the whole string (a trailing newline fails)

Design Decisions:
    - MISSING sentinel distinguishes "key absent" from an explicit None, which
      the optional-field gates in field_rules depend on
    - Enum option sets are compared by value so str Enums and plain tuples
      are interchangeable as `options`
"""

import math
import re
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

from contextkit.core.outcome import PASSED, Outcome, failed


class _Missing:
    """Marker for a key the caller did not supply."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


def is_absent(value: Any) -> bool:
    """MISSING, None, or the empty string."""
    return value is MISSING or value is None or (isinstance(value, str) and value == "")


def is_falsy_scalar(value: Any) -> bool:
    """MISSING, None, "", False, zero or NaN. Empty containers are not falsy here."""
    if is_absent(value) or value is False:
        return True
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0 or (isinstance(value, float) and math.isnan(value))
    return False


# --- Presence & format --------------------------------------------------------

def required(value: Any, field: str) -> Outcome:
    if is_absent(value):
        return failed(f"{field} is required", field)
    return PASSED


def is_email(value: Any, field: str = "email") -> Outcome:
    """local@domain.tld, no whitespace, exactly one @ per part."""
    if not isinstance(value, str) or not EMAIL_PATTERN.fullmatch(value):
        return failed(f"Invalid email format for {field}", field)
    return PASSED


def is_uuid(value: Any, field: str = "id") -> Outcome:
    """RFC 4122 shape: version nibble 1-5, variant nibble 8/9/a/b."""
    if not isinstance(value, str) or not UUID_PATTERN.fullmatch(value):
        return failed(f"Invalid UUID format for {field}", field)
    return PASSED


# --- String length ------------------------------------------------------------

def min_length(value: Any, min_len: int, field: str) -> Outcome:
    if not isinstance(value, str) or len(value) < min_len:
        return failed(f"{field} must be at least {min_len} characters", field)
    return PASSED


def max_length(value: Any, max_len: int, field: str) -> Outcome:
    if not isinstance(value, str) or len(value) > max_len:
        return failed(f"{field} must be at most {max_len} characters", field)
    return PASSED


def length_between(value: Any, min_len: int, max_len: int, field: str) -> Outcome:
    if not isinstance(value, str) or not min_len <= len(value) <= max_len:
        return failed(
            f"{field} must be between {min_len} and {max_len} characters", field,
        )
    return PASSED


# --- Membership & shape -------------------------------------------------------

def is_one_of(value: Any, options: Iterable[Any], field: str) -> Outcome:
    choices = tuple(o.value if isinstance(o, Enum) else o for o in options)
    if value not in choices:
        return failed(
            f"{field} must be one of: {', '.join(str(c) for c in choices)}", field,
        )
    return PASSED


def is_array(value: Any, field: str) -> Outcome:
    if not isinstance(value, (list, tuple)):
        return failed(f"{field} must be an array", field)
    return PASSED


def is_object(value: Any, field: str) -> Outcome:
    if not isinstance(value, Mapping):
        return failed(f"{field} must be an object", field)
    return PASSED


# --- Numbers ------------------------------------------------------------------

def number_between(value: Any, lo: float, hi: float, field: str) -> Outcome:
    if (
        isinstance(value, bool)
        or not isinstance(value, (int, float))
        or (isinstance(value, float) and math.isnan(value))
        or not lo <= value <= hi
    ):
        return failed(f"{field} must be between {lo} and {hi}", field)
    return PASSED
