"""Validation of the numeric text entered for weight and height."""

from __future__ import annotations

import re

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)",
    re.IGNORECASE,
)
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1


def parse_number(text: str) -> int | float | None:
    """Parse text as an integer, else as a float; None if it is neither.

    No surrounding whitespace, digit separators or other decoration is accepted.
    """
    if _INT_RE.fullmatch(text):
        value = int(text)
        if _INT_MIN <= value <= _INT_MAX:
            return value
    if _FLOAT_RE.fullmatch(text):
        return float(text)
    return None


def is_valid_entry(text: str) -> bool:
    """Tell whether an entry holds a number."""
    return parse_number(text) is not None


def can_calculate(weight_text: str, height_text: str) -> bool:
    """Tell whether both entries are filled in with numbers."""
    return all(text != "" and is_valid_entry(text) for text in (weight_text, height_text))