"""Checks on account numbers and CPFs, and lenient integer parsing."""

from __future__ import annotations

import re

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _digits(text: str, count: int) -> list[int] | None:
    head = text[:count]
    if len(head) < count or not all("0" <= ch <= "9" for ch in head):
        return None
    return [ord(ch) - ord("0") for ch in head]


def is_valid_account_number(text: str) -> bool:
    """True when the eighth digit equals the sum of the first seven, modulo 10."""
    digits = _digits(text, 8)
    if digits is None:
        return False
    return sum(digits[:7]) % 10 == digits[7]


def is_valid_cpf(text: str) -> bool:
    """True when the last two digits spell the sum of the first nine."""
    digits = _digits(text, 11)
    if digits is None:
        return False
    return sum(digits[:9]) == 10 * digits[9] + digits[10]


def parse_int_prefix(text: str) -> int:
    """Read a leading, optionally signed integer, ignoring what follows; 0 if none."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0