# inventory_cli/prompts.py
from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Callable, TypeVar

T = TypeVar("T")

_INT_RE = re.compile(r"[+-]?[0-9]+")
_CENTS = Decimal("0.01")

# INTEGER columns are 32-bit signed
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

INVALID_INT = "Please enter a valid integer."
INVALID_DECIMAL = "Please enter a valid decimal number."


def parse_int(text: str) -> int:
    s = text.strip()
    if not _INT_RE.fullmatch(s):
        raise ValueError(f"not an integer: {text!r}")
    value = int(s)
    if not INT_MIN <= value <= INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def parse_price(text: str) -> Decimal:
    """Parse a decimal amount and round it to cents (half up)."""
    s = text.strip()
    try:
        value = Decimal(s)
    except InvalidOperation:
        raise ValueError(f"not a decimal number: {text!r}") from None
    if not value.is_finite():
        raise ValueError(f"not a decimal number: {text!r}")
    return value.quantize(_CENTS, rounding=ROUND_HALF_UP)


def read_valid(prompt: str, parse: Callable[[str], T], error_message: str) -> T:
    while True:
        raw = input(prompt)
        try:
            return parse(raw)
        except ValueError:
            print(error_message)


def read_int(prompt: str) -> int:
    return read_valid(prompt, parse_int, INVALID_INT)


def read_price(prompt: str) -> Decimal:
    return read_valid(prompt, parse_price, INVALID_DECIMAL)


def read_text(prompt: str) -> str:
    return input(prompt).strip()
