"""Conversions between decimal integers and binary, octal and hex notation.

The functions mirror a digit-at-a-time approach: a non-positive number
produces an empty digit string, and "binary" and "octal" inputs are integers
whose decimal digits are read as digits of the other base.
"""

from __future__ import annotations

__all__ = [
    "decimal_to_binary",
    "binary_to_decimal",
    "decimal_to_hexadecimal",
    "hexadecimal_to_decimal",
    "decimal_to_octal",
    "octal_to_decimal",
]

_HEX_DIGITS = "0123456789ABCDEF"


def _to_base(n: int, base: int) -> str:
    digits: list[str] = []
    while n > 0:
        n, remainder = divmod(n, base)
        digits.append(_HEX_DIGITS[remainder])
    return "".join(reversed(digits))


def _from_decimal_digits(n: int, base: int) -> int:
    total = 0
    weight = 1
    while n > 0:
        n, digit = divmod(n, 10)
        total += digit * weight
        weight *= base
    return total


def decimal_to_binary(n: int) -> str:
    """Binary digits of ``n``; empty for ``n <= 0``."""
    return _to_base(n, 2)


def binary_to_decimal(n: int) -> int:
    """Read the decimal digits of ``n`` as a binary number."""
    return _from_decimal_digits(n, 2)


def decimal_to_hexadecimal(n: int) -> str:
    """Upper-case hexadecimal digits of ``n``; empty for ``n <= 0``."""
    return _to_base(n, 16)


def hexadecimal_to_decimal(text: str) -> int:
    """Value of an upper-case hexadecimal string.

    Characters outside 0-9 and A-F count as zero digits.
    """
    total = 0
    for char in text:
        total = total * 16 + max(_HEX_DIGITS.find(char), 0)
    return total


def decimal_to_octal(n: int) -> str:
    """Octal digits of ``n``; empty for ``n <= 0``."""
    return _to_base(n, 8)


def octal_to_decimal(n: int) -> int:
    """Read the decimal digits of ``n`` as an octal number."""
    return _from_decimal_digits(n, 8)