"""Small string algorithms: searching, hashing, reversing and reformatting."""

from __future__ import annotations

import itertools
import re
from collections import Counter
from collections.abc import Iterator
from string import ascii_letters

__all__ = [
    "first_non_repeating",
    "prefix_function",
    "is_palindrome",
    "reverse_string",
    "reverse_words",
    "string_hash",
    "keep_letters",
    "permutations",
    "anagram_deletions",
    "to_24_hour",
]

_HASH_MOD = 1_000_000_007
_HASH_BASE = 31
_TIME_12H = re.compile(r"(\d{2})(:\d{2}:\d{2})(AM|PM)")


def first_non_repeating(text: str) -> str | None:
    """Return the first character that occurs exactly once, or None."""
    counts = Counter(text)
    return next((char for char in text if counts[char] == 1), None)


def prefix_function(text: str) -> list[int]:
    """Knuth-Morris-Pratt prefix function of ``text``.

    Entry ``i`` is the length of the longest proper prefix of ``text[:i + 1]``
    that is also a suffix of it.
    """
    pi = [0] * len(text)
    for i in range(1, len(text)):
        j = pi[i - 1]
        while j > 0 and text[i] != text[j]:
            j = pi[j - 1]
        if text[i] == text[j]:
            j += 1
        pi[i] = j
    return pi


def is_palindrome(text: str) -> bool:
    """Whether ``text`` reads the same forwards and backwards."""
    return text == text[::-1]


def reverse_string(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]


def reverse_words(text: str) -> str:
    """Reverse the order of space-separated words, keeping every space."""
    return " ".join(reversed(text.split(" ")))


def _truncating_mod(value: int, modulus: int) -> int:
    remainder = abs(value) % modulus
    return remainder if value >= 0 else -remainder


def string_hash(text: str) -> int:
    """Polynomial rolling hash with base 31 modulo 1e9+7.

    Each character weighs its offset from ``'a'`` plus one, so lower-case
    letters map to 1..26. The remainder keeps the sign of the dividend.
    """
    total = 0
    weight = 1
    for char in text:
        term = _truncating_mod((ord(char) - ord("a") + 1) * weight, _HASH_MOD)
        total = _truncating_mod(total + term, _HASH_MOD)
        weight = weight * _HASH_BASE % _HASH_MOD
    return total


def keep_letters(text: str) -> str:
    """Drop every character that is not an ASCII letter."""
    return "".join(char for char in text if char in ascii_letters)


def _permute(text: str) -> Iterator[str]:
    for order in itertools.permutations(text):
        yield "".join(order)


def permutations(text: str) -> list[str]:
    """Every arrangement of the characters of ``text``, by position.

    Repeated characters give repeated arrangements. The order is that of
    picking each remaining character in turn as the next one.
    """
    return list(_permute(text))


def anagram_deletions(first: str, second: str) -> int:
    """Number of characters to delete from both strings to make anagrams."""
    a, b = Counter(first), Counter(second)
    return sum(((a - b) + (b - a)).values())


def to_24_hour(text: str) -> str:
    """Convert ``hh:mm:ssAM`` / ``hh:mm:ssPM`` into 24-hour ``hh:mm:ss``."""
    match = _TIME_12H.fullmatch(text)
    if match is None:
        raise ValueError(f"not a 12-hour time of the form hh:mm:ssAM/PM: {text!r}")
    hours_text, rest, half = match.groups()
    hours = int(hours_text)
    if half == "AM":
        return ("00" if hours == 12 else hours_text) + rest
    return ("12" if hours == 12 else str(hours + 12)) + rest