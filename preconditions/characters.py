"""
Character-class predicates.

Pure checks with no I/O. Each returns a bool and never raises for str
input; the facade in preconditions.checks turns a False into a failure.
"""

from __future__ import annotations

PRINTABLE_ASCII_MIN = 32
PRINTABLE_ASCII_MAX = 126

_ASCII_ALPHANUMERIC: frozenset[str] = frozenset(
    "abcdefghijklmnopqrstuvwxyz"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "0123456789"
)


def is_printable_ascii(ch: str) -> bool:
    """True if ch is a single character with ordinal 32..126."""
    return len(ch) == 1 and PRINTABLE_ASCII_MIN <= ord(ch) <= PRINTABLE_ASCII_MAX


def is_ascii_alphanumeric(ch: str) -> bool:
    """True if ch is one of a-z, A-Z, 0-9.

    str.isalnum() is not used: it accepts non-ASCII letters and digits.
    """
    return ch in _ASCII_ALPHANUMERIC


def all_printable_ascii(text: str) -> bool:
    """True if every character of text is printable ASCII. True for ""."""
    return all(is_printable_ascii(ch) for ch in text)


def all_ascii_alphanumeric(text: str) -> bool:
    """True if every character of text is ASCII alphanumeric. True for ""."""
    return all(is_ascii_alphanumeric(ch) for ch in text)
