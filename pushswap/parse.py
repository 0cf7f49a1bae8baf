"""Reading the starting numbers from command-line arguments."""

from __future__ import annotations

from typing import Iterable, Sequence

INT_MAX = 2147483647
INT_MIN = -2147483648

_DIGITS = frozenset("0123456789")
_SIGNS = frozenset("+-")
_SPACES = frozenset(" \t\n\r\v\f")
_ALLOWED = _DIGITS | _SIGNS | frozenset(" \t\n")


class ParseError(ValueError):
    """The arguments do not describe a valid list of distinct integers."""


def to_int(token: str) -> int:
    """Convert ``token`` to an integer in the 32-bit signed range.

    Leading whitespace, one sign and leading zeros are skipped; digits are
    read up to the first non-digit. More than ten characters after the
    leading zeros, or a value out of range, raise ParseError.
    """
    pos = 0
    while pos < len(token) and token[pos] in _SPACES:
        pos += 1
    negative = False
    if pos < len(token) and token[pos] in _SIGNS:
        negative = token[pos] == "-"
        pos += 1
    while pos < len(token) and token[pos] == "0":
        pos += 1
    rest = token[pos:]
    if len(rest) > 10:
        raise ParseError(f"number too long: {token!r}")
    digits = []
    for ch in rest:
        if ch not in _DIGITS:
            break
        digits.append(ch)
    number = int("".join(digits)) if digits else 0
    if negative:
        number = -number
        if number < INT_MIN:
            raise ParseError(f"number out of range: {token!r}")
    elif number > INT_MAX:
        raise ParseError(f"number out of range: {token!r}")
    return number


def join_arguments(args: Iterable[str]) -> str:
    """Concatenate the arguments, each followed by a single space."""
    return "".join(f"{arg} " for arg in args)


def check_signs(text: str) -> None:
    """Reject a sign not followed by a digit or directly preceded by one."""
    for pos, ch in enumerate(text):
        if ch not in _SIGNS:
            continue
        following = text[pos + 1] if pos + 1 < len(text) else ""
        if following not in _DIGITS:
            raise ParseError(f"misplaced sign at position {pos}")
        if pos > 0 and text[pos - 1] in _DIGITS:
            raise ParseError(f"misplaced sign at position {pos}")


def parse_arguments(args: Sequence[str], strict_signs: bool = True) -> list[int]:
    """Return the integers written in ``args``, in order.

    Only digits, signs, spaces, tabs and newlines are accepted. With
    ``strict_signs`` the placement of every sign is checked as well.
    Duplicates raise ParseError. No numbers at all give an empty list.
    """
    text = join_arguments(args)
    bad = next((ch for ch in text if ch not in _ALLOWED), None)
    if bad is not None:
        raise ParseError(f"invalid character: {bad!r}")
    if strict_signs:
        check_signs(text)
    values: list[int] = []
    seen: set[int] = set()
    for token in text.split():
        value = to_int(token)
        if value in seen:
            raise ParseError(f"duplicate number: {value}")
        seen.add(value)
        values.append(value)
    return values


def is_ascending(values: Sequence[int]) -> bool:
    """True when ``values`` are in strictly ascending order."""
    return all(x < y for x, y in zip(values, values[1:]))