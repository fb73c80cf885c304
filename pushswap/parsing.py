"""Validation and conversion of command-line arguments into integers."""

from __future__ import annotations

from collections.abc import Iterable

_WHITESPACE = " \t\n\v\f\r"
_INT_MAX = 2147483647
_INT_MIN_MAGNITUDE = 2147483648
_LLONG_MAX = 9223372036854775807


class ArgumentError(ValueError):
    """Raised when the arguments do not describe a valid list of integers."""


def _to_int32(value: int) -> int:
    return ((value + 2**31) % 2**32) - 2**31


def atoi(text: str) -> int:
    """Convert the leading integer of ``text`` the way the classic ``atoi`` does.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. When the magnitude grows past the 64-bit range the result is
    ``-1`` for positive input and ``0`` for negative input. The result is
    truncated to a signed 32-bit integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    count = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        if count > _LLONG_MAX // 10:
            return -1 if sign > 0 else 0
        count = count * 10 + (ord(char) - ord("0"))
    return _to_int32(count * sign)


def split_words(text: str) -> list[str]:
    """Split ``text`` on spaces, dropping empty pieces."""
    return [word for word in text.split(" ") if word]


def is_number(text: str) -> bool:
    """Tell whether ``text`` is an integer that fits in 32 signed bits.

    Leading whitespace is allowed; a sign is only taken as such when
    something follows it; any trailing character makes the text invalid.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+") and len(rest) > 1:
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    count = 0
    consumed = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        count = count * 10 + (ord(char) - ord("0"))
        if sign == -1 and count > _INT_MIN_MAGNITUDE:
            return False
        if sign == 1 and count > _INT_MAX:
            return False
        consumed += 1
    return consumed == len(rest)


def merge_arguments(args: Iterable[str]) -> str:
    """Join the arguments into one space-separated string."""
    return " ".join(args)


def _check_shape(args: list[str]) -> None:
    if any(arg == "" for arg in args):
        raise ArgumentError("empty argument")
    if any(not arg.strip(" ") for arg in args):
        raise ArgumentError("argument holds only spaces")


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Turn command-line arguments into a list of distinct integers.

    Each argument may hold several space-separated numbers. Raises
    :class:`ArgumentError` on empty arguments, non-numbers, values out of
    the 32-bit range and duplicates.
    """
    args = list(args)
    if not args:
        return []
    _check_shape(args)
    words = split_words(merge_arguments(args))
    values: list[int] = []
    seen: set[int] = set()
    for word in words:
        if not is_number(word):
            raise ArgumentError(f"not a valid integer: {word!r}")
        value = atoi(word)
        if value in seen:
            raise ArgumentError(f"duplicate value: {value}")
        seen.add(value)
        values.append(value)
    return values