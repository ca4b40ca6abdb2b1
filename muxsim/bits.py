"""
Digit parsing for the input streams.

Each character of a stream is parsed on its own into either an integer digit
or the INVALID marker. What an INVALID marker turns into is decided by an
InvalidDigitPolicy chosen by the caller.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Union

DIGITS = "0123456789"


class _Invalid:
    """Marker for a character that is not a decimal digit."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "INVALID"

    def __bool__(self) -> bool:
        return False


INVALID = _Invalid()

ParsedDigit = Union[int, _Invalid]


class InvalidDigitError(ValueError):
    """Raised for a non-digit character under InvalidDigitPolicy.RAISE."""

    def __init__(self, stream: str, position: int, char: str):
        self.stream = stream
        self.position = position
        self.char = char
        super().__init__(
            f"Stream {stream} has non-digit character {char!r} at position {position}"
        )


class InvalidDigitPolicy(Enum):
    """
    What to do with a character that does not parse as a digit.

    NAN
        Keep it as not-a-number (the bit reads as NaN wherever it is used).
    ZERO
        Treat it as a 0 bit.
    SKIP
        Drop it from the stream before bit indices are assigned.
    RAISE
        Raise InvalidDigitError.
    """

    NAN = "nan"
    ZERO = "zero"
    SKIP = "skip"
    RAISE = "raise"


def parse_digit(char: str) -> ParsedDigit:
    """Parse one character into its digit value, or INVALID."""
    if len(char) == 1 and char in DIGITS:
        return DIGITS.index(char)
    return INVALID


def parse_digits(stream: str) -> list[ParsedDigit]:
    """Parse every character of a stream, keeping positions."""
    return [parse_digit(char) for char in stream]


def resolve_digits(
    stream: str,
    policy: InvalidDigitPolicy = InvalidDigitPolicy.NAN,
    name: str = "A",
) -> list[float | int]:
    """
    Parse a stream and apply the policy to every INVALID marker.

    Parameters
    ----------
    stream : str
        Raw digit stream
    policy : InvalidDigitPolicy
        How to resolve characters that are not digits (default: NAN)
    name : str
        Stream name used in error messages (default: "A")

    Returns
    -------
    list of int or float
        Bit values; under NAN an invalid character becomes float("nan")
    """
    bits = []
    for position, digit in enumerate(parse_digits(stream)):
        if digit is not INVALID:
            bits.append(digit)
        elif policy is InvalidDigitPolicy.NAN:
            bits.append(math.nan)
        elif policy is InvalidDigitPolicy.ZERO:
            bits.append(0)
        elif policy is InvalidDigitPolicy.RAISE:
            raise InvalidDigitError(name, position, stream[position])
        # SKIP: nothing appended
    return bits


def filter_chars(
    stream: str,
    policy: InvalidDigitPolicy = InvalidDigitPolicy.NAN,
    name: str = "A",
) -> list[str]:
    """
    Apply the policy to a stream while keeping raw characters.

    Under NAN the characters pass through untouched, so a downstream float
    conversion yields NaN for a non-digit.
    """
    if policy is InvalidDigitPolicy.NAN:
        return list(stream)

    chars = []
    for position, char in enumerate(stream):
        if parse_digit(char) is not INVALID:
            chars.append(char)
        elif policy is InvalidDigitPolicy.ZERO:
            chars.append("0")
        elif policy is InvalidDigitPolicy.RAISE:
            raise InvalidDigitError(name, position, char)
    return chars
