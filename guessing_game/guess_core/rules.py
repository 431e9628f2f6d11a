"""
Game Rules
==========

Guess parsing, comparison against the secret and guess counting.
"""

from __future__ import annotations

import re
from enum import Enum

from guessing_game.guess_core.errors import ParseError


# Optional sign followed by ASCII digits only
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class GuessResult(Enum):
    """Outcome of comparing a guess with the secret."""
    TOO_SMALL = "too_small"
    TOO_BIG = "too_big"
    CORRECT = "correct"


def parse_guess(line: str) -> int:
    """
    Parse one line of input into a guess.

    Surrounding whitespace (including the trailing newline) is ignored.
    The value is not range-checked: any integer is a valid guess.

    Args:
        line: Raw input line.

    Returns:
        The guessed integer.

    Raises:
        ParseError: If the line is not a base-10 integer, or has too many
            digits to convert.
    """
    text = line.strip()
    if not _INTEGER_RE.fullmatch(text):
        raise ParseError(text)
    try:
        return int(text)
    except ValueError as e:
        # Digit count above sys.get_int_max_str_digits()
        raise ParseError(text) from e


def compare(guess: int, secret: int) -> GuessResult:
    """Compare a guess with the secret."""
    if guess < secret:
        return GuessResult.TOO_SMALL
    if guess > secret:
        return GuessResult.TOO_BIG
    return GuessResult.CORRECT


class GuessCount:
    """Number of valid guesses made in the current session."""

    def __init__(self):
        self._count: int = 0

    @property
    def value(self) -> int:
        return self._count

    def increment(self) -> int:
        """Count one more valid guess and return the new total."""
        self._count += 1
        return self._count

    def reset(self) -> None:
        self._count = 0

    def __repr__(self) -> str:
        return f"GuessCount({self._count})"
