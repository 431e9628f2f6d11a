"""
Game Errors
===========

Exceptions raised by the game loop.

- ParseError: a guess line is not an integer (recovered by the loop)
- InputClosedError: input ended before the secret was found
- OutputError: the output stream can no longer be written
"""

from __future__ import annotations


class GameError(Exception):
    """Base class for all game errors."""


class ParseError(GameError, ValueError):
    """Raised when a guess line does not contain a base-10 integer."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Not a number: {text!r}")


class InputClosedError(GameError, EOFError):
    """Raised when the input stream ends before the secret is guessed."""

    def __init__(self, guess_count: int = 0):
        self.guess_count = guess_count
        super().__init__(f"Input closed after {guess_count} guesses")


class OutputError(GameError):
    """Raised when writing to the output stream fails."""
