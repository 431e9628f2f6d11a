"""
Bisect Agent - Halves the candidate range on every guess.

Keeps the window of values the secret can still take, guesses its
midpoint and shrinks the window from the "Too small" / "Too big"
feedback. Finds any secret in [1, 100] within 7 guesses.

Serves as a working example of driving GuessingGame.submit() and as
the baseline for the evaluation harness.
"""

from __future__ import annotations

from typing import Optional

from guessing_game.guess_core.config_loader import GameConfig, get_config
from guessing_game.guess_core.game import StepResult
from guessing_game.guess_core.rules import GuessResult


class BisectAgent:
    """Binary-search player over the configured secret range."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        low: Optional[int] = None,
        high: Optional[int] = None
    ):
        """
        Initialize the agent.

        Args:
            config: Game configuration. Uses default if None.
            low: Lower bound of the search. Defaults to config secret.low.
            high: Upper bound of the search. Defaults to config secret.high.
        """
        if config is None:
            config = get_config()

        self._initial_low = config.secret.low if low is None else low
        self._initial_high = config.secret.high if high is None else high
        self.reset()

    @property
    def window(self) -> tuple:
        """Current (low, high) bounds the secret must lie in."""
        return (self._low, self._high)

    def reset(self) -> None:
        """Called when a new session starts."""
        self._low = self._initial_low
        self._high = self._initial_high

    def act(self, last: Optional[StepResult] = None) -> str:
        """
        Choose the next guess.

        Args:
            last: Result of the previous submission, None on the first guess.

        Returns:
            The guess as an input line.
        """
        if last is not None and last.guess is not None:
            if last.result is GuessResult.TOO_SMALL:
                self._low = max(self._low, last.guess + 1)
            elif last.result is GuessResult.TOO_BIG:
                self._high = min(self._high, last.guess - 1)

        return str((self._low + self._high) // 2)
