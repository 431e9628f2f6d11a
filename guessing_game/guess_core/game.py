"""
Core Game
=========

Game loop combining secret generation, guess parsing, comparison and
line-based terminal I/O.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Optional, TextIO

from guessing_game.guess_core.config_loader import GameConfig, get_config
from guessing_game.guess_core.errors import InputClosedError, OutputError, ParseError
from guessing_game.guess_core.rng import SecretSource
from guessing_game.guess_core.rules import GuessCount, GuessResult, compare, parse_guess


class GameState(Enum):
    """Where the loop is within one iteration."""
    PROMPTING = "prompting"
    AWAITING_INPUT = "awaiting_input"
    EVALUATING = "evaluating"
    WON = "won"


@dataclass
class StepResult:
    """Result of processing one input line."""
    message: str                    # Feedback line for the player
    guess: Optional[int]            # None if the line did not parse
    result: Optional[GuessResult]   # None if the line did not parse
    guess_count: int
    won: bool

    @property
    def is_parse_error(self) -> bool:
        return self.guess is None


class GuessingGame:
    """
    One guess-the-number session.

    States:
    - PROMPTING: ready to ask for the next guess
    - AWAITING_INPUT: prompt written, blocked on a line of input
    - EVALUATING: line received, being parsed and compared
    - WON: secret found (terminal until reset)

    step() runs a full iteration against the attached streams; submit()
    is the same evaluation without any I/O, for programmatic players.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
        secret_source: Optional[SecretSource] = None,
        input_stream: Optional[TextIO] = None,
        output_stream: Optional[TextIO] = None
    ):
        """
        Initialize game. No secret is drawn until initialize() or reset().

        Args:
            config: Game configuration. Uses default if None.
            seed: Random seed, used only when secret_source is None.
            secret_source: Provider of secrets. A SecretSource over the
                configured range is created if None.
            input_stream: Where guesses are read from. Defaults to sys.stdin.
            output_stream: Where feedback is written. Defaults to sys.stdout.
        """
        if config is None:
            config = get_config()

        self._config = config
        self._messages = config.messages
        self._source = secret_source if secret_source is not None else SecretSource(config, seed)
        self._input = input_stream if input_stream is not None else sys.stdin
        self._output = output_stream if output_stream is not None else sys.stdout

        # Session state
        self._secret: Optional[int] = None
        self._count = GuessCount()
        self._state = GameState.PROMPTING

    @property
    def config(self) -> GameConfig:
        """Game configuration."""
        return self._config

    @property
    def secret(self) -> Optional[int]:
        """Secret of the current session, or None before the first reset."""
        return self._secret

    @property
    def guess_count(self) -> int:
        """Number of valid guesses made this session."""
        return self._count.value

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def is_over(self) -> bool:
        """True once the secret has been guessed."""
        return self._state is GameState.WON

    def reset(self, seed: Optional[int] = None) -> None:
        """
        Start a new session without writing anything.

        Args:
            seed: Reseed the secret source before drawing. Keeps current if None.
        """
        if seed is not None:
            self._source.reset(seed)
        self._secret = self._source.draw()
        self._count.reset()
        self._state = GameState.PROMPTING

    def initialize(self) -> None:
        """Start a new session and greet the player."""
        self.reset()
        self._write(self._messages.welcome)

    def prompt_and_read(self) -> str:
        """
        Ask for a guess and block until a line arrives.

        Returns:
            The raw line, including its newline if present.

        Raises:
            InputClosedError: If the input stream has ended.
            OutputError: If the prompt could not be written.
        """
        self._write(self._messages.prompt)
        self._state = GameState.AWAITING_INPUT

        line = self._input.readline()
        if not line:
            raise InputClosedError(self._count.value)
        return line

    def submit(self, line: str) -> StepResult:
        """
        Evaluate one line of input against the secret.

        Unparsable lines leave the guess count untouched.

        Args:
            line: Raw input line.

        Returns:
            StepResult describing the outcome.

        Raises:
            RuntimeError: If no session is active or the session is already won.
        """
        if self._secret is None:
            raise RuntimeError("No active session. Call initialize() or reset() first.")
        if self._state is GameState.WON:
            raise RuntimeError("Session already won. Call reset() to play again.")

        self._state = GameState.EVALUATING

        try:
            guess = parse_guess(line)
        except ParseError:
            self._state = GameState.PROMPTING
            return StepResult(
                message=self._messages.parse_error,
                guess=None,
                result=None,
                guess_count=self._count.value,
                won=False
            )

        count = self._count.increment()
        outcome = compare(guess, self._secret)

        if outcome is GuessResult.CORRECT:
            self._state = GameState.WON
            message = self._messages.format_win(count)
        else:
            self._state = GameState.PROMPTING
            if outcome is GuessResult.TOO_SMALL:
                message = self._messages.too_small
            else:
                message = self._messages.too_big

        return StepResult(
            message=message,
            guess=guess,
            result=outcome,
            guess_count=count,
            won=outcome is GuessResult.CORRECT
        )

    def step(self) -> StepResult:
        """Run one prompt/read/evaluate iteration and write the feedback."""
        line = self.prompt_and_read()
        result = self.submit(line)
        self._write(result.message)
        return result

    def run(self) -> int:
        """
        Play a full session on the attached streams.

        Returns:
            Number of guesses it took to win.

        Raises:
            InputClosedError: If input ends before the secret is found.
            OutputError: If writing to the output stream fails.
        """
        self.initialize()
        while not self.is_over:
            self.step()
        return self._count.value

    def _write(self, text: str) -> None:
        """Write one line and flush so prompts show before blocking reads."""
        try:
            self._output.write(text + "\n")
            self._output.flush()
        except (OSError, ValueError) as e:
            # ValueError: write to a closed file
            raise OutputError(f"Failed to write output: {e}") from e
