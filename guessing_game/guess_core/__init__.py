"""
Guess Core - The game itself.

This module provides the game loop and all supporting pieces
(configuration, secret generation, parsing and comparison rules).

Main exports:
- GuessingGame: One game session, interactive or programmatic
- SecretSource: Seedable provider of secret numbers
- GameConfig: Configuration loaded from game_config.yaml
"""

from guessing_game.guess_core.config_loader import GameConfig, load_config, get_config
from guessing_game.guess_core.errors import (
    GameError,
    ParseError,
    InputClosedError,
    OutputError,
)
from guessing_game.guess_core.rng import SecretSource
from guessing_game.guess_core.rules import GuessResult, GuessCount, compare, parse_guess
from guessing_game.guess_core.game import GuessingGame, GameState, StepResult

__all__ = [
    "GameConfig",
    "load_config",
    "get_config",
    "GameError",
    "ParseError",
    "InputClosedError",
    "OutputError",
    "SecretSource",
    "GuessResult",
    "GuessCount",
    "compare",
    "parse_guess",
    "GuessingGame",
    "GameState",
    "StepResult",
]
