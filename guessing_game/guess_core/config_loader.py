"""
Configuration Loader
====================

Loads and validates game_config.yaml, providing typed access to all parameters.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml


@dataclass(frozen=True)
class SecretConfig:
    """Closed range the secret number is drawn from."""
    low: int    # Smallest possible secret (inclusive)
    high: int   # Largest possible secret (inclusive)

    @property
    def size(self) -> int:
        """Number of possible secrets."""
        return self.high - self.low + 1


@dataclass(frozen=True)
class MessagesConfig:
    """User-visible lines written by the game loop."""
    welcome: str
    prompt: str
    too_small: str
    too_big: str
    win: str            # Formatted with {count}
    parse_error: str
    input_closed: str

    def format_win(self, count: int) -> str:
        """Win line for a session finished in `count` guesses."""
        return self.win.format(count=count)


@dataclass(frozen=True)
class EvaluationConfig:
    """Limits for the automated evaluation harness."""
    max_guesses: int


@dataclass(frozen=True)
class GameConfig:
    """
    Complete game configuration loaded from YAML.

    All values are immutable to prevent accidental modification during runtime.
    """
    secret: SecretConfig
    messages: MessagesConfig
    evaluation: EvaluationConfig


def _validate_config(config: GameConfig) -> None:
    """Validate configuration consistency."""
    if config.secret.low > config.secret.high:
        raise ValueError(
            f"secret.low ({config.secret.low}) must not exceed "
            f"secret.high ({config.secret.high})"
        )

    if "{count}" not in config.messages.win:
        raise ValueError(f"messages.win must contain '{{count}}', got '{config.messages.win}'")

    if config.evaluation.max_guesses < 1:
        raise ValueError(
            f"evaluation.max_guesses must be positive, got {config.evaluation.max_guesses}"
        )


def load_config(config_path: Optional[str] = None) -> GameConfig:
    """
    Load and validate game configuration from YAML.

    Args:
        config_path: Path to game_config.yaml. If None, uses default location.

    Returns:
        Validated GameConfig instance.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If config validation fails.
    """
    if config_path is None:
        config_path = os.path.join(
            os.path.dirname(os.path.dirname(__file__)),
            "game_config.yaml"
        )

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        raw = yaml.safe_load(f)

    if not isinstance(raw, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    try:
        secret_data = raw["secret"]
        secret = SecretConfig(
            low=int(secret_data["low"]),
            high=int(secret_data["high"])
        )

        messages_data = raw["messages"]
        messages = MessagesConfig(
            welcome=str(messages_data["welcome"]),
            prompt=str(messages_data["prompt"]),
            too_small=str(messages_data["too_small"]),
            too_big=str(messages_data["too_big"]),
            win=str(messages_data["win"]),
            parse_error=str(messages_data["parse_error"]),
            input_closed=str(messages_data.get("input_closed", "No answer received, exiting."))
        )
    except KeyError as e:
        raise ValueError(f"Missing config key {e} in {config_path}") from e

    # Evaluation section is optional
    eval_data = raw.get("evaluation", {})
    evaluation = EvaluationConfig(
        max_guesses=int(eval_data.get("max_guesses", 200))
    )

    config = GameConfig(
        secret=secret,
        messages=messages,
        evaluation=evaluation
    )

    _validate_config(config)
    return config


# Module-level singleton for convenience
_cached_config: Optional[GameConfig] = None


def get_config() -> GameConfig:
    """Get the cached game configuration, loading if necessary."""
    global _cached_config
    if _cached_config is None:
        _cached_config = load_config()
    return _cached_config


def reload_config(config_path: Optional[str] = None) -> GameConfig:
    """Reload the configuration (useful for testing)."""
    global _cached_config
    _cached_config = load_config(config_path)
    return _cached_config
