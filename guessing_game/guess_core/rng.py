"""
RNG - Secret Source
===================

Provides the secret number for each session from a private, seedable
random generator, so a seed fully determines the secrets a game sees.
"""

from __future__ import annotations

import random
from typing import Optional

from guessing_game.guess_core.config_loader import GameConfig, get_config


class SecretSource:
    """
    Uniform secret generator over the configured closed range.

    Each instance owns its own random.Random; the process-wide
    random module state is never read or modified.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None
    ):
        """
        Initialize secret source.

        Args:
            config: Game configuration. Uses default if None.
            seed: Random seed for reproducibility. Random if None.
        """
        if config is None:
            config = get_config()

        self._config = config
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def low(self) -> int:
        """Smallest secret this source can produce."""
        return self._config.secret.low

    @property
    def high(self) -> int:
        """Largest secret this source can produce."""
        return self._config.secret.high

    @property
    def seed(self) -> Optional[int]:
        """Seed the generator was last (re)initialized with."""
        return self._seed

    def draw(self) -> int:
        """
        Draw the next secret.

        Returns:
            Integer uniformly distributed in [low, high].
        """
        return self._rng.randint(self.low, self.high)

    def reset(self, seed: Optional[int] = None) -> None:
        """
        Reset the generator with optional new seed.

        Args:
            seed: New random seed. Replays the current seed if None.
        """
        if seed is not None:
            self._seed = seed
        self._rng = random.Random(self._seed)
