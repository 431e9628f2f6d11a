"""
Terminal Play Mode
==================

Play Guess the Number on stdin/stdout.

Exit codes:
    0   - secret guessed
    1   - input ended before the secret was guessed
    2   - standard output could not be written
    130 - interrupted

Usage:
    guessing-game
    python -m guessing_game

The game takes no options. --seed only fixes the secret for debugging
and scripted runs.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from guessing_game.guess_core.config_loader import load_config
from guessing_game.guess_core.errors import InputClosedError, OutputError
from guessing_game.guess_core.game import GuessingGame

EXIT_WON = 0
EXIT_INPUT_CLOSED = 1
EXIT_OUTPUT_ERROR = 2
EXIT_INTERRUPTED = 130


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Guess the secret number between 1 and 100")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for a reproducible secret (debugging only)")

    args = parser.parse_args(argv)

    config = load_config()
    game = GuessingGame(
        config=config,
        seed=args.seed,
        input_stream=sys.stdin,
        output_stream=sys.stdout
    )

    try:
        game.run()
        return EXIT_WON
    except InputClosedError:
        print(config.messages.input_closed, file=sys.stderr)
        return EXIT_INPUT_CLOSED
    except OutputError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_OUTPUT_ERROR
    except KeyboardInterrupt:
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
