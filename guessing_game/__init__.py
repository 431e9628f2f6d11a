"""
Guess the Number
================

A command-line number-guessing game. The program picks a secret integer,
reads guesses line by line and answers "Too small", "Too big" or reports
the win together with the number of guesses it took.

- guess_core: configuration, secret generation, rules and the game loop
- evaluation: seed-bank harness for automated agents
- play: command-line entry point

The secret range and message texts live in game_config.yaml.
"""

__version__ = "0.1.0"
