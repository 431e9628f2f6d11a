"""
Evaluation Package
==================

Contains the seed bank, a bisection agent and the harness that replays
agents against the game.
"""

from guessing_game.evaluation.bisect_agent import BisectAgent
from guessing_game.evaluation.run_eval import evaluate_agent, load_seed_bank

__all__ = ["BisectAgent", "evaluate_agent", "load_seed_bank"]
