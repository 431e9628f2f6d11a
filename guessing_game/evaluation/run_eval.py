"""
Evaluation Harness
==================

Replays an agent against the fixed seed bank and reports how many guesses
it needs.

Usage:
    python -m guessing_game.evaluation.run_eval [--seeds seed_bank.json] [--quiet]
"""

from __future__ import annotations

import argparse
import json
import os
import sys
import time
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from guessing_game.guess_core.config_loader import GameConfig, get_config
from guessing_game.guess_core.game import GuessingGame, StepResult
from guessing_game.evaluation.bisect_agent import BisectAgent


@dataclass
class EvalResult:
    """Result for a single seed."""
    seed: int
    secret: int
    guesses: int
    truncated: bool
    elapsed_time: float


@dataclass
class EvalSummary:
    """Summary of evaluation across all seeds."""
    mean_guesses: float
    std_guesses: float
    min_guesses: int
    max_guesses: int
    median_guesses: float
    truncated_count: int
    total_time: float
    results: List[EvalResult]


def load_seed_bank(path: Optional[str] = None) -> List[int]:
    """
    Load the evaluation seed bank.

    Args:
        path: Path to seed_bank.json. Uses default if None.

    Returns:
        List of seeds.
    """
    if path is None:
        path = os.path.join(os.path.dirname(__file__), "seed_bank.json")

    with open(path, "r") as f:
        data = json.load(f)

    return [int(s) for s in data["seeds"]]


def evaluate_single_seed(
    agent: BisectAgent,
    seed: int,
    config: Optional[GameConfig] = None,
    verbose: bool = False
) -> EvalResult:
    """
    Evaluate agent on a single seed.

    The session is truncated once the agent has submitted
    evaluation.max_guesses lines, parse failures included.

    Args:
        agent: Object with reset() and act(last_result) -> line.
        seed: Random seed for the secret.
        config: Game configuration. Uses default if None.
        verbose: If True, print progress.

    Returns:
        EvalResult for this seed.
    """
    if config is None:
        config = get_config()

    game = GuessingGame(config=config, seed=seed)
    game.reset()
    agent.reset()

    max_submissions = config.evaluation.max_guesses
    submissions = 0
    last: Optional[StepResult] = None
    start_time = time.time()

    while not game.is_over and submissions < max_submissions:
        last = game.submit(agent.act(last))
        submissions += 1

    elapsed = time.time() - start_time

    result = EvalResult(
        seed=seed,
        secret=game.secret,
        guesses=game.guess_count,
        truncated=not game.is_over,
        elapsed_time=elapsed
    )

    if verbose:
        status = "truncated" if result.truncated else "won"
        print(f"  Seed {seed}: secret={result.secret}, "
              f"guesses={result.guesses}, {status}")

    return result


def evaluate_agent(
    agent: Optional[BisectAgent] = None,
    seeds: Optional[List[int]] = None,
    config: Optional[GameConfig] = None,
    verbose: bool = True
) -> EvalSummary:
    """
    Evaluate agent on all seeds in the seed bank.

    Args:
        agent: Agent to evaluate. Uses BisectAgent if None.
        seeds: List of seeds. Uses seed_bank.json if None.
        config: Game configuration. Uses default if None.
        verbose: If True, print progress.

    Returns:
        EvalSummary with aggregate statistics.
    """
    if config is None:
        config = get_config()
    if agent is None:
        agent = BisectAgent(config)
    if seeds is None:
        seeds = load_seed_bank()
    if not seeds:
        raise ValueError("Seed bank is empty")

    if verbose:
        print(f"Evaluating on {len(seeds)} seeds...")

    results: List[EvalResult] = []
    total_start = time.time()

    for seed in seeds:
        results.append(evaluate_single_seed(agent, seed, config=config, verbose=verbose))

    total_time = time.time() - total_start

    guesses = np.array([r.guesses for r in results])

    summary = EvalSummary(
        mean_guesses=float(np.mean(guesses)),
        std_guesses=float(np.std(guesses)),
        min_guesses=int(guesses.min()),
        max_guesses=int(guesses.max()),
        median_guesses=float(np.median(guesses)),
        truncated_count=sum(1 for r in results if r.truncated),
        total_time=total_time,
        results=results
    )

    if verbose:
        print()
        print("=" * 50)
        print("EVALUATION SUMMARY")
        print("=" * 50)
        print(f"Seeds evaluated: {len(seeds)}")
        print(f"Mean guesses:    {summary.mean_guesses:.2f}")
        print(f"Std deviation:   {summary.std_guesses:.2f}")
        print(f"Min guesses:     {summary.min_guesses}")
        print(f"Max guesses:     {summary.max_guesses}")
        print(f"Median guesses:  {summary.median_guesses:.2f}")
        print(f"Truncated:       {summary.truncated_count}")
        print(f"Total time:      {total_time:.3f}s")
        print("=" * 50)

    return summary


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Evaluate the bisection agent on the seed bank")
    parser.add_argument(
        "--seeds",
        type=str,
        default=None,
        help="Path to seed bank JSON (uses default if not specified)"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Reduce output verbosity"
    )

    args = parser.parse_args(argv)

    try:
        seeds = load_seed_bank(args.seeds)
    except (OSError, ValueError, KeyError) as e:
        print(f"Error loading seed bank: {e}")
        return 1

    summary = evaluate_agent(seeds=seeds, verbose=not args.quiet)
    if args.quiet:
        print(f"Mean guesses: {summary.mean_guesses:.2f} over {len(seeds)} seeds")

    return 0 if summary.truncated_count == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
