"""runner.py

Monte Carlo aggregation of Monty Hall trials.

Each strategy is played ``trial_count`` times on fresh boards; the fraction of
trials won estimates the strategy's true win probability (1/3 when staying,
2/3 when switching).

Example:
    >>> runner = build_runner(SimulationConfig(simulations=1_000))
    >>> results = runner.simulate(1_000)
    >>> results[Strategy.SWITCH].win_ratio > results[Strategy.STAY].win_ratio
    True
"""
from __future__ import annotations

from .config import SimulationConfig
from .engine import GameEngine
from .errors import InvalidArgumentError
from .selector import RandomIndexSelector
from .state import Strategy

from dataclasses import dataclass

import numpy as np
from loguru import logger

HEADLINES = {
    Strategy.STAY: "Running simulation where the player does not change the door:",
    Strategy.SWITCH: "Running simulation where the player changes the door:",
}


@dataclass(frozen=True, slots=True)
class AggregateResult:
    """Outcome of one strategy run.

    Attributes:
        trials_run (int): Number of trials played.
        wins (int): Number of trials whose final pick hid the car.
        win_ratio (float): ``wins / trials_run``.
        strategy (Strategy): Strategy the trials were played with.
    """
    trials_run: int
    wins: int
    win_ratio: float
    strategy: Strategy = Strategy.STAY

    def summary(self) -> str:
        return (
            f"Simulations: {self.trials_run}, Wins: {self.wins}, "
            f"Win Ratio: {self.win_ratio:.2f}"
        )


def validate_trial_count(trial_count) -> int:
    """Returns ``trial_count`` as a plain int.

    Raises:
        InvalidArgumentError: unless ``trial_count`` is a positive integer.
    """
    if isinstance(trial_count, bool) or not isinstance(trial_count, (int, np.integer)):
        raise InvalidArgumentError(f"trial_count must be an integer, got {trial_count!r}.")
    if trial_count <= 0:
        raise InvalidArgumentError(f"trial_count must be positive, got {trial_count}.")
    return int(trial_count)


class SimulationRunner:
    """Repeats :class:`GameEngine` trials and aggregates their outcomes.

    Args:
        engine (GameEngine): plays the individual trials.
        log (optional): loguru logger for per-trial traces and summaries. Defaults
            to the module logger bound with ``component="SimulationRunner"``.
    """

    def __init__(self, engine: GameEngine, *, log=None) -> None:
        self.engine = engine
        self.log = log if log is not None else logger.bind(component="SimulationRunner")

    def run(self, trial_count: int, switch_strategy: bool) -> AggregateResult:
        """Plays ``trial_count`` independent trials with one strategy.

        Args:
            trial_count (int): number of trials, must be positive.
            switch_strategy (bool): whether the player switches after the reveal.

        Raises:
            InvalidArgumentError: if ``trial_count`` is not a positive integer.

        Returns:
            AggregateResult: trials played, wins and win ratio.
        """
        trial_count = validate_trial_count(trial_count)
        wins = 0
        for trial_idx in range(trial_count):
            won = self.engine.play(switch_strategy)
            wins += won
            self.log.debug(
                "Trial {idx:>5d} | {outcome}",
                idx=trial_idx + 1,
                outcome="WIN" if won else "LOSE",
            )

        result = AggregateResult(
            trials_run=trial_count,
            wins=wins,
            win_ratio=wins / trial_count,
            strategy=Strategy.from_flag(switch_strategy),
        )
        self.log.info(result.summary())
        return result

    def simulate(self, trial_count: int) -> dict[Strategy, AggregateResult]:
        """Runs the stay strategy, then the switch strategy, with the same trial count."""
        results = {}
        for strategy in Strategy:
            self.log.info(HEADLINES[strategy])
            results[strategy] = self.run(trial_count, switch_strategy=strategy.switches)
        return results


def build_runner(config: SimulationConfig) -> SimulationRunner:
    """Wires one random source, one engine and a runner from ``config``."""
    selector = RandomIndexSelector(seed=config.seed)
    return SimulationRunner(GameEngine(selector))
