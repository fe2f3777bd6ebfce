"""config.py

Defaults and the run configuration bundle for the simulator.
"""
from dataclasses import dataclass

DOORS_NUMBER = 3
DEFAULT_SIMULATIONS = 10_000


@dataclass(slots=True)
class SimulationConfig:
    """Settings for one invocation of the simulator.

    Attributes:
        simulations (int): Number of trials run per strategy.
        verbose (bool): Emit per-trial trace lines (``DEBUG``) besides the summaries.
        seed (int | None): Seed for the random source. ``None`` draws the seed from
            OS entropy; a fixed value is only meant for tests and debugging.
    """
    simulations: int = DEFAULT_SIMULATIONS
    verbose: bool = False
    seed: int | None = None
