"""selector.py

Uniform random index selection over a board.

The selector owns the single pseudo-random generator of a simulation. It is
created once per engine (seeded from OS entropy unless a seed is given) and every
draw of a run goes through it, one at a time. Tests inject a deterministic
generator instead.

Example:
    >>> selector = RandomIndexSelector(seed=7)
    >>> selector.uniform_int(2) in (0, 1, 2)
    True
"""
from __future__ import annotations

from .errors import InvalidArgumentError, NoSuitableCandidateError
from .state import Board, Door

from collections.abc import Callable

import numpy as np
from gymnasium.utils import seeding

DoorPredicate = Callable[[Door], bool]


class RandomIndexSelector:
    """Draws uniformly distributed door indices.

    Args:
        rng (np.random.Generator | None): generator to draw from. When ``None`` a new
            one is created with :func:`gymnasium.utils.seeding.np_random`.
        seed (int | None): seed for the generator created when ``rng`` is ``None``.
            Defaults to ``None`` (seed drawn from OS entropy).
    """

    def __init__(self, rng: np.random.Generator | None = None, *, seed: int | None = None) -> None:
        if rng is None:
            rng, seed = seeding.np_random(seed)
        self._rng = rng
        self.seed = seed

    def uniform_int(self, max_inclusive: int) -> int:
        """Returns an integer drawn uniformly from ``[0, max_inclusive]``.

        Raises:
            InvalidArgumentError: if ``max_inclusive`` is negative.
        """
        if max_inclusive < 0:
            raise InvalidArgumentError(f"max_inclusive must be non-negative, got {max_inclusive}.")
        return int(self._rng.integers(0, max_inclusive + 1))

    def choose_index_matching(self, board: Board, predicate: DoorPredicate) -> int:
        """Picks one door index, uniformly among the doors satisfying ``predicate``.

        Args:
            board (Board): doors to choose from.
            predicate (DoorPredicate): condition a door must meet to be a candidate.

        Raises:
            NoSuitableCandidateError: if no door of the board satisfies ``predicate``.

        Returns:
            int: index into ``board`` of the chosen door.
        """
        candidates = [idx for idx, door in enumerate(board) if predicate(door)]
        if not candidates:
            raise NoSuitableCandidateError("No suitable indices available")

        return candidates[self.uniform_int(len(candidates) - 1)]
