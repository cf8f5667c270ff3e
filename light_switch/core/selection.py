"""
core/selection.py

Who walks into the interrogation room today.

The warden picks uniformly at random, with replacement.
Tests pick by hand.
"""

from __future__ import annotations
from typing import Callable, Iterable, List, Optional
import numpy as np


# Maps a population size to the index of the prisoner chosen today
Selector = Callable[[int], int]


class RandomSelector:
    """
    Uniform i.i.d. choice of prisoner index.

    Each selector owns its generator, so concurrent trials never
    share random state. Draws are fetched in batches; the stream of
    indices is still independent and uniform on [0, population).
    """

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        batch_size: int = 4096
    ):
        self.rng = rng if rng is not None else np.random.default_rng()
        self.batch_size = batch_size
        self._buffer: List[int] = []
        self._position = 0
        self._population: Optional[int] = None

    def __call__(self, population: int) -> int:
        if population != self._population:
            self._population = population
            self._buffer = []
            self._position = 0

        if self._position >= len(self._buffer):
            self._buffer = self.rng.integers(
                0, population, size=self.batch_size
            ).tolist()
            self._position = 0

        chosen = self._buffer[self._position]
        self._position += 1
        return chosen


class ScriptedSelector:
    """
    Replays a fixed visitation order.

    Used to check the protocol against hand-derived schedules.
    """

    def __init__(self, sequence: Iterable[int]):
        self.sequence = list(sequence)
        self.position = 0

    def __call__(self, population: int) -> int:
        if self.position >= len(self.sequence):
            raise IndexError(
                f"Scripted sequence exhausted after {len(self.sequence)} days"
            )

        chosen = self.sequence[self.position]
        if not 0 <= chosen < population:
            raise ValueError(
                f"Scripted index {chosen} outside population of {population}"
            )

        self.position += 1
        return chosen
