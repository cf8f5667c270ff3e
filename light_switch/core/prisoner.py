"""
core/prisoner.py

A prisoner sees one bit, remembers what it can,
and leaves one bit behind.

Inspired by:
- Relay races (knowledge handed forward one day at a time)
- Gossip protocols (local exchange, global knowledge)
- Coupon collecting (every id must turn up at least once)
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Dict, Type
import numpy as np


class Prisoner(ABC):
    """
    A single prisoner with private knowledge.

    The only channel to other prisoners is the light switch.
    Knowledge only ever grows; a prisoner never believes something false.
    """

    def __init__(self, population: int):
        if population < 1:
            raise ValueError(f"Population must be at least 1, got {population}")
        self.population = population
        self.known_visited = np.zeros(population, dtype=bool)
        self._known_count = 0

    @abstractmethod
    def decide(self, day: int, light_is_on: bool, self_index: int) -> bool:
        """
        Take a turn in the interrogation room.

        Args:
            day: Current day, starting at 0
            light_is_on: Switch state left by the previous prisoner
            self_index: This prisoner's own index

        Returns:
            Switch state to leave for the next prisoner
        """
        pass

    def mark_known(self, index: int) -> None:
        """Record that prisoner `index` is known to have been interrogated."""
        if not self.known_visited[index]:
            self.known_visited[index] = True
            self._known_count += 1

    def count_known(self) -> int:
        """Number of prisoners this prisoner knows have been interrogated."""
        return self._known_count

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}("
            f"known={self._known_count}/{self.population})"
        )


class DayCounterPrisoner(Prisoner):
    """
    The day-counter relay protocol.

    Every day has a target prisoner, `day % population`.
    The light left on means: "whoever was in here yesterday knew
    that yesterday's target had been interrogated."
    Knowledge moves forward one day at a time.
    """

    def decide(self, day: int, light_is_on: bool, self_index: int) -> bool:
        # Being here is proof of our own interrogation
        self.mark_known(self_index)

        # The previous prisoner knew yesterday's target had been interrogated
        if day > 0 and light_is_on:
            self.mark_known((day - 1) % self.population)

        # Tell tomorrow whether we know today's target has been interrogated
        return bool(self.known_visited[day % self.population])


PRISONER_STRATEGIES: Dict[str, Type[Prisoner]] = {
    "day_counter": DayCounterPrisoner,
}


def create_prisoner(strategy: str, population: int) -> Prisoner:
    """
    Factory function to create prisoners of different strategies.

    Args:
        strategy: Strategy name, currently only 'day_counter'
        population: Number of prisoners in the prison

    Returns:
        A prisoner with empty knowledge
    """
    if strategy not in PRISONER_STRATEGIES:
        raise ValueError(f"Unknown prisoner strategy: {strategy}")

    return PRISONER_STRATEGIES[strategy](population)
