"""
environments/prison.py

The prison: a population, one light switch, and a calendar.

One prisoner per day. One bit of memory shared by all.
The warden keeps the ground truth; the prisoners only keep beliefs.

Inspired by:
- The 100 prisoners and a light switch puzzle
- Coupon collector processes
- Discrete-event simulation loops
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional
import logging
import numpy as np

from light_switch.core.prisoner import Prisoner, create_prisoner
from light_switch.core.selection import RandomSelector, Selector
from light_switch.errors import (
    ConfigurationError,
    InvariantViolationError,
    TrialTimeoutError,
)

logger = logging.getLogger(__name__)


class PrisonStatus(Enum):
    """Lifecycle of a single trial."""
    RUNNING = "running"
    TERMINATED = "terminated"


@dataclass
class PrisonConfig:
    """Configuration for the prison environment."""
    population: int = 100             # Number of prisoners
    strategy: str = "day_counter"     # Prisoner decision protocol
    max_days: Optional[int] = None    # Safety bound; None = run until freed


class Prison:
    """
    The world of one trial.

    Owns:
    - The prisoners, indexed 0..population-1
    - The light switch
    - The day counter
    - Ground truth about who has really been interrogated

    Each trial constructs its own prison; nothing is shared between trials.
    """

    def __init__(
        self,
        config: Optional[PrisonConfig] = None,
        selector: Optional[Selector] = None,
        rng: Optional[np.random.Generator] = None
    ):
        self.config = config or PrisonConfig()
        if self.config.population < 1:
            raise ConfigurationError(
                f"Prison needs at least one prisoner, got {self.config.population}"
            )
        if self.config.max_days is not None and self.config.max_days < 1:
            raise ConfigurationError(
                f"max_days must be positive, got {self.config.max_days}"
            )

        self.population = self.config.population
        self.selector = selector if selector is not None else RandomSelector(rng)

        self.prisoners: List[Prisoner] = [
            create_prisoner(self.config.strategy, self.population)
            for _ in range(self.population)
        ]
        self.light_is_on = False
        self.day = 0
        self.status = PrisonStatus.RUNNING

        # Ground truth, invisible to prisoners
        self.interrogated = np.zeros(self.population, dtype=bool)
        self.interrogated_count = 0
        self.all_interrogated_day: Optional[int] = None
        self.freed_day: Optional[int] = None

    @property
    def terminated(self) -> bool:
        return self.status is PrisonStatus.TERMINATED

    def advance(self) -> bool:
        """
        Advance simulation by one day.

        1. Warden picks a prisoner
        2. Ground truth records the interrogation
        3. Prisoner reads and sets the light
        4. Check the prisoner's belief against ground truth
        5. Free everyone if the prisoner knows all were interrogated

        Returns True once the prisoners are freed.
        """
        if self.terminated:
            raise RuntimeError(f"Prison already terminated on day {self.freed_day}")

        chosen = self.selector(self.population)

        if not self.interrogated[chosen]:
            self.interrogated[chosen] = True
            self.interrogated_count += 1

        prisoner = self.prisoners[chosen]
        self.light_is_on = prisoner.decide(self.day, self.light_is_on, chosen)

        actual = self.interrogated_count
        reported = prisoner.count_known()

        if reported > actual:
            raise InvariantViolationError(
                f"Day {self.day}: prisoner {chosen} believes {reported} prisoners "
                f"were interrogated, but only {actual} actually were"
            )

        if self.all_interrogated_day is None and actual == self.population:
            self.all_interrogated_day = self.day
            logger.debug(f"All {self.population} prisoners interrogated on day {self.day}")

        if reported == self.population:
            self.status = PrisonStatus.TERMINATED
            self.freed_day = self.day
            logger.debug(f"Prisoner {chosen} declared on day {self.day}")
            return True

        self.day += 1

        if self.config.max_days is not None and self.day >= self.config.max_days:
            raise TrialTimeoutError(
                f"No prisoner declared within {self.config.max_days} days "
                f"(best knowledge {self.best_known()}/{self.population})"
            )

        return False

    def best_known(self) -> int:
        """Largest number of prisoners any single prisoner knows about."""
        return int(self.get_known_counts().max())

    def get_known_counts(self) -> np.ndarray:
        """Knowledge count of every prisoner, as array."""
        return np.array([p.count_known() for p in self.prisoners])

    def __repr__(self) -> str:
        return (
            f"Prison(population={self.population}, "
            f"day={self.day}, "
            f"light={'on' if self.light_is_on else 'off'}, "
            f"interrogated={self.interrogated_count})"
        )
