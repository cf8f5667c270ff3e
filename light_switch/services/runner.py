"""
light_switch/services/runner.py

Trial runner.

A runner drives one prison from day 0 until the prisoners are freed:
1. Build a fresh prison with its own random generator
2. Advance one day at a time
3. Report progress every `log_period` days
4. Return the trial result

Runners share nothing, so any number can run side by side.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from light_switch.core.selection import Selector
from light_switch.environments.prison import Prison, PrisonConfig
from light_switch.errors import InvariantViolationError

from .records import TrialResult

logger = logging.getLogger(__name__)


@dataclass
class RunnerConfig:
    """Configuration for a single trial."""
    prisoner_count: int = 100
    strategy: str = "day_counter"

    # Progress logging cadence in days (0 or None disables)
    log_period: Optional[int] = 1000

    # Safety bound on trial length (None = unbounded)
    max_days: Optional[int] = None


class TrialRunner:
    """
    Runs one trial to completion.

    Encapsulates the simulation loop and progress reporting.
    """

    def __init__(
        self,
        config: Optional[RunnerConfig] = None,
        rng: Optional[np.random.Generator] = None,
        selector: Optional[Selector] = None,
        progress_callback: Optional[Callable[[int, int], None]] = None,
    ):
        self.config = config or RunnerConfig()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.selector = selector
        self.progress_callback = progress_callback

    def build_prison(self) -> Prison:
        """Create a fresh prison for this trial."""
        prison_config = PrisonConfig(
            population=self.config.prisoner_count,
            strategy=self.config.strategy,
            max_days=self.config.max_days,
        )
        return Prison(prison_config, selector=self.selector, rng=self.rng)

    def run(self, trial_index: int = 0) -> TrialResult:
        """
        Run a trial.

        Args:
            trial_index: Position of this trial within its experiment

        Returns:
            TrialResult with freed and all-interrogated days
        """
        prison = self.build_prison()
        log_period = self.config.log_period

        logger.debug(f"Trial {trial_index} starting with {prison.population} prisoners")

        while not prison.advance():
            if log_period and prison.day % log_period == 0:
                self._report_progress(trial_index, prison)

        if prison.all_interrogated_day is None:
            raise InvariantViolationError(
                f"Trial {trial_index}: prisoners freed on day {prison.freed_day} "
                f"before everyone was interrogated"
            )

        logger.debug(
            f"Trial {trial_index} done: freed on day {prison.freed_day}, "
            f"all interrogated on day {prison.all_interrogated_day}"
        )

        return TrialResult(
            freed_on_day=prison.freed_day,
            all_interrogated_on_day=prison.all_interrogated_day,
            prisoner_count=prison.population,
            trial_index=trial_index,
        )

    def _report_progress(self, trial_index: int, prison: Prison) -> None:
        best_known = prison.best_known()
        logger.info(f"Trial {trial_index} day {prison.day}: max-known {best_known}")
        if self.progress_callback is not None:
            self.progress_callback(prison.day, best_known)


def run_trial(
    config: RunnerConfig,
    seed: np.random.SeedSequence,
    trial_index: int = 0,
) -> TrialResult:
    """
    Run one trial from a seed.

    Module-level so worker processes can pickle it.
    """
    runner = TrialRunner(config, rng=np.random.default_rng(seed))
    return runner.run(trial_index)
