"""
light_switch/services/experiment.py

Experiment aggregator.

An experiment repeats the same trial many times and averages the outcome:
1. Validate the configuration before anything runs
2. Spawn an independent seed for every trial
3. Run trials in-process or on a worker pool
4. Collect results as they complete
5. Reduce them into a summary

Trials are embarrassingly parallel; the reduction is order-independent.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import (
    Executor,
    ProcessPoolExecutor,
    ThreadPoolExecutor,
    as_completed,
)
from dataclasses import dataclass

import numpy as np

from light_switch.core.prisoner import PRISONER_STRATEGIES
from light_switch.errors import (
    ConfigurationError,
    InvariantViolationError,
    TrialTimeoutError,
)

from .records import ExperimentSummary, TrialResult, summarize
from .runner import RunnerConfig, run_trial

logger = logging.getLogger(__name__)

BACKENDS = ("process", "thread")


@dataclass
class ExperimentConfig:
    """Configuration for a batch of trials."""
    # Trial parameters
    prisoner_count: int = 100
    strategy: str = "day_counter"
    max_days: int | None = None  # Per-trial safety bound

    # Repetition
    repetitions: int = 1

    # Progress logging cadence in days (0 disables)
    log_period: int = 1000

    # Worker pool
    workers: int = 1
    backend: str = "process"  # "process" or "thread"

    # Random seed (None = fresh entropy)
    seed: int | None = None

    def validate(self) -> None:
        """Reject configurations that cannot produce a summary."""
        if self.prisoner_count < 1:
            raise ConfigurationError(
                f"prisoner_count must be at least 1, got {self.prisoner_count}"
            )
        if self.repetitions < 1:
            raise ConfigurationError(
                f"repetitions must be at least 1, got {self.repetitions}"
            )
        if self.log_period < 0:
            raise ConfigurationError(
                f"log_period must not be negative, got {self.log_period}"
            )
        if self.workers < 1:
            raise ConfigurationError(f"workers must be at least 1, got {self.workers}")
        if self.strategy not in PRISONER_STRATEGIES:
            raise ConfigurationError(f"Unknown prisoner strategy: {self.strategy}")
        if self.backend not in BACKENDS:
            raise ConfigurationError(f"Unknown backend: {self.backend}")
        if self.max_days is not None and self.max_days < 1:
            raise ConfigurationError(f"max_days must be positive, got {self.max_days}")

    def runner_config(self) -> RunnerConfig:
        return RunnerConfig(
            prisoner_count=self.prisoner_count,
            strategy=self.strategy,
            log_period=self.log_period,
            max_days=self.max_days,
        )


class Experiment:
    """
    Runs independent trials and aggregates their results.

    Every trial gets a child of one SeedSequence, so a seeded
    experiment gives the same results with any number of workers.
    """

    def __init__(self, config: ExperimentConfig):
        config.validate()
        self.config = config
        self.seeds = np.random.SeedSequence(config.seed).spawn(config.repetitions)
        self.results: list[TrialResult] = []
        self.elapsed: float = 0.0

    def spawn_seeds(self) -> list[np.random.SeedSequence]:
        """One independent seed per trial, the same on every call."""
        return list(self.seeds)

    def run(self) -> ExperimentSummary:
        """Run every trial and summarize."""
        start_time = time.time()
        seeds = self.spawn_seeds()

        logger.info(
            f"Running {self.config.repetitions} trial(s) with "
            f"{self.config.prisoner_count} prisoners on {self.config.workers} worker(s)"
        )

        if self.config.workers == 1:
            results = self._run_sequential(seeds)
        else:
            results = self._run_pool(seeds)

        self.results = sorted(results, key=lambda r: r.trial_index)
        self.elapsed = time.time() - start_time

        summary = summarize(self.results)
        logger.info(
            f"Experiment complete in {self.elapsed:.2f}s: "
            f"average freed day {summary.average_freed_day:.2f}"
        )
        return summary

    def _run_sequential(self, seeds: list[np.random.SeedSequence]) -> list[TrialResult]:
        runner_config = self.config.runner_config()
        results = []
        for trial_index, seed in enumerate(seeds):
            result = run_trial(runner_config, seed, trial_index)
            self._log_result(result)
            results.append(result)
        return results

    def _run_pool(self, seeds: list[np.random.SeedSequence]) -> list[TrialResult]:
        runner_config = self.config.runner_config()
        results = []
        with self._create_executor() as executor:
            futures = [
                executor.submit(run_trial, runner_config, seed, trial_index)
                for trial_index, seed in enumerate(seeds)
            ]
            try:
                for future in as_completed(futures):
                    result = future.result()
                    self._log_result(result)
                    results.append(result)
            except (InvariantViolationError, TrialTimeoutError):
                for future in futures:
                    future.cancel()
                raise
        return results

    def _create_executor(self) -> Executor:
        if self.config.backend == "process":
            return ProcessPoolExecutor(max_workers=self.config.workers)
        return ThreadPoolExecutor(max_workers=self.config.workers)

    def _log_result(self, result: TrialResult) -> None:
        logger.info(
            f"Trial {result.trial_index}: freed on day {result.freed_on_day}, "
            f"all interrogated on day {result.all_interrogated_on_day}"
        )


def run_experiment(config: ExperimentConfig) -> ExperimentSummary:
    """Validate, run and summarize an experiment."""
    return Experiment(config).run()


def main(argv: list[str] | None = None) -> int:
    """
    Run an experiment from the command line.

    Returns the process exit status.
    """
    import argparse

    parser = argparse.ArgumentParser(
        description="Simulate the 100 prisoners and a light switch puzzle"
    )
    parser.add_argument("--prisoner-count", type=int, default=100)
    parser.add_argument("--repetitions", type=int, default=1)
    parser.add_argument(
        "--log-period", type=int, default=1000,
        help="Days between progress lines (0 disables)",
    )
    parser.add_argument("--workers", type=int, default=1)
    parser.add_argument("--backend", default="process", choices=list(BACKENDS))
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--max-days", type=int, default=0,
        help="Abort a trial after this many days (0 = unbounded)",
    )
    parser.add_argument("--verbose", action="store_true")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    config = ExperimentConfig(
        prisoner_count=args.prisoner_count,
        repetitions=args.repetitions,
        log_period=args.log_period,
        workers=args.workers,
        backend=args.backend,
        seed=args.seed,
        max_days=args.max_days or None,
    )

    try:
        config.validate()
    except ConfigurationError as e:
        parser.error(str(e))

    try:
        summary = run_experiment(config)
    except (InvariantViolationError, TrialTimeoutError) as e:
        logger.error(f"Simulation aborted: {e}")
        return 1

    print(
        f"Done! Average freed day: {summary.average_freed_day:.2f}, "
        f"average all-interrogated day: {summary.average_all_interrogated_day:.2f} "
        f"over {summary.trial_count} trial(s)"
    )
    return 0


if __name__ == "__main__":
    import sys
    sys.exit(main())
