"""
Statistical properties of the simulation.

Belief never precedes truth. Coverage follows the coupon collector.
The invariant check never fires for the day-counter protocol.
"""

import numpy as np
import pytest

from light_switch.services.experiment import ExperimentConfig, run_experiment
from light_switch.services.records import expected_coverage_day


def run_many(prisoner_count, repetitions, seed):
    config = ExperimentConfig(
        prisoner_count=prisoner_count,
        repetitions=repetitions,
        log_period=0,
        seed=seed,
    )
    return run_experiment(config)


class TestBeliefLagsTruth:
    """freed_on_day >= all_interrogated_on_day for every trial."""

    @pytest.mark.parametrize("prisoner_count", [1, 2, 3, 5, 10])
    def test_freed_never_before_coverage(self, prisoner_count):
        summary = run_many(prisoner_count, repetitions=200, seed=prisoner_count)
        for result in summary.results:
            assert result.freed_on_day >= result.all_interrogated_on_day
            assert result.lag >= 0

    def test_single_prisoner_always_day_zero(self):
        summary = run_many(1, repetitions=500, seed=None)
        assert all(r.freed_on_day == 0 for r in summary.results)
        assert all(r.all_interrogated_on_day == 0 for r in summary.results)

    def test_coverage_day_at_least_population_minus_one(self):
        # Each day interrogates one prisoner
        summary = run_many(6, repetitions=200, seed=4)
        assert min(r.all_interrogated_on_day for r in summary.results) >= 5


class TestCouponCollector:
    """Full coverage follows the coupon-collector distribution."""

    def test_five_prisoners_mean(self):
        summary = run_many(5, repetitions=2000, seed=100)
        # Expected 10.42, std ~5.0, standard error ~0.11
        assert summary.average_all_interrogated_day == pytest.approx(
            expected_coverage_day(5), abs=0.75
        )

    def test_ten_prisoners_mean(self):
        summary = run_many(10, repetitions=500, seed=200)
        # Expected 28.29, std ~11.2, standard error ~0.5
        assert summary.average_all_interrogated_day == pytest.approx(
            expected_coverage_day(10), rel=0.1
        )

    def test_coverage_distribution_is_right_skewed(self):
        summary = run_many(10, repetitions=500, seed=300)
        covered = np.array([r.all_interrogated_on_day for r in summary.results])
        assert np.median(covered) < covered.mean()

    def test_summary_reports_expectation(self):
        summary = run_many(10, repetitions=5, seed=0)
        assert summary.expected_all_interrogated_day == pytest.approx(expected_coverage_day(10))


class TestInvariantNeverFires:
    """The invariant-violation path never triggers for the relay protocol."""

    @pytest.mark.parametrize("prisoner_count,repetitions", [
        (1, 10000),
        (2, 10000),
        (10, 300),
        (100, 1),
    ])
    def test_quick_fuzz(self, prisoner_count, repetitions):
        summary = run_many(prisoner_count, repetitions, seed=prisoner_count)
        assert summary.trial_count == repetitions

    @pytest.mark.slow
    @pytest.mark.parametrize("prisoner_count,repetitions", [
        (1, 10000),
        (2, 10000),
        (10, 10000),
        (100, 10000),
        (1000, 2),
    ])
    def test_full_fuzz(self, prisoner_count, repetitions):
        config = ExperimentConfig(
            prisoner_count=prisoner_count,
            repetitions=repetitions,
            log_period=0,
            seed=prisoner_count,
            workers=4,
        )
        summary = run_experiment(config)
        assert summary.trial_count == repetitions
