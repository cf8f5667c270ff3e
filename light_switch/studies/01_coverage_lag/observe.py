"""
Study 01: Coverage Lag Observation

Run: python -m light_switch.studies.01_coverage_lag.observe

Everyone is interrogated long before anyone knows it.
How long before?
"""

import argparse
from typing import Dict, Sequence

from light_switch.services.experiment import ExperimentConfig, run_experiment
from light_switch.services.records import ExperimentSummary


def run_study(
    populations: Sequence[int] = (2, 5, 10, 20),
    trials: int = 100,
    seed: int = 0,
    workers: int = 1
) -> Dict[int, ExperimentSummary]:
    """
    Compare the coverage day with the coupon-collector expectation,
    and measure how long the relay protocol takes to notice.
    """
    print("=" * 50)
    print("Study 01: Coverage Lag")
    print("=" * 50)
    print("\nTruth first, belief later.")
    print("-" * 50)

    summaries = {}
    for population in populations:
        config = ExperimentConfig(
            prisoner_count=population,
            repetitions=trials,
            log_period=0,
            workers=workers,
            seed=seed,
        )
        summary = run_experiment(config)
        summaries[population] = summary

        print(f"\nPrisoners: {population}")
        print(f"  Coverage day:  {summary.average_all_interrogated_day:.1f} "
              f"(expected {summary.expected_all_interrogated_day:.1f})")
        print(f"  Freed day:     {summary.average_freed_day:.1f} "
              f"(min {summary.min_freed_day}, max {summary.max_freed_day})")
        print(f"  Lag:           {summary.average_lag:.1f}")

    print("\n" + "=" * 50)
    print("Study complete. How fast does the lag grow?")
    print("=" * 50)

    return summaries


def main():
    parser = argparse.ArgumentParser(description="Coverage Lag Study")
    parser.add_argument("--populations", type=int, nargs="+", default=[2, 5, 10, 20])
    parser.add_argument("--trials", type=int, default=100)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--workers", type=int, default=1)
    args = parser.parse_args()

    run_study(
        populations=args.populations,
        trials=args.trials,
        seed=args.seed,
        workers=args.workers
    )


if __name__ == "__main__":
    main()
