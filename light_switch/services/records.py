"""
light_switch/services/records.py

What a trial leaves behind, and what many trials add up to.

A trial result is two days: when the prisoners were freed,
and when they could have been. The summary is their average.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import numpy as np


@dataclass
class TrialResult:
    """
    Outcome of a single trial.

    freed_on_day is when a prisoner first believed everyone had been
    interrogated; all_interrogated_on_day is when that became true.
    Belief never precedes truth.
    """

    freed_on_day: int
    all_interrogated_on_day: int
    prisoner_count: int = 0
    trial_index: int = 0

    @property
    def lag(self) -> int:
        """Days between full coverage and the declaration."""
        return self.freed_on_day - self.all_interrogated_on_day

    def to_dict(self) -> Dict[str, Any]:
        return {
            "freed_on_day": self.freed_on_day,
            "all_interrogated_on_day": self.all_interrogated_on_day,
            "prisoner_count": self.prisoner_count,
            "trial_index": self.trial_index,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TrialResult":
        return cls(
            freed_on_day=data["freed_on_day"],
            all_interrogated_on_day=data["all_interrogated_on_day"],
            prisoner_count=data.get("prisoner_count", 0),
            trial_index=data.get("trial_index", 0),
        )


@dataclass
class ExperimentSummary:
    """
    Reduction of many independent trials.

    Averages are exact floating point means (sum, then divide).
    """

    trial_count: int
    average_freed_day: float
    average_all_interrogated_day: float
    prisoner_count: int = 0
    std_freed_day: float = 0.0
    min_freed_day: int = 0
    max_freed_day: int = 0
    average_lag: float = 0.0
    expected_all_interrogated_day: Optional[float] = None
    results: List[TrialResult] = field(default_factory=list, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "trial_count": self.trial_count,
            "prisoner_count": self.prisoner_count,
            "average_freed_day": self.average_freed_day,
            "average_all_interrogated_day": self.average_all_interrogated_day,
            "std_freed_day": self.std_freed_day,
            "min_freed_day": self.min_freed_day,
            "max_freed_day": self.max_freed_day,
            "average_lag": self.average_lag,
            "expected_all_interrogated_day": self.expected_all_interrogated_day,
        }


def expected_coverage_day(population: int) -> float:
    """
    Coupon-collector expectation of the full-coverage day.

    Collecting all n coupons takes n * H_n draws on average.
    Days are counted from 0, so the expected day index is one less.
    """
    if population < 1:
        raise ValueError(f"Population must be at least 1, got {population}")
    harmonic = np.sum(1.0 / np.arange(1, population + 1))
    return float(population * harmonic - 1.0)


def summarize(results: List[TrialResult]) -> ExperimentSummary:
    """
    Reduce trial results into an experiment summary.

    Order of results does not matter.
    """
    if not results:
        raise ValueError("Cannot summarize zero trials")

    trial_count = len(results)
    freed = np.array([r.freed_on_day for r in results], dtype=np.int64)
    covered = np.array([r.all_interrogated_on_day for r in results], dtype=np.int64)

    # Integer sums keep the average exact until the single division
    average_freed = int(freed.sum()) / trial_count
    average_covered = int(covered.sum()) / trial_count

    prisoner_count = results[0].prisoner_count
    expected = expected_coverage_day(prisoner_count) if prisoner_count > 0 else None

    return ExperimentSummary(
        trial_count=trial_count,
        average_freed_day=average_freed,
        average_all_interrogated_day=average_covered,
        prisoner_count=prisoner_count,
        std_freed_day=float(freed.std()),
        min_freed_day=int(freed.min()),
        max_freed_day=int(freed.max()),
        average_lag=average_freed - average_covered,
        expected_all_interrogated_day=expected,
        results=list(results),
    )
