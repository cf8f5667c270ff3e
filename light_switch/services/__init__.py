"""
light_switch/services/

Running trials and experiments.

Architecture:
- Runner: Drives one prison until the prisoners are freed
- Experiment: Runs many trials, in-process or on a worker pool
- Records: Trial results and their summary

This is embarrassingly parallel at the trial level.
"""

from .records import TrialResult, ExperimentSummary, summarize, expected_coverage_day
from .runner import TrialRunner, RunnerConfig, run_trial
from .experiment import Experiment, ExperimentConfig, run_experiment

__all__ = [
    "TrialResult",
    "ExperimentSummary",
    "summarize",
    "expected_coverage_day",
    "TrialRunner",
    "RunnerConfig",
    "run_trial",
    "Experiment",
    "ExperimentConfig",
    "run_experiment",
]
