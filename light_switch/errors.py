"""
light_switch/errors.py

Failure modes of a simulation run.

Configuration faults are caught before any trial starts.
Invariant violations mean the protocol itself is broken.
"""


class ConfigurationError(ValueError):
    """Rejected configuration (e.g. zero prisoners or zero repetitions)."""


class InvariantViolationError(RuntimeError):
    """A prisoner believes something that is not true. Always fatal."""


class TrialTimeoutError(RuntimeError):
    """A trial passed its max_days safety bound without terminating."""
