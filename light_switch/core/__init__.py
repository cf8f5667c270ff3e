"""
Core components of the light switch simulation.

- prisoner: The decision protocol - one bit in, one bit out
- selection: Who is interrogated each day
"""

from .prisoner import (
    Prisoner,
    DayCounterPrisoner,
    create_prisoner,
)
from .selection import Selector, RandomSelector, ScriptedSelector

__all__ = [
    "Prisoner",
    "DayCounterPrisoner",
    "create_prisoner",
    "Selector",
    "RandomSelector",
    "ScriptedSelector",
]
