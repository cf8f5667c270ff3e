"""
Light Switch: the 100 prisoners and a light switch puzzle, simulated.

A population of prisoners, each interrogated repeatedly at random, must
decide through a single shared light switch when every one of them has
been interrogated at least once.
"""

__version__ = "0.1.0"
