"""
Studies: Structured experiments for understanding.

Each study begins with observation, not hypothesis.

Study progression:
1. Coverage lag - how long after the truth does belief arrive?
"""
