"""
Tests for core/selection.py

Random and scripted choice of the day's prisoner.
"""

import numpy as np
import pytest

from light_switch.core.selection import RandomSelector, ScriptedSelector


class TestRandomSelector:
    """Tests for RandomSelector."""

    def test_indices_within_population(self):
        selector = RandomSelector(np.random.default_rng(0))
        draws = [selector(7) for _ in range(1000)]
        assert min(draws) >= 0
        assert max(draws) < 7

    def test_every_prisoner_can_be_chosen(self):
        selector = RandomSelector(np.random.default_rng(1))
        draws = {selector(5) for _ in range(500)}
        assert draws == {0, 1, 2, 3, 4}

    def test_roughly_uniform(self):
        selector = RandomSelector(np.random.default_rng(2))
        counts = np.bincount([selector(4) for _ in range(20000)], minlength=4)
        # Expected 5000 each, std ~61
        assert np.all(np.abs(counts - 5000) < 400)

    def test_same_seed_same_sequence(self):
        a = RandomSelector(np.random.default_rng(42))
        b = RandomSelector(np.random.default_rng(42))
        assert [a(10) for _ in range(50)] == [b(10) for _ in range(50)]

    def test_refills_batch(self):
        selector = RandomSelector(np.random.default_rng(3), batch_size=3)
        draws = [selector(10) for _ in range(10)]
        assert len(draws) == 10
        assert all(0 <= d < 10 for d in draws)

    def test_population_change_discards_buffer(self):
        selector = RandomSelector(np.random.default_rng(4))
        selector(1000)
        assert all(selector(2) < 2 for _ in range(100))

    def test_returns_python_int(self):
        selector = RandomSelector(np.random.default_rng(5))
        assert type(selector(3)) is int

    def test_default_generator(self):
        selector = RandomSelector()
        assert 0 <= selector(3) < 3


class TestScriptedSelector:
    """Tests for ScriptedSelector."""

    def test_replays_in_order(self):
        selector = ScriptedSelector([2, 0, 1])
        assert [selector(3), selector(3), selector(3)] == [2, 0, 1]

    def test_exhausted_raises(self):
        selector = ScriptedSelector([0])
        selector(1)
        with pytest.raises(IndexError, match="exhausted"):
            selector(1)

    def test_out_of_range_raises(self):
        selector = ScriptedSelector([3])
        with pytest.raises(ValueError, match="outside population"):
            selector(3)
