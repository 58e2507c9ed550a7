import random

import pytest

from knntree.algorithms.selection import (
    PivotStrategy,
    choose_pivot,
    partition,
    select,
)


class TestSelection:
    def setup_method(self):
        self.rng = random.Random(5)

    def test_partition_three_ways(self):
        keys = [5, 1, 9, 5, 3, 7, 5]
        items = [f"item{k}" for k in keys]
        lt, gt = partition(items, keys, 0, len(keys), pivot_index=0)
        assert all(k < 5 for k in keys[:lt])
        assert all(k == 5 for k in keys[lt:gt])
        assert all(k > 5 for k in keys[gt:])
        assert gt - lt == 3
        assert items == [f"item{k}" for k in keys]

    @pytest.mark.parametrize("strategy", list(PivotStrategy))
    def test_select_every_rank(self, strategy: PivotStrategy):
        original = [self.rng.randint(0, 30) for _ in range(60)]
        for rank in range(len(original)):
            keys = list(original)
            items = list(original)
            select(items, keys, 0, len(keys), rank, strategy, random.Random(rank))
            assert keys[rank] == sorted(original)[rank]
            assert all(k <= keys[rank] for k in keys[:rank])
            assert all(k >= keys[rank] for k in keys[rank + 1 :])
            assert items == keys

    def test_select_in_sub_range(self):
        keys = [100, 4, 3, 2, 1, -100]
        items = list(keys)
        select(items, keys, 1, 5, 2, PivotStrategy.LAST)
        assert keys[0] == 100 and keys[5] == -100
        assert keys[2] == 2

    def test_select_rank_out_of_range(self):
        with pytest.raises(IndexError):
            select([1, 2], [1, 2], 0, 2, 2)

    def test_select_with_nan_keys_terminates(self):
        nan = float("nan")
        keys = [3.0, nan, 1.0, nan, 2.0]
        items = list(range(5))
        select(items, keys, 0, 5, 2)
        assert sorted(items) == [0, 1, 2, 3, 4]

    def test_median_of_three(self):
        assert choose_pivot([1, 9, 5], 0, 3) == 2
        assert choose_pivot([5, 1, 9], 0, 3) == 0
        assert choose_pivot([9, 5, 1], 0, 3) == 1
        assert choose_pivot([1, 2, 3, 4, 5], 0, 5) == 2

    def test_last_and_short_ranges(self):
        assert choose_pivot([3, 2, 1], 0, 3, PivotStrategy.LAST) == 2
        assert choose_pivot([3, 2], 0, 2, PivotStrategy.RANDOM) == 1

    def test_random_pivot_is_seeded(self):
        keys = list(range(100))
        first = [choose_pivot(keys, 0, 100, PivotStrategy.RANDOM, random.Random(1)) for _ in range(3)]
        second = [choose_pivot(keys, 0, 100, PivotStrategy.RANDOM, random.Random(1)) for _ in range(3)]
        assert first == second
        assert all(0 <= i < 100 for i in first)
