"""
Linear-time selection (quickselect) used to find split medians while
building a KDTree.

Points and their precomputed axis keys live in two parallel lists that are
always swapped together, so each axis function is called once per point per
tree level.
"""

import random
import typing as t
from enum import Enum

from knntree.utils.utils import cmp

T = t.TypeVar("T")


class PivotStrategy(str, Enum):
    LAST = "last"
    MEDIAN_OF_THREE = "median_of_three"
    RANDOM = "random"


def _swap(items: t.List[t.Any], keys: t.List[t.Any], i: int, j: int):
    items[i], items[j] = items[j], items[i]
    keys[i], keys[j] = keys[j], keys[i]


def choose_pivot(
    keys: t.Sequence[t.Any],
    lo: int,
    hi: int,
    strategy: PivotStrategy = PivotStrategy.MEDIAN_OF_THREE,
    rng: random.Random | None = None,
) -> int:
    """Index in [lo, hi) of the pivot to partition around."""
    last = hi - 1
    if strategy == PivotStrategy.LAST or hi - lo < 3:
        return last
    if strategy == PivotStrategy.RANDOM:
        return (rng or random).randrange(lo, hi)

    mid = lo + (hi - lo) // 2
    a, b, c = keys[lo], keys[mid], keys[last]
    if cmp(a, b) <= 0:
        if cmp(b, c) <= 0:
            return mid
        return last if cmp(a, c) <= 0 else lo
    if cmp(a, c) <= 0:
        return lo
    return last if cmp(b, c) <= 0 else mid


def partition(
    items: t.List[T], keys: t.List[t.Any], lo: int, hi: int, pivot_index: int
) -> t.Tuple[int, int]:
    """
    Three-way partition of [lo, hi) around keys[pivot_index]. The pivot is first
    moved to the last slot. Returns (lt, gt) with keys in [lo, lt) strictly less
    than the pivot, [lt, gt) comparing equal to it and [gt, hi) strictly greater.
    Keys that compare neither way with the pivot (NaN) count as equal.
    """
    _swap(items, keys, pivot_index, hi - 1)
    pivot = keys[hi - 1]
    lt, i, gt = lo, lo, hi
    while i < gt:
        key = keys[i]
        if key < pivot:
            _swap(items, keys, lt, i)
            lt += 1
            i += 1
        elif pivot < key:
            gt -= 1
            _swap(items, keys, i, gt)
        else:
            i += 1
    return lt, gt


def select(
    items: t.List[T],
    keys: t.List[t.Any],
    lo: int,
    hi: int,
    k: int,
    strategy: PivotStrategy = PivotStrategy.MEDIAN_OF_THREE,
    rng: random.Random | None = None,
) -> None:
    """
    Rearranges [lo, hi) in place so that position k (absolute index, lo <= k < hi)
    holds the element of that rank. Every key before k compares <= keys[k] and
    every key after compares >=.
    """
    if not lo <= k < hi:
        raise IndexError(f"Rank {k} outside of [{lo}, {hi})")

    while hi - lo > 1:
        lt, gt = partition(
            items, keys, lo, hi, choose_pivot(keys, lo, hi, strategy, rng)
        )
        if k < lt:
            hi = lt
        elif k >= gt:
            lo = gt
        else:
            return
