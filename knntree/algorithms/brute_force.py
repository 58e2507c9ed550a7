"""Linear scans used as the reference for KDTree queries."""

import typing as t

from knntree.utils.utils import sort_by_distance

T = t.TypeVar("T")


def k_nearest(
    points: t.Iterable[T],
    target: T,
    k: int,
    distance_func: t.Callable[[T, T], t.Any],
) -> t.List[t.Tuple[T, t.Any]]:
    """The k (point, distance) pairs closest to target, by ascending distance."""
    if k <= 0:
        return []
    pairs = sort_by_distance((p, distance_func(target, p)) for p in points)
    return pairs[:k]


def within_radius(
    points: t.Iterable[T],
    target: T,
    radius: t.Any,
    distance_func: t.Callable[[T, T], t.Any],
) -> t.List[t.Tuple[T, t.Any]]:
    """Every (point, distance) pair with distance <= radius, by ascending distance."""
    pairs = []
    for p in points:
        dist = distance_func(target, p)
        if not radius < dist:
            pairs.append((p, dist))
    return sort_by_distance(pairs)
