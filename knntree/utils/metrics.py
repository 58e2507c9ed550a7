"""
Ready-made axes, distances and radii for points stored as coordinate
sequences (tuples, lists, numpy rows). `absolute_difference` lower-bounds
each of the three distances along a single axis, so it is a sound radius
function for all of them.
"""

import math
import typing as t

Coordinates = t.Sequence[float]


def axis_getter(index: int) -> t.Callable[[Coordinates], float]:
    def axis(point: Coordinates) -> float:
        return point[index]

    axis.__name__ = f"axis_{index}"
    return axis


def coordinate_axes(dimensions: int) -> t.List[t.Callable[[Coordinates], float]]:
    return [axis_getter(i) for i in range(dimensions)]


def euclidean_distance(a: Coordinates, b: Coordinates) -> float:
    return math.sqrt(sum((x - y) ** 2 for x, y in zip(a, b)))


def manhattan_distance(a: Coordinates, b: Coordinates) -> float:
    return sum(abs(x - y) for x, y in zip(a, b))


def chebyshev_distance(a: Coordinates, b: Coordinates) -> float:
    return max((abs(x - y) for x, y in zip(a, b)), default=0.0)


def absolute_difference(a: float, b: float) -> float:
    return abs(a - b)


METRICS: t.Dict[str, t.Callable[[Coordinates, Coordinates], float]] = {
    "euclidean": euclidean_distance,
    "manhattan": manhattan_distance,
    "chebyshev": chebyshev_distance,
}
