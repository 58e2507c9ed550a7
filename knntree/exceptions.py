import typing as t


class EmptyAxesError(ValueError):
    def __init__(self):
        super().__init__("A KDTree needs at least one axis")


class InvalidNeighborCountError(ValueError):
    def __init__(self, k: int):
        super().__init__(f"k must be non-negative, got {k}")
        self.k = k


class PruningContractError(Exception):
    """
    Raised by a tree built with `debug_check=True` when a query disagrees with a
    linear scan. This means the radius function is not a lower bound of the
    distance function along a single axis.
    """

    def __init__(self, expected: t.List[t.Any], actual: t.List[t.Any], *args: object):
        super().__init__(
            f"KNN result distances {actual} differ from brute force {expected}", *args
        )
        self.expected = expected
        self.actual = actual


class ScenarioError(Exception):
    pass
