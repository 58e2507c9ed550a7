"""
A build-once KD-tree over caller-defined points.

The caller supplies the axes (projections from a point to an ordered value),
the distance between two points and the "radius" between two axis values.
The radius must never exceed the distance between two points that differ only
along that axis, otherwise the k-NN pruning drops valid neighbors silently.
Build the tree with `debug_check=True` to verify every query against a linear
scan while developing a new metric.
"""

import copy
import random
import typing as t
from dataclasses import dataclass

from knntree.algorithms import brute_force
from knntree.algorithms.candidates import CandidateSet
from knntree.algorithms.selection import PivotStrategy, select
from knntree.exceptions import (
    EmptyAxesError,
    InvalidNeighborCountError,
    PruningContractError,
)
from knntree.utils.utils import TreeLog, TreeLogger, cmp, sort_by_distance

T = t.TypeVar("T")  # Type variable for generic objects

Axis = t.Callable[[T], t.Any]
DistanceFunc = t.Callable[[T, T], t.Any]
RadiusFunc = t.Callable[[t.Any, t.Any], t.Any]

_VISIT = 0
_FAR = 1


@dataclass
class KDNode(t.Generic[T]):
    value: T
    left: t.Optional["KDNode[T]"] = None
    right: t.Optional["KDNode[T]"] = None


class KDTree(t.Generic[T]):
    def __init__(
        self,
        points: t.Iterable[T],
        axes: t.Sequence[Axis],
        distance_func: DistanceFunc,
        radius_func: RadiusFunc,
        *,
        pivot: PivotStrategy = PivotStrategy.MEDIAN_OF_THREE,
        random_seed: int | None = None,
        debug_check: bool = False,
        logger: TreeLogger | None = None,
    ):
        """
        Builds the tree. A list passed as `points` is reordered in place; nodes
        hold deep copies of the points.
        """
        self.axes = list(axes)
        if not self.axes:
            raise EmptyAxesError()
        self.distance_func = distance_func
        self.radius_func = radius_func
        self.pivot = PivotStrategy(pivot)
        self.random_seed = random_seed
        self.debug_check = debug_check
        self.logger = logger
        self.size = 0
        self.root = self._build(points)

        if self.logger is not None:
            self.logger.append(
                TreeLog(
                    f"Built tree with {self.size} points over {len(self.axes)} axes, height {self.height()}."
                )
            )

    def _build(self, points: t.Iterable[T]) -> KDNode[T] | None:
        items = points if isinstance(points, list) else list(points)
        self.size = len(items)
        if not items:
            return None

        rng = random.Random(self.random_seed)
        keys: t.List[t.Any] = [None] * len(items)
        root: KDNode[T] | None = None

        # (lo, hi, axis_index, parent, is_left_child)
        stack: t.List[t.Tuple[int, int, int, KDNode[T] | None, bool]] = [
            (0, len(items), 0, None, True)
        ]
        while stack:
            lo, hi, axis_index, parent, is_left = stack.pop()
            if lo >= hi:
                continue

            axis = self.axes[axis_index]
            for i in range(lo, hi):
                keys[i] = axis(items[i])
            median = lo + (hi - lo) // 2
            select(items, keys, lo, hi, median, self.pivot, rng)

            node = KDNode(copy.deepcopy(items[median]))
            if parent is None:
                root = node
            elif is_left:
                parent.left = node
            else:
                parent.right = node

            next_axis = (axis_index + 1) % len(self.axes)
            stack.append((median + 1, hi, next_axis, node, False))
            stack.append((lo, median, next_axis, node, True))

        return root

    def __len__(self):
        return self.size

    def __iter__(self) -> t.Iterator[T]:
        """In-order iteration over the stored values."""
        stack: t.List[KDNode[T]] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def height(self) -> int:
        if self.root is None:
            return 0
        height = 0
        stack = [(self.root, 1)]
        while stack:
            node, depth = stack.pop()
            height = max(height, depth)
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, depth + 1))
        return height

    def query(self, target: T, k: int = 1) -> t.List[T]:
        """Find the k nearest neighbors of target, closest first."""
        return [value for value, _ in self.query_with_distances(target, k)]

    find_k_nearest_neighbors = query

    def nearest(self, target: T) -> T | None:
        neighbors = self.query(target, k=1)
        return neighbors[0] if neighbors else None

    def query_with_distances(self, target: T, k: int = 1) -> t.List[t.Tuple[T, t.Any]]:
        """Like `query`, keeping the distance of each neighbor to target."""
        if k < 0:
            raise InvalidNeighborCountError(k)
        if k == 0 or self.root is None:
            return []

        candidates = CandidateSet[T](k)
        n_axes = len(self.axes)
        stack: t.List[t.Tuple[t.Any, ...]] = [(_VISIT, self.root, 0)]
        while stack:
            frame = stack.pop()
            if frame[0] == _FAR:
                _, far, axis_index, target_key, node_key = frame
                worst = candidates.worst
                if (
                    not candidates.is_full()
                    or worst is not None
                    and self.radius_func(target_key, node_key) < worst.distance
                ):
                    stack.append((_VISIT, far, axis_index))
                continue

            _, node, axis_index = frame
            candidates.offer(node.value, self.distance_func(target, node.value))

            axis = self.axes[axis_index]
            target_key, node_key = axis(target), axis(node.value)
            if target_key < node_key:
                near, far = node.left, node.right
            else:
                near, far = node.right, node.left

            # The far side is decided only once the whole near side has been searched
            next_axis = (axis_index + 1) % n_axes
            if far is not None:
                stack.append((_FAR, far, next_axis, target_key, node_key))
            if near is not None:
                stack.append((_VISIT, near, next_axis))

        pairs = candidates.drain()
        if self.debug_check:
            self._check_against_brute_force(target, k, pairs)
        return [(copy.deepcopy(value), dist) for value, dist in pairs]

    def query_radius(self, target: T, radius: t.Any) -> t.List[T]:
        """Every stored value within `radius` of target, closest first."""
        if self.root is None:
            return []

        found: t.List[t.Tuple[T, t.Any]] = []
        stack: t.List[t.Tuple[KDNode[T], int]] = [(self.root, 0)]
        while stack:
            node, axis_index = stack.pop()
            dist = self.distance_func(target, node.value)
            if not radius < dist:
                found.append((node.value, dist))

            axis = self.axes[axis_index]
            target_key, node_key = axis(target), axis(node.value)
            if target_key < node_key:
                near, far = node.left, node.right
            else:
                near, far = node.right, node.left

            next_axis = (axis_index + 1) % len(self.axes)
            if far is not None and not radius < self.radius_func(target_key, node_key):
                stack.append((far, next_axis))
            if near is not None:
                stack.append((near, next_axis))

        return [copy.deepcopy(value) for value, _ in sort_by_distance(found)]

    def _check_against_brute_force(
        self, target: T, k: int, pairs: t.List[t.Tuple[T, t.Any]]
    ):
        expected = [d for _, d in brute_force.k_nearest(self, target, k, self.distance_func)]
        actual = [d for _, d in pairs]
        if len(expected) != len(actual) or any(
            cmp(a, b) != 0 for a, b in zip(expected, actual)
        ):
            if self.logger is not None:
                self.logger.append(
                    TreeLog(f"KNN query for {target!r} disagrees with brute force.")
                )
            raise PruningContractError(expected=expected, actual=actual)

    def render(self) -> str:
        """Indented dump of the tree, one node per line with its split axis."""
        if self.root is None:
            return "<empty KDTree>"
        lines = []
        stack: t.List[t.Tuple[KDNode[T], int, str]] = [(self.root, 0, "root")]
        while stack:
            node, depth, label = stack.pop()
            lines.append(
                f"{'  ' * depth}{label} [axis {depth % len(self.axes)}]: {node.value!r}"
            )
            if node.right is not None:
                stack.append((node.right, depth + 1, "R"))
            if node.left is not None:
                stack.append((node.left, depth + 1, "L"))
        return "\n".join(lines)

    def __str__(self):
        return self.render()


def build(
    points: t.Iterable[T],
    axes: t.Sequence[Axis],
    distance_func: DistanceFunc,
    radius_func: RadiusFunc,
    **kwargs: t.Any,
) -> KDTree[T]:
    return KDTree(points, axes, distance_func, radius_func, **kwargs)


def query(tree: KDTree[T], target: T, k: int = 1) -> t.List[T]:
    return tree.query(target, k)
