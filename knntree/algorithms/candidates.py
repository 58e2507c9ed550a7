import heapq
import typing as t

from knntree.utils.utils import sort_by_distance

T = t.TypeVar("T")


class Candidate(t.Generic[T]):
    def __init__(self, value: T, distance: t.Any):
        self.value = value
        self.distance = distance

    def __lt__(self, other: "Candidate[T]"):
        # Reversed so that heapq keeps the farthest candidate on top
        return other.distance < self.distance

    def __repr__(self):
        return f"Candidate({self.value!r}, {self.distance!r})"


class CandidateSet(t.Generic[T]):
    """
    The best `capacity` (value, distance) pairs seen so far, as a bounded
    max-heap on distance. The worst kept candidate is readable in O(1).
    """

    def __init__(self, capacity: int):
        self.capacity = capacity
        self.heap: t.List[Candidate[T]] = []

    def __len__(self):
        return len(self.heap)

    def __bool__(self):
        return bool(self.heap)

    def is_full(self) -> bool:
        return len(self.heap) >= self.capacity

    @property
    def worst(self) -> Candidate[T] | None:
        return self.heap[0] if self.heap else None

    def offer(self, value: T, distance: t.Any) -> bool:
        """Keeps (value, distance) if it improves the set. Returns whether it was kept."""
        if self.capacity <= 0:
            return False
        candidate = Candidate(value, distance)
        if len(self.heap) < self.capacity:
            heapq.heappush(self.heap, candidate)
        elif distance < self.heap[0].distance:
            heapq.heapreplace(self.heap, candidate)
        else:
            return False
        return True

    def can_improve(self, distance: t.Any) -> bool:
        """Whether a point at `distance` could still enter the set."""
        if not self.is_full():
            return True
        return bool(self.heap) and distance < self.heap[0].distance

    def drain(self) -> t.List[t.Tuple[T, t.Any]]:
        """Empties the set and returns its pairs by ascending distance."""
        pairs = []
        while self.heap:
            candidate = heapq.heappop(self.heap)
            pairs.append((candidate.value, candidate.distance))
        pairs.reverse()
        return sort_by_distance(pairs)
