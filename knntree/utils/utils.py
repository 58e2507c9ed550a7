import functools
import json
import typing as t
from datetime import datetime

T = t.TypeVar("T")


def timestamp_string():
    return datetime.now().strftime("%Y-%m-%d-%Hh%Mm%Ss_%f")


class TreeLog:
    def __init__(self, message: str, step: int = 0, timestamp: str | None = None):
        self.message = message
        self.step = step
        self.timestamp = timestamp if timestamp is not None else timestamp_string()

    def __str__(self):
        return "At step {}: '{}'".format(self.step, self.message)

    def toJSON(self):
        return json.dumps(self, default=lambda o: o.__dict__, sort_keys=True, indent=4)


class TreeLogger(list[TreeLog]):
    def __init__(self, printout: bool = True):
        super(TreeLogger, self).__init__()
        self.printout = printout

    def append(self, log: TreeLog):
        super(TreeLogger, self).append(log)
        if self.printout:
            print(log)


def cmp(a: t.Any, b: t.Any) -> int:
    """
    Three-way comparison using only `<`. Pairs that compare neither way
    (e.g. anything against NaN) are equal.
    """
    return (b < a) - (a < b)


def sort_by_distance(pairs: t.Iterable[t.Tuple[T, t.Any]]) -> t.List[t.Tuple[T, t.Any]]:
    """Stable ascending sort of (value, distance) pairs."""
    return sorted(pairs, key=functools.cmp_to_key(lambda p, q: cmp(p[1], q[1])))
