from dataclasses import dataclass

from knntree.algorithms.kd_tree import KDTree
from knntree.utils.metrics import absolute_difference
from knntree.utils.utils import TreeLogger


@dataclass
class City:
    name: str
    lat: float
    lon: float


def planar_distance(a: City, b: City) -> float:
    return ((a.lat - b.lat) ** 2 + (a.lon - b.lon) ** 2) ** 0.5


cities = [
    City("Paris", 48.86, 2.35),
    City("Lyon", 45.76, 4.84),
    City("Marseille", 43.30, 5.37),
    City("Bordeaux", 44.84, -0.58),
    City("Lille", 50.63, 3.06),
    City("Nantes", 47.22, -1.55),
    City("Strasbourg", 48.57, 7.75),
]

tree = KDTree[City](
    cities,
    axes=[lambda c: c.lat, lambda c: c.lon],
    distance_func=planar_distance,
    radius_func=absolute_difference,
    debug_check=True,
    logger=TreeLogger(),
)
print(tree)
neighbors = tree.query(City("Grenoble", 45.19, 5.72), k=2)
assert [c.name for c in neighbors] == ["Lyon", "Marseille"]
print([c.name for c in neighbors])
