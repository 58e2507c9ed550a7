import typing as t

from pydantic import BaseModel

from knntree.data_models import PointModel


class QueryReport(BaseModel):
    target: PointModel
    """The query point"""

    k: int
    """The number of neighbors requested"""

    neighbors: t.List[PointModel] = []
    """The neighbors found, closest first"""

    distances: t.List[float] = []
    """Distance of each neighbor to the target"""


class ScenarioReport(BaseModel):
    n_points: int
    dimensions: int
    metric: str
    pivot: str
    tree_height: int
    build_seconds: float = 0.0
    queries: t.List[QueryReport] = []


class BenchmarkReport(BaseModel):
    n_points: int
    dimensions: int
    n_queries: int
    k: int
    pivot: str
    tree_height: int
    build_seconds: float = 0.0
    """Wall time spent building the tree"""

    mean_query_seconds: float = 0.0
    """Mean wall time of one KDTree query"""

    mean_brute_force_seconds: float = 0.0
    """Mean wall time of the same query done with a linear scan"""

    mismatches: int = 0
    """Queries whose distances differ from the linear scan"""
