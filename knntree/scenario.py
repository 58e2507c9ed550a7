import time
import typing as t

import numpy as np

from knntree.algorithms import brute_force
from knntree.algorithms.kd_tree import KDTree
from knntree.algorithms.selection import PivotStrategy
from knntree.data_models import QueryYamlModel, ScenarioYamlModel
from knntree.exceptions import ScenarioError
from knntree.report import BenchmarkReport, QueryReport, ScenarioReport
from knntree.utils import metrics
from knntree.utils.utils import TreeLog, TreeLogger

Point = t.Tuple[float, ...]


def _check_dimensions(points: t.Iterable[t.Sequence[float]], dimensions: int, what: str):
    for i, point in enumerate(points):
        if len(point) != dimensions:
            raise ScenarioError(
                f"{what} {i} has {len(point)} coordinates, expected {dimensions}"
            )


def build_tree(
    scenario: ScenarioYamlModel, logger: TreeLogger | None = None
) -> KDTree[Point]:
    _check_dimensions(scenario.points, scenario.dimensions, "Point")
    return KDTree[Point](
        [tuple(p) for p in scenario.points],
        axes=metrics.coordinate_axes(scenario.dimensions),
        distance_func=metrics.METRICS[scenario.metric],
        radius_func=metrics.absolute_difference,
        pivot=scenario.pivot,
        random_seed=scenario.random_seed,
        debug_check=scenario.debug_check,
        logger=logger,
    )


def run_scenario(
    scenario: ScenarioYamlModel, logger: TreeLogger | None = None
) -> ScenarioReport:
    _check_dimensions([q.target for q in scenario.queries], scenario.dimensions, "Target")

    start = time.perf_counter()
    tree = build_tree(scenario, logger=logger)
    build_seconds = time.perf_counter() - start

    report = ScenarioReport(
        n_points=len(tree),
        dimensions=scenario.dimensions,
        metric=scenario.metric,
        pivot=tree.pivot.value,
        tree_height=tree.height(),
        build_seconds=build_seconds,
    )
    for step, query in enumerate(scenario.queries, start=1):
        pairs = tree.query_with_distances(tuple(query.target), query.k)
        report.queries.append(
            QueryReport(
                target=query.target,
                k=query.k,
                neighbors=[list(p) for p, _ in pairs],
                distances=[float(d) for _, d in pairs],
            )
        )
        if logger is not None:
            logger.append(
                TreeLog(
                    f"{len(pairs)} nearest neighbors of {tuple(query.target)}: {[p for p, _ in pairs]}",
                    step,
                )
            )
    return report


def random_scenario(
    n_points: int,
    dimensions: int,
    n_queries: int,
    k: int,
    seed: int = 10,
    scale: float = 1000.0,
) -> ScenarioYamlModel:
    rng = np.random.default_rng(seed)
    points = np.round(rng.random((n_points, dimensions)) * scale, 3)
    targets = np.round(rng.random((n_queries, dimensions)) * scale, 3)
    return ScenarioYamlModel(
        dimensions=dimensions,
        random_seed=seed,
        points=points.tolist(),
        queries=[QueryYamlModel(target=target, k=k) for target in targets.tolist()],
    )


def run_benchmark(
    n_points: int,
    dimensions: int,
    n_queries: int,
    k: int,
    seed: int = 10,
    pivot: PivotStrategy = PivotStrategy.MEDIAN_OF_THREE,
    logger: TreeLogger | None = None,
) -> BenchmarkReport:
    scenario = random_scenario(n_points, dimensions, n_queries, k, seed)
    scenario.pivot = pivot
    points = [tuple(p) for p in scenario.points]

    start = time.perf_counter()
    tree = build_tree(scenario, logger=logger)
    build_seconds = time.perf_counter() - start

    query_seconds = 0.0
    brute_force_seconds = 0.0
    mismatches = 0
    for query in scenario.queries:
        target = tuple(query.target)

        start = time.perf_counter()
        actual = [d for _, d in tree.query_with_distances(target, k)]
        query_seconds += time.perf_counter() - start

        start = time.perf_counter()
        expected = [
            d for _, d in brute_force.k_nearest(points, target, k, tree.distance_func)
        ]
        brute_force_seconds += time.perf_counter() - start

        if actual != expected:
            mismatches += 1

    if logger is not None and mismatches:
        logger.append(TreeLog(f"{mismatches} queries disagree with brute force."))

    return BenchmarkReport(
        n_points=n_points,
        dimensions=dimensions,
        n_queries=n_queries,
        k=k,
        pivot=tree.pivot.value,
        tree_height=tree.height(),
        build_seconds=build_seconds,
        mean_query_seconds=query_seconds / max(n_queries, 1),
        mean_brute_force_seconds=brute_force_seconds / max(n_queries, 1),
        mismatches=mismatches,
    )
