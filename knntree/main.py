import typing as t

import typer

from knntree.algorithms.selection import PivotStrategy
from knntree.data_models import scenario_from_yaml, scenario_to_yaml
from knntree.scenario import random_scenario, run_benchmark, run_scenario
from knntree.utils.utils import TreeLogger

app = typer.Typer()


@app.command()
def run(
    scenario: str,
    report: t.Annotated[t.Optional[str], typer.Option("--report")] = None,
    quiet: t.Annotated[bool, typer.Option("--quiet")] = False,
):
    logger = TreeLogger(printout=not quiet)
    result = run_scenario(scenario_from_yaml(scenario), logger=logger)
    if report:
        with open(report, "w") as f:
            f.write(result.model_dump_json(indent=4))


@app.command()
def bench(
    n_points: t.Annotated[int, typer.Option("--n-points")] = 10000,
    dimensions: t.Annotated[int, typer.Option("--dimensions")] = 2,
    n_queries: t.Annotated[int, typer.Option("--n-queries")] = 100,
    k: t.Annotated[int, typer.Option("--k")] = 5,
    seed: t.Annotated[int, typer.Option("--seed")] = 10,
    pivot: t.Annotated[PivotStrategy, typer.Option("--pivot")] = PivotStrategy.MEDIAN_OF_THREE,
):
    result = run_benchmark(
        n_points=n_points,
        dimensions=dimensions,
        n_queries=n_queries,
        k=k,
        seed=seed,
        pivot=pivot,
        logger=TreeLogger(),
    )
    print(result.model_dump_json(indent=4))
    if result.mismatches:
        raise typer.Exit(code=1)


@app.command()
def gen_scenario(
    *,
    out: t.Annotated[str, typer.Option("--out")] = "scenario.yaml",
    n_points: t.Annotated[int, typer.Option("--n-points")] = 20,
    dimensions: t.Annotated[int, typer.Option("--dimensions")] = 2,
    n_queries: t.Annotated[int, typer.Option("--n-queries")] = 1,
    k: t.Annotated[int, typer.Option("--k")] = 5,
    seed: t.Annotated[int, typer.Option("--seed")] = 10,
):
    scenario_to_yaml(
        random_scenario(
            n_points=n_points,
            dimensions=dimensions,
            n_queries=n_queries,
            k=k,
            seed=seed,
        ),
        out,
    )


if __name__ == "__main__":
    app()
