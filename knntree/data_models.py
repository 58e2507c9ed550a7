import typing as t

import yaml
from pydantic import BaseModel, Field

from knntree.algorithms.selection import PivotStrategy

PointModel = t.List[float]


class QueryYamlModel(BaseModel):
    target: PointModel
    k: int = Field(default=1, ge=0)


class ScenarioYamlModel(BaseModel):
    dimensions: int = Field(ge=1)
    metric: t.Literal["euclidean", "manhattan", "chebyshev"] = "euclidean"
    pivot: PivotStrategy = PivotStrategy.MEDIAN_OF_THREE
    random_seed: int | None = 10
    debug_check: bool = False
    points: t.List[PointModel] = []
    queries: t.List[QueryYamlModel] = []


def scenario_from_yaml(file_path: str) -> ScenarioYamlModel:
    with open(file_path, "r") as stream:
        config = yaml.safe_load(stream)
    return ScenarioYamlModel(**config)


def scenario_to_yaml(scenario: ScenarioYamlModel, file_path: str):
    with open(file_path, "w") as file:
        yaml.dump(
            scenario.model_dump(mode="json"), file, default_flow_style=None, sort_keys=False
        )
