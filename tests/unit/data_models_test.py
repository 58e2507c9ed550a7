import os

import pytest
from pydantic import ValidationError

from knntree.algorithms.selection import PivotStrategy
from knntree.data_models import (
    QueryYamlModel,
    ScenarioYamlModel,
    scenario_from_yaml,
    scenario_to_yaml,
)

SCENARIOS_DIR = os.path.join(os.path.dirname(__file__), "..", "scenarios")


class TestDataModels:
    def test_load_scenario(self):
        scenario = scenario_from_yaml(os.path.join(SCENARIOS_DIR, "seven_points.yaml"))
        assert scenario.dimensions == 2
        assert scenario.metric == "euclidean"
        assert scenario.pivot == PivotStrategy.MEDIAN_OF_THREE
        assert scenario.debug_check
        assert len(scenario.points) == 7
        assert scenario.queries[0] == QueryYamlModel(target=[782.0, 780.0], k=1)

    def test_defaults(self):
        scenario = ScenarioYamlModel(dimensions=3)
        assert scenario.metric == "euclidean"
        assert scenario.pivot == PivotStrategy.MEDIAN_OF_THREE
        assert scenario.points == []
        assert QueryYamlModel(target=[0.0]).k == 1

    def test_rejects_invalid_values(self):
        with pytest.raises(ValidationError):
            ScenarioYamlModel(dimensions=0)
        with pytest.raises(ValidationError):
            ScenarioYamlModel(dimensions=2, metric="cosine")
        with pytest.raises(ValidationError):
            QueryYamlModel(target=[0.0, 0.0], k=-1)

    def test_yaml_round_trip(self, tmp_path):
        scenario = ScenarioYamlModel(
            dimensions=2,
            pivot=PivotStrategy.LAST,
            points=[[1.0, 2.0], [3.0, 4.0]],
            queries=[QueryYamlModel(target=[0.0, 0.0], k=2)],
        )
        path = str(tmp_path / "scenario.yaml")
        scenario_to_yaml(scenario, path)
        assert scenario_from_yaml(path) == scenario
