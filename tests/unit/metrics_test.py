import numpy as np

from knntree.utils import metrics
from knntree.utils.utils import TreeLog, TreeLogger, cmp, sort_by_distance


class TestMetrics:
    def test_distances(self):
        assert metrics.euclidean_distance((0, 0, 0), (1, 2, 2)) == 3.0
        assert metrics.manhattan_distance((0, 0, 0), (1, -2, 2)) == 5
        assert metrics.chebyshev_distance((0, 0, 0), (1, -7, 2)) == 7
        assert metrics.chebyshev_distance((), ()) == 0.0

    def test_axes(self):
        axes = metrics.coordinate_axes(3)
        assert [axis((4, 5, 6)) for axis in axes] == [4, 5, 6]
        assert axes[1].__name__ == "axis_1"
        assert metrics.axis_getter(0)(np.array([7.0, 8.0])) == 7.0

    def test_radius_lower_bounds_each_metric(self):
        a, b = (1.0, 5.0, -2.0), (4.0, 1.0, 0.5)
        for distance in metrics.METRICS.values():
            for i in range(3):
                assert metrics.absolute_difference(a[i], b[i]) <= distance(a, b)


class TestUtils:
    def test_cmp_treats_nan_as_equal(self):
        nan = float("nan")
        assert cmp(1, 2) == -1
        assert cmp(2, 1) == 1
        assert cmp(2, 2) == 0
        assert cmp(nan, 1.0) == 0
        assert cmp(1.0, nan) == 0

    def test_sort_by_distance_is_stable(self):
        pairs = [("a", 2), ("b", 1), ("c", 2), ("d", 0)]
        assert sort_by_distance(pairs) == [("d", 0), ("b", 1), ("a", 2), ("c", 2)]

    def test_logger(self, capsys):
        logger = TreeLogger()
        logger.append(TreeLog("hello", 3))
        assert capsys.readouterr().out == "At step 3: 'hello'\n"
        quiet = TreeLogger(printout=False)
        quiet.append(TreeLog("silent"))
        assert capsys.readouterr().out == ""
        assert quiet[0].step == 0
        assert '"message": "silent"' in quiet[0].toJSON()
