import math

import numpy as np
import pytest

from density_clustering.clustering.metrics import (
    euclidean_distance,
    manhattan_distance,
    chebyshev_distance,
    haversine_distance,
    get_distance_function
)


def test_euclidean_distance():
    assert euclidean_distance([1, 1], [3, 1]) == 2
    assert euclidean_distance([1, 1], [1, 3]) == 2
    assert euclidean_distance([0, 0], [3, 4]) == 5


def test_euclidean_distance_uses_shared_prefix():
    assert euclidean_distance([0, 0, 100], [3, 4]) == 5
    assert euclidean_distance([], [1, 2]) == 0


def test_euclidean_distance_accepts_arrays():
    assert euclidean_distance(np.array([1.0, 1.0]), (4, 5)) == 5


def test_manhattan_and_chebyshev():
    assert manhattan_distance([0, 0], [3, 4]) == 7
    assert chebyshev_distance([0, 0], [3, 4]) == 4
    assert chebyshev_distance([], []) == 0


def test_haversine_distance():
    assert haversine_distance([39.9, 116.4], [39.9, 116.4]) == 0
    # 经线上一度约111.2公里
    assert haversine_distance([0, 0], [1, 0]) == pytest.approx(111195, rel=1e-3)


def test_get_distance_function():
    assert get_distance_function() is euclidean_distance
    assert get_distance_function('manhattan') is manhattan_distance

    def custom(p, q):
        return 0.0

    assert get_distance_function(custom) is custom


def test_get_distance_function_unknown_metric():
    with pytest.raises(ValueError, match='不支持的度量方式'):
        get_distance_function('cosine')


def test_euclidean_distance_sums_dimensions_in_order():
    rng = np.random.default_rng(7)

    for _ in range(20):
        p = rng.uniform(-1000, 1000, size=257)
        q = rng.uniform(-1000, 1000, size=257)

        total = 0.0
        for a, b in zip(p.tolist(), q.tolist()):
            total += (a - b) * (a - b)

        assert euclidean_distance(p, q) == math.sqrt(total)
        assert euclidean_distance(p.tolist(), q.tolist()) == math.sqrt(total)
