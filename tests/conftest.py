"""
测试公共fixture
"""

import matplotlib
matplotlib.use('Agg')

import pytest


@pytest.fixture
def regular_density_points():
    """三个紧密的小团加一个孤立点"""
    return [
        [1, 1], [0, 1], [1, 0],
        [10, 10], [10, 11], [11, 10],
        [50, 50], [51, 50], [50, 51],
        [100, 100]
    ]


@pytest.fixture
def dbscan_points():
    return [
        [1, 1], [0, 1], [1, 0],
        [10, 10], [10, 13], [13, 13],
        [54, 54], [55, 55], [89, 89], [57, 55]
    ]


@pytest.fixture
def various_density_points():
    return [
        [0, 0], [6, 0], [-1, 0], [0, 1], [0, -1],
        [45, 45], [45.1, 45.2], [45.1, 45.3], [45.8, 45.5], [45.2, 45.3],
        [50, 50], [56, 50], [50, 52], [50, 55], [50, 51]
    ]
