from pathlib import Path

import pytest

from density_clustering.config import (
    ClusteringConfig,
    DEFAULT_DBSCAN_MIN_PTS,
    DEFAULT_OPTICS_MIN_PTS
)


def test_min_pts_defaults_per_algorithm():
    assert ClusteringConfig('dbscan').min_pts == DEFAULT_DBSCAN_MIN_PTS
    assert ClusteringConfig('optics').min_pts == DEFAULT_OPTICS_MIN_PTS
    assert ClusteringConfig('optics', min_pts=4).min_pts == 4


def test_unknown_algorithm():
    with pytest.raises(ValueError, match='kmeans'):
        ClusteringConfig('kmeans')


def test_to_dict():
    config = ClusteringConfig('dbscan', epsilon=5, output_dir='out')

    assert config.output_dir == Path('out')
    assert config.to_dict() == {
        'algorithm': 'dbscan',
        'epsilon': 5,
        'min_pts': 2,
        'metric': 'euclidean',
        'output_dir': 'out',
        'visualize': True
    }
