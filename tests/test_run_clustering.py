import importlib.util
import json
import sys
from pathlib import Path

import pytest

from density_clustering.config import ClusteringConfig


SCRIPT = Path(__file__).parent.parent / 'scripts' / 'run_clustering.py'


@pytest.fixture
def run_clustering():
    spec = importlib.util.spec_from_file_location('run_clustering', SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def points_csv(tmp_path, regular_density_points):
    path = tmp_path / 'points.csv'
    lines = ['x,y'] + [f'{x},{y}' for x, y in regular_density_points]
    path.write_text('\n'.join(lines) + '\n')
    return path


def test_optics_end_to_end(run_clustering, points_csv, tmp_path, monkeypatch):
    output_dir = tmp_path / 'out'
    monkeypatch.setattr(sys, 'argv', [
        'run_clustering.py', '--data', str(points_csv), '--algorithm', 'optics',
        '--eps', '2', '--min-pts', '2', '--output-dir', str(output_dir), '--no-visualize'
    ])

    run_clustering.main()

    with open(output_dir / 'optics_results.json') as f:
        payload = json.load(f)
    assert payload['clusters'] == [[0, 1, 2], [3, 4, 5], [6, 7, 8], [9]]
    assert payload['reachability_plot'][0] == [0, None]
    assert (output_dir / 'optics_summary.json').exists()
    assert (output_dir / 'optics_points.csv').exists()


def test_dbscan_with_figures(run_clustering, points_csv, tmp_path, monkeypatch):
    output_dir = tmp_path / 'out'
    monkeypatch.setattr(sys, 'argv', [
        'run_clustering.py', '--data', str(points_csv), '--eps', '2',
        '--output-dir', str(output_dir)
    ])

    run_clustering.main()

    with open(output_dir / 'dbscan_results.json') as f:
        payload = json.load(f)
    assert payload['noise'] == [9]
    assert (output_dir / 'dbscan_clusters_2d.png').exists()


def test_missing_file_exits(run_clustering, tmp_path, monkeypatch):
    monkeypatch.setattr(sys, 'argv', [
        'run_clustering.py', '--data', str(tmp_path / 'missing.csv'), '--no-visualize'
    ])

    with pytest.raises(SystemExit):
        run_clustering.main()


def test_reported_time_is_engine_time(run_clustering, regular_density_points):
    result = run_clustering.run_clustering(regular_density_points,
                                           ClusteringConfig('dbscan', epsilon=2))

    assert result['execution_time'] == result['stats']['execution_time']
