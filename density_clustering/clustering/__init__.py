"""
聚类算法模块
包含DBSCAN和OPTICS密度聚类算法及其共用工具
"""

from .dbscan import DBSCAN, DBSCANState
from .optics import OPTICS, OPTICSState
from .priority_queue import PriorityQueue
from .metrics import (
    DistanceFunction,
    euclidean_distance,
    manhattan_distance,
    chebyshev_distance,
    haversine_distance,
    get_distance_function
)
from .utils import region_query, merge_neighbors, clusters_to_labels

__all__ = [
    'DBSCAN',
    'DBSCANState',
    'OPTICS',
    'OPTICSState',
    'PriorityQueue',
    'DistanceFunction',
    'euclidean_distance',
    'manhattan_distance',
    'chebyshev_distance',
    'haversine_distance',
    'get_distance_function',
    'region_query',
    'merge_neighbors',
    'clusters_to_labels'
]
