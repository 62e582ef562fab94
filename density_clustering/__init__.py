"""
密度聚类
任意度量空间上的DBSCAN与OPTICS聚类
"""

from .clustering import DBSCAN, OPTICS, PriorityQueue, euclidean_distance

__version__ = '0.1.0'

__all__ = [
    'DBSCAN',
    'OPTICS',
    'PriorityQueue',
    'euclidean_distance'
]
