"""
可视化模块
聚类结果和可达图的可视化
"""

from .plot_clusters import ClusterVisualizer
from .plot_reachability import plot_reachability, reachability_values

__all__ = [
    'ClusterVisualizer',
    'plot_reachability',
    'reachability_values'
]
