"""
数据处理模块
点数据的加载和聚类结果的保存
"""

from .loader import load_points_csv, clustering_result_frame, save_clustering_result

__all__ = [
    'load_points_csv',
    'clustering_result_frame',
    'save_clustering_result'
]
