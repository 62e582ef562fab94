"""
聚类工具函数
DBSCAN和OPTICS共用的邻域查询、邻居合并和数据集检查
"""

from collections.abc import Sequence as SequenceABC
from typing import Any, List, Sequence

import numpy as np

from .metrics import DistanceFunction


def check_dataset(dataset: Any) -> Sequence:
    """
    检查数据集是否为序列类型

    Args:
        dataset: 待检查的数据集，None表示空数据集

    Returns:
        数据集本身（None时返回空列表）
    """
    if dataset is None:
        return []

    if isinstance(dataset, np.ndarray):
        return dataset

    if isinstance(dataset, (str, bytes)) or not isinstance(dataset, SequenceABC):
        raise TypeError(f"数据集必须是序列类型，收到 {type(dataset).__name__}")

    return dataset


def region_query(dataset: Sequence, point_idx: int, eps: float,
                 distance: DistanceFunction) -> List[int]:
    """
    查找指定点邻域内的所有点

    逐点线性扫描，距离严格小于eps的点才算邻居。

    Args:
        dataset: 所有点
        point_idx: 目标点的索引
        eps: 邻域半径
        distance: 距离函数

    Returns:
        邻域内点的索引列表（升序，不含目标点本身）
    """
    neighbors = []
    point = dataset[point_idx]

    for i in range(len(dataset)):
        if i == point_idx:
            continue

        if distance(point, dataset[i]) < eps:
            neighbors.append(i)

    return neighbors


def merge_neighbors(a: List[int], b: List[int]) -> List[int]:
    """
    合并两个邻居列表

    较短的列表保持原有顺序在前，较长列表中尚未出现的元素按原顺序追加在后；
    长度相同时以a为基础。

    Args:
        a: 第一个邻居列表
        b: 第二个邻居列表

    Returns:
        合并后的新列表
    """
    if len(a) > len(b):
        source, dest = a, b
    else:
        source, dest = b, a

    merged = list(dest)
    seen = set(dest)

    for point_idx in source:
        if point_idx not in seen:
            seen.add(point_idx)
            merged.append(point_idx)

    return merged


def clusters_to_labels(clusters: List[List[int]], n_samples: int) -> np.ndarray:
    """
    将聚类列表转换为标签数组

    Args:
        clusters: 每个聚类的成员索引列表
        n_samples: 总点数

    Returns:
        每个点所属聚类的编号，未归入任何聚类的点为-1
    """
    labels = np.full(n_samples, -1, dtype=np.int32)

    for cluster_id, members in enumerate(clusters):
        labels[members] = cluster_id

    return labels
