"""
距离度量
聚类算法使用的可插拔距离函数
"""

from math import radians, sin, cos, sqrt, atan2
from typing import Callable, Dict, Protocol, Sequence, Union

import numpy as np


EARTH_RADIUS_M = 6371000.0  # 地球平均半径（米）


class DistanceFunction(Protocol):
    """两点之间的距离，返回非负数"""

    def __call__(self, p: Sequence[float], q: Sequence[float]) -> float:
        ...


def _common_prefix(p: Sequence[float], q: Sequence[float]):
    # 维度不同时只比较共同的前缀
    n = min(len(p), len(q))
    return (np.asarray(p[:n], dtype=np.float64),
            np.asarray(q[:n], dtype=np.float64))


def euclidean_distance(p: Sequence[float], q: Sequence[float]) -> float:
    """
    多维空间中的欧氏距离

    Args:
        p: 第一个点
        q: 第二个点

    Returns:
        两点之间的距离
    """
    # 按维度顺序累加（np.sum对长向量使用成对求和，边界上的结果会不同）
    total = 0.0
    for a, b in zip(p, q):
        d = float(a) - float(b)
        total += d * d
    return float(np.sqrt(total))


def manhattan_distance(p: Sequence[float], q: Sequence[float]) -> float:
    """曼哈顿距离"""
    p, q = _common_prefix(p, q)
    return float(np.sum(np.abs(p - q)))


def chebyshev_distance(p: Sequence[float], q: Sequence[float]) -> float:
    """切比雪夫距离"""
    p, q = _common_prefix(p, q)
    if p.size == 0:
        return 0.0
    return float(np.max(np.abs(p - q)))


def haversine_distance(p: Sequence[float], q: Sequence[float]) -> float:
    """
    Haversine距离，适用于地理坐标

    Args:
        p: 第一个点 [lat, lon]（度）
        q: 第二个点 [lat, lon]（度）

    Returns:
        两点之间的距离（米）
    """
    lat1, lon1 = radians(p[0]), radians(p[1])
    lat2, lon2 = radians(q[0]), radians(q[1])

    dlon = lon2 - lon1
    dlat = lat2 - lat1
    a = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlon / 2) ** 2
    c = 2 * atan2(sqrt(a), sqrt(1 - a))

    return EARTH_RADIUS_M * c


METRICS: Dict[str, Callable[[Sequence[float], Sequence[float]], float]] = {
    'euclidean': euclidean_distance,
    'manhattan': manhattan_distance,
    'chebyshev': chebyshev_distance,
    'haversine': haversine_distance,
}


def get_distance_function(metric: Union[str, DistanceFunction, None] = None) -> DistanceFunction:
    """
    解析距离函数

    Args:
        metric: 度量名称、可调用对象，或None（使用欧氏距离）

    Returns:
        距离函数
    """
    if metric is None:
        return euclidean_distance

    if callable(metric):
        return metric

    try:
        return METRICS[metric]
    except KeyError:
        raise ValueError(f"不支持的度量方式: {metric}") from None
