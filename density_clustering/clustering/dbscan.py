"""
DBSCAN实现
经典的密度聚类算法，邻域查询为逐点线性扫描
"""

import time
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence, Tuple

import numpy as np

from ..config import DEFAULT_EPSILON, DEFAULT_DBSCAN_MIN_PTS
from .metrics import DistanceFunction, get_distance_function
from .utils import check_dataset, clusters_to_labels, merge_neighbors, region_query


@dataclass
class DBSCANState:
    """一次DBSCAN运行的全部可变状态"""

    dataset: Sequence
    eps: float
    min_pts: int
    distance: DistanceFunction
    visited: List[bool] = field(default_factory=list)
    assigned: List[bool] = field(default_factory=list)
    clusters: List[List[int]] = field(default_factory=list)
    noise: List[int] = field(default_factory=list)
    core_points: List[int] = field(default_factory=list)

    def __post_init__(self):
        n_samples = len(self.dataset)
        if not self.visited:
            self.visited = [False] * n_samples
        if not self.assigned:
            self.assigned = [False] * n_samples


class DBSCAN:
    """DBSCAN聚类算法"""

    def __init__(self, dataset: Optional[Sequence] = None, epsilon: float = DEFAULT_EPSILON,
                 min_pts: int = DEFAULT_DBSCAN_MIN_PTS, distance: Any = None):
        """
        初始化DBSCAN参数

        Args:
            dataset: 点的序列，每个点是坐标序列
            epsilon: 邻域半径（严格小于才算邻居）
            min_pts: 核心点的最小邻居数
            distance: 距离函数或度量名称，默认为欧氏距离
        """
        self.dataset = check_dataset(dataset)
        self.epsilon = epsilon
        self.min_pts = min_pts
        self.distance = get_distance_function(distance)

        self.clusters: List[List[int]] = []
        self.noise: List[int] = []
        self.labels_ = None
        self.core_sample_indices_ = None
        self.execution_time = 0

    def create_state(self) -> DBSCANState:
        """按当前参数创建新的运行状态"""
        return DBSCANState(
            dataset=self.dataset,
            eps=self.epsilon,
            min_pts=self.min_pts,
            distance=self.distance
        )

    def run(self, dataset: Optional[Sequence] = None, epsilon: Optional[float] = None,
            min_pts: Optional[int] = None,
            distance: Any = None) -> Tuple[List[List[int]], List[int]]:
        """
        执行DBSCAN聚类

        传入的参数会替换当前参数，未传入的保持不变。

        Args:
            dataset: 点的序列
            epsilon: 邻域半径
            min_pts: 核心点的最小邻居数
            distance: 距离函数或度量名称

        Returns:
            (聚类列表, 噪声点列表)
        """
        if dataset is not None:
            self.dataset = check_dataset(dataset)
        if epsilon is not None:
            self.epsilon = epsilon
        if min_pts is not None:
            self.min_pts = min_pts
        if distance is not None:
            self.distance = get_distance_function(distance)

        start_time = time.time()
        state = self.create_state()

        for point_idx in range(len(state.dataset)):
            if state.visited[point_idx]:
                continue

            state.visited[point_idx] = True
            neighbors = region_query(state.dataset, point_idx, state.eps, state.distance)

            # 以该点为起点创建新的聚类
            cluster_id = len(state.clusters)
            state.clusters.append([point_idx])
            state.assigned[point_idx] = True

            if len(neighbors) < state.min_pts:
                # 邻域太小，标记为噪声，单点聚类保留
                state.noise.append(point_idx)
            else:
                state.core_points.append(point_idx)
                self.expand_cluster(state, cluster_id, neighbors)

        # 保存结果
        self.clusters = state.clusters
        self.noise = state.noise
        self.labels_ = clusters_to_labels(state.clusters, len(state.dataset))
        self.core_sample_indices_ = np.array(sorted(state.core_points), dtype=np.int32)
        self.execution_time = time.time() - start_time

        return self.clusters, self.noise

    def expand_cluster(self, state: DBSCANState, cluster_id: int,
                       neighbors: List[int]) -> None:
        """
        从邻居列表扩展聚类

        邻居列表在遍历过程中可能被替换为合并后的新列表，
        遍历按位置继续进行。

        Args:
            state: 运行状态
            cluster_id: 当前聚类ID
            neighbors: 初始邻居索引列表
        """
        i = 0
        while i < len(neighbors):
            point_idx = neighbors[i]

            if not state.visited[point_idx]:
                state.visited[point_idx] = True

                point_neighbors = region_query(state.dataset, point_idx,
                                               state.eps, state.distance)
                if len(point_neighbors) >= state.min_pts:
                    state.core_points.append(point_idx)
                    neighbors = merge_neighbors(neighbors, point_neighbors)

            if not state.assigned[point_idx]:
                state.assigned[point_idx] = True
                state.clusters[cluster_id].append(point_idx)

            i += 1

    def region_query(self, point_idx: int) -> List[int]:
        """
        查找指定点邻域内的所有点

        Args:
            point_idx: 目标点的索引

        Returns:
            邻域内点的索引列表
        """
        return region_query(self.dataset, point_idx, self.epsilon, self.distance)

    def get_cluster_stats(self) -> dict:
        """
        获取聚类统计信息

        Returns:
            包含聚类统计信息的字典
        """
        if self.labels_ is None:
            return {}

        stats = {
            'n_clusters': len(self.clusters),
            'n_noise': len(self.noise),
            'n_core_points': len(self.core_sample_indices_),
            'execution_time': self.execution_time,
            'cluster_sizes': {}
        }

        for cluster_id, members in enumerate(self.clusters):
            stats['cluster_sizes'][cluster_id] = len(members)

        return stats
