"""
OPTICS实现
按可达距离对点排序，得到聚类结构和可达图
"""

import time
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence, Tuple

import numpy as np

from ..config import DEFAULT_EPSILON, DEFAULT_OPTICS_MIN_PTS
from .metrics import DistanceFunction, get_distance_function
from .priority_queue import PriorityQueue
from .utils import check_dataset, clusters_to_labels, region_query


@dataclass
class OPTICSState:
    """一次OPTICS运行的全部可变状态"""

    dataset: Sequence
    eps: float
    min_pts: int
    distance: DistanceFunction
    processed: List[bool] = field(default_factory=list)
    reachability: List[Optional[float]] = field(default_factory=list)
    core_distances: List[Optional[float]] = field(default_factory=list)
    core_distance: Optional[float] = None
    ordered_list: List[int] = field(default_factory=list)
    clusters: List[List[int]] = field(default_factory=list)

    def __post_init__(self):
        n_samples = len(self.dataset)
        if not self.processed:
            self.processed = [False] * n_samples
        if not self.reachability:
            self.reachability = [None] * n_samples
        if not self.core_distances:
            self.core_distances = [None] * n_samples


class OPTICS:
    """OPTICS聚类算法"""

    def __init__(self, dataset: Optional[Sequence] = None, epsilon: float = DEFAULT_EPSILON,
                 min_pts: int = DEFAULT_OPTICS_MIN_PTS, distance: Any = None):
        """
        初始化OPTICS参数

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
        self.state: Optional[OPTICSState] = None
        self.labels_ = None
        self.core_sample_indices_ = None
        self.execution_time = 0

    def create_state(self) -> OPTICSState:
        """按当前参数创建新的运行状态"""
        return OPTICSState(
            dataset=self.dataset,
            eps=self.epsilon,
            min_pts=self.min_pts,
            distance=self.distance
        )

    def run(self, dataset: Optional[Sequence] = None, epsilon: Optional[float] = None,
            min_pts: Optional[int] = None, distance: Any = None) -> List[List[int]]:
        """
        执行OPTICS聚类

        传入的参数会替换当前参数，未传入的保持不变。

        Args:
            dataset: 点的序列
            epsilon: 邻域半径
            min_pts: 核心点的最小邻居数
            distance: 距离函数或度量名称

        Returns:
            聚类列表，每个聚类按访问顺序排列
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
            if state.processed[point_idx]:
                continue

            state.processed[point_idx] = True
            state.clusters.append([point_idx])
            cluster_id = len(state.clusters) - 1
            state.ordered_list.append(point_idx)

            neighbors = region_query(state.dataset, point_idx, state.eps, state.distance)

            if self.distance_to_core(state, point_idx, neighbors) is not None:
                queue = PriorityQueue(sorting='asc')
                self.update_queue(state, point_idx, neighbors, queue)
                self.expand_cluster(state, cluster_id, queue)

        # 保存结果
        self.state = state
        self.clusters = state.clusters
        self.labels_ = clusters_to_labels(state.clusters, len(state.dataset))
        self.core_sample_indices_ = np.array(
            [i for i, core in enumerate(state.core_distances) if core is not None],
            dtype=np.int32
        )
        self.execution_time = time.time() - start_time

        return self.clusters

    def update_queue(self, state: OPTICSState, point_idx: int, neighbors: List[int],
                     queue: PriorityQueue) -> None:
        """
        用核心点的邻居更新优先队列

        Args:
            state: 运行状态
            point_idx: 核心点索引
            neighbors: 核心点的邻居索引列表
            queue: 按可达距离升序排列的队列
        """
        state.core_distance = self.distance_to_core(state, point_idx, neighbors)
        point = state.dataset[point_idx]

        for neighbor_idx in neighbors:
            if state.processed[neighbor_idx]:
                continue

            reachable = max(state.core_distance,
                            state.distance(point, state.dataset[neighbor_idx]))

            if state.reachability[neighbor_idx] is None:
                state.reachability[neighbor_idx] = reachable
                queue.insert(neighbor_idx, reachable)
            elif reachable < state.reachability[neighbor_idx]:
                # 找到更近的可达距离，调整队列中的位置
                state.reachability[neighbor_idx] = reachable
                queue.remove(neighbor_idx)
                queue.insert(neighbor_idx, reachable)

    def expand_cluster(self, state: OPTICSState, cluster_id: int,
                       queue: PriorityQueue) -> None:
        """
        按可达距离由近到远扩展聚类

        每处理一个核心点，队列都可能插入更近的点，扫描从队首重新开始；
        扫描到队尾仍没有未处理的点时扩展结束。

        Args:
            state: 运行状态
            cluster_id: 当前聚类ID
            queue: 按可达距离升序排列的队列
        """
        position = 0
        while position < len(queue):
            point_idx = queue[position]

            if state.processed[point_idx]:
                position += 1
                continue

            neighbors = region_query(state.dataset, point_idx, state.eps, state.distance)
            state.processed[point_idx] = True

            state.clusters[cluster_id].append(point_idx)
            state.ordered_list.append(point_idx)

            if self.distance_to_core(state, point_idx, neighbors) is not None:
                self.update_queue(state, point_idx, neighbors, queue)
                position = 0
            else:
                position += 1

    def distance_to_core(self, state: OPTICSState, point_idx: int,
                         neighbors: Optional[List[int]] = None) -> Optional[float]:
        """
        计算核心距离

        Args:
            state: 运行状态
            point_idx: 点索引
            neighbors: 该点的邻居（为None时重新查询）

        Returns:
            到最近邻居的距离（不超过eps），邻居数不足min_pts时返回None
        """
        if neighbors is None:
            neighbors = region_query(state.dataset, point_idx, state.eps, state.distance)

        if len(neighbors) < state.min_pts:
            return None

        point = state.dataset[point_idx]
        min_distance = state.eps
        for neighbor_idx in neighbors:
            dist = state.distance(point, state.dataset[neighbor_idx])
            if dist < min_distance:
                min_distance = dist

        state.core_distances[point_idx] = min_distance
        return min_distance

    def region_query(self, point_idx: int) -> List[int]:
        """
        查找指定点邻域内的所有点

        Args:
            point_idx: 目标点的索引

        Returns:
            邻域内点的索引列表
        """
        return region_query(self.dataset, point_idx, self.epsilon, self.distance)

    def get_reachability_plot(self) -> List[Tuple[int, Optional[float]]]:
        """
        生成可达图

        Returns:
            按访问顺序排列的(点索引, 可达距离)列表，从未被到达的点可达距离为None
        """
        if self.state is None:
            return []

        return [(point_idx, self.state.reachability[point_idx])
                for point_idx in self.state.ordered_list]

    def get_cluster_stats(self) -> dict:
        """
        获取聚类统计信息

        孤立点（既不是核心点也从未被到达）计为噪声。

        Returns:
            包含聚类统计信息的字典
        """
        if self.state is None:
            return {}

        n_noise = sum(
            1 for reach, core in zip(self.state.reachability, self.state.core_distances)
            if reach is None and core is None
        )

        stats = {
            'n_clusters': len(self.clusters),
            'n_noise': n_noise,
            'n_core_points': len(self.core_sample_indices_),
            'execution_time': self.execution_time,
            'cluster_sizes': {}
        }

        for cluster_id, members in enumerate(self.clusters):
            stats['cluster_sizes'][cluster_id] = len(members)

        return stats
