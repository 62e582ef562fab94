"""
默认参数配置
"""

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, Optional


# 算法参数
DEFAULT_EPSILON = 1.0
DEFAULT_DBSCAN_MIN_PTS = 2
DEFAULT_OPTICS_MIN_PTS = 1
DEFAULT_METRIC = 'euclidean'

ALGORITHMS = ('dbscan', 'optics')

# 输出
DEFAULT_OUTPUT_DIR = Path('./results')
DEFAULT_FIGURE_DPI = 300


@dataclass
class ClusteringConfig:
    """一次聚类任务的参数"""

    algorithm: str = 'dbscan'
    epsilon: float = DEFAULT_EPSILON
    min_pts: Optional[int] = None  # None时按算法取默认值
    metric: str = DEFAULT_METRIC
    output_dir: Path = DEFAULT_OUTPUT_DIR
    visualize: bool = True

    def __post_init__(self):
        if self.algorithm not in ALGORITHMS:
            raise ValueError(f"不支持的算法: {self.algorithm}")

        if self.min_pts is None:
            self.min_pts = (DEFAULT_DBSCAN_MIN_PTS if self.algorithm == 'dbscan'
                            else DEFAULT_OPTICS_MIN_PTS)

        self.output_dir = Path(self.output_dir)

    def to_dict(self) -> Dict[str, Any]:
        params = asdict(self)
        params['output_dir'] = str(self.output_dir)
        return params
