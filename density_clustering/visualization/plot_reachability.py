"""
可达图可视化
OPTICS可达图的柱状图
"""

from typing import List, Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np

from ..config import DEFAULT_FIGURE_DPI


def reachability_values(plot: List[Tuple[int, Optional[float]]],
                        ceiling: Optional[float] = None) -> np.ndarray:
    """
    将可达图转换为数值数组

    Args:
        plot: (点索引, 可达距离)列表
        ceiling: 未定义的可达距离的取值，None时取最大可达距离

    Returns:
        与可达图等长的可达距离数组
    """
    defined = [reach for _, reach in plot if reach is not None]

    if ceiling is None:
        ceiling = max(defined) if defined else 1.0

    return np.array([ceiling if reach is None else reach for _, reach in plot], dtype=float)


def plot_reachability(plot: List[Tuple[int, Optional[float]]],
                      clusters: Optional[List[List[int]]] = None,
                      title: str = "OPTICS可达图",
                      ceiling: Optional[float] = None,
                      figsize: Tuple[int, int] = (14, 6),
                      colormap: str = 'tab20',
                      save_path: Optional[str] = None,
                      dpi: int = DEFAULT_FIGURE_DPI) -> plt.Figure:
    """
    绘制可达图

    未定义可达距离的点（每个聚类的起点）以灰色画到ceiling高度。

    Args:
        plot: (点索引, 可达距离)列表，按访问顺序排列
        clusters: 聚类列表，用于按聚类着色（可选）
        title: 图表标题
        ceiling: 未定义可达距离的显示高度
        figsize: 图形大小
        colormap: 颜色映射
        save_path: 保存路径
        dpi: 保存图片的分辨率

    Returns:
        matplotlib图形对象
    """
    values = reachability_values(plot, ceiling)
    undefined = np.array([reach is None for _, reach in plot], dtype=bool)

    colors = np.full((len(plot), 4), plt.get_cmap('Greys')(0.5))
    if clusters:
        cmap = plt.get_cmap(colormap)
        cluster_colors = cmap(np.linspace(0, 1, len(clusters)))
        cluster_of = {}
        for cluster_id, members in enumerate(clusters):
            for point_idx in members:
                cluster_of[point_idx] = cluster_id
        for i, (point_idx, _) in enumerate(plot):
            if point_idx in cluster_of:
                colors[i] = cluster_colors[cluster_of[point_idx]]

    fig, ax = plt.subplots(figsize=figsize)

    positions = np.arange(len(plot))
    ax.bar(positions[~undefined], values[~undefined], color=colors[~undefined], width=1.0)
    ax.bar(positions[undefined], values[undefined], color='lightgray', width=1.0,
           hatch='//', label='未定义')

    ax.set_title(title, fontsize=14, fontweight='bold')
    ax.set_xlabel('访问顺序')
    ax.set_ylabel('可达距离')
    ax.set_xlim(-0.5, max(len(plot), 1) - 0.5)
    ax.grid(True, axis='y', alpha=0.3)

    if len(plot) <= 50:
        ax.set_xticks(positions)
        ax.set_xticklabels([str(point_idx) for point_idx, _ in plot], rotation=90, fontsize=8)

    if undefined.any():
        ax.legend(loc='upper right')

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=dpi, bbox_inches='tight')
        print(f"可达图已保存到: {save_path}")

    return fig
