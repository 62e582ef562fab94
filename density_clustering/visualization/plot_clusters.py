"""
聚类结果可视化
DBSCAN/OPTICS聚类结果的二维散点图
"""

from typing import List, Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np
from scipy.spatial import ConvexHull, QhullError

from ..config import DEFAULT_FIGURE_DPI


class ClusterVisualizer:
    """聚类可视化器"""

    def __init__(self, figsize: Tuple[int, int] = (12, 10),
                 colormap: str = 'tab20'):
        """
        初始化可视化器

        Args:
            figsize: 图形大小
            colormap: 颜色映射
        """
        self.figsize = figsize
        self.colormap = colormap
        self.cmap = plt.get_cmap(colormap)

    def plot_clusters_2d(self, points: Sequence[Sequence[float]],
                         clusters: List[List[int]],
                         noise: Optional[List[int]] = None,
                         title: str = "聚类结果",
                         save_path: Optional[str] = None,
                         show_noise: bool = True,
                         alpha: float = 0.6,
                         s: float = 30.0,
                         dpi: int = DEFAULT_FIGURE_DPI) -> plt.Figure:
        """
        绘制2D聚类结果

        只使用每个点的前两个坐标。

        Args:
            points: 点数据
            clusters: 聚类列表
            noise: 噪声点列表
            title: 图表标题
            save_path: 保存路径
            show_noise: 是否显示噪声点
            alpha: 透明度
            s: 点的大小
            dpi: 保存图片的分辨率

        Returns:
            matplotlib图形对象
        """
        points = np.asarray(points, dtype=float)
        noise_set = set(noise or [])

        fig, ax = plt.subplots(figsize=self.figsize)

        colors = self.cmap(np.linspace(0, 1, max(len(clusters), 1)))

        for cluster_id, members in enumerate(clusters):
            members = [i for i in members if i not in noise_set]
            if not members:
                continue

            cluster_points = points[members]
            color = colors[cluster_id]

            ax.scatter(cluster_points[:, 0], cluster_points[:, 1],
                       c=[color], label=f'聚类 {cluster_id}',
                       marker='o', s=s, alpha=alpha, edgecolors='w', linewidths=0.5)

            # 绘制凸包（对于较大的聚类）
            if len(cluster_points) > 3:
                try:
                    hull = ConvexHull(cluster_points[:, :2])
                except QhullError:
                    # 共线等退化情况没有凸包
                    continue
                hull_points = cluster_points[hull.vertices]
                hull_points = np.vstack([hull_points, hull_points[0]])  # 闭合多边形

                ax.plot(hull_points[:, 0], hull_points[:, 1],
                        color=color, alpha=0.3, linewidth=1, linestyle='--')

        if show_noise and noise_set:
            noise_points = points[sorted(noise_set)]
            ax.scatter(noise_points[:, 0], noise_points[:, 1],
                       c='gray', label='噪声点', marker='x', s=s * 0.5, alpha=alpha * 0.5)

        ax.set_title(title, fontsize=14, fontweight='bold')
        ax.set_xlabel('X坐标')
        ax.set_ylabel('Y坐标')
        ax.grid(True, alpha=0.3)

        # 图例只显示前15项以避免过于拥挤
        handles, labels_legend = ax.get_legend_handles_labels()
        if handles:
            ax.legend(handles[:15], labels_legend[:15], loc='upper right', fontsize=8)

        stats_text = f'聚类数: {len(clusters)}\n噪声点: {len(noise_set)}\n总点数: {len(points)}'
        ax.text(0.02, 0.98, stats_text, transform=ax.transAxes,
                fontsize=10, verticalalignment='top',
                bbox=dict(boxstyle='round', facecolor='wheat', alpha=0.8))

        plt.tight_layout()

        if save_path:
            plt.savefig(save_path, dpi=dpi, bbox_inches='tight')
            print(f"聚类图已保存到: {save_path}")

        return fig
