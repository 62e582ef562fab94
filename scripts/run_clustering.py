#!/usr/bin/env python3
"""
运行DBSCAN或OPTICS聚类
从CSV读取点数据，输出聚类结果、摘要和图表
"""

import sys
from pathlib import Path

# 添加项目根目录到Python路径
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import argparse
import json
from typing import Any, Dict, List

from density_clustering.config import ClusteringConfig, ALGORITHMS, DEFAULT_EPSILON, DEFAULT_OUTPUT_DIR
from density_clustering.clustering import DBSCAN, OPTICS
from density_clustering.clustering.metrics import METRICS
from density_clustering.data_processing import load_points_csv, save_clustering_result


def run_clustering(points: List[List[float]], config: ClusteringConfig) -> Dict[str, Any]:
    """
    按配置运行聚类算法

    Args:
        points: 点数据
        config: 聚类参数

    Returns:
        聚类结果和性能数据
    """
    print("\n" + "=" * 60)
    print(f"运行{config.algorithm.upper()}聚类")
    print("=" * 60)

    print(f"算法参数:")
    print(f"  epsilon (邻域半径): {config.epsilon}")
    print(f"  min_pts (最小邻居数): {config.min_pts}")
    print(f"  metric (距离度量): {config.metric}")
    print(f"  数据点数量: {len(points)}")

    result: Dict[str, Any] = {
        'algorithm': config.algorithm,
        'parameters': config.to_dict()
    }

    if config.algorithm == 'dbscan':
        model = DBSCAN(points, config.epsilon, config.min_pts, config.metric)
        clusters, noise = model.run()
        result['noise'] = noise
    else:
        model = OPTICS(points, config.epsilon, config.min_pts, config.metric)
        clusters = model.run()
        result['reachability_plot'] = model.get_reachability_plot()

    stats = model.get_cluster_stats()
    execution_time = model.execution_time

    print(f"\n聚类结果:")
    print(f"  聚类数量: {stats['n_clusters']}")
    print(f"  核心点数量: {stats['n_core_points']}")
    print(f"  噪声点数量: {stats['n_noise']}")

    if stats['cluster_sizes']:
        print(f"  聚类大小分布:")
        for cluster_id, size in list(stats['cluster_sizes'].items())[:10]:  # 显示前10个聚类
            print(f"    聚类 {cluster_id}: {size} 个点")
        if len(stats['cluster_sizes']) > 10:
            print(f"    ... 还有 {len(stats['cluster_sizes']) - 10} 个聚类")

    print(f"\n执行时间: {execution_time:.4f} 秒")

    result['clusters'] = clusters
    result['stats'] = stats
    result['execution_time'] = execution_time

    return result


def visualize_results(points: List[List[float]], result: Dict[str, Any],
                      output_dir: Path) -> None:
    """
    可视化聚类结果

    Args:
        points: 点数据
        result: 聚类结果
        output_dir: 输出目录
    """
    # 延迟导入matplotlib
    from density_clustering.visualization import ClusterVisualizer, plot_reachability

    print("\n" + "=" * 60)
    print("可视化聚类结果")
    print("=" * 60)

    output_dir.mkdir(parents=True, exist_ok=True)
    algorithm = result['algorithm']
    params = result['parameters']

    visualizer = ClusterVisualizer(figsize=(14, 12))
    visualizer.plot_clusters_2d(
        points, result['clusters'], result.get('noise'),
        title=f"{algorithm.upper()}聚类结果 (eps={params['epsilon']}, min_pts={params['min_pts']})",
        save_path=str(output_dir / f"{algorithm}_clusters_2d.png")
    )

    if 'reachability_plot' in result:
        plot_reachability(
            result['reachability_plot'], result['clusters'],
            save_path=str(output_dir / f"{algorithm}_reachability.png")
        )

    print(f"可视化结果已保存到: {output_dir}")


def save_results(result: Dict[str, Any], output_dir: Path) -> None:
    """
    保存聚类结果

    Args:
        result: 聚类结果
        output_dir: 输出目录
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    algorithm = result['algorithm']

    result_file = save_clustering_result(
        result['clusters'], output_dir / f"{algorithm}_results",
        noise=result.get('noise'),
        reachability_plot=result.get('reachability_plot'),
        format='json'
    )
    table_file = save_clustering_result(
        result['clusters'], output_dir / f"{algorithm}_points",
        noise=result.get('noise'),
        reachability_plot=result.get('reachability_plot'),
        format='csv'
    )

    summary_file = output_dir / f"{algorithm}_summary.json"
    summary = {
        'algorithm': algorithm,
        'parameters': result['parameters'],
        'stats': result['stats'],
        'execution_time': result['execution_time']
    }
    with open(summary_file, 'w') as f:
        json.dump(summary, f, indent=2, default=str)

    print(f"结果已保存到: {result_file}")
    print(f"逐点结果已保存到: {table_file}")
    print(f"摘要已保存到: {summary_file}")


def main():
    """主函数"""
    parser = argparse.ArgumentParser(description='运行DBSCAN/OPTICS密度聚类')
    parser.add_argument('--data', type=str, required=True,
                        help='点数据CSV文件路径')
    parser.add_argument('--algorithm', type=str, default='dbscan', choices=ALGORITHMS,
                        help='聚类算法（默认: dbscan）')
    parser.add_argument('--eps', type=float, default=DEFAULT_EPSILON,
                        help=f'邻域半径（默认: {DEFAULT_EPSILON}）')
    parser.add_argument('--min-pts', type=int,
                        help='核心点的最小邻居数（默认: DBSCAN为2，OPTICS为1）')
    parser.add_argument('--metric', type=str, default='euclidean',
                        choices=sorted(METRICS),
                        help='距离度量方式（默认: euclidean）')
    parser.add_argument('--columns', type=str, nargs='+',
                        help='作为坐标使用的列名（默认: 全部列）')
    parser.add_argument('--no-header', action='store_true',
                        help='CSV文件没有表头')
    parser.add_argument('--output-dir', type=str, default=str(DEFAULT_OUTPUT_DIR),
                        help=f'输出目录（默认: {DEFAULT_OUTPUT_DIR}）')
    parser.add_argument('--no-visualize', action='store_true',
                        help='不生成可视化图表')

    args = parser.parse_args()

    try:
        config = ClusteringConfig(
            algorithm=args.algorithm,
            epsilon=args.eps,
            min_pts=args.min_pts,
            metric=args.metric,
            output_dir=args.output_dir,
            visualize=not args.no_visualize
        )

        print(f"加载数据: {args.data}")
        points = load_points_csv(args.data, columns=args.columns,
                                 header=None if args.no_header else 'infer')
        if not points:
            raise ValueError("没有加载到任何点数据")
        print(f"加载了 {len(points)} 个点")

        result = run_clustering(points, config)

        if config.visualize:
            visualize_results(points, result, config.output_dir)

        save_results(result, config.output_dir)

        print("\n" + "=" * 60)
        print(f"{config.algorithm.upper()}聚类完成")
        print("=" * 60)

    except Exception as e:
        print(f"错误: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
