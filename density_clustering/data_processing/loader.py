"""
数据加载器
负责从CSV读取点数据以及保存聚类结果
"""

import json
import warnings
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

import pandas as pd


def load_points_csv(file_path: Union[str, Path],
                    columns: Optional[Sequence[str]] = None,
                    nrows: Optional[int] = None,
                    header: Optional[str] = 'infer') -> List[List[float]]:
    """
    从CSV文件加载点数据

    Args:
        file_path: CSV文件路径
        columns: 作为坐标使用的列名（None表示全部列）
        nrows: 限制加载的行数
        header: 传给pandas的表头设置，无表头时为None

    Returns:
        点列表，每个点是坐标列表
    """
    df = pd.read_csv(file_path, nrows=nrows, header=header)

    if columns is not None:
        df = df[list(columns)]

    numeric = df.apply(pd.to_numeric, errors='coerce')
    invalid_rows = numeric.isna().any(axis=1)

    if invalid_rows.any():
        # 含非数值坐标的行直接丢弃
        warnings.warn(f"{file_path}: 跳过 {int(invalid_rows.sum())} 行非数值数据")
        numeric = numeric[~invalid_rows]

    return numeric.astype(float).values.tolist()


def clustering_result_frame(clusters: List[List[int]],
                            noise: Optional[List[int]] = None,
                            reachability_plot: Optional[List[Tuple[int, Optional[float]]]] = None
                            ) -> pd.DataFrame:
    """
    将聚类结果整理为DataFrame

    每行对应一个点，按聚类内的顺序排列。

    Args:
        clusters: 聚类列表
        noise: 噪声点列表（DBSCAN）
        reachability_plot: 可达图（OPTICS）

    Returns:
        包含point_id、cluster、order、is_noise、reachability列的DataFrame
    """
    noise_set = set(noise or [])
    reachability: Dict[int, Optional[float]] = dict(reachability_plot or [])

    rows = []
    for cluster_id, members in enumerate(clusters):
        for order, point_idx in enumerate(members):
            rows.append({
                'point_id': point_idx,
                'cluster': cluster_id,
                'order': order,
                'is_noise': point_idx in noise_set,
                'reachability': reachability.get(point_idx)
            })

    return pd.DataFrame(rows, columns=['point_id', 'cluster', 'order', 'is_noise', 'reachability'])


def save_clustering_result(clusters: List[List[int]],
                           output_path: Union[str, Path],
                           noise: Optional[List[int]] = None,
                           reachability_plot: Optional[List[Tuple[int, Optional[float]]]] = None,
                           format: str = 'csv') -> Path:
    """
    保存聚类结果

    Args:
        clusters: 聚类列表
        output_path: 输出文件路径（后缀按格式替换）
        noise: 噪声点列表
        reachability_plot: 可达图
        format: 输出格式 ('csv', 'json', 'pickle')

    Returns:
        实际写入的文件路径
    """
    output_path = Path(output_path)

    if format == 'json':
        # JSON保留聚类的嵌套结构
        output_file = output_path.with_suffix('.json')
        payload = {
            'clusters': clusters,
            'noise': noise or [],
            'reachability_plot': [list(item) for item in (reachability_plot or [])]
        }
        with open(output_file, 'w') as f:
            json.dump(payload, f, indent=2)
        return output_file

    df = clustering_result_frame(clusters, noise, reachability_plot)

    if format == 'csv':
        output_file = output_path.with_suffix('.csv')
        df.to_csv(output_file, index=False)
    elif format == 'pickle':
        output_file = output_path.with_suffix('.pkl')
        df.to_pickle(output_file)
    else:
        raise ValueError(f"不支持的格式: {format}")

    return output_file
