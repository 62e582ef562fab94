"""
有序优先队列
按优先级排序的工作列表，OPTICS算法按可达距离扩展时使用
"""

from typing import Any, Iterator, List, Optional, Sequence, Tuple


class PriorityQueue:
    """按优先级排序的队列，元素与优先级保存在两个平行列表中"""

    SORTINGS = ('asc', 'desc')

    def __init__(self, elements: Optional[Sequence[Any]] = None,
                 priorities: Optional[Sequence[float]] = None,
                 sorting: str = 'desc'):
        """
        初始化优先队列

        Args:
            elements: 初始元素（可选）
            priorities: 与初始元素一一对应的优先级（可选）
            sorting: 排序方向，'asc'为升序，'desc'为降序
        """
        if sorting not in self.SORTINGS:
            raise ValueError(f"不支持的排序方式: {sorting}")

        self._queue: List[Any] = []
        self._priorities: List[float] = []
        self._sorting = sorting

        if elements is not None and priorities is not None:
            if len(elements) != len(priorities):
                raise ValueError("元素和优先级的长度必须一致")
            for element, priority in zip(elements, priorities):
                self.insert(element, priority)

    @property
    def sorting(self) -> str:
        return self._sorting

    def insert(self, element: Any, priority: float) -> None:
        """
        插入元素

        从队尾向队首扫描，凡是新优先级严格优于该位置优先级的下标都会成为
        候选插入位置，最终取最靠前的一个；优先级相同的元素保持先来后到。

        Args:
            element: 要插入的元素
            priority: 元素的优先级
        """
        index_to_insert = len(self._queue)

        for index in range(len(self._queue) - 1, -1, -1):
            if self._is_better(priority, self._priorities[index]):
                index_to_insert = index

        self._queue.insert(index_to_insert, element)
        self._priorities.insert(index_to_insert, priority)

    def remove(self, element: Any) -> None:
        """
        删除第一个等于element的元素及其优先级，元素不存在时不做任何操作

        Args:
            element: 要删除的元素
        """
        for index, queued in enumerate(self._queue):
            if queued == element:
                del self._queue[index]
                del self._priorities[index]
                break

    def _is_better(self, priority: float, other: float) -> bool:
        if self._sorting == 'desc':
            return priority > other
        return priority < other

    def get_elements(self) -> List[Any]:
        """返回当前顺序的元素列表"""
        return list(self._queue)

    def get_priorities(self) -> List[float]:
        """返回当前顺序的优先级列表"""
        return list(self._priorities)

    def get_element_priority(self, index: int) -> float:
        return self._priorities[index]

    def get_elements_with_priorities(self) -> List[Tuple[Any, float]]:
        """
        返回(元素, 优先级)对

        Returns:
            按队列顺序排列的(元素, 优先级)列表
        """
        return list(zip(self._queue, self._priorities))

    def __len__(self) -> int:
        return len(self._queue)

    def __getitem__(self, index: int) -> Any:
        return self._queue[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._queue))

    def __contains__(self, element: Any) -> bool:
        return element in self._queue

    def __repr__(self) -> str:
        return f"PriorityQueue({self.get_elements_with_priorities()!r}, sorting={self._sorting!r})"
