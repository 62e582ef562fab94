import pytest

from density_clustering.clustering.priority_queue import PriorityQueue


class TestPriorityQueue:

    def test_ascending_initial_elements_sorted_by_priority(self):
        queue = PriorityQueue([1, 2, 3, 4], [4, 1, 2, 3], 'asc')

        assert queue.get_elements() == [2, 3, 4, 1]
        assert queue.get_priorities() == [1, 2, 3, 4]

    def test_descending_is_default(self):
        queue = PriorityQueue([1, 2, 3, 4], [4, 1, 2, 3])

        assert queue.sorting == 'desc'
        assert queue.get_elements() == [1, 4, 3, 2]
        assert queue.get_priorities() == [4, 3, 2, 1]

    def test_equal_priorities_keep_insertion_order(self):
        queue = PriorityQueue(sorting='asc')
        queue.insert('a', 1)
        queue.insert('b', 1)
        queue.insert('c', 1)
        queue.insert('d', 0)
        queue.insert('e', 2)

        assert queue.get_elements() == ['d', 'a', 'b', 'c', 'e']

    def test_descending_insert_before_first_smaller(self):
        queue = PriorityQueue(['a', 'b', 'c'], [5, 3, 1])
        queue.insert('x', 3)
        queue.insert('y', 4)

        assert queue.get_elements_with_priorities() == [
            ('a', 5), ('y', 4), ('b', 3), ('x', 3), ('c', 1)
        ]

    def test_remove_present_element(self):
        queue = PriorityQueue(['a', 'b', 'c', 'd'], [1, 2, 3, 4], 'asc')
        queue.remove('b')

        assert len(queue) == 3
        assert queue.get_elements() == ['a', 'c', 'd']
        assert queue.get_priorities() == [1, 3, 4]

    def test_remove_absent_element_is_noop(self):
        queue = PriorityQueue(['a', 'b'], [1, 2], 'asc')
        queue.remove('z')

        assert queue.get_elements_with_priorities() == [('a', 1), ('b', 2)]

    def test_remove_only_first_occurrence(self):
        queue = PriorityQueue(sorting='asc')
        queue.insert('x', 1)
        queue.insert('x', 2)
        queue.remove('x')

        assert queue.get_elements_with_priorities() == [('x', 2)]

    def test_mismatched_lengths_rejected(self):
        with pytest.raises(ValueError):
            PriorityQueue([1, 2, 3], [1, 2])

    def test_unknown_sorting_rejected(self):
        with pytest.raises(ValueError):
            PriorityQueue(sorting='random')

    def test_views_are_copies(self):
        queue = PriorityQueue([1], [1])
        queue.get_elements().append(2)
        queue.get_priorities().append(2)

        assert len(queue) == 1
        assert queue.get_priorities() == [1]

    def test_sequence_protocol(self):
        queue = PriorityQueue([7, 8, 9], [3, 2, 1], 'asc')

        assert queue[0] == 9
        assert queue.get_element_priority(0) == 1
        assert list(queue) == [9, 8, 7]
        assert 8 in queue
        assert 5 not in queue
