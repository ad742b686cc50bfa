import pytest

from pipex.linked_list import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_init_from_items_keeps_order():
    lst = LinkedList([1, 2, 3])
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_push_front_prepends():
    lst = LinkedList(["b", "c"])
    node = lst.push_front("a")
    assert list(lst) == ["a", "b", "c"]
    assert lst.head is node


def test_push_back_appends():
    lst = LinkedList(["a"])
    node = lst.push_back("b")
    assert list(lst) == ["a", "b"]
    assert lst.last() is node


def test_push_back_on_empty_sets_head():
    lst = LinkedList()
    node = lst.push_back(5)
    assert lst.head is node
    assert lst.last() is node


def test_last_returns_tail_node():
    lst = LinkedList([1, 2, 3])
    tail = lst.last()
    assert isinstance(tail, Node)
    assert tail.content == 3
    assert tail.next is None


def test_len_counts_all_nodes():
    lst = LinkedList()
    for i in range(10):
        lst.push_front(i)
    assert len(lst) == 10


def test_clear_calls_delete_in_order():
    deleted = []
    lst = LinkedList(["x", "y", "z"])
    lst.clear(deleted.append)
    assert deleted == ["x", "y", "z"]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete_empties():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_iterate_visits_each_content():
    seen = []
    LinkedList([4, 5, 6]).iterate(seen.append)
    assert seen == [4, 5, 6]


def test_map_returns_new_list():
    original = LinkedList([1, 2, 3])
    mapped = original.map(lambda x: x * 10)
    assert list(mapped) == [10, 20, 30]
    assert list(original) == [1, 2, 3]
    assert mapped is not original


def test_map_of_empty_list_is_empty():
    assert list(LinkedList().map(str)) == []


def test_map_failure_deletes_partial_results():
    deleted = []

    def func(x):
        if x == 3:
            raise RuntimeError("boom")
        return x * 2

    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3, 4]).map(func, deleted.append)
    assert deleted == [2, 4]