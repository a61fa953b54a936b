import pytest

from fractview.linkedlist import LinkedList, Node


def test_append_keeps_order():
    lst = LinkedList()
    for v in ["a", "b", "c"]:
        lst.append(v)
    assert list(lst) == ["a", "b", "c"]


def test_push_front_reverses_order():
    lst = LinkedList()
    for v in [1, 2, 3]:
        lst.push_front(v)
    assert list(lst) == [3, 2, 1]


def test_len_counts_nodes():
    lst = LinkedList([1, 2, 3, 4])
    assert len(lst) == 4
    assert len(LinkedList()) == 0


def test_last_returns_final_node():
    lst = LinkedList(["x", "y"])
    node = lst.last()
    assert isinstance(node, Node)
    assert node.value == "y"
    assert node.next is None


def test_last_of_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().last()


def test_append_returns_new_last_node():
    lst = LinkedList([1])
    node = lst.append(2)
    assert lst.last() is node


def test_clear_calls_deleter_in_order_and_empties():
    seen = []
    lst = LinkedList([1, 2, 3])
    lst.clear(seen.append)
    assert seen == [1, 2, 3]
    assert list(lst) == []
    assert len(lst) == 0


def test_clear_without_deleter():
    lst = LinkedList(["a"])
    lst.clear()
    assert lst.head is None


def test_foreach_visits_every_value():
    seen = []
    LinkedList([5, 6, 7]).foreach(seen.append)
    assert seen == [5, 6, 7]


def test_map_builds_new_list_and_leaves_original():
    lst = LinkedList([1, 2, 3])
    mapped = lst.map(lambda v: v * 10)
    assert list(mapped) == [10, 20, 30]
    assert list(lst) == [1, 2, 3]
    assert mapped.head is not lst.head


def test_map_of_empty_is_empty():
    assert list(LinkedList().map(str)) == []