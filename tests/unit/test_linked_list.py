from dsviz.components.linked_list import LinkedList


def test_insert_at_end_and_len():
    ll = LinkedList()
    assert ll.len() == 0
    assert str(ll) == "[Head] [Tail]"

    ll.insert_at_end(1)
    ll.insert_at_end(2)
    assert ll.len() == 2
    assert str(ll) == "[Head] 1 -> 2 [Tail]"


def test_insert_at_beginning():
    ll = LinkedList([2, 3])
    ll.insert_at_beginning(1)

    assert ll.to_list() == [1, 2, 3]
    node = ll.get(0)
    assert node is not None
    assert node.value == 1


def test_insert_in_middle():
    ll = LinkedList([1, 3])
    ll.insert_at_position(2, 1)

    assert str(ll) == "[Head] 1 -> 2 -> 3 [Tail]"


def test_insert_at_position_clamps():
    ll = LinkedList([5])
    ll.insert_at_position(4, -3)
    ll.insert_at_position(6, 100)

    assert ll.to_list() == [4, 5, 6]


def test_search_found():
    ll = LinkedList([7, 8, 9])

    result = ll.find_node(8)
    assert result is not None
    node, idx = result
    assert idx == 1
    assert node.value == 8
    assert ll.search(9) == 2


def test_search_not_found():
    ll = LinkedList([7, 8])

    assert ll.find_node(42) is None
    assert ll.search(42) == -1


def test_delete_head_middle_and_missing():
    ll = LinkedList([1, 2, 3, 2])

    assert ll.delete(1) is True
    assert ll.to_list() == [2, 3, 2]

    # only the first match is unlinked
    assert ll.delete(2) is True
    assert ll.to_list() == [3, 2]

    assert ll.delete(99) is False
    assert ll.to_list() == [3, 2]


def test_delete_on_empty_list():
    ll = LinkedList()
    assert ll.delete(1) is False
    assert ll.is_empty()


def test_get_out_of_range():
    ll = LinkedList([1])
    assert ll.get(-1) is None
    assert ll.get(5) is None
