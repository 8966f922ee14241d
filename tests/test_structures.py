import pytest

from algori.structures import (
    BinaryTree,
    LinkedList,
    LinkedListNode,
    MaxPriorityQueue,
    Pointer,
    Stack,
)


def test_binary_tree_planets():
    planets = ["Mercury", "Venus", "Mars", "Jupiter", "Saturn", "Uranus"]
    tree = BinaryTree()
    for planet in planets:
        tree.add(planet)
    assert tree.walk() == ["Jupiter", "Mars", "Mercury", "Saturn", "Uranus", "Venus"]


def test_binary_tree_walk_is_sorted_with_duplicates():
    values = [5, 3, 8, 3, 1, 9, 5, 0]
    tree = BinaryTree()
    for v in values:
        tree.add(v)
    assert tree.walk() == sorted(values)


def test_binary_tree_empty_walk():
    assert BinaryTree().walk() == []


def test_linked_list_push_pop_order():
    lst = LinkedList()
    for i in range(101):
        lst.push(i)
    assert lst.peek() == 100
    assert [lst.pop() for _ in range(101)] == list(range(100, -1, -1))
    assert lst.is_empty()
    assert lst.pop() is None
    assert lst.peek() is None


def test_linked_list_search():
    lst = LinkedList()
    for i in range(101):
        lst.push(i)
    node = lst.search(9)
    assert isinstance(node, LinkedListNode) and node.value == 9
    assert node.next.value == 8
    assert lst.search(500) is None


def test_linked_list_iteration():
    lst = LinkedList()
    for v in "abc":
        lst.push(v)
    assert list(lst) == ["c", "b", "a"]


def test_pointer_value_and_move():
    array = [3, 1, 4, 1, 5, 9, 2, 6, 5, 3, 5]
    pointer = Pointer(array)
    assert pointer.value() == 3
    pointer.move_by(5)
    assert pointer.index == 5
    assert pointer.value() == array[5]


def test_pointer_out_of_range_and_negative():
    pointer = Pointer([1, 2])
    pointer.move_by(2)
    with pytest.raises(IndexError):
        pointer.value()
    with pytest.raises(ValueError):
        pointer.move_by(-1)


def test_priority_queue_pop_max():
    queue = MaxPriorityQueue()
    for v in [3, 2, 6, 1, 0, 99, 2, 3, 7, 1, 3, 7, 9]:
        queue.push(v)
    assert queue.pop() == 99


def test_priority_queue_drains_in_descending_order():
    values = [3, 2, 6, 1, 0, 99, 2, 3, 7, 1, 3, 7, 9]
    queue = MaxPriorityQueue()
    for v in values:
        queue.push(v)
    drained = [queue.pop() for _ in range(len(values))]
    assert drained == sorted(values, reverse=True)
    assert queue.pop() is None
    assert len(queue) == 0


def test_stack_push_pop():
    stack = Stack()
    for i in range(11):
        stack.push(i)
    assert stack.peek() == 10
    assert [stack.pop() for _ in range(11)] == list(range(10, -1, -1))
    assert stack.is_empty() is True
    assert stack.pop() is None
    assert stack.peek() is None