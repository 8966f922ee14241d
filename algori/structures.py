"""Basic data structures: binary search tree, linked list, pointer, priority queue, stack."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any


@dataclass
class _TreeNode:
    element: Any
    left: _TreeNode | None = None
    right: _TreeNode | None = None


class BinaryTree:
    """Unbalanced binary search tree; equal values go to the left."""

    def __init__(self) -> None:
        self._root: _TreeNode | None = None

    def add(self, value: Any) -> None:
        """Insert a value."""
        if self._root is None:
            self._root = _TreeNode(value)
            return
        node = self._root
        while True:
            if value <= node.element:
                if node.left is None:
                    node.left = _TreeNode(value)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = _TreeNode(value)
                    return
                node = node.right

    def walk(self) -> list[Any]:
        """Return the elements in order."""
        result: list[Any] = []
        stack: list[_TreeNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.element)
            node = node.right
        return result


@dataclass
class LinkedListNode:
    """A node of a singly linked list."""

    value: Any
    next: LinkedListNode | None = None


@dataclass
class LinkedList:
    """Singly linked list with insertion and removal at the head."""

    head: LinkedListNode | None = None

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def push(self, value: Any) -> None:
        """Insert a value at the head."""
        self.head = LinkedListNode(value, self.head)

    def pop(self) -> Any | None:
        """Remove and return the head value, or None if empty."""
        if self.head is None:
            return None
        node = self.head
        self.head = node.next
        return node.value

    def peek(self) -> Any | None:
        """Return the head value, or None if empty."""
        return None if self.head is None else self.head.value

    def is_empty(self) -> bool:
        return self.head is None

    def search(self, value: Any) -> LinkedListNode | None:
        """Return the first node holding value, or None."""
        node = self.head
        while node is not None:
            if node.value == value:
                return node
            node = node.next
        return None


class Pointer:
    """A cursor that moves forward over a sequence."""

    def __init__(self, array: Sequence[Any]) -> None:
        self._array = array
        self.index = 0

    def value(self) -> Any:
        """Return the element under the cursor."""
        return self._array[self.index]

    def move_by(self, offset: int) -> None:
        """Move the cursor forward by a non-negative offset."""
        if offset < 0:
            raise ValueError("offset must be non-negative")
        self.index += offset


@dataclass
class MaxPriorityQueue:
    """Max-priority queue on a binary heap."""

    heap: list[Any] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.heap)

    def push(self, value: Any) -> None:
        """Add a value."""
        heap = self.heap
        heap.append(value)
        i = len(heap) - 1
        while i > 0 and heap[(i - 1) // 2] < heap[i]:
            parent = (i - 1) // 2
            heap[i], heap[parent] = heap[parent], heap[i]
            i = parent

    def pop(self) -> Any | None:
        """Remove and return the largest value, or None if empty."""
        heap = self.heap
        if not heap:
            return None
        last = heap.pop()
        if not heap:
            return last
        result, heap[0] = heap[0], last
        i, n = 0, len(heap)
        while 2 * i + 1 < n:
            largest = i
            for child in (2 * i + 1, 2 * i + 2):
                if child < n and heap[child] > heap[largest]:
                    largest = child
            if largest == i:
                break
            heap[i], heap[largest] = heap[largest], heap[i]
            i = largest
        return result


@dataclass
class Stack:
    """Last-in, first-out stack."""

    _data: list[Any] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self._data)

    def push(self, value: Any) -> None:
        self._data.append(value)

    def pop(self) -> Any | None:
        """Remove and return the top value, or None if empty."""
        return self._data.pop() if self._data else None

    def peek(self) -> Any | None:
        """Return the top value, or None if empty."""
        return self._data[-1] if self._data else None

    def is_empty(self) -> bool:
        return not self._data