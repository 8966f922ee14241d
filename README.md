# algori

A small library of classic algorithms and data structures in plain Python.
It has no dependencies outside the standard library. It is a library only.
It has no command-line tool.

## Installation

```
pip install .
```

## Modules

- `algori.sort` has the sorting functions. Every function except `merge_sort`
  sorts a list in place and returns `None`.
  - `insertion_sort`, `bubble_sort`, `selection_sort`, `quicksort`,
    `heap_max_sort` and `pdqsort` sort in ascending order.
  - `heap_min_sort` uses a min-heap and leaves the list in **descending** order.
  - `binary_sort` is binary insertion sort. It raises `ValueError` when the list
    has fewer than two elements.
  - `count_sort` and `radix_sort` accept only non-negative integers. They raise
    `ValueError` for anything else.
  - `merge_sort` returns a new sorted list and does not change its input.
- `algori.search` has the search functions.
  - `binary_search(array, key)` searches a sorted sequence. It returns a
    `SearchResult(found, index)`. When the key is missing, `index` is the
    insertion point.
  - `linearity_search(array, value)` returns the index of the first match, or
    `None`.
  - `max_search` and `min_search` return the index of the first largest or
    smallest element. Both raise `ValueError` on an empty sequence.
  - `min_and_max` returns `(min_index, max_index)` using pairwise comparisons,
    or `None` for an empty sequence.
- `algori.subarray` finds maximum subarrays. Both functions return
  `(left, right, sum)` and raise `ValueError` on an empty sequence.
  - `merge_max_subarray` returns the best subarray that crosses the midpoint.
  - `rude_max_subarray` searches by brute force.
- `algori.numeric` has two functions.
  - `dft(signal)` gives the discrete Fourier transform of a real signal as a
    list of `Complex`.
  - `gcd(a, b)` is Euclid's algorithm.
- `algori.complex` has `Complex(real, imag)`, a frozen dataclass.
  - It supports `+`, `-`, `*` and `/`.
  - It orders by real part, then by imaginary part.
- `algori.matrix` has `Matrix(rows, cols, data)`, a matrix of floats.
  - It supports `+`, `-` and `*`. These raise `ValueError` when the shapes do
    not match.
  - `check()` reports whether the data matches the declared shape.
- `algori.structures` has the data structures.
  - `BinaryTree` is an unbalanced search tree. `walk()` returns the elements
    in order.
  - `LinkedList` and `LinkedListNode` form a singly linked list with push and
    pop at the head.
  - `Pointer` is a forward-moving cursor over a sequence.
  - `MaxPriorityQueue` is a binary max-heap.
  - `Stack` is a last-in, first-out stack.
  - Methods such as `pop` and `peek` return `None` when the structure is empty.
- `algori.gates` has logic gates built from NAND. Each gate's `output()` method
  gives its result.
  - Gates: `Nand`, `Not`, `And`, `Or`, `Nor`, `Xor`, `Xnor`, `ThreeAnd`,
    `ThreeOr`, `HighLevel`, `LowLevel`.
  - Other elements: `Switch`, `EightSwitch`, `DelayLine` (which sleeps for
    `delay` milliseconds) and `DataSelector`.
  - These gates are abstract `LogicGate` subclasses: every gate above plus
    `Switch` and `DelayLine`.
- `algori.circuits` has circuits built from the gates.
  - Adders: `HalfAdder` and `FullAdder` return `(sum, carry)`.
  - 8-bit circuits: `EightBitSplitter`, `EightBitMux`, `EightBitAdder`,
    `EightBitNot`, `EightBitOr`.

## Examples

Sorting:

```python
from algori.sort import pdqsort, merge_sort

data = [7, 3, 5, 1, 9, 65, 65, 4, 6, 6]
pdqsort(data)
assert data == [1, 3, 4, 5, 6, 6, 7, 9, 65, 65]

assert merge_sort([3, 1, 2]) == [1, 2, 3]
```

Searching:

```python
from algori.search import binary_search, linearity_search, min_and_max

assert linearity_search([7, 3, 5, 1, 9, 65, 4, 5], 65) == 5
assert min_and_max([7, 3, 5, 1, 9, 65, 4, 5]) == (3, 5)
assert binary_search([1, 3, 5], 4) == (False, 2)
```

Numbers and matrices:

```python
from algori.numeric import gcd
from algori.complex import Complex
from algori.matrix import Matrix

assert gcd(18, 9) == 9
assert Complex(1, 2) * Complex(3, 4) == Complex(-5, 10)

a = Matrix(2, 2, [[1.0, 2.0], [3.0, 4.0]])
b = Matrix(2, 2, [[1.0, 0.0], [0.0, 1.0]])
assert a * b == a
```

Data structures:

```python
from algori.structures import BinaryTree, MaxPriorityQueue

tree = BinaryTree()
for planet in ["Mercury", "Venus", "Mars", "Jupiter", "Saturn", "Uranus"]:
    tree.add(planet)
assert tree.walk() == ["Jupiter", "Mars", "Mercury", "Saturn", "Uranus", "Venus"]

queue = MaxPriorityQueue()
for n in [3, 2, 6, 1, 0, 99, 2]:
    queue.push(n)
assert queue.pop() == 99
```

Logic circuits:

```python
from algori.gates import Xor
from algori.circuits import EightBitAdder

assert Xor(True, False).output() is True
assert EightBitAdder(False, 1, 1).output() == (2, False)
```

## Running the tests

```
pip install .[test]
pytest
```