# adtkit

A small collection of classic abstract data types and array exercises, written
for study and experimentation. Everything is plain Python with no runtime
dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `adtkit.errors` | `IllegalStateError`, `OutOfBoundError` (an `IndexError`), `NotOrderedError` (a `ValueError`) |
| `adtkit.arrays` | `greater_than`, `member`, `largest` (returns `Largest`), `remove`, `compare`, `ordering`, `reverse` |
| `adtkit.matrix` | `Matrix` with `m[row, col]` indexing, `scale`, `transpose_from`, `copy` and `*` |
| `adtkit.geometry` | `Point` and `ComplexNumber`, both supporting `+` |
| `adtkit.vector_list` | `VectorList`, an array-backed list that grows on insert and shrinks on delete |
| `adtkit.queues` | the abstract `Queue`, and `VectorQueue` and `PointerQueue` |
| `adtkit.stack` | `Stack` |
| `adtkit.postfix` | `Operation`, `is_symbol`, `operation_for`, `execute_operation` and `PostfixStack` |
| `adtkit.heap` | `HeapPriorityQueue`, a bounded min-heap |
| `adtkit.pointer_set` | `PointerSet`, an insertion-ordered set with `union`, `intersect` and `difference` |
| `adtkit.dictionary` | `Pair` and `PointerDictionary` |
| `adtkit.binary_tree` | `TreeNode` and `BinaryTree` with `pre_order`, `in_order`, `post_order`, `depth` and `format` |
| `adtkit.n_tree` | `NTreeNode` and `NTree` |
| `adtkit.graph` | `GraphNode`, `Edge` and `AdjacencyMatrixGraph` |

## Examples

Array helpers:

```python
from adtkit.arrays import greater_than, largest, ordering, remove
from adtkit.errors import NotOrderedError

values = [1, 2, 5, 4, 5, 3, 6, 9]
greater_than(values, 1)     # 7
largest(values)             # Largest(largest=9, pos=7)
remove(values, 5)           # values is now [1, 2, 4, 5, 3, 6, 9, 0]

ordering([1, 2, 6])         # -1 (ascending)
ordering([0, 0, 0, 0])      # 0  (constant)
ordering([0, -1, -20])      # 1  (descending)
try:
    ordering([0, 1, -1, -20])
except NotOrderedError:
    print("not ordered")
```

Matrices:

```python
from adtkit.matrix import Matrix

m = Matrix(3, 3, 1)
m.scale(5)
m[0, 0]                     # 5.0
product = m * Matrix(3, 2, 1)
print(product)
```

Postfix evaluation. Each operator pushed onto a `PostfixStack` pops itself and
the two values below it and pushes the result as a string. Sums, differences
and products are made non-negative; division truncates toward zero.

```python
from adtkit.postfix import PostfixStack

s = PostfixStack()
for token in ["5", "10", "2", "*", "+"]:
    s.push(token)
s.pop()                     # "25"
```

Queues, stacks and heaps:

```python
from adtkit.queues import PointerQueue
from adtkit.stack import Stack
from adtkit.heap import HeapPriorityQueue

q = PointerQueue(10)
q.enqueue(50)
q.enqueue(100)
q.dequeue()                 # 50

st = Stack()
st.push(1)
st.push(2)
st.top()                    # 2

h = HeapPriorityQueue(5)
for v in (1, 2, 3, 2):
    h.insert(v)
h.delete_minimum()
h.minimum()                 # 2
```

`VectorQueue` uses each of its `max_size` slots only once, so over its whole
life it accepts at most `max_size` enqueues, even after dequeues.

Sets and dictionaries:

```python
from adtkit.pointer_set import PointerSet
from adtkit.dictionary import Pair, PointerDictionary

a, b = PointerSet(10), PointerSet(10)
for v in (1, 2, 3, 4, 5):
    a.insert(v)
for v in (1, 3, 33):
    b.insert(v)
sorted(a.intersect(b))      # [1, 3]
sorted(a.difference(b))     # [2, 4, 5]

d = PointerDictionary(10)
d.put(Pair("A", 10))
d.put(Pair("A", 100))       # an existing key is updated
d.get_value("A")            # 100
```

Binary trees:

```python
from adtkit.binary_tree import BinaryTree, TreeNode

left = BinaryTree(5)
left.insert_left(TreeNode(2))
left.insert_right(TreeNode(3))

t = BinaryTree(10)
t.insert_left(left.root)
list(t.pre_order())         # [10, 5, 2, 3]
list(t.in_order())          # [2, 5, 3, 10]
list(t.post_order())        # [2, 3, 5, 10]
```

Graphs:

```python
from adtkit.graph import AdjacencyMatrixGraph, GraphNode

g = AdjacencyMatrixGraph()
n1, n2 = GraphNode("N1"), GraphNode("N2")
g.insert_node(n1)
g.insert_node(n2)
g.insert_link(n1, n2, 5)
g.link_weight(n1, n2)       # 5
g.adjacents(n1)             # [n2]
```

## Errors

Errors are raised as Python exceptions:

- `OutOfBoundError` for positions outside a `VectorList` or a `VectorQueue`
  that is empty or used up; `Matrix` raises `IndexError` for bad indices.
- `IllegalStateError` for operations that need a non-empty (or non-full)
  structure, and for graph or tree operations that break their rules.
- `KeyError` when removing or looking up a missing set element or dictionary key.
- `ValueError` for mismatched matrix dimensions and negative sizes.

## What it does not do

This is a library only: there is no command-line program, and nothing is
stored on disk. The structures live in memory for as long as the objects do.