# binarytrees

Linked binary trees in plain Python. The package covers building and
inspecting trees, traversals and rotations. It also provides binary search
trees, AVL trees and max binary heaps. A text renderer draws a tree so you
can see its shape.

Every node is a `binarytrees.node.Node`. It holds an integer `value` and
links to its `parent`, `left` and `right` nodes. Creating a node with a
`parent` records that parent but does not attach the node as a child. You
attach it yourself.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Building and inspecting a tree

```python
from binarytrees.node import Node, insert_left, insert_right, height, size, inorder

root = Node(98)
root.left = Node(12, parent=root)
root.right = Node(402, parent=root)
insert_right(root.left, 54)
insert_right(root, 128)

height(root)         # 2
size(root)           # 5
list(inorder(root))  # [12, 54, 98, 402, 128]
```

`insert_left` and `insert_right` put a new node between the parent and any
child already on that side.

`binarytrees.node` also offers:

- `is_leaf`
- `is_root`
- `preorder` and `postorder`, which are generators like `inorder`
- `depth`, which counts edges up to the root
- `leaves`
- `internal_nodes`, which counts nodes with at least one child
- `balance`, which is the left height minus the right height
- `is_full`
- `is_perfect`
- `sibling`
- `uncle`

## Shape and traversal

`binarytrees.shape` provides:

- `levelorder`, a generator that yields values level by level.
- `is_complete`.
- `lowest_common_ancestor`. A node counts as its own ancestor. It returns `None` if the two nodes share no ancestor.
- `rotate_left` and `rotate_right`. Each returns the new root of the subtree. Each raises `ValueError` when the needed child is missing.

## Rendering

```python
from binarytrees.render import render, print_tree

text = render(root)   # the drawing as a string
print_tree(root)      # prints the same drawing
```

Each node is drawn as its value padded to three digits in brackets, such as
`(098)`. Dashes and dots link parents to children.

## Search trees

```python
from binarytrees.bst import array_to_bst, bst_insert, bst_search, bst_remove, is_bst

tree = array_to_bst([79, 47, 68, 87, 84, 91, 21, 32, 34, 2])
bst_search(tree, 32).value   # 32
tree, node = bst_insert(tree, 5)   # node is None if 5 was already present
tree = bst_remove(tree, 79)        # raises KeyError if the value is absent
is_bst(tree)                       # True
```

`array_to_bst` skips repeated values. When `bst_remove` removes a node with
two children, that node takes its in-order successor's value.

`binarytrees.avl` offers the same for self-balancing trees:

- `avl_insert`, which returns `(root, node)`.
- `array_to_avl`.
- `avl_remove`. It rebalances after removal. A value not in the tree leaves the tree as it was.
- `sorted_array_to_avl`, which builds from a sorted sequence by taking middles.
- `is_avl`.

## Max binary heaps

```python
from binarytrees.heap import array_to_heap, heap_insert, heap_extract, heap_to_sorted_array, is_heap

heap = array_to_heap([79, 47, 68, 87, 84, 91])
is_heap(heap)                  # True
heap, node = heap_insert(heap, 100)
heap, top = heap_extract(heap) # top == 100; raises IndexError on an empty heap
values = heap_to_sorted_array(heap)
```

- `heap_insert` places the new node at the next free place in level order. It then moves the value upward while it exceeds its parent's.
- `heap_extract` promotes child values down one path and removes the node at the end of that path.
- `heap_to_sorted_array` extracts repeatedly until the heap is empty and returns the values in the order they came out. It consumes the heap.

## What this package does not do

The package is a library only. It has no command-line program, and it does
not store trees or load them from files.