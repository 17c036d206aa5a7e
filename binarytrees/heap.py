"""Max binary heaps held as linked trees: validation, insertion and extraction."""

from __future__ import annotations

from collections.abc import Iterable

from binarytrees.node import Node, size
from binarytrees.shape import is_complete


def _ordered(tree: Node) -> bool:
    """Return True if no descendant of *tree* holds a value above its parent's."""
    for child in (tree.left, tree.right):
        if child is not None and (child.value > tree.value or not _ordered(child)):
            return False
    return True


def is_heap(tree: Node | None) -> bool:
    """Return True if *tree* is a complete tree with no child above its parent.

    Returns False for None.
    """
    return is_complete(tree) and _ordered(tree)


def heap_insert(root: Node | None, value: int) -> tuple[Node, Node]:
    """Insert *value* into the max heap rooted at *root*.

    The new node takes the next free place in level order and its value
    is swapped upward while it exceeds its parent's. Returns ``(root, node)``:
    the root of the heap and the node that ends up holding *value*.
    """
    if root is None:
        node = Node(value)
        return node, node

    path = bin(size(root) + 1)[3:]
    parent = root
    for step in path[:-1]:
        parent = parent.right if step == "1" else parent.left
    node = Node(value, parent)
    if path[-1] == "1":
        parent.right = node
    else:
        parent.left = node

    while node.parent is not None and node.value > node.parent.value:
        node.value, node.parent.value = node.parent.value, node.value
        node = node.parent
    return root, node


def array_to_heap(values: Iterable[int]) -> Node | None:
    """Build a max heap by inserting *values* in order; None if there are none."""
    root: Node | None = None
    for value in values:
        root, _ = heap_insert(root, value)
    return root


def _largest(tree: Node) -> Node:
    """Return the node judged largest in *tree*, searching down left children."""
    if tree.left is None:
        return tree
    left_max = _largest(tree.left)
    current = left_max if left_max.value > tree.value else tree
    if tree.right is not None:
        right_max = _largest(tree.right)
        current = right_max if right_max.value > current.value else tree
    return current


def _detach(node: Node) -> None:
    parent = node.parent
    if parent is not None:
        if parent.left is node:
            parent.left = None
        if parent.right is node:
            parent.right = None
    node.parent = None


def _promote(tree: Node) -> None:
    """Fill *tree* with the larger child value repeatedly down the tree."""
    while tree.left is not None:
        chosen = _largest(tree.left)
        if tree.right is not None:
            right_max = _largest(tree.right)
            if right_max.value > chosen.value:
                chosen = right_max
        tree.value = chosen.value
        if chosen.left is None:
            _detach(chosen)
            return
        tree = chosen


def heap_extract(root: Node | None) -> tuple[Node | None, int]:
    """Remove the root value of the heap and return ``(root, value)``.

    Child values are promoted down the path of larger children and the
    node at the end of that path is removed. A node without a left child
    counts as the end of a path, so anything under its right side is
    dropped with it. Raises IndexError if the heap is empty.
    """
    if root is None:
        raise IndexError("extract from an empty heap")
    value = root.value
    if root.left is None:
        return None, value
    _promote(root)
    return root, value


def heap_to_sorted_array(heap: Node | None) -> list[int]:
    """Extract values from *heap* until it is empty and return them in order.

    The heap is consumed in the process.
    """
    values: list[int] = []
    while heap is not None:
        heap, value = heap_extract(heap)
        values.append(value)
    return values