"""Binary search trees: validation, insertion, lookup and removal."""

from __future__ import annotations

from collections.abc import Iterable

from binarytrees.node import Node


def _within(tree: Node | None, low: int | None, high: int | None) -> bool:
    """Return True if every value of *tree* lies strictly between *low* and *high*."""
    if tree is None:
        return True
    if low is not None and tree.value <= low:
        return False
    if high is not None and tree.value >= high:
        return False
    return _within(tree.left, low, tree.value) and _within(tree.right, tree.value, high)


def is_bst(tree: Node | None) -> bool:
    """Return True if *tree* is a binary search tree without duplicates; False for None."""
    return tree is not None and _within(tree, None, None)


def bst_insert(root: Node | None, value: int) -> tuple[Node, Node | None]:
    """Insert *value* into the search tree rooted at *root*.

    Returns ``(root, node)``: the root of the tree after insertion and the
    node created. ``node`` is None when *value* is already in the tree.
    """
    if root is None:
        node = Node(value)
        return node, node
    current = root
    while True:
        if value < current.value:
            if current.left is None:
                current.left = Node(value, current)
                return root, current.left
            current = current.left
        elif value > current.value:
            if current.right is None:
                current.right = Node(value, current)
                return root, current.right
            current = current.right
        else:
            return root, None


def array_to_bst(values: Iterable[int]) -> Node | None:
    """Build a search tree by inserting *values* in order; repeats are skipped."""
    root: Node | None = None
    for value in values:
        root, _ = bst_insert(root, value)
    return root


def bst_search(tree: Node | None, value: int) -> Node | None:
    """Return the node of *tree* holding *value*, or None."""
    while tree is not None:
        if tree.value == value:
            return tree
        tree = tree.left if value < tree.value else tree.right
    return None


def bst_remove(root: Node | None, value: int) -> Node | None:
    """Remove *value* from the search tree and return the new root.

    A node with two children takes the value of its in-order successor,
    which is removed in its place. Raises KeyError if *value* is absent.
    """
    node = bst_search(root, value)
    if node is None:
        raise KeyError(value)
    if node.left is not None and node.right is not None:
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.value = successor.value
        node = successor
    child = node.left if node.left is not None else node.right
    parent = node.parent
    if child is not None:
        child.parent = parent
    node.parent = None
    if parent is None:
        return child
    if parent.left is node:
        parent.left = child
    else:
        parent.right = child
    return root