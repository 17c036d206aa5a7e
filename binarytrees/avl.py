"""AVL trees: validation, insertion, removal and building from arrays."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from binarytrees.bst import bst_remove
from binarytrees.node import Node, balance
from binarytrees.shape import rotate_left, rotate_right


def _valid(tree: Node | None, low: int | None, high: int | None) -> bool:
    if tree is None:
        return True
    if low is not None and tree.value <= low:
        return False
    if high is not None and tree.value >= high:
        return False
    if abs(balance(tree)) > 1:
        return False
    return _valid(tree.left, low, tree.value) and _valid(tree.right, tree.value, high)


def is_avl(tree: Node | None) -> bool:
    """Return True if *tree* is a search tree whose every node is balanced; False for None."""
    return tree is not None and _valid(tree, None, None)


def _insert(
    tree: Node | None, parent: Node | None, value: int
) -> tuple[Node, Node | None]:
    """Insert into the subtree *tree*; return its new root and the created node."""
    if tree is None:
        node = Node(value, parent)
        return node, node
    if value < tree.value:
        tree.left, created = _insert(tree.left, tree, value)
    elif value > tree.value:
        tree.right, created = _insert(tree.right, tree, value)
    else:
        return tree, None
    if created is None:
        return tree, None

    factor = balance(tree)
    if factor > 1 and value < tree.left.value:
        tree = rotate_right(tree)
    elif factor < -1 and value > tree.right.value:
        tree = rotate_left(tree)
    elif factor > 1 and value > tree.left.value:
        tree.left = rotate_left(tree.left)
        tree = rotate_right(tree)
    elif factor < -1 and value < tree.right.value:
        tree.right = rotate_right(tree.right)
        tree = rotate_left(tree)
    return tree, created


def avl_insert(root: Node | None, value: int) -> tuple[Node, Node | None]:
    """Insert *value* into the AVL tree rooted at *root*, rebalancing as needed.

    Returns ``(root, node)``: the root after insertion and the node created.
    ``node`` is None when *value* is already in the tree.
    """
    return _insert(root, None, value)


def array_to_avl(values: Iterable[int]) -> Node | None:
    """Build an AVL tree by inserting *values* in order; repeats are skipped."""
    root: Node | None = None
    for value in values:
        root, _ = avl_insert(root, value)
    return root


def _rebalance(tree: Node | None) -> Node | None:
    """Rebalance *tree* bottom-up with single rotations; return its new root."""
    if tree is None or (tree.left is None and tree.right is None):
        return tree
    tree.left = _rebalance(tree.left)
    tree.right = _rebalance(tree.right)
    factor = balance(tree)
    if factor > 1:
        return rotate_right(tree)
    if factor < -1:
        return rotate_left(tree)
    return tree


def avl_remove(root: Node | None, value: int) -> Node | None:
    """Remove *value* from the AVL tree and return the rebalanced root.

    A value that is not in the tree leaves it as it was.
    """
    if root is None:
        return None
    try:
        root = bst_remove(root, value)
    except KeyError:
        pass
    return _rebalance(root)


def _build(parent: Node | None, values: Sequence[int], begin: int, last: int) -> Node | None:
    if begin > last:
        return None
    mid = (begin + last) // 2
    node = Node(values[mid], parent)
    node.left = _build(node, values, begin, mid - 1)
    node.right = _build(node, values, mid + 1, last)
    return node


def sorted_array_to_avl(values: Sequence[int]) -> Node | None:
    """Build a balanced tree from sorted *values* by taking middles; None if empty."""
    return _build(None, values, 0, len(values) - 1)