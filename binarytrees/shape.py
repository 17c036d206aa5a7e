"""Queries and operations that depend on the shape of a whole tree."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from binarytrees.node import Node


def lowest_common_ancestor(first: Node | None, second: Node | None) -> Node | None:
    """Return the lowest common ancestor of two nodes, or None if there is none.

    A node counts as its own ancestor, so if one node lies above the
    other the upper one is returned.
    """
    while first is not None and second is not None and first is not second:
        mom, pop = first.parent, second.parent
        if first is pop or mom is None or (mom.parent is None and pop is not None):
            second = pop
        elif mom is second or pop is None or (pop.parent is None and mom is not None):
            first = mom
        else:
            first, second = mom, pop
    if first is None or second is None:
        return None
    return first


def levelorder(tree: Node | None) -> Iterator[int]:
    """Yield the values of *tree* level by level, left to right."""
    if tree is None:
        return
    queue = deque([tree])
    while queue:
        node = queue.popleft()
        yield node.value
        queue.extend(child for child in (node.left, node.right) if child is not None)


def is_complete(tree: Node | None) -> bool:
    """Return True if every level of *tree* is filled except possibly the last,
    which is filled from the left; False for None."""
    if tree is None:
        return False
    queue = deque([tree])
    gap = False
    while queue:
        node = queue.popleft()
        for child in (node.left, node.right):
            if child is None:
                gap = True
            elif gap:
                return False
            else:
                queue.append(child)
    return True


def _replace_in_parent(old: Node, new: Node) -> None:
    """Move *new* into the place *old* held under its parent."""
    above = old.parent
    old.parent = new
    new.parent = above
    if above is not None:
        if above.left is old:
            above.left = new
        else:
            above.right = new


def rotate_left(tree: Node | None) -> Node:
    """Rotate *tree* to the left and return the new root of the subtree.

    Raises ValueError if *tree* is None or has no right child.
    """
    if tree is None or tree.right is None:
        raise ValueError("a left rotation needs a node with a right child")
    pivot = tree.right
    inner = pivot.left
    pivot.left = tree
    tree.right = inner
    if inner is not None:
        inner.parent = tree
    _replace_in_parent(tree, pivot)
    return pivot


def rotate_right(tree: Node | None) -> Node:
    """Rotate *tree* to the right and return the new root of the subtree.

    Raises ValueError if *tree* is None or has no left child.
    """
    if tree is None or tree.left is None:
        raise ValueError("a right rotation needs a node with a left child")
    pivot = tree.left
    inner = pivot.right
    pivot.right = tree
    tree.left = inner
    if inner is not None:
        inner.parent = tree
    _replace_in_parent(tree, pivot)
    return pivot