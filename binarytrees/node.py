"""Binary tree nodes and the basic measurements and queries on them."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(eq=False, repr=False)
class Node:
    """A binary tree node holding an integer value.

    Creating a node records its parent but does not attach it as a child;
    the caller decides which side it goes on.
    """

    value: int
    parent: Node | None = None
    left: Node | None = None
    right: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


def insert_left(parent: Node, value: int) -> Node:
    """Insert a new node as the left child of *parent*.

    An existing left child becomes the left child of the new node.
    """
    if parent is None:
        raise ValueError("parent node is required")
    new = Node(value, parent)
    if parent.left is not None:
        new.left = parent.left
        parent.left.parent = new
    parent.left = new
    return new


def insert_right(parent: Node, value: int) -> Node:
    """Insert a new node as the right child of *parent*.

    An existing right child becomes the right child of the new node.
    """
    if parent is None:
        raise ValueError("parent node is required")
    new = Node(value, parent)
    if parent.right is not None:
        new.right = parent.right
        parent.right.parent = new
    parent.right = new
    return new


def is_leaf(node: Node | None) -> bool:
    """Return True if *node* exists and has no children."""
    return node is not None and node.left is None and node.right is None


def is_root(node: Node | None) -> bool:
    """Return True if *node* exists and has no parent."""
    return node is not None and node.parent is None


def preorder(tree: Node | None) -> Iterator[int]:
    """Yield the values of *tree* in pre-order."""
    if tree is not None:
        yield tree.value
        yield from preorder(tree.left)
        yield from preorder(tree.right)


def inorder(tree: Node | None) -> Iterator[int]:
    """Yield the values of *tree* in in-order."""
    if tree is not None:
        yield from inorder(tree.left)
        yield tree.value
        yield from inorder(tree.right)


def postorder(tree: Node | None) -> Iterator[int]:
    """Yield the values of *tree* in post-order."""
    if tree is not None:
        yield from postorder(tree.left)
        yield from postorder(tree.right)
        yield tree.value


def height(tree: Node | None) -> int:
    """Return the number of edges on the longest downward path; 0 for None or a leaf."""
    if tree is None:
        return 0
    left = 1 + height(tree.left) if tree.left is not None else 0
    right = 1 + height(tree.right) if tree.right is not None else 0
    return max(left, right)


def _levels(tree: Node | None) -> int:
    """Return the number of nodes on the longest downward path; 0 for None."""
    if tree is None:
        return 0
    return 1 + max(_levels(tree.left), _levels(tree.right))


def depth(node: Node | None) -> int:
    """Return the number of edges from *node* up to its root; 0 for None."""
    count = 0
    while node is not None and node.parent is not None:
        count += 1
        node = node.parent
    return count


def size(tree: Node | None) -> int:
    """Return the number of nodes in *tree*."""
    if tree is None:
        return 0
    return 1 + size(tree.left) + size(tree.right)


def leaves(tree: Node | None) -> int:
    """Return the number of leaves in *tree*."""
    if tree is None:
        return 0
    own = 1 if tree.left is None and tree.right is None else 0
    return own + leaves(tree.left) + leaves(tree.right)


def internal_nodes(tree: Node | None) -> int:
    """Return the number of nodes in *tree* with at least one child."""
    if tree is None:
        return 0
    own = 1 if tree.left is not None or tree.right is not None else 0
    return own + internal_nodes(tree.left) + internal_nodes(tree.right)


def balance(tree: Node | None) -> int:
    """Return the balance factor: left subtree height minus right; 0 for None."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def _full(tree: Node | None) -> bool:
    if tree is None:
        return True
    if (tree.left is None) != (tree.right is None):
        return False
    return _full(tree.left) and _full(tree.right)


def is_full(tree: Node | None) -> bool:
    """Return True if every node of *tree* has zero or two children; False for None."""
    return tree is not None and _full(tree)


def _first_leaf_level(tree: Node) -> int:
    level = 0
    while not is_leaf(tree):
        tree = tree.left if tree.left is not None else tree.right
        level += 1
    return level


def _perfect(tree: Node, leaf_level: int, level: int) -> bool:
    if is_leaf(tree):
        return level == leaf_level
    if tree.left is None or tree.right is None:
        return False
    return _perfect(tree.left, leaf_level, level + 1) and _perfect(
        tree.right, leaf_level, level + 1
    )


def is_perfect(tree: Node | None) -> bool:
    """Return True if *tree* is full and all its leaves are on one level; False for None."""
    if tree is None:
        return False
    return _perfect(tree, _first_leaf_level(tree), 0)


def sibling(node: Node | None) -> Node | None:
    """Return the other child of *node*'s parent, or None."""
    if node is None or node.parent is None:
        return None
    if node.parent.left is node:
        return node.parent.right
    return node.parent.left


def uncle(node: Node | None) -> Node | None:
    """Return the sibling of *node*'s parent, or None."""
    if node is None:
        return None
    return sibling(node.parent)