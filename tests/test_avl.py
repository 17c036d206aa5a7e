from binarytrees.avl import (
    array_to_avl,
    avl_insert,
    avl_remove,
    is_avl,
    sorted_array_to_avl,
)
from binarytrees.node import Node, inorder, insert_left, insert_right, preorder

ARRAY = [79, 47, 68, 87, 84, 91, 21, 32, 34, 2, 20, 22, 98, 1, 62, 95]
SORTED = [1, 2, 20, 21, 22, 32, 34, 47, 62, 68, 79, 84, 87, 91, 95, 98]


def _links_ok(tree):
    if tree is None:
        return True
    for child in (tree.left, tree.right):
        if child is not None and child.parent is not tree:
            return False
    return _links_ok(tree.left) and _links_ok(tree.right)


def _basic_tree():
    root = Node(98)
    left = insert_left(root, 12)
    right = insert_right(root, 128)
    insert_right(left, 54)
    insert_right(right, 402)
    insert_left(left, 10)
    return root


def test_is_avl_cases():
    root = _basic_tree()
    assert is_avl(root) is True
    assert is_avl(root.left) is True
    insert_left(root.right, 97)
    assert is_avl(root) is False

    root = _basic_tree()
    deep = insert_right(root.right.right, 430)
    assert is_avl(root) is False
    insert_left(deep, 420)
    assert is_avl(root) is False


def test_is_avl_none():
    assert is_avl(None) is False


def test_insert_sequence():
    root = None
    for value in [98, 402, 12, 46, 128, 256]:
        root, node = avl_insert(root, value)
        assert node.value == value
    assert list(preorder(root)) == [98, 12, 46, 256, 128, 402]
    for value in [512, 50]:
        root, node = avl_insert(root, value)
        assert node.value == value
    assert list(preorder(root)) == [98, 46, 12, 50, 256, 128, 402, 512]
    assert root.parent is None
    assert is_avl(root)
    assert _links_ok(root)


def test_insert_duplicate():
    root = array_to_avl([2, 1, 3])
    new_root, node = avl_insert(root, 3)
    assert node is None
    assert new_root is root
    assert list(preorder(new_root)) == [2, 1, 3]


def test_insert_into_empty():
    root, node = avl_insert(None, 4)
    assert root is node
    assert root.value == 4


def test_array_to_avl():
    tree = array_to_avl(ARRAY)
    assert list(preorder(tree)) == [
        47, 21, 2, 1, 20, 32, 22, 34, 84, 68, 62, 79, 91, 87, 98, 95
    ]
    assert list(inorder(tree)) == sorted(ARRAY)
    assert is_avl(tree)
    assert _links_ok(tree)


def test_array_to_avl_empty():
    assert array_to_avl([]) is None


def test_remove_sequence():
    tree = array_to_avl(ARRAY)
    tree = avl_remove(tree, 47)
    assert list(preorder(tree)) == [
        62, 21, 2, 1, 20, 32, 22, 34, 84, 68, 79, 91, 87, 98, 95
    ]
    tree = avl_remove(tree, 79)
    assert list(preorder(tree)) == [
        62, 21, 2, 1, 20, 32, 22, 34, 91, 84, 68, 87, 98, 95
    ]
    tree = avl_remove(tree, 32)
    assert list(preorder(tree)) == [62, 21, 2, 1, 20, 34, 22, 91, 84, 68, 87, 98, 95]
    tree = avl_remove(tree, 34)
    assert list(preorder(tree)) == [62, 21, 2, 1, 20, 22, 91, 84, 68, 87, 98, 95]
    tree = avl_remove(tree, 22)
    assert list(preorder(tree)) == [62, 2, 1, 21, 20, 91, 84, 68, 87, 98, 95]
    assert is_avl(tree)
    assert tree.parent is None
    assert _links_ok(tree)


def test_remove_missing_keeps_tree():
    tree = array_to_avl([2, 1, 3])
    result = avl_remove(tree, 9)
    assert result is tree
    assert list(preorder(result)) == [2, 1, 3]


def test_remove_last_and_none():
    assert avl_remove(Node(1), 1) is None
    assert avl_remove(None, 1) is None


def test_sorted_array_to_avl():
    tree = sorted_array_to_avl(SORTED)
    assert list(preorder(tree)) == [
        47, 21, 2, 1, 20, 32, 22, 34, 84, 68, 62, 79, 91, 87, 95, 98
    ]
    assert is_avl(tree)
    assert _links_ok(tree)


def test_sorted_array_to_avl_empty():
    assert sorted_array_to_avl([]) is None