from binarytrees.node import Node
from binarytrees.render import print_tree, render


def _seven_node_tree():
    root = Node(98)
    root.left = Node(12, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(16, root.left)
    root.right = Node(402, root)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    return root


EXPECTED = (
    "       .-------(098)-------.\n"
    "  .--(012)--.         .--(402)--.\n"
    "(006)     (016)     (256)     (512)"
)


def test_render_full_tree():
    assert render(_seven_node_tree()) == EXPECTED


def test_render_single_node():
    assert render(Node(98)) == "(098)"


def test_render_negative_value():
    assert render(Node(-5)) == "(-05)"


def test_render_none():
    assert render(None) == ""


def test_render_left_only_chain():
    root = Node(1)
    root.left = Node(2, root)
    assert render(root).split("\n") == ["  .--(001)", "(002)"]


def test_render_has_one_line_per_level():
    lines = render(_seven_node_tree()).split("\n")
    assert len(lines) == 3
    assert all(line == line.rstrip() for line in lines)


def test_print_tree(capsys):
    print_tree(_seven_node_tree())
    assert capsys.readouterr().out == EXPECTED + "\n"


def test_print_tree_none(capsys):
    print_tree(None)
    assert capsys.readouterr().out == ""