"""Text drawing of a binary tree, one line per level."""

from __future__ import annotations

from binarytrees.node import Node, height


class _Canvas:
    """Rows of characters that grow to the right as they are written."""

    def __init__(self, rows: int) -> None:
        self._rows: list[list[str]] = [[] for _ in range(rows)]

    def put(self, row: int, col: int, char: str) -> None:
        line = self._rows[row]
        if col >= len(line):
            line.extend(" " * (col + 1 - len(line)))
        line[col] = char

    def lines(self) -> list[str]:
        return ["".join(line).rstrip(" ") for line in self._rows]


def _draw(tree: Node | None, offset: int, level: int, canvas: _Canvas) -> int:
    """Draw *tree* with its left edge at *offset*; return the width it took."""
    if tree is None:
        return 0
    is_left = tree.parent is not None and tree.parent.left is tree
    label = f"({tree.value:03d})"
    width = len(label)
    left = _draw(tree.left, offset, level + 1, canvas)
    right = _draw(tree.right, offset + left + width, level + 1, canvas)
    for i, char in enumerate(label):
        canvas.put(level, offset + left + i, char)
    if level:
        half = width // 2
        if is_left:
            for i in range(width + right):
                canvas.put(level - 1, offset + left + half + i, "-")
        else:
            for i in range(left + width):
                canvas.put(level - 1, offset - half + i, "-")
        canvas.put(level - 1, offset + left + half, ".")
    return left + width + right


def render(tree: Node | None) -> str:
    """Return a drawing of *tree*; an empty string for None."""
    if tree is None:
        return ""
    canvas = _Canvas(height(tree) + 1)
    _draw(tree, 0, 0, canvas)
    return "\n".join(canvas.lines())


def print_tree(tree: Node | None) -> None:
    """Print the drawing of *tree*; print nothing for None."""
    if tree is not None:
        print(render(tree))