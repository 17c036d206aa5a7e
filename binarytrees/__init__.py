"""Linked binary trees, search trees, AVL trees and max binary heaps."""

__version__ = "0.1.0"