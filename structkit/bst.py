"""An unbalanced binary search tree mapping keys to values."""

from __future__ import annotations

import operator
import random
import sys
import zlib
from typing import Any, Callable, Sequence, TextIO


class _Node:
    __slots__ = ("key", "value", "left", "right")

    def __init__(self, key: Any, value: Any) -> None:
        self.key = key
        self.value = value
        self.left: _Node | None = None
        self.right: _Node | None = None


class BinarySearchTree:
    """Key/value tree ordered by ``compare`` (``operator.lt`` by default)."""

    def __init__(self, compare: Callable[[Any, Any], bool] = operator.lt) -> None:
        self._compare = compare
        self._root: _Node | None = None
        self._size = 0

    def copy(self) -> BinarySearchTree:
        """Return an independent tree with the same shape and contents."""
        clone = BinarySearchTree(self._compare)
        clone._size = self._size
        if self._root is None:
            return clone
        clone._root = _Node(self._root.key, self._root.value)
        stack = [(self._root, clone._root)]
        while stack:
            src, dst = stack.pop()
            if src.left is not None:
                dst.left = _Node(src.left.key, src.left.value)
                stack.append((src.left, dst.left))
            if src.right is not None:
                dst.right = _Node(src.right.key, src.right.value)
                stack.append((src.right, dst.right))
        return clone

    def _require_root(self) -> _Node:
        if self._root is None:
            raise ValueError("tree is empty")
        return self._root

    @staticmethod
    def _leftmost(node: _Node) -> _Node:
        while node.left is not None:
            node = node.left
        return node

    @staticmethod
    def _rightmost(node: _Node) -> _Node:
        while node.right is not None:
            node = node.right
        return node

    def min(self) -> tuple[Any, Any]:
        """(key, value) pair with the smallest key."""
        node = self._leftmost(self._require_root())
        return node.key, node.value

    def max(self) -> tuple[Any, Any]:
        """(key, value) pair with the largest key."""
        node = self._rightmost(self._require_root())
        return node.key, node.value

    def root(self) -> tuple[Any, Any]:
        """(key, value) pair stored at the root."""
        node = self._require_root()
        return node.key, node.value

    def _find_node(self, key: Any) -> _Node | None:
        node = self._root
        while node is not None:
            if self._compare(key, node.key):
                node = node.left
            elif self._compare(node.key, key):
                node = node.right
            else:
                return node
        return None

    def __contains__(self, key: Any) -> bool:
        return self._find_node(key) is not None

    def find(self, key: Any) -> Any:
        """Value stored under key; KeyError if absent."""
        node = self._find_node(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def empty(self) -> bool:
        """True when the tree holds no entries."""
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def clear(self) -> None:
        """Remove every entry."""
        self._root = None
        self._size = 0

    def insert(self, key: Any, value: Any) -> None:
        """Add key with value, or replace the value if key is present."""
        if self._root is None:
            self._root = _Node(key, value)
            self._size += 1
            return
        node = self._root
        while True:
            if self._compare(key, node.key):
                if node.left is None:
                    node.left = _Node(key, value)
                    self._size += 1
                    return
                node = node.left
            elif self._compare(node.key, key):
                if node.right is None:
                    node.right = _Node(key, value)
                    self._size += 1
                    return
                node = node.right
            else:
                node.value = value
                return

    def erase(self, key: Any) -> None:
        """Remove key; KeyError if absent."""
        self._root = self._erase(self._root, key)

    def _erase(self, node: _Node | None, key: Any) -> _Node | None:
        if node is None:
            raise KeyError(key)
        if self._compare(key, node.key):
            node.left = self._erase(node.left, key)
            return node
        if self._compare(node.key, key):
            node.right = self._erase(node.right, key)
            return node
        if node.left is not None and node.right is not None:
            successor = self._leftmost(node.right)
            node.key, node.value = successor.key, successor.value
            node.right = self._erase(node.right, node.key)
            return node
        self._size -= 1
        return node.left if node.left is not None else node.right


def _out(out: TextIO | None) -> TextIO:
    return sys.stdout if out is None else out


def print_level_by_level(tree: BinarySearchTree, out: TextIO | None = None) -> None:
    """Write each level of the tree on its own line, marking gaps with ``null``."""
    stream = _out(out)
    level: list[_Node | None] = [tree._root]
    while True:
        parts: list[str] = []
        following: list[_Node | None] = []
        all_null = True
        for node in level:
            if node is None:
                parts.append("null")
                following.extend((None, None))
            else:
                parts.append(f"({node.key},{node.value}) ")
                all_null = False
                following.extend((node.left, node.right))
        if all_null:
            break
        stream.write("".join(parts) + "\n")
        level = following


def print_tree(tree: BinarySearchTree, out: TextIO | None = None) -> None:
    """Write the tree sideways: right subtree above, one tab per depth level."""
    stream = _out(out)

    def walk(node: _Node | None, depth: int) -> None:
        if node is None:
            return
        walk(node.right, depth + 1)
        stream.write("\t" * depth + f"({node.key}, {node.value})\n")
        walk(node.left, depth + 1)

    walk(tree._root, 0)


def _node_id(key: Any) -> int:
    if isinstance(key, int):
        return key & 0xFFFFFFFF
    return zlib.crc32(str(key).encode("utf-8"))


def viz_tree(tree: BinarySearchTree, out: TextIO | None = None) -> None:
    """Write the tree as a Graphviz digraph."""
    stream = _out(out)
    stream.write("digraph Tree {\n")

    def walk(node: _Node | None, prev: _Node | None) -> None:
        if node is None:
            return
        ident = _node_id(node.key)
        stream.write(f'\tnode_{ident}[label="{node.key} [{node.value}]"];\n')
        if prev is not None:
            stream.write(f"\tnode_{_node_id(prev.key)} -> ")
        else:
            stream.write("\t")
        stream.write(f"node_{ident};\n")
        walk(node.left, node)
        walk(node.right, node)

    walk(tree._root, None)
    stream.write("}\n")


_NAMES = (
    "Teresa", "Carlos", "Nkemdi", "Dante", "Alexander", "Evelyn", "Dillon",
    "Thomas", "Armando", "Mariel", "Furkan", "Anjali", "Jeremy", "Clayton",
    "Jessica",
)


def main(argv: Sequence[str] | None = None) -> int:
    """Build a tree of sample names with random values and print it."""
    rng = random.Random()
    tree = BinarySearchTree()
    for name in _NAMES:
        tree.insert(name, rng.randrange(len(_NAMES)))
    print_tree(tree, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())