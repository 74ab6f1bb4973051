"""
Persistent AVL tree nodes.

A tree is either the shared ``EMPTY`` constant or a ``Node`` holding one value
and two subtrees. Nodes are immutable tuples: every structural change builds
new nodes along one path and reuses all other subtrees as they are, so older
versions of a tree remain valid after an insert. Each node caches its height,
which is computed once in ``make_node``, the only place nodes are built.
"""

from typing import Any, NamedTuple, Union


class Empty:
    __slots__ = ()

    def __repr__(self) -> str:
        return "EMPTY"

    def __reduce__(self) -> str:
        return "EMPTY"


EMPTY = Empty()


class Node(NamedTuple):
    head: Any
    left: "Tree"
    right: "Tree"
    height: int

    def __repr__(self) -> str:
        return f"Node({self.head!r}, {self.left!r}, {self.right!r})"


Tree = Union[Empty, Node]


def empty() -> Empty:
    return EMPTY


def is_empty(t: Tree) -> bool:
    return t is EMPTY


def height(t: Tree) -> int:
    if t is EMPTY:
        return 0
    return t.height


def make_node(head: Any, left: Tree, right: Tree) -> Node:
    return Node(head, left, right, 1 + max(height(left), height(right)))


def singleton(value: Any) -> Node:
    return Node(value, EMPTY, EMPTY, 1)


def diff(t: Tree) -> int:
    """Height of the right subtree minus height of the left; positive is right-heavy."""
    if t is EMPTY:
        return 0
    return height(t.right) - height(t.left)
