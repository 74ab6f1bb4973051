"""
Set operations over persistent AVL trees.

``insert`` places a value by order and rebalances every rebuilt ancestor on
the way back up, so only the search path is copied. ``fold_left`` and
``fold_right`` reduce the values in ascending and descending order. The
derived operations come in two styles: direct recursion that follows the
tree shape (``size``, ``member``), and the same result phrased as a fold
(``size_by_fold``, ``member_by_fold``). For ``size`` the two cost the same
O(n). For ``member`` the fold cannot prune by order and degrades from
O(log n) to O(n).
"""

from functools import reduce
from typing import Any, Callable, Iterable, Iterator, List, TypeVar

from .balance import balance
from .tree import EMPTY, Node, Tree, height, make_node, singleton

A = TypeVar('A')


# ---------------------------------------------------------------------------
# Insertion
# ---------------------------------------------------------------------------

def insert(value: Any, t: Tree) -> Node:
    if t is EMPTY:
        return singleton(value)

    if value < t.head:
        return balance(make_node(t.head, insert(value, t.left), t.right))
    if value > t.head:
        return balance(make_node(t.head, t.left, insert(value, t.right)))
    return t


# ---------------------------------------------------------------------------
# Folds
# ---------------------------------------------------------------------------

def fold_left(combine: Callable[[Any, A], A], initial: A, t: Tree) -> A:
    """Reduce ``t`` in ascending order, calling ``combine(value, acc)``."""
    if t is EMPTY:
        return initial
    acc = fold_left(combine, initial, t.left)
    acc = combine(t.head, acc)
    return fold_left(combine, acc, t.right)


def fold_right(combine: Callable[[Any, A], A], initial: A, t: Tree) -> A:
    """Reduce ``t`` in descending order, calling ``combine(value, acc)``."""
    if t is EMPTY:
        return initial
    acc = fold_right(combine, initial, t.right)
    acc = combine(t.head, acc)
    return fold_right(combine, acc, t.left)


# ---------------------------------------------------------------------------
# Derived operations
# ---------------------------------------------------------------------------

def from_list(values: Iterable[Any]) -> Tree:
    return reduce(lambda acc, value: insert(value, acc), values, EMPTY)


def size(t: Tree) -> int:
    if t is EMPTY:
        return 0
    return 1 + size(t.left) + size(t.right)


def size_by_fold(t: Tree) -> int:
    return fold_left(lambda _, acc: acc + 1, 0, t)


def member(value: Any, t: Tree) -> bool:
    while t is not EMPTY:
        if value < t.head:
            t = t.left
        elif value > t.head:
            t = t.right
        else:
            return True
    return False


def member_by_fold(value: Any, t: Tree) -> bool:
    """Same answer as ``member`` but visits every node; O(n) instead of O(log n)."""
    return fold_left(lambda candidate, acc: acc or candidate == value, False, t)


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------

def iter_values(t: Tree) -> Iterator[Any]:
    stack: List[Node] = []
    node = t
    while stack or node is not EMPTY:
        while node is not EMPTY:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.head
        node = node.right


def to_list(t: Tree) -> List[Any]:
    return list(iter_values(t))


def pre_order(t: Tree) -> List[Any]:
    result: List[Any] = []
    if t is EMPTY:
        return result
    stack: List[Node] = [t]
    while stack:
        node = stack.pop()
        result.append(node.head)
        if node.right is not EMPTY:
            stack.append(node.right)
        if node.left is not EMPTY:
            stack.append(node.left)
    return result


def min_value(t: Tree) -> Any:
    if t is EMPTY:
        raise ValueError("min from empty set")
    while t.left is not EMPTY:
        t = t.left
    return t.head


def max_value(t: Tree) -> Any:
    if t is EMPTY:
        raise ValueError("max from empty set")
    while t.right is not EMPTY:
        t = t.right
    return t.head


# ---------------------------------------------------------------------------
# Invariant checks
# ---------------------------------------------------------------------------

def is_ordered(t: Tree) -> bool:
    values = to_list(t)
    return all(a < b for a, b in zip(values, values[1:]))


def is_balanced(t: Tree) -> bool:
    if t is EMPTY:
        return True
    if abs(height(t.right) - height(t.left)) > 1:
        return False
    return is_balanced(t.left) and is_balanced(t.right)


def has_valid_heights(t: Tree) -> bool:
    # Recomputes every height from scratch rather than trusting the cache.
    def measure(node: Tree) -> int:
        if node is EMPTY:
            return 0
        left = measure(node.left)
        right = measure(node.right)
        if left < 0 or right < 0:
            return -1
        expected = 1 + max(left, right)
        return expected if node.height == expected else -1

    return measure(t) >= 0


def is_valid(t: Tree) -> bool:
    return has_valid_heights(t) and is_ordered(t) and is_balanced(t)
