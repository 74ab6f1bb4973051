"""Immutable AVL-balanced sets."""

from .avl_set import AVLSet
from .balance import balance, rotate_left, rotate_right
from .operations import (
    fold_left,
    fold_right,
    from_list,
    has_valid_heights,
    insert,
    is_balanced,
    is_ordered,
    is_valid,
    iter_values,
    max_value,
    member,
    member_by_fold,
    min_value,
    pre_order,
    size,
    size_by_fold,
    to_list,
)
from .tree import EMPTY, Empty, Node, Tree, diff, empty, height, is_empty, make_node, singleton

__all__ = [
    'AVLSet',
    'EMPTY',
    'Empty',
    'Node',
    'Tree',
    'balance',
    'diff',
    'empty',
    'fold_left',
    'fold_right',
    'from_list',
    'has_valid_heights',
    'height',
    'insert',
    'is_balanced',
    'is_empty',
    'is_ordered',
    'is_valid',
    'iter_values',
    'make_node',
    'max_value',
    'member',
    'member_by_fold',
    'min_value',
    'pre_order',
    'rotate_left',
    'rotate_right',
    'singleton',
    'size',
    'size_by_fold',
    'to_list',
]
