from typing import Callable, Generic, Iterable, Iterator, List, TypeVar

from . import operations
from .tree import EMPTY, Tree, height

T = TypeVar('T')
A = TypeVar('A')


class AVLSet(Generic[T]):
    """Immutable ordered set backed by a persistent AVL tree.

    ``insert`` returns a new set and leaves this one untouched; both share
    every subtree the insert did not pass through.
    """

    __slots__ = ('_root',)

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._root: Tree = operations.from_list(values)

    @classmethod
    def _from_root(cls, root: Tree) -> 'AVLSet[T]':
        result: AVLSet[T] = cls.__new__(cls)
        result._root = root
        return result

    @property
    def root(self) -> Tree:
        return self._root

    def insert(self, value: T) -> 'AVLSet[T]':
        root = operations.insert(value, self._root)
        if root is self._root:
            return self
        return AVLSet._from_root(root)

    def contains(self, value: T) -> bool:
        return operations.member(value, self._root)

    def min(self) -> T:
        return operations.min_value(self._root)

    def max(self) -> T:
        return operations.max_value(self._root)

    def size(self) -> int:
        return operations.size(self._root)

    def is_empty(self) -> bool:
        return self._root is EMPTY

    def height(self) -> int:
        return height(self._root)

    def in_order(self) -> List[T]:
        return operations.to_list(self._root)

    def pre_order(self) -> List[T]:
        return operations.pre_order(self._root)

    def fold_left(self, combine: Callable[[T, A], A], initial: A) -> A:
        return operations.fold_left(combine, initial, self._root)

    def fold_right(self, combine: Callable[[T, A], A], initial: A) -> A:
        return operations.fold_right(combine, initial, self._root)

    def is_balanced(self) -> bool:
        return operations.is_balanced(self._root)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        return operations.iter_values(self._root)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AVLSet):
            return NotImplemented
        return self.in_order() == other.in_order()

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"AVLSet({self.in_order()})"

    def __str__(self) -> str:
        return f"AVLSet(size={self.size()}, height={self.height()})"
