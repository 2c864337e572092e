"""
Binary tree: a recursive sum type with a terminal Leaf and a Node variant.

Serves as the reference for implementing both capabilities on a recursive
user type: generation halves the size on every level and is forced to Leaf
at size 0; shrinking offers Leaf first, then rebuilt nodes.
"""

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from ..core.lazy import Lazy
from .base import Domain
from .containers import Tuples

T = TypeVar("T")


class Tree(ABC, Generic[T]):
    """Base of the Leaf and Node variants."""

    @abstractmethod
    def count_nodes(self) -> int:
        ...


@dataclass(frozen=True)
class Leaf(Tree[T]):
    def count_nodes(self) -> int:
        return 0


@dataclass(frozen=True)
class Node(Tree[T]):
    value: T
    left: Tree[T]
    right: Tree[T]

    def count_nodes(self) -> int:
        return 1 + self.left.count_nodes() + self.right.count_nodes()


class Trees(Domain[Tree[Any]]):
    """
    Trees of one value domain.

    Args:
        value: Domain of the node values
    """

    def __init__(self, value: Domain[T]) -> None:
        self.value = value

    def arbitrary(self, size: int, rng: random.Random) -> Tree[T]:
        if size == 0 or rng.randrange(4) == 0:
            return Leaf()
        return Node(
            self.value.arbitrary(size, rng),
            self.arbitrary(size // 2, rng),
            self.arbitrary(size // 2, rng),
        )

    def shrink(self, tree: Tree[T]) -> Lazy[Tree[T]]:
        lazy: Lazy[Tree[T]] = Lazy()
        if isinstance(tree, Node):
            lazy.push(Leaf())
            parts = Tuples(self.value, self, self).shrink((tree.value, tree.left, tree.right))
            lazy.push_map(parts, _rebuild)
        return lazy

    def __repr__(self) -> str:
        return f"Trees({self.value!r})"


def _rebuild(parts):
    return Node(*parts)
