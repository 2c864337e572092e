"""
Composite domains: options, lists and tuples.

Shrinking is lazy throughout: each candidate is built by a thunk only when
the traversal reaches it, and components are shrunk leftmost first.
"""

import random
from itertools import repeat
from typing import Any, Callable, List, Optional, Sequence, Tuple, TypeVar

from ..core.lazy import Lazy
from .base import Domain

T = TypeVar("T")


class Options(Domain[Optional[T]]):
    """None, or a value of the inner domain, with even odds."""

    def __init__(self, inner: Domain[T]) -> None:
        self.inner = inner

    def arbitrary(self, size: int, rng: random.Random) -> Optional[T]:
        if rng.random() < 0.5:
            return None
        return self.inner.arbitrary(size, rng)

    def shrink(self, value: Optional[T]) -> Lazy[Optional[T]]:
        lazy: Lazy[Optional[T]] = Lazy()
        if value is None:
            return lazy
        lazy.push(None)
        lazy.push_map(self.inner.shrink(value), _identity)
        return lazy

    def clone(self, value: Optional[T]) -> Optional[T]:
        return None if value is None else self.inner.clone(value)

    def __repr__(self) -> str:
        return f"Options({self.inner!r})"


class Lists(Domain[Any]):
    """
    Variable-length sequences of one element domain.

    Candidates, in order:
    1. the empty sequence
    2. chunk removals of size n/2, n/4, ..., 1 at each aligned offset
    3. each element's own shrinks, length held fixed

    Args:
        element: Domain of the elements
        container: Builds the final value from a list (default list)
    """

    def __init__(self, element: Domain[T], container: Callable[[List[T]], Any] = list) -> None:
        self.element = element
        self.container = container

    def arbitrary(self, size: int, rng: random.Random) -> Any:
        length = rng.randint(0, size)
        return self.container([self.element.arbitrary(size, rng) for _ in range(length)])

    def shrink(self, value: Sequence[T]) -> Lazy[Any]:
        items = list(value)
        lazy: Lazy[List[T]] = Lazy()
        if items:
            lazy.push([])
            lazy.push_thunk((items, len(items) // 2, 0, self.element), _removals_step)
        if self.container is list:
            return lazy
        return Lazy.create(lambda out: out.push_map(lazy, self.container))

    def clone(self, value: Sequence[T]) -> Any:
        return self.container([self.element.clone(x) for x in value])

    def __repr__(self) -> str:
        return f"Lists({self.element!r})"


class Tuples(Domain[Tuple[Any, ...]]):
    """Fixed-arity tuples, one domain per position."""

    def __init__(self, *components: Domain[Any]) -> None:
        self.components = components

    def arbitrary(self, size: int, rng: random.Random) -> Tuple[Any, ...]:
        return tuple(c.arbitrary(size, rng) for c in self.components)

    def shrink(self, value: Tuple[Any, ...]) -> Lazy[Tuple[Any, ...]]:
        lazy: Lazy[Tuple[Any, ...]] = Lazy()
        value = tuple(value)
        lazy.push_map_env(_indexed_shrinks(value, self.components), value, _replace_in_tuple)
        return lazy

    def clone(self, value: Tuple[Any, ...]) -> Tuple[Any, ...]:
        return tuple(c.clone(x) for c, x in zip(self.components, value))

    def __repr__(self) -> str:
        return f"Tuples({', '.join(repr(c) for c in self.components)})"


def _identity(x):
    return x


def _removals_step(state, lazy):
    items, chunk, start, element = state
    if chunk == 0:
        # Removals exhausted: element shrinks follow, leftmost element first.
        lazy.push_map_env(_indexed_shrinks(items, repeat(element)), items, _replace_in_list)
        return
    lazy.push(items[:start] + items[start + chunk:])
    start += chunk
    if start >= len(items):
        chunk, start = chunk // 2, 0
    lazy.push_thunk((items, chunk, start, element), _removals_step)


def _indexed_shrinks(values, domains):
    """(index, candidate) for each position in turn; a position is shrunk only when reached."""
    for index, (domain, x) in enumerate(zip(domains, values)):
        for candidate in domain.shrink(x):
            yield index, candidate


def _replace_in_list(indexed, items):
    index, candidate = indexed
    return items[:index] + [candidate] + items[index + 1:]


def _replace_in_tuple(indexed, value):
    index, candidate = indexed
    return value[:index] + (candidate,) + value[index + 1:]
