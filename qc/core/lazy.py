"""
Lazily generated sequence, traversable once.

A Lazy holds values that are already realized and a queue of thunks: owned,
deferred producers that run only when the traversal reaches them. A thunk may
push values and further thunks onto the sequence it belongs to, which lets
shrink spaces of nested values be described as trees without building them.

Ordering: realized values come first, in push order, followed by what each
pending thunk produces, in thunk-push order. A thunk pushed while another
thunk runs goes to the end of the queue like any other, so two mapped
sources alternate; callers that need one source drained before the next
chain them into a single source.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Callable, Deque, Generic, Iterable, Iterator, TypeVar

from .errors import ThunkConsumedError

T = TypeVar("T")
A = TypeVar("A")

_END = object()


class Thunk(ABC, Generic[T]):
    """
    Deferred unit of work attached to a Lazy.

    call() consumes the thunk: it runs at most once.
    """

    @abstractmethod
    def call(self, lazy: "Lazy[T]") -> None:
        ...


class StateThunk(Thunk[T]):
    """Thunk owning a captured state and a producer(state, lazy) function."""

    __slots__ = ("_state", "_producer", "_consumed")

    def __init__(self, state: Any, producer: Callable[[Any, "Lazy[T]"], None]) -> None:
        self._state = state
        self._producer = producer
        self._consumed = False

    def call(self, lazy: "Lazy[T]") -> None:
        if self._consumed:
            raise ThunkConsumedError("thunk already invoked")
        self._consumed = True
        state, producer = self._state, self._producer
        # Ownership moves to the producer; the thunk keeps nothing.
        self._state = None
        self._producer = None
        producer(state, lazy)


class Lazy(Iterator[T]):
    """
    Lazily generated sequence, only traversable once.

    Usage:
        lazy = Lazy.new_from([1, 2])
        lazy.push_thunk([3, 4], lambda rest, l: l.push(rest[0]))
        list(lazy)  # [1, 2, 3]
    """

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._realized: Deque[T] = deque(values)
        self._pending: Deque[Thunk[T]] = deque()

    @classmethod
    def new_from(cls, values: Iterable[T]) -> "Lazy[T]":
        """Create a sequence pre-seeded with a finite run of values."""
        return cls(values)

    @classmethod
    def create(cls, builder: Callable[["Lazy[T]"], None]) -> "Lazy[T]":
        """Create an empty sequence and let builder populate it."""
        lazy: Lazy[T] = cls()
        builder(lazy)
        return lazy

    @property
    def realized_count(self) -> int:
        return len(self._realized)

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def push(self, value: T) -> None:
        """Push a value to the end of the realized values."""
        self._realized.append(value)

    def push_thunk(self, state: A, producer: Callable[[A, "Lazy[T]"], None]) -> None:
        """
        Push a deferred producer to the end of the thunk queue.

        Args:
            state: Captured state, owned by the thunk from now on
            producer: Called once as producer(state, lazy); may push values
                and thunks onto lazy, or nothing at all
        """
        self._pending.append(StateThunk(state, producer))

    def push_map(self, source: Iterable[A], transform: Callable[[A], T]) -> None:
        """
        Lazily append transform(x) for each x of source.

        One element is pulled from source per thunk invocation.
        """
        self.push_thunk((iter(source), transform), _map_step)

    def push_map_env(
        self,
        source: Iterable[A],
        env: Any,
        transform: Callable[[A, Any], T],
    ) -> None:
        """
        Like push_map, threading an owned mutable env through transform(x, env).
        """
        self.push_thunk((iter(source), env, transform), _map_env_step)

    def __iter__(self) -> "Lazy[T]":
        return self

    def __next__(self) -> T:
        while not self._realized and self._pending:
            self._pending.popleft().call(self)
        if self._realized:
            return self._realized.popleft()
        raise StopIteration

    def __repr__(self) -> str:
        return f"Lazy(realized={len(self._realized)}, pending={len(self._pending)})"


def _map_step(state, lazy):
    source, transform = state
    x = next(source, _END)
    if x is _END:
        return
    lazy.push(transform(x))
    lazy.push_thunk(state, _map_step)


def _map_env_step(state, lazy):
    source, env, transform = state
    x = next(source, _END)
    if x is _END:
        return
    lazy.push(transform(x, env))
    lazy.push_thunk(state, _map_env_step)
