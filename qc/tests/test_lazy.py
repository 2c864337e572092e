"""
Tests for the lazy sequence.

Critical: values come out in push order, thunks run at most once and only
when the traversal needs them.
"""

from itertools import islice

import pytest

from qc.core.errors import ThunkConsumedError
from qc.core.lazy import Lazy, StateThunk


def test_lazy_list_nested_thunks():
    """A thunk may push a value and a follow-up thunk."""

    def second(rest, lazy):
        lazy.push(rest.pop(0))

    def first(rest, lazy):
        lazy.push(rest.pop(0))
        lazy.push_thunk(rest, second)

    def build(lazy):
        lazy.push(3)
        lazy.push_thunk([4, 5], first)

    lazy = Lazy.create(build)

    assert next(lazy) == 3
    assert next(lazy) == 4
    assert next(lazy) == 5
    assert next(lazy, None) is None


def test_push_map():
    """push_map over [3, 4, 5] yields the transformed values, then ends."""
    lazy = Lazy()
    lazy.push_map(Lazy.new_from([3, 4, 5]), lambda x: (x, 1))

    assert next(lazy) == (3, 1)
    assert next(lazy) == (4, 1)
    assert next(lazy) == (5, 1)
    assert next(lazy, None) is None


def test_push_map_env_threads_state():
    """The environment is shared across every mapped element."""

    def running_total(x, env):
        env["total"] += x
        return env["total"]

    lazy = Lazy()
    lazy.push_map_env([1, 2, 3, 4], {"total": 0}, running_total)

    assert list(lazy) == [1, 3, 6, 10]


def test_immediate_values_precede_thunks():
    """Values pushed during construction come before any thunk output."""
    lazy = Lazy()
    lazy.push(1)
    lazy.push_thunk("a", lambda s, l: l.push(s))
    lazy.push(2)

    assert list(lazy) == [1, 2, "a"]


def test_thunks_run_in_push_order():
    """A thunk pushed by a running thunk queues behind thunks pushed earlier."""

    def inner(value, lazy):
        lazy.push(value)

    def outer(value, lazy):
        lazy.push(value)
        lazy.push_thunk("b", inner)

    lazy = Lazy()
    lazy.push_thunk("a", outer)
    lazy.push_thunk("c", inner)

    assert list(lazy) == ["a", "c", "b"]


def test_push_map_sources_alternate():
    """Each mapped source re-queues after one element, so two sources take turns."""
    lazy = Lazy()
    lazy.push_map([1, 2, 3], lambda x: ("first", x))
    lazy.push_map([1, 2], lambda x: ("second", x))

    assert list(lazy) == [
        ("first", 1),
        ("second", 1),
        ("first", 2),
        ("second", 2),
        ("first", 3),
    ]


def test_thunks_run_on_demand():
    """A thunk is not invoked until the traversal reaches it."""
    calls = []

    def produce(value, lazy):
        calls.append(value)
        lazy.push(value)

    lazy = Lazy.new_from([0])
    lazy.push_thunk(1, produce)
    lazy.push_thunk(2, produce)

    assert calls == []
    assert next(lazy) == 0
    assert calls == []
    assert next(lazy) == 1
    assert calls == [1]
    assert lazy.pending_count == 1


def test_empty_thunk_prunes():
    """A thunk pushing nothing is skipped over."""
    lazy = Lazy()
    lazy.push_thunk(None, lambda s, l: None)
    lazy.push_thunk(None, lambda s, l: None)
    lazy.push_thunk(7, lambda s, l: l.push(s))

    assert list(lazy) == [7]


def test_infinite_generation_is_lazy():
    """A self-reinstalling thunk describes an unbounded sequence."""

    def count_from(n, lazy):
        lazy.push(n)
        lazy.push_thunk(n + 1, count_from)

    lazy = Lazy()
    lazy.push_thunk(0, count_from)

    assert list(islice(lazy, 5)) == [0, 1, 2, 3, 4]
    assert lazy.realized_count == 0
    assert lazy.pending_count == 1


def test_exhausted_stays_exhausted():
    """After the last value, next() keeps reporting the end."""
    lazy = Lazy.new_from(["x"])
    lazy.push_thunk(None, lambda s, l: None)

    assert list(lazy) == ["x"]
    for _ in range(3):
        with pytest.raises(StopIteration):
            next(lazy)
    assert lazy.realized_count == 0
    assert lazy.pending_count == 0


def test_no_value_returned_twice():
    """Total values returned equals total values realized."""

    def fan_out(n, lazy):
        for i in range(n):
            lazy.push((n, i))
        if n > 0:
            lazy.push_thunk(n - 1, fan_out)

    lazy = Lazy()
    lazy.push_thunk(4, fan_out)
    values = list(lazy)

    assert len(values) == 4 + 3 + 2 + 1
    assert len(set(values)) == len(values)


def test_thunk_runs_at_most_once():
    """Invoking a consumed thunk raises."""
    calls = []
    thunk = StateThunk("s", lambda s, l: calls.append(s))
    lazy = Lazy()

    thunk.call(lazy)
    with pytest.raises(ThunkConsumedError):
        thunk.call(lazy)
    assert calls == ["s"]


def test_failing_thunk_propagates():
    """An exception inside a thunk reaches the caller of next()."""

    def boom(state, lazy):
        raise ValueError(state)

    lazy = Lazy()
    lazy.push_thunk("broken", boom)

    with pytest.raises(ValueError, match="broken"):
        next(lazy)
    assert list(lazy) == []
