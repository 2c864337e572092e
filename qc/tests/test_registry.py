"""
Tests for annotation to domain resolution.
"""

import random
from typing import Optional, Union

import pytest

from qc.core.errors import UnsupportedTypeError
from qc.core.lazy import Lazy
from qc.domains import (
    Bools,
    Bytes8,
    Domain,
    Floats,
    Integers,
    Lists,
    Natural,
    Naturals,
    Options,
    Registry,
    SmallN,
    SmallNs,
    Strings,
    Tree,
    Trees,
    Tuples,
    U8,
    Unicode,
    UnicodeStrings,
    Unit,
    domain_for,
    registered_types,
)


@pytest.mark.parametrize(
    "tp,expected",
    [
        (bool, Bools),
        (int, Integers),
        (float, Floats),
        (str, Strings),
        (Natural, Naturals),
        (U8, Bytes8),
        (SmallN, SmallNs),
        (Unicode, UnicodeStrings),
        (None, Unit),
        (type(None), Unit),
    ],
)
def test_builtin_types(tp, expected):
    assert isinstance(domain_for(tp), expected)


def test_optional_forms():
    """Optional[X] and X | None resolve alike."""
    for tp in (Optional[int], Union[int, None], int | None):
        domain = domain_for(tp)
        assert isinstance(domain, Options)
        assert isinstance(domain.inner, Integers)


def test_containers():
    lists = domain_for(list[Optional[str]])
    assert isinstance(lists, Lists)
    assert isinstance(lists.element, Options)
    assert isinstance(lists.element.inner, Strings)

    pair = domain_for(tuple[int, str])
    assert isinstance(pair, Tuples)
    assert [type(c) for c in pair.components] == [Integers, Strings]


def test_variadic_tuple_builds_tuples():
    domain = domain_for(tuple[U8, ...])
    value = domain.arbitrary(6, random.Random(2))

    assert isinstance(domain, Lists)
    assert isinstance(value, tuple)
    assert all(0 <= x <= 255 for x in value)


def test_generic_origin():
    """Tree[X] is built by the factory registered for Tree."""
    domain = domain_for(Tree[list[int]])

    assert isinstance(domain, Trees)
    assert isinstance(domain.value, Lists)


def test_domain_instances_pass_through():
    domain = Naturals()

    assert domain_for(domain) is domain


@pytest.mark.parametrize("tp", [complex, dict[str, int], Union[int, str], Optional[bytes], list])
def test_unsupported_types(tp):
    with pytest.raises(UnsupportedTypeError):
        domain_for(tp)


def test_unsupported_is_a_type_error():
    with pytest.raises(TypeError):
        domain_for(complex)


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y


class Points(Domain[Point]):
    def arbitrary(self, size, rng):
        return Point(rng.randint(0, size), rng.randint(0, size))

    def shrink(self, value):
        return Lazy.new_from([Point(0, 0)] if (value.x, value.y) != (0, 0) else [])


def test_custom_registration():
    """A registered user type composes with the built-in containers."""
    registry = Registry()
    registry.register(Point, Points)

    domain = registry.domain_for(list[Optional[Point]])
    values = domain.arbitrary(5, random.Random(4))

    assert all(v is None or isinstance(v, Point) for v in values)
    assert registry.registered() == [Point]


def test_fresh_registry_knows_no_types():
    with pytest.raises(UnsupportedTypeError):
        Registry().domain_for(int)


def test_registered_types_listing():
    types = registered_types()

    assert int in types
    assert Tree in types
    assert Natural in types


def test_generic_origins_are_recorded():
    """Generic origins are known at registration, not discovered by calling their factory."""
    registry = Registry()
    registry.register(Tree, Trees)
    registry.register(int, Integers)

    assert registry.is_generic(Tree)
    assert not registry.is_generic(int)
    assert not registry.is_generic(Natural)


def test_bare_generic_needs_arguments():
    with pytest.raises(UnsupportedTypeError, match="type arguments"):
        domain_for(Tree)


def test_broken_factory_error_is_not_hidden():
    """A factory failing on its own is reported as such."""
    registry = Registry()

    def broken():
        raise TypeError("bad constructor")

    registry.register(Point, broken)

    with pytest.raises(TypeError, match="bad constructor"):
        registry.domain_for(Point)
    assert not registry.is_generic(Point)
