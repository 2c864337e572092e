"""
Registry of domains by type annotation.

Resolves annotations such as list[Optional[int]] or Tree[U8] into composed
domain objects. Generic origins are registered with a factory receiving the
resolved domains of their type arguments.
"""

import types
from typing import Any, Callable, Dict, List, Set, Tuple, Union, get_args, get_origin

from ..core.errors import UnsupportedTypeError
from .base import Domain
from .containers import Lists, Options, Tuples
from .numeric import Bools, Bytes8, Floats, Integers, Naturals, SmallN, SmallNs, U8, Natural, Unit
from .text import Strings, Unicode, UnicodeStrings
from .tree import Tree, Trees

# Factory signature: (*argument_domains) -> domain
Factory = Callable[..., Domain[Any]]

_UNION_ORIGINS = (Union, types.UnionType)


class Registry:
    """
    Mapping from annotations to domain factories.

    Usage:
        registry = Registry()
        registry.register(Point, lambda: Points())
        domain = registry.domain_for(list[Point])
    """

    def __init__(self) -> None:
        self._factories: Dict[Any, Factory] = {}
        self._generic: Set[Any] = set()

    def register(self, tp: Any, factory: Factory) -> None:
        """
        Register a domain factory.

        Args:
            tp: Plain type, NewType, or generic origin (e.g. Tree)
            factory: Called with the domains of the type arguments, if any
        """
        self._factories[tp] = factory
        if getattr(tp, "__parameters__", ()):
            self._generic.add(tp)

    def registered(self) -> List[Any]:
        """Registered annotations, in registration order."""
        return list(self._factories)

    def is_generic(self, tp: Any) -> bool:
        """True for registered generic origins (e.g. Tree); their factory takes argument domains."""
        return tp in self._generic

    def domain_for(self, tp: Any) -> Domain[Any]:
        """
        Resolve an annotation to a domain.

        Domain instances are returned unchanged.

        Raises:
            UnsupportedTypeError: If no domain is known for tp
        """
        if isinstance(tp, Domain):
            return tp
        if tp is None or tp is type(None):
            return Unit()

        origin = get_origin(tp)
        args = get_args(tp)
        if origin is None:
            if self.is_generic(tp):
                raise UnsupportedTypeError(f"Generic type needs type arguments: {tp!r}")
            if tp in self._factories:
                return self._factories[tp]()
            raise UnsupportedTypeError(f"No domain for type: {tp!r}")

        if origin in _UNION_ORIGINS:
            present = [a for a in args if a is not type(None)]
            if len(present) == 1 and len(args) == 2:
                return Options(self.domain_for(present[0]))
            raise UnsupportedTypeError(f"Only Optional unions are supported: {tp!r}")
        if origin is list:
            return Lists(self.domain_for(_single_arg(tp, args)))
        if origin is tuple:
            if len(args) == 2 and args[1] is Ellipsis:
                return Lists(self.domain_for(args[0]), container=tuple)
            if args == ((),):
                return Tuples()
            return Tuples(*(self.domain_for(a) for a in args))
        if origin in self._factories:
            return self._factories[origin](*(self.domain_for(a) for a in args))
        raise UnsupportedTypeError(f"No domain for type: {tp!r}")


def _single_arg(tp: Any, args: Tuple[Any, ...]) -> Any:
    if len(args) != 1:
        raise UnsupportedTypeError(f"Expected one type argument: {tp!r}")
    return args[0]


def _builtin_registry() -> Registry:
    registry = Registry()
    registry.register(bool, Bools)
    registry.register(int, Integers)
    registry.register(float, Floats)
    registry.register(str, Strings)
    registry.register(Natural, Naturals)
    registry.register(U8, Bytes8)
    registry.register(SmallN, SmallNs)
    registry.register(Unicode, UnicodeStrings)
    registry.register(Tree, Trees)
    return registry


default_registry = _builtin_registry()


def register(tp: Any, factory: Factory) -> None:
    """Register a domain factory on the default registry."""
    default_registry.register(tp, factory)


def domain_for(tp: Any) -> Domain[Any]:
    """Resolve an annotation on the default registry."""
    return default_registry.domain_for(tp)


def registered_types() -> List[Any]:
    """Annotations registered on the default registry (for listings)."""
    return default_registry.registered()


def is_generic(tp: Any) -> bool:
    """Whether tp is a generic origin on the default registry."""
    return default_registry.is_generic(tp)
