"""
Arbitrary and Shrink capabilities.

Defines the contract every value domain implements. A domain is a plain
object; composite domains (options, lists, tuples, trees) hold the domains
of their components and delegate to them.
"""

import copy
import random
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from ..core.lazy import Lazy

T = TypeVar("T")


class Arbitrary(ABC, Generic[T]):
    """
    Random value construction, parameterized by a size factor.

    All implementations must guarantee:
    - Totality (never fails, for every size including 0)
    - Termination (recursive values decrease size on recursion)
    - Randomness drawn only from the supplied rng
    """

    @abstractmethod
    def arbitrary(self, size: int, rng: random.Random) -> T:
        """
        Generate a value.

        Args:
            size: Non-negative bound on magnitude, length or depth
            rng: Random source owned by the running check

        Returns:
            Generated value
        """
        ...


class Shrink(ABC, Generic[T]):
    """
    Enumeration of simpler candidates for a value.

    All implementations must guarantee:
    - Finite candidate sequence, never containing the value itself
    - Well-foundedness (no infinite chain of strictly smaller candidates)
    - Most drastic candidates first
    """

    @abstractmethod
    def shrink(self, value: T) -> Lazy[T]:
        """
        Lazily enumerate candidates smaller than value.

        Returns:
            Lazy sequence of candidates, possibly empty
        """
        ...

    def clone(self, value: T) -> T:
        """
        Duplicate a value so a property may consume (mutate) it.

        Implementations may override. Default is a deep copy.
        """
        return copy.deepcopy(value)


class Domain(Arbitrary[T], Shrink[T]):
    """Both capabilities for one value shape."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Immutable:
    """Mixin for domains whose values are immutable: clone returns the value."""

    def clone(self, value):
        return value
