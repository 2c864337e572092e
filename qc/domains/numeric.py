"""
Numeric domains: unit, booleans, naturals, integers, bytes, small naturals, floats.

Integers shrink toward 0: first 0 itself, then n - n/2, n - n/4, ... n - 1.
Under greedy descent this reaches an exact falsification boundary.
"""

import math
import random
from typing import NewType

from ..core.lazy import Lazy
from .base import Domain, Immutable

Natural = NewType("Natural", int)
U8 = NewType("U8", int)


class SmallN(int):
    """Natural number bounded by the size factor at generation time."""

    def __new__(cls, value: int = 0) -> "SmallN":
        if value < 0:
            raise ValueError(f"SmallN must be non-negative, got {value}")
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"SmallN({int(self)})"


def shrink_natural(n: int) -> Lazy[int]:
    """Candidates for a natural n: 0, then halving steps toward n."""
    lazy: Lazy[int] = Lazy()
    if n > 0:
        lazy.push(0)
        lazy.push_thunk((n, n // 2), _toward_zero_step)
    return lazy


def _toward_zero_step(state, lazy):
    n, step = state
    if step <= 0:
        return
    lazy.push(n - step if n > 0 else n + step)
    lazy.push_thunk((n, step // 2), _toward_zero_step)


class Unit(Immutable, Domain[None]):
    """The single value None."""

    def arbitrary(self, size: int, rng: random.Random) -> None:
        return None

    def shrink(self, value: None) -> Lazy[None]:
        return Lazy()


class Bools(Immutable, Domain[bool]):
    def arbitrary(self, size: int, rng: random.Random) -> bool:
        return rng.random() < 0.5

    def shrink(self, value: bool) -> Lazy[bool]:
        return Lazy.new_from([False] if value else [])


class Naturals(Immutable, Domain[int]):
    """Non-negative integers below 2**size."""

    def arbitrary(self, size: int, rng: random.Random) -> int:
        return rng.randint(0, (1 << size) - 1)

    def shrink(self, value: int) -> Lazy[int]:
        return shrink_natural(value)


class Integers(Immutable, Domain[int]):
    """Signed integers with magnitude below 2**size."""

    def arbitrary(self, size: int, rng: random.Random) -> int:
        magnitude = rng.randint(0, (1 << size) - 1)
        return -magnitude if rng.random() < 0.5 else magnitude

    def shrink(self, value: int) -> Lazy[int]:
        lazy: Lazy[int] = Lazy()
        if value == 0:
            return lazy
        lazy.push(0)
        if value < 0:
            lazy.push(-value)
        lazy.push_thunk((value, abs(value) // 2), _toward_zero_step)
        return lazy


class Bytes8(Immutable, Domain[int]):
    """Unsigned 8-bit integers; fixed width, so size is ignored."""

    def arbitrary(self, size: int, rng: random.Random) -> int:
        return rng.randint(0, 255)

    def shrink(self, value: int) -> Lazy[int]:
        return shrink_natural(value)


class SmallNs(Immutable, Domain[SmallN]):
    """Naturals within [0, size]."""

    def arbitrary(self, size: int, rng: random.Random) -> SmallN:
        return SmallN(rng.randint(0, size))

    def shrink(self, value: SmallN) -> Lazy[SmallN]:
        return Lazy.create(lambda lazy: lazy.push_map(shrink_natural(int(value)), SmallN))


class Floats(Immutable, Domain[float]):
    """Finite floats within [-size, size]."""

    def arbitrary(self, size: int, rng: random.Random) -> float:
        return rng.uniform(-size, size)

    def shrink(self, value: float) -> Lazy[float]:
        lazy: Lazy[float] = Lazy()
        if value == 0.0:
            return lazy
        if not math.isfinite(value):
            lazy.push(0.0)
            return lazy
        truncated = math.trunc(value)
        if value != truncated:
            lazy.push(0.0)
            if truncated != 0:
                lazy.push(float(truncated))
            return lazy
        lazy.push_map(Integers().shrink(truncated), float)
        return lazy
