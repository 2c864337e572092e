"""
Text domains: characters and strings.

Characters shrink toward 'a'. A lowercase letter offers the letters before
it; any other character offers 'a' and then characters with a smaller code
point, never going below the space character.
"""

import random

from ..core.lazy import Lazy
from .base import Domain, Immutable
from .containers import Lists
from .numeric import shrink_natural

_FIRST_PRINTABLE = 0x20
_LAST_PRINTABLE = 0x7E
_SURROGATES = range(0xD800, 0xE000)


class Unicode(str):
    """String that may hold any non-surrogate code point."""

    def __repr__(self) -> str:
        return f"Unicode({str.__repr__(self)})"


def shrink_char(c: str) -> Lazy[str]:
    lazy: Lazy[str] = Lazy()
    if "a" <= c <= "z":
        lazy.push_map(shrink_natural(ord(c) - ord("a")), _letter)
        return lazy
    lazy.push("a")
    lazy.push_thunk(shrink_natural(ord(c) - _FIRST_PRINTABLE), _code_points_step)
    return lazy


def _letter(offset):
    return chr(ord("a") + offset)


def _code_points_step(offsets, lazy):
    for offset in offsets:
        point = _FIRST_PRINTABLE + offset
        if point in _SURROGATES:
            continue
        lazy.push(chr(point))
        lazy.push_thunk(offsets, _code_points_step)
        return


class Chars(Immutable, Domain[str]):
    """Printable ASCII characters."""

    def arbitrary(self, size: int, rng: random.Random) -> str:
        return chr(rng.randint(_FIRST_PRINTABLE, _LAST_PRINTABLE))

    def shrink(self, value: str) -> Lazy[str]:
        return shrink_char(value)


class UnicodeChars(Immutable, Domain[str]):
    """Printable ASCII half of the time, otherwise any non-surrogate code point."""

    def arbitrary(self, size: int, rng: random.Random) -> str:
        if rng.random() < 0.5:
            return chr(rng.randint(_FIRST_PRINTABLE, _LAST_PRINTABLE))
        point = rng.randint(0x80, 0x10FFFF - len(_SURROGATES))
        if point >= _SURROGATES.start:
            point += len(_SURROGATES)
        return chr(point)

    def shrink(self, value: str) -> Lazy[str]:
        return shrink_char(value)


class Strings(Immutable, Lists):
    """ASCII strings, shrunk as lists of characters."""

    def __init__(self) -> None:
        super().__init__(Chars(), container="".join)

    def __repr__(self) -> str:
        return "Strings()"


class UnicodeStrings(Immutable, Lists):
    """Unicode strings, shrunk as lists of characters."""

    def __init__(self) -> None:
        super().__init__(UnicodeChars(), container=_join_unicode)

    def __repr__(self) -> str:
        return "UnicodeStrings()"


def _join_unicode(chars):
    return Unicode("".join(chars))
