"""
Value domains: random generation and shrinking per value shape.

- Arbitrary / Shrink: the two capabilities, Domain: both together
- Numeric: Unit, Bools, Naturals, Integers, Bytes8, SmallNs, Floats
- Text: Chars, UnicodeChars, Strings, UnicodeStrings
- Containers: Options, Lists, Tuples
- Tree: recursive Leaf/Node example
- Registry: annotation -> domain resolution
"""

from .base import Arbitrary, Shrink, Domain, Immutable
from .numeric import (
    Natural,
    U8,
    SmallN,
    Unit,
    Bools,
    Naturals,
    Integers,
    Bytes8,
    SmallNs,
    Floats,
    shrink_natural,
)
from .text import Unicode, Chars, UnicodeChars, Strings, UnicodeStrings, shrink_char
from .containers import Options, Lists, Tuples
from .tree import Tree, Leaf, Node, Trees
from .registry import Registry, default_registry, register, domain_for, registered_types, is_generic

__all__ = [
    "Arbitrary",
    "Shrink",
    "Domain",
    "Immutable",
    "Natural",
    "U8",
    "SmallN",
    "Unit",
    "Bools",
    "Naturals",
    "Integers",
    "Bytes8",
    "SmallNs",
    "Floats",
    "shrink_natural",
    "Unicode",
    "Chars",
    "UnicodeChars",
    "Strings",
    "UnicodeStrings",
    "shrink_char",
    "Options",
    "Lists",
    "Tuples",
    "Tree",
    "Leaf",
    "Node",
    "Trees",
    "Registry",
    "default_registry",
    "register",
    "domain_for",
    "registered_types",
    "is_generic",
]
