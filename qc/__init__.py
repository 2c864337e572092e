"""
qc - QuickCheck-style property testing with lazy shrinking

Generates random values for a property, and when one falsifies it, reduces
that counterexample to a locally minimal one by walking a lazily built
space of shrink candidates.

    from qc import DEFAULT_CONFIG, quick_check

    def prop_reverse(xs: list[int]) -> bool:
        return list(reversed(list(reversed(xs)))) == xs

    quick_check("reverse", DEFAULT_CONFIG.with_trials(500), prop_reverse)
"""

__version__ = "0.1.0"

from .core import (
    Lazy,
    QConfig,
    DEFAULT_CONFIG,
    QuickCheckError,
    ConfigError,
    UnsupportedTypeError,
    CheckFailure,
    Falsified,
    NoWitness,
)
from .driver import CheckResult, Witness, quick_check, quick_shrink, quick_check_occurs
from .decorators import quickcheck, occurs
from .domains import Natural, U8, SmallN, Unicode, Tree, Leaf, Node, register, domain_for

__all__ = [
    "Lazy",
    "QConfig",
    "DEFAULT_CONFIG",
    "QuickCheckError",
    "ConfigError",
    "UnsupportedTypeError",
    "CheckFailure",
    "Falsified",
    "NoWitness",
    "CheckResult",
    "Witness",
    "quick_check",
    "quick_shrink",
    "quick_check_occurs",
    "quickcheck",
    "occurs",
    "Natural",
    "U8",
    "SmallN",
    "Unicode",
    "Tree",
    "Leaf",
    "Node",
    "register",
    "domain_for",
]
