"""
Core primitives of the quick-check engine.

- Lazy: single-pass sequence with deferred producers (thunks)
- QConfig: immutable check configuration
- Errors: fatal check outcomes and misuse errors
"""

from .lazy import Lazy, Thunk, StateThunk
from .config import QConfig, DEFAULT_CONFIG
from .errors import (
    QuickCheckError,
    ConfigError,
    UnsupportedTypeError,
    ThunkConsumedError,
    CheckFailure,
    Falsified,
    NoWitness,
)

__all__ = [
    "Lazy",
    "Thunk",
    "StateThunk",
    "QConfig",
    "DEFAULT_CONFIG",
    "QuickCheckError",
    "ConfigError",
    "UnsupportedTypeError",
    "ThunkConsumedError",
    "CheckFailure",
    "Falsified",
    "NoWitness",
]
