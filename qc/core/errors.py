"""
Exception types for the quick-check engine.

A check has two outcomes only: it passes, or it fails fatally. The two fatal
outcomes (a falsified universal property and an existential property with no
witness) are distinct types sharing CheckFailure as their base.
"""

from typing import Any, Optional


class QuickCheckError(Exception):
    """Base class for all engine errors."""
    pass


class ConfigError(QuickCheckError, ValueError):
    """Raised when a configuration value is malformed (e.g. negative trials)."""
    pass


class UnsupportedTypeError(QuickCheckError, TypeError):
    """Raised when no domain is known for a type annotation."""
    pass


class ThunkConsumedError(QuickCheckError, RuntimeError):
    """Raised when a deferred producer is invoked a second time."""
    pass


class CheckFailure(QuickCheckError, AssertionError):
    """
    Fatal outcome of a check.

    Subclasses AssertionError so test runners report it as a failed assertion.
    """

    def __init__(self, message: str, name: str, trials: int, seed: Optional[int] = None) -> None:
        super().__init__(message)
        self.name = name
        self.trials = trials
        self.seed = seed


class Falsified(CheckFailure):
    """
    Raised when a universal property returns False for a generated value.

    Fields:
        name: Check name
        trials: Trials consumed, including the falsifying one
        counterexample: Minimized (locally minimal) counterexample
        original: Value that first falsified the property, before shrinking
        seed: Seed of the random source used for the check
    """

    def __init__(
        self,
        name: str,
        trials: int,
        counterexample: Any,
        original: Any = None,
        seed: Optional[int] = None,
    ) -> None:
        super().__init__(
            f"qc {name}: falsified ({trials} trials) with value {counterexample!r}",
            name=name,
            trials=trials,
            seed=seed,
        )
        self.counterexample = counterexample
        self.original = original


class NoWitness(CheckFailure):
    """Raised when an existential property is never satisfied within the trial budget."""

    def __init__(self, name: str, trials: int, seed: Optional[int] = None) -> None:
        super().__init__(
            f"qc {name}: no witness found ({trials} trials)",
            name=name,
            trials=trials,
            seed=seed,
        )
