"""
Check configuration.

QConfig is immutable. Builder methods return a new instance, so the shared
DEFAULT_CONFIG can be used as a starting point without ever changing.
"""

import os
from dataclasses import dataclass, replace
from typing import Optional

from .errors import ConfigError


@dataclass(frozen=True)
class QConfig:
    """
    Immutable check configuration.

    Fields:
        trials: Number of generated values to test (default 50)
        size: Size factor passed to generation (default 8)
        verbose: Log trials, falsification and shrink steps (default False)
        grow: Increase the size factor by one every 8 trials (default True)
        seed: Seed for the random source (None = fresh seed per check)
    """
    trials: int = 50
    size: int = 8
    verbose: bool = False
    grow: bool = True
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if not isinstance(self.trials, int) or self.trials < 0:
            raise ConfigError(f"trials must be a non-negative integer, got {self.trials!r}")
        if not isinstance(self.size, int) or self.size < 0:
            raise ConfigError(f"size must be a non-negative integer, got {self.size!r}")

    def with_trials(self, trials: int) -> "QConfig":
        """Set number of trials (default 50)."""
        return replace(self, trials=trials)

    def with_size(self, size: int) -> "QConfig":
        """Set size factor (default 8)."""
        return replace(self, size=size)

    def with_verbose(self, verbose: bool) -> "QConfig":
        """Set verbose (default False)."""
        return replace(self, verbose=verbose)

    def with_grow(self, grow: bool) -> "QConfig":
        """Set if size factor should gradually increase (default True)."""
        return replace(self, grow=grow)

    def with_seed(self, seed: Optional[int]) -> "QConfig":
        """Pin the random source to reproduce a run."""
        return replace(self, seed=seed)

    def effective_size(self, trial: int) -> int:
        """Size factor for the trial with zero-based index `trial`."""
        return self.size + (trial // 8 if self.grow else 0)

    @classmethod
    def from_env(cls) -> "QConfig":
        """
        Build a config from environment variables.

        Reads QC_TRIALS, QC_SIZE, QC_VERBOSE, QC_GROW and QC_SEED. Unset or
        unparsable values keep their defaults.
        """
        defaults = cls()
        trials = _env_int("QC_TRIALS")
        size = _env_int("QC_SIZE")
        return cls(
            trials=trials if trials is not None and trials >= 0 else defaults.trials,
            size=size if size is not None and size >= 0 else defaults.size,
            verbose=_env_bool("QC_VERBOSE", defaults.verbose),
            grow=_env_bool("QC_GROW", defaults.grow),
            seed=_env_int("QC_SEED"),
        )


DEFAULT_CONFIG = QConfig()


def _env_int(key: str) -> Optional[int]:
    val = os.getenv(key)
    if not val:
        return None
    try:
        return int(val)
    except ValueError:
        return None


def _env_bool(key: str, default: bool) -> bool:
    val = os.getenv(key)
    if not val:
        return default
    val = val.strip().lower()
    if val in ("1", "true", "yes", "on"):
        return True
    if val in ("0", "false", "no", "off"):
        return False
    return default
