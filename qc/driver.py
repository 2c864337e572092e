"""
Quick-check driver: trial loop, falsification and shrinking.

quick_check generates values for a property; the first value the property
rejects is minimized with quick_shrink and reported by raising Falsified.
quick_check_occurs is the dual existence search.

Shrinking is a greedy, leftmost-first descent: the first candidate that
still falsifies the property is taken and the search restarts from it. The
result is locally minimal, not necessarily the smallest counterexample.
"""

import inspect
import random
import typing
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .core.config import QConfig
from .core.errors import Falsified, NoWitness, UnsupportedTypeError
from .domains.base import Domain
from .domains.registry import domain_for
from .logging_config import get_logger

Property = Callable[[Any], bool]


@dataclass(frozen=True)
class CheckResult:
    """
    Result of a passed check.

    Fields:
        name: Check name
        trials: Number of trials run
        seed: Seed of the random source
    """
    name: str
    trials: int
    seed: int


@dataclass(frozen=True)
class Witness:
    """
    Result of a successful existence search.

    Fields:
        name: Check name
        trials: Trials consumed, including the satisfying one
        value: Generated value satisfying the property
        seed: Seed of the random source
    """
    name: str
    trials: int
    value: Any
    seed: int


def resolve_domain(prop: Property, of: Any = None) -> Domain[Any]:
    """
    Find the domain a property ranges over.

    Args:
        prop: Property of one argument
        of: Domain instance or type annotation; when None, the annotation of
            prop's first parameter is used

    Raises:
        UnsupportedTypeError: If no domain can be determined
    """
    if of is not None:
        return domain_for(of)
    try:
        hints = typing.get_type_hints(prop)
        params = list(inspect.signature(prop).parameters)
    except (TypeError, ValueError, NameError) as e:
        raise UnsupportedTypeError(f"Cannot read annotations of {prop!r}: {e}") from e
    if params and params[0] in hints:
        return domain_for(hints[params[0]])
    raise UnsupportedTypeError(
        f"Property {prop!r} has no annotated parameter; pass of=<type or domain>"
    )


def quick_check(name: str, config: QConfig, prop: Property, of: Any = None) -> CheckResult:
    """
    Repeatedly test prop with generated values.

    If prop holds for all config.trials values the check passes. Otherwise
    the first counterexample is minimized with quick_shrink.

    Args:
        name: Check name used in reports
        config: Check configuration
        prop: Property of one argument; receives a copy of each value
        of: Domain or annotation (default: prop's parameter annotation)

    Returns:
        CheckResult when every trial passed

    Raises:
        Falsified: With the minimized counterexample
    """
    domain = resolve_domain(prop, of)
    seed = _seed_for(config)
    rng = random.Random(seed)
    log = get_logger(__name__, check=name)
    if config.verbose:
        log.info("qc %s: running %d trials (seed %d)", name, config.trials, seed)

    for i in range(config.trials):
        value = domain.arbitrary(config.effective_size(i), rng)
        if config.verbose:
            log.debug("qc %s: %d. trying value %r", name, 1 + i, value)
        if not prop(domain.clone(value)):
            if config.verbose:
                log.info("qc %s: first falsification with value %r", name, value)
            shrunk = _shrink(config, domain, value, prop, log)
            raise Falsified(name, 1 + i, shrunk, original=value, seed=seed)

    if config.verbose:
        log.info("qc %s: passed", name)
    return CheckResult(name=name, trials=config.trials, seed=seed)


def quick_shrink(config: QConfig, value: Any, prop: Property, of: Any = None) -> Any:
    """
    Minimize a counterexample of prop.

    Returns value itself when none of its shrink candidates falsifies prop.
    """
    domain = resolve_domain(prop, of)
    return _shrink(config, domain, value, prop, get_logger(__name__))


def quick_check_occurs(config: QConfig, name: str, prop: Property, of: Any = None) -> Witness:
    """
    Search for a generated value satisfying prop.

    Returns:
        Witness for the first value prop accepts

    Raises:
        NoWitness: If no value in config.trials trials satisfies prop
    """
    domain = resolve_domain(prop, of)
    seed = _seed_for(config)
    rng = random.Random(seed)
    log = get_logger(__name__, check=name)

    for i in range(config.trials):
        value = domain.arbitrary(config.effective_size(i), rng)
        if prop(domain.clone(value)):
            if config.verbose:
                log.info("qc %s: occurred (%d trials) with value %r", name, 1 + i, value)
            return Witness(name=name, trials=1 + i, value=value, seed=seed)

    raise NoWitness(name, config.trials, seed=seed)


def _shrink(config: QConfig, domain: Domain[Any], value: Any, prop: Property, log) -> Any:
    while True:
        for candidate in domain.shrink(value):
            if not prop(domain.clone(candidate)):
                if config.verbose:
                    log.info("Shrunk to: %r", candidate)
                value = candidate
                break
        else:
            if config.verbose:
                log.info("Shrink finished: %r", value)
            return value


def _seed_for(config: QConfig) -> int:
    if config.seed is not None:
        return config.seed
    return random.randrange(1 << 32)
