"""
Decorators turning annotated properties into runnable checks.

The check name is derived from the property's qualified name and source
location, so reports point back at the definition:

    @quickcheck
    def test_reverse_twice(xs: list[int]) -> bool:
        return list(reversed(list(reversed(xs)))) == xs

The decorated object takes no arguments, so pytest collects and runs it like
any other test function.
"""

import os
from typing import Any, Callable, Optional

from .core.config import DEFAULT_CONFIG, QConfig
from .driver import Property, quick_check, quick_check_occurs


def quickcheck(config: Any = None, of: Any = None):
    """
    Wrap a property into a zero-argument check running quick_check.

    Usable bare (@quickcheck) or with arguments (@quickcheck(cfg, of=...)).
    """
    if callable(config) and not isinstance(config, QConfig):
        return quickcheck()(config)

    def decorator(prop: Property) -> Callable[[], None]:
        name = call_site_name(prop)
        cfg = config or DEFAULT_CONFIG

        def runner() -> None:
            quick_check(name, cfg, prop, of=of)

        return _describe(runner, prop, cfg, of)

    return decorator


def occurs(config: Any = None, of: Any = None):
    """
    Wrap a property into a zero-argument check running quick_check_occurs.

    Without a config, four times the default number of trials are run.
    """
    if callable(config) and not isinstance(config, QConfig):
        return occurs()(config)

    def decorator(prop: Property) -> Callable[[], None]:
        name = call_site_name(prop)
        cfg = config or DEFAULT_CONFIG.with_trials(DEFAULT_CONFIG.trials * 4)

        def runner() -> None:
            quick_check_occurs(cfg, name, prop, of=of)

        return _describe(runner, prop, cfg, of, existential=True)

    return decorator


def call_site_name(prop: Property) -> str:
    """Name of the form '<qualname>\\n<file>:<line>'."""
    qualname = getattr(prop, "__qualname__", repr(prop))
    code = getattr(prop, "__code__", None)
    if code is None:
        return qualname
    return f"{qualname}\n{os.path.basename(code.co_filename)}:{code.co_firstlineno}"


def _describe(
    runner: Callable[[], None],
    prop: Property,
    config: QConfig,
    of: Optional[Any],
    existential: bool = False,
) -> Callable[[], None]:
    # No __wrapped__: pytest would read prop's parameters as fixtures.
    runner.__name__ = getattr(prop, "__name__", runner.__name__)
    runner.__qualname__ = getattr(prop, "__qualname__", runner.__qualname__)
    runner.__module__ = getattr(prop, "__module__", runner.__module__)
    runner.__doc__ = getattr(prop, "__doc__", None)
    runner.qc_property = prop  # type: ignore[attr-defined]
    runner.qc_config = config  # type: ignore[attr-defined]
    runner.qc_of = of  # type: ignore[attr-defined]
    runner.qc_existential = existential  # type: ignore[attr-defined]
    return runner
