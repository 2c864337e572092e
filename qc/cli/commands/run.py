"""
Run command: load a property by dotted path and check it
"""

import importlib
import json
import os
import sys
from typing import Any, Optional, Tuple

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from qc.core import CheckFailure, ConfigError, Falsified, QConfig, UnsupportedTypeError
from qc.driver import quick_check, quick_check_occurs
from qc.logging_config import setup_logging

console = Console()


def load_target(target: str) -> Tuple[Any, Optional[QConfig], Any, bool]:
    """
    Import a property given as "module:function".

    Functions decorated with @quickcheck / @occurs are unwrapped, keeping
    their config, domain and mode.

    Returns:
        (property, config or None, of or None, existential)

    Raises:
        ValueError: If target is not of the form module:function
        ImportError, AttributeError: If it cannot be loaded
    """
    module_name, sep, attr = target.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"Target must look like module:function, got {target!r}")

    cwd = os.getcwd()
    if cwd not in sys.path:
        sys.path.insert(0, cwd)

    obj: Any = importlib.import_module(module_name)
    for part in attr.split("."):
        obj = getattr(obj, part)

    return (
        getattr(obj, "qc_property", obj),
        getattr(obj, "qc_config", None),
        getattr(obj, "qc_of", None),
        getattr(obj, "qc_existential", False),
    )


def run_command(
    target: str = typer.Argument(..., help="Property to check, as module:function"),
    trials: Optional[int] = typer.Option(None, "--trials", "-n", help="Number of trials"),
    size: Optional[int] = typer.Option(None, "--size", "-s", help="Size factor"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for the random source"),
    grow: Optional[bool] = typer.Option(None, "--grow/--no-grow", help="Grow size every 8 trials"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log trials and shrink steps"),
    occurs: bool = typer.Option(False, "--occurs", help="Search for a satisfying value instead"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Check a property and report the minimized counterexample on failure.

    Examples:
        qc run mypkg.props:prop_sort_idempotent
        qc run mypkg.props:prop_sort_idempotent --trials 500 --seed 7
        qc run mypkg.props:prop_finds_zero --occurs
        qc run mypkg.props:prop_sort_idempotent --json
    """
    try:
        prop, config, of, existential = load_target(target)
    except (ImportError, AttributeError, ValueError) as e:
        _print_error(str(e), json_output)
        raise typer.Exit(2)

    config = config or QConfig.from_env()
    try:
        if trials is not None:
            config = config.with_trials(trials)
        if size is not None:
            config = config.with_size(size)
    except ConfigError as e:
        _print_error(str(e), json_output)
        raise typer.Exit(2)
    if seed is not None:
        config = config.with_seed(seed)
    if grow is not None:
        config = config.with_grow(grow)
    if verbose:
        config = config.with_verbose(True)
        setup_logging()

    try:
        if existential or occurs:
            witness = quick_check_occurs(config, target, prop, of=of)
        else:
            result = quick_check(target, config, prop, of=of)
    except CheckFailure as failure:
        _print_failure(failure, json_output)
        raise typer.Exit(1)
    except UnsupportedTypeError as e:
        _print_error(str(e), json_output)
        raise typer.Exit(2)

    if existential or occurs:
        output = {
            "success": True,
            "check": target,
            "trials": witness.trials,
            "seed": witness.seed,
            "witness": repr(witness.value),
        }
    else:
        output = {"success": True, "check": target, "trials": result.trials, "seed": result.seed}

    if json_output:
        print(json.dumps(output, indent=2))
        return

    console.print(f"[green]✓ {escape(target)} passed[/green] ({output['trials']} trials)")
    console.print(f"  Seed: [cyan]{output['seed']}[/cyan]")
    if "witness" in output:
        console.print(f"  Witness: [yellow]{escape(output['witness'])}[/yellow]")


def _print_failure(failure: CheckFailure, json_output: bool) -> None:
    output = {
        "success": False,
        "check": failure.name,
        "trials": failure.trials,
        "seed": failure.seed,
    }
    if isinstance(failure, Falsified):
        output["outcome"] = "falsified"
        output["counterexample"] = repr(failure.counterexample)
        output["original"] = repr(failure.original)
    else:
        output["outcome"] = "no-witness"

    if json_output:
        print(json.dumps(output, indent=2))
        return

    console.print(f"[red]✗ {escape(str(failure))}[/red]")
    table = Table(title="Falsified" if output["outcome"] == "falsified" else "No witness")
    table.add_column("Field", style="green")
    table.add_column("Value", style="cyan")
    table.add_row("Check", escape(str(failure.name)))
    table.add_row("Trials", str(failure.trials))
    table.add_row("Seed", str(failure.seed))
    if "counterexample" in output:
        table.add_row("Counterexample", escape(output["counterexample"]))
        table.add_row("First falsified by", escape(output["original"]))
    console.print(table)


def _print_error(message: str, json_output: bool) -> None:
    if json_output:
        print(json.dumps({"error": message}))
    else:
        console.print(f"[red]Error:[/red] {escape(message)}")
