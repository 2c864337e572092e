#!/usr/bin/env python3
"""
qc CLI - property-based testing with lazy shrinking

Main entrypoint for the qc command-line tool.
"""

import typer
from rich.console import Console
from rich.table import Table

from qc.cli.commands import listing, run

app = typer.Typer(
    name="qc",
    help="Property-based testing with lazy shrinking",
    add_completion=False,
)

console = Console()

app.command(name="run")(run.run_command)
app.command(name="types")(listing.types_command)


@app.command()
def version():
    """Show version information."""
    from qc import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]qc[/bold]", f"v{__version__}")
    table.add_row("Shrinking", "greedy, leftmost-first")

    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
