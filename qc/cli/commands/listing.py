"""
Types command: list annotations with a registered domain
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from qc.domains import domain_for, is_generic, registered_types

console = Console()


def types_command():
    """
    List the annotations the registry resolves, and their domains.

    Composite annotations (Optional[X], list[X], tuple[...]) are built from
    these and need no registration.
    """
    table = Table(title="Registered Types")
    table.add_column("Annotation", style="green")
    table.add_column("Domain", style="cyan")

    for tp in registered_types():
        label = getattr(tp, "__name__", repr(tp))
        if is_generic(tp):
            table.add_row(escape(f"{label}[...]"), "generic, built from its argument domains")
        else:
            table.add_row(escape(label), escape(repr(domain_for(tp))))

    console.print(table)
