"""Keys command implementation."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from codedeploy_ops.casing import DEFAULT_CASE_RULES, CasingPolicy, camelize

console = Console()


def show_keys(*, names: list[str], upper: bool) -> None:
    """Print the wire-format rendering of each raw key.

    Args:
        names: Raw keys as typed by the user.
        upper: Render with a PascalCase initial.
    """
    rules = DEFAULT_CASE_RULES
    if upper:
        rules = rules.with_default(CasingPolicy.UPPER_INITIAL)

    table = Table(title="Wire keys")
    table.add_column("Raw key", style="cyan")
    table.add_column("Wire key", style="green")
    for name in names:
        table.add_row(name, camelize(name, rules))

    console.print(table)
