"""Rich terminal rendering for scaffold summaries and messages."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from gitscaffold.scaffold.writer import ScaffoldResult

_DELIMITER = "-" * 48


def render_scaffold_summary(console: Console, result: ScaffoldResult, *, verbose: bool = False) -> None:
    """Print what went into the generated message file."""
    if verbose and (result.changed or result.deleted or result.excluded):
        table = Table(title=f"Commit #{result.commit_number}", border_style="dim", title_style="bold")
        table.add_column("Status", justify="center", width=10)
        table.add_column("File", style="magenta")
        for path in result.changed:
            table.add_row("[green]changed[/green]", path)
        for path in result.deleted:
            table.add_row("[red]deleted[/red]", path)
        for path in result.excluded:
            table.add_row("[dim]ignored[/dim]", path)
        console.print(table)

    console.print(f"[bold]{result.path.name}[/bold] [green]created[/green] ✅")
    console.print(
        f"[dim]Changed:[/dim] {len(result.changed)}  "
        f"[dim]Deleted:[/dim] {len(result.deleted)}  "
        f"[dim]Excluded:[/dim] {len(result.excluded)}"
    )


def render_commit_message(console: Console, message: str) -> None:
    console.print()
    console.print("Commit message:")
    console.print(_DELIMITER, markup=False)
    console.print(message, markup=False, highlight=False)
    console.print(_DELIMITER, markup=False)
