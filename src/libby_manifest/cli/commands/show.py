"""Show command implementation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from libby_manifest.errors import ManifestFormatError
from libby_manifest.manifest.reader import load_manifest

if TYPE_CHECKING:
    from pathlib import Path

console = Console()
err_console = Console(stderr=True)


def show_manifest(path: Path) -> None:
    """Execute show command.

    Args:
        path: libby.json file to inspect.
    """
    try:
        manifest = load_manifest(path)
    except ManifestFormatError as err:
        err_console.print(f"[red]✗[/red] {escape(str(err))}")
        raise SystemExit(1) from None

    table = Table(title=f"Libraries ({len(manifest.libraries)})")
    table.add_column("Group", style="cyan")
    table.add_column("Name")
    table.add_column("Version")
    table.add_column("Classifier")
    table.add_column("Checksum")

    for entry in manifest.libraries:
        table.add_row(
            entry.group,
            entry.name,
            entry.version,
            entry.classifier or "",
            entry.checksum or "[dim]none[/dim]",
        )
    console.print(table)

    repos = Tree("[bold]Repositories[/bold]")
    for url in manifest.repositories:
        repos.add(escape(url))
    console.print(repos)

    if manifest.relocations is None:
        console.print("[dim]No repackaging step configured.[/dim]")
        return

    relocations = Tree(f"[bold]Relocations[/bold] ({len(manifest.relocations)})")
    for mapping in manifest.relocations:
        relocations.add(f"{escape(mapping.from_prefix)} [dim]->[/dim] {escape(mapping.to_prefix)}")
    console.print(relocations)
