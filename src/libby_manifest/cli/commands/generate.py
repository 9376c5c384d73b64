"""Generate command implementation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from libby_manifest.build import BuildDescription
from libby_manifest.cli.config import get_config
from libby_manifest.errors import LibbyManifestError
from libby_manifest.task import ManifestTask

if TYPE_CHECKING:
    from pathlib import Path

    from libby_manifest.task import TaskResult

console = Console()
err_console = Console(stderr=True)


def run_generate(
    *,
    description_path: Path,
    build_dir: Path | None,
    output: Path | None,
    json_output: bool,
) -> None:
    """Execute generate command.

    Args:
        description_path: Build description JSON file.
        build_dir: Override for the configured build directory.
        output: Explicit manifest output file.
        json_output: Print the raw manifest JSON.
    """
    config = get_config()

    try:
        description = BuildDescription.load(description_path)
        task = ManifestTask(
            description,
            build_dir=build_dir or config.build_dir,
            manifest_path=config.manifest_path,
            output=output,
        )
        result = task.run()
    except LibbyManifestError as err:
        err_console.print(f"[red]✗[/red] Manifest generation failed: {escape(str(err))}")
        raise SystemExit(1) from None

    if json_output:
        console.print_json(result.manifest.to_json())
    else:
        _print_summary(result)

    console.print(f"[green]✓[/green] Manifest written to {result.output_path}")
    console.print(f"[blue]i[/blue] Resource directory: {result.resource_dir}")


def _print_summary(result: TaskResult) -> None:
    """Print manifest summary.

    Args:
        result: The completed task result.
    """
    manifest = result.manifest
    checksummed = sum(1 for entry in manifest.libraries if entry.checksum is not None)

    table = Table(title="Manifest Summary")
    table.add_column("Property", style="cyan")
    table.add_column("Value")

    table.add_row("Format Version", str(manifest.version))
    table.add_row("Libraries", str(len(manifest.libraries)))
    table.add_row("With Checksum", str(checksummed))
    table.add_row("Repositories", str(len(manifest.repositories)))
    if manifest.relocations is None:
        table.add_row("Relocations", "[dim]not configured[/dim]")
    else:
        table.add_row("Relocations", str(len(manifest.relocations)))
    table.add_row("Fingerprint", manifest.fingerprint()[:12])

    console.print(table)
