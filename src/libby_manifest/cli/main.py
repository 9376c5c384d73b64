"""Main CLI entry point using Typer.

This module defines the top-level CLI commands:
- libby-manifest generate: Write libby.json from a build description
- libby-manifest show: Summarize an existing libby.json
"""

from __future__ import annotations

import sys
from pathlib import Path  # noqa: TC003 - Typer requires runtime access
from typing import Annotated

import structlog
import typer
from rich.console import Console

from libby_manifest import __version__
from libby_manifest.cli.config import LOG_LEVELS, get_config

app = typer.Typer(
    name="libby-manifest",
    help="libby-manifest - Runtime dependency manifest generator",
    no_args_is_help=True,
)
console = Console()


def _stderr_logger_factory(*_args: object) -> structlog.PrintLogger:
    """Send log lines to stderr so stdout stays clean for --json output."""
    return structlog.PrintLogger(sys.stderr)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"libby-manifest {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output."),
    ] = False,
) -> None:
    """libby-manifest - Runtime dependency manifest generator.

    Use 'libby-manifest COMMAND --help' for information on specific commands.
    """
    level = LOG_LEVELS["DEBUG"] if verbose else get_config().log_level_number
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=_stderr_logger_factory,
    )


@app.command()
def generate(
    description: Annotated[
        Path,
        typer.Argument(help="Build description JSON produced by the host build."),
    ],
    build_dir: Annotated[
        Path | None,
        typer.Option("--build-dir", "-b", help="Override the build output directory."),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the manifest to this file instead."),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Also print the raw manifest JSON."),
    ] = False,
) -> None:
    """Generate libby.json for a build.

    Examples:
        libby-manifest generate build/libby-input.json

        libby-manifest generate build.json --build-dir out

        libby-manifest generate build.json --output libby.json --json
    """
    from libby_manifest.cli.commands.generate import run_generate  # noqa: PLC0415

    run_generate(
        description_path=description,
        build_dir=build_dir,
        output=output,
        json_output=json_output,
    )


@app.command()
def show(
    manifest: Annotated[Path, typer.Argument(help="libby.json file to inspect.")],
) -> None:
    """Show the contents of a libby.json manifest.

    Examples:
        libby-manifest show build/libby/libby.json
    """
    from libby_manifest.cli.commands.show import show_manifest  # noqa: PLC0415

    show_manifest(manifest)


if __name__ == "__main__":
    app()
