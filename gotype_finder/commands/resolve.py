"""Resolution commands for the gotype-finder CLI."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn

import click
from rich.table import Table

from ..console import console
from ..errors import SourceFinderError
from ..resolution import ModuleVersion
from ..resolution import SourceFinder
from ..settings import FinderSettings
from ..utils.error_format import escape_markup
from ..utils.error_format import format_error_chain


@dataclass
class CliState:
    """Options shared by every command."""

    settings: FinderSettings
    start_dir: Path | None = None

    def create_finder(self) -> SourceFinder:
        return SourceFinder(self.settings, start_dir=self.start_dir)


def _fail(error: Exception) -> NoReturn:
    console.print(f"[red]Error:[/red] {escape_markup(format_error_chain(error))}")
    sys.exit(1)


@click.command("resolve")
@click.argument("import_paths", nargs=-1, required=True)
@click.pass_obj
def resolve_cmd(state: CliState, import_paths: tuple[str, ...]):
    """Print the directory holding each IMPORT_PATH."""
    finder = state.create_finder()
    for import_path in import_paths:
        try:
            directory = finder.resolve_directory(import_path)
        except SourceFinderError as e:
            _fail(e)
        if len(import_paths) > 1:
            click.echo(f"{import_path}\t{directory}")
        else:
            click.echo(str(directory))


@click.command("files")
@click.argument("import_path")
@click.option("--sort", "sort_files", is_flag=True, help="Sort files by name")
@click.pass_obj
def files_cmd(state: CliState, import_path: str, sort_files: bool):
    """Print the source files implementing IMPORT_PATH."""
    try:
        sources = state.create_finder().get_package_source_files(import_path)
    except SourceFinderError as e:
        _fail(e)

    if sort_files:
        sources.sort()
    if not sources:
        console.print(f"[yellow]No source files in {escape_markup(import_path)}[/yellow]")
        return
    for source in sources:
        click.echo(str(source))


@click.command("roots")
@click.argument("module_path", required=False)
@click.argument("version", required=False)
@click.pass_obj
def roots_cmd(state: CliState, module_path: str | None, version: str | None):
    """Show candidate roots for MODULE_PATH at VERSION.

    Without MODULE_PATH, shows the standard library roots. Without VERSION,
    the version required by the current module is used.

    Examples:

        \b
        gotype-finder roots
        gotype-finder roots golang.org/x/mod v0.14.0
        gotype-finder roots golang.org/x/mod
    """
    finder = state.create_finder()
    identity: ModuleVersion | None = None

    try:
        if module_path is not None:
            if version is None:
                requires = finder.manifest_file.manifest.requires
                match = next((r for r in requires if r.path == module_path), None)
                if match is None:
                    console.print(f"[red]Module {escape_markup(module_path)} is not required by the manifest[/red]")
                    console.print("[dim]Pass VERSION explicitly to inspect it anyway.[/dim]")
                    sys.exit(1)
                version = match.version
            identity = ModuleVersion(path=module_path, version=version)
        candidates = finder.enumerator.enumerate_roots(identity)
    except SourceFinderError as e:
        _fail(e)

    title = f"Candidate roots for {identity}" if identity else "Candidate roots for the standard library"
    table = Table(title=escape_markup(title), show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", no_wrap=True)
    table.add_column("Path", style="green", overflow="fold")
    table.add_column("Status", no_wrap=True)

    selected = False
    for index, candidate in enumerate(candidates, start=1):
        if candidate.is_dir():
            status = "[yellow]exists[/yellow]" if selected else "[bold green]selected[/bold green]"
            selected = True
        else:
            status = "[dim]missing[/dim]"
        table.add_row(str(index), escape_markup(candidate), status)

    console.print(table)
    if not selected:
        console.print("[yellow]No candidate root exists.[/yellow]")


@click.command("manifest")
@click.pass_obj
def manifest_cmd(state: CliState):
    """Show the module manifest governing the current directory."""
    try:
        manifest_file = state.create_finder().manifest_file
    except SourceFinderError as e:
        _fail(e)

    manifest = manifest_file.manifest
    console.print(f"[bold]Module:[/bold] {escape_markup(manifest.module_path)}")
    console.print(f"[bold]Go:[/bold] {escape_markup(manifest.go_version or 'unspecified')}")
    console.print(f"[dim]File: {escape_markup(manifest_file.path)}[/dim]", soft_wrap=True)

    if not manifest.requires:
        console.print("\n[dim]No requirements declared.[/dim]")
        return

    table = Table(title="Requirements", show_header=True, header_style="bold cyan")
    table.add_column("Module", style="green")
    table.add_column("Version", style="magenta")
    table.add_column("Indirect")
    for requirement in manifest.requires:
        table.add_row(
            escape_markup(requirement.path),
            escape_markup(requirement.version),
            "yes" if requirement.indirect else "",
        )
    console.print(table)
