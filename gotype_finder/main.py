"""gotype-finder CLI entry point."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from .commands.resolve import CliState
from .commands.resolve import files_cmd
from .commands.resolve import manifest_cmd
from .commands.resolve import resolve_cmd
from .commands.resolve import roots_cmd
from .console import console
from .errors import ConfigurationError
from .logging_setup import init_json_logging
from .settings import SettingsPaths
from .settings import load_settings
from .utils.error_format import escape_markup
from .utils.error_format import format_error_chain


@click.group(invoke_without_command=True)
@click.version_option(package_name="gotype-finder")
@click.option(
    "--settings",
    "settings_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Extra settings file layered over the global and project settings",
)
@click.option(
    "--chdir",
    "-C",
    "start_dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Directory the manifest search starts from (default: current directory)",
)
@click.option("--log-file", type=click.Path(dir_okay=False, path_type=Path), default=None, help="Write JSONL logs here")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level for --log-file (default: $GOTYPE_FINDER_LOG_LEVEL or INFO)",
)
@click.pass_context
def cli(
    ctx: click.Context,
    settings_file: Path | None,
    start_dir: Path | None,
    log_file: Path | None,
    log_level: str | None,
):
    """gotype-finder - locate the Go source files behind an import path."""
    if log_file is not None:
        init_json_logging(log_file, log_level)

    try:
        settings = load_settings(SettingsPaths.default(start_dir), extra=settings_file)
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {escape_markup(format_error_chain(e))}")
        sys.exit(1)

    ctx.obj = CliState(settings=settings, start_dir=start_dir)

    if ctx.invoked_subcommand is None:
        click.echo("\n" + ctx.get_help())
        ctx.exit()


cli.add_command(resolve_cmd)
cli.add_command(files_cmd)
cli.add_command(roots_cmd)
cli.add_command(manifest_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
