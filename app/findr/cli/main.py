"""Main CLI application entry point.

Defines the Typer application: parses roots and filters, validates them,
then runs the search and prints one block of matches per root.
"""

from pathlib import Path
from typing import Annotated

import typer

from findr import __version__
from findr.core.settings import SettingsError, load_settings
from findr.search.config import ConfigError, build_config
from findr.search.finder import run
from findr.search.models import EntryType
from findr.utils.formatting import apply_theme, print_diagnostic, print_error
from findr.utils.log import configure_logging

app = typer.Typer(
    name="findr",
    help="Find filesystem entries by type and name.",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"findr version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    paths: Annotated[
        list[str] | None,
        typer.Argument(
            metavar="PATH",
            help="Search paths. Defaults to the current directory.",
            show_default=False,
        ),
    ] = None,
    names: Annotated[
        list[str] | None,
        typer.Option(
            "--name",
            "-n",
            metavar="NAME",
            help="Regular expression searched in each entry's base name. Repeatable.",
        ),
    ] = None,
    entry_types: Annotated[
        list[EntryType] | None,
        typer.Option(
            "--type",
            "-t",
            metavar="TYPE",
            help="Entry type: d (directory), f (file) or l (link). Repeatable.",
        ),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            help="Settings file (default: ~/.config/findr/config.toml).",
            dir_okay=False,
        ),
    ] = None,
    unsorted: Annotated[
        bool,
        typer.Option("--unsorted", help="List directory children in filesystem order."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging."),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Recursively list entries below each PATH that match every filter kind.

    Several --name or --type values are alternatives: an entry passes a
    filter kind if it matches any of its values.
    """
    configure_logging(verbose)

    try:
        config = build_config(paths, names, entry_types)
        settings = load_settings(config_path)
    except (ConfigError, SettingsError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    apply_theme(settings.colors)

    run(
        config,
        on_error=print_diagnostic if settings.show_errors else None,
        sort_entries=settings.sort_entries and not unsorted,
    )


if __name__ == "__main__":
    app()
