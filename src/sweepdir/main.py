import os

import typer
from rich.console import Console
from rich.markup import escape
from typing import List, Optional

from .errors import ResourceError, SweepError
from .grouper import build_index
from .logger import get_logger, set_debug_mode
from .options import ScanOptions, resolve_options
from .reporter import render_report, verbose_header
from .scanner import scan

app = typer.Typer(help="List the files of a directory grouped by extension", add_completion=False)
console = Console()
error_console = Console(stderr=True)
logger = get_logger("sweepdir.main")


def run_sweep(options: ScanOptions) -> str:
    """Scan, group and render; nothing is returned unless every stage succeeds"""
    try:
        files = scan(options.directory, include_hidden=options.include_hidden)
    except MemoryError as e:
        raise ResourceError("list the directory") from e

    try:
        index = build_index(files)
    except MemoryError as e:
        raise ResourceError("build the extension index") from e

    try:
        return render_report(index, verbose=options.verbose)
    except MemoryError as e:
        raise ResourceError("sort the report") from e


@app.command(
    context_settings={
        "help_option_names": ["-h", "--help"],
        "ignore_unknown_options": True,
    },
    epilog="If no directory is specified, the current directory will be used.",
)
def main(
    directory: Optional[List[str]] = typer.Argument(
        None, metavar="[DIRECTORY]", help="Directory to scan (the last one given wins)", show_default=False
    ),
    include_hidden: bool = typer.Option(False, "--include-hidden", help="Include hidden files in the output"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable verbose output"),
):
    """Group the regular files of DIRECTORY by extension, sorted alphabetically."""
    options = resolve_options(directory, include_hidden=include_hidden, verbose=verbose)
    set_debug_mode(options.verbose)
    logger.debug(f"Resolved options: {options}")

    if options.verbose:
        console.out(verbose_header(options), end="", highlight=False)

    try:
        report = run_sweep(options)
    except SweepError as e:
        logger.debug(f"{e.operation} failed", exc_info=True)
        error_console.print(f"[red]Error: {escape(e.message)}[/red]", soft_wrap=True, highlight=False)
        raise typer.Exit(1)

    # bytes keep undecodable filenames intact
    typer.echo(os.fsencode(report), nl=False)


if __name__ == "__main__":
    app()
