"""CLI for Site Manifest."""

import json
import logging
import os
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from . import __version__
from .config import load_config
from .errors import ManifestError
from .manifest import DirectoryEntry, FileEntry, SymlinkEntry, iter_entries
from .walker import WalkResult, walk

console = Console()
error_console = Console(stderr=True)


def configure_logging(verbose: bool) -> None:
    """Route package log records through rich on stderr."""
    logger = logging.getLogger("site_manifest")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=error_console, show_path=False))


@click.command()
@click.version_option(version=__version__, prog_name="site-manifest")
@click.argument("root", required=False, type=click.Path(path_type=Path))
@click.option("--include", "-i", multiple=True, help="Only include paths matching this pattern")
@click.option("--exclude", "-e", multiple=True, help="Exclude paths matching this pattern")
@click.option("--glob", "use_glob", is_flag=True, help="Treat patterns as globs instead of regexes")
@click.option("--json", "as_json", is_flag=True, help="Print the manifest as JSON")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def main(
    root: Path | None,
    include: tuple[str, ...],
    exclude: tuple[str, ...],
    use_glob: bool,
    as_json: bool,
    verbose: bool,
) -> None:
    """Site Manifest - Hash a built site directory.

    Walks ROOT (default: _site), hashing every file like `git hash-object`,
    and prints the unique assets and the entry tree.
    """
    configure_logging(verbose)

    try:
        config = load_config(
            root=root,
            include=list(include) or None,
            exclude=list(exclude) or None,
            pattern_syntax="glob" if use_glob else None,
        )
        result = walk(config.root, config.to_filter_config())
    except (ManifestError, OSError) as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    _print_assets(result)
    _print_entries(result)


def _print_assets(result: WalkResult) -> None:
    console.rule("Assets")
    console.print(f"# of assets: {len(result.index)}")
    for content_hash, path in result.index.items():
        console.print(json.dumps({"hash": content_hash, "path": path}), markup=False, highlight=False, soft_wrap=True)


def _display(text: str) -> str:
    """Make a filesystem string printable, escaping undecodable bytes and markup."""
    return escape(os.fsencode(text).decode("utf-8", "backslashreplace"))


def _print_entries(result: WalkResult) -> None:
    console.rule("Entries")
    console.print(f"# of entries: {len(result.root)}")

    table = Table()
    table.add_column("Path", style="cyan")
    table.add_column("Kind")
    table.add_column("Hash / Target")
    table.add_column("Size", justify="right")

    for path, entry in iter_entries(result.root):
        if isinstance(entry, FileEntry):
            table.add_row(_display(path), entry.kind, entry.content_hash, str(entry.size))
        elif isinstance(entry, SymlinkEntry):
            table.add_row(_display(path), entry.kind, _display(entry.target), "")
        elif isinstance(entry, DirectoryEntry):
            table.add_row(f"{_display(path)}/", entry.kind, "", "")

    console.print(table)

    stats = result.stats
    console.print(
        f"[dim]{stats.files_hashed} files, {stats.duplicate_files} duplicates, "
        f"{stats.bytes_hashed} bytes hashed[/dim]"
    )


if __name__ == "__main__":
    main()
