"""CLI entry point for agentdoc.

Invoked as::

    agentdoc [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m agentdoc.cli.main

Commands
--------
show        Print a document's body with every import expanded
meta        Print a document's front-matter metadata as JSON or YAML
check       Resolve documents and report any that fail
stores      List registered document store backends
version     Show version information
"""
from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.syntax import Syntax
from rich.table import Table

from agentdoc.config import LoaderConfig
from agentdoc.core.errors import ConfigError, ResolutionError
from agentdoc.loader.loader import Loader

console = Console()
err_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _make_loader(root: str | None, config_path: str | None) -> Loader:
    """Build a loader from --config and/or --root, exiting on error."""
    try:
        config = LoaderConfig.from_yaml(config_path) if config_path else LoaderConfig()
    except ConfigError as exc:
        err_console.print(f"[red]Config error:[/red] {exc}")
        sys.exit(1)
    return Loader(root, config=config)


def _load_or_exit(loader: Loader, name: str):
    doc = loader.get_document(name)
    if doc is None:
        err_console.print(f"[red]Error:[/red] could not load document {name!r}")
        sys.exit(1)
    return doc


def _discover(loader: Loader) -> list[str]:
    """Return every document name under the loader's root, sorted."""
    root = Path(loader.root)
    found: set[str] = set()
    for ext in loader.config.extensions:
        for path in root.rglob(f"*{ext}"):
            if path.is_file():
                found.add(path.relative_to(root).as_posix())
    return sorted(found)


root_option = click.option(
    "--root",
    "-r",
    default=None,
    type=click.Path(file_okay=False),
    help="Sandbox root directory (defaults to the config's root, else '.').",
)
config_option = click.option(
    "--config",
    "-c",
    "config_path",
    default=None,
    type=click.Path(dir_okay=False),
    help="YAML loader configuration file.",
)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="agentdoc")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Load Markdown documents with YAML front matter and @(...) imports."""
    _configure_logging(verbose)


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from agentdoc import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]agentdoc[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# stores command
# ---------------------------------------------------------------------------


@cli.command(name="stores")
def stores_command() -> None:
    """List document store backends, including installed entry-points."""
    from agentdoc.store import store_registry

    store_registry.load_entrypoints()
    table = Table(title="Document stores")
    table.add_column("Name", style="bold")
    table.add_column("Class")
    for name in store_registry.list_stores():
        cls = store_registry.get(name)
        table.add_row(name, f"{cls.__module__}.{cls.__qualname__}")
    console.print(table)


# ---------------------------------------------------------------------------
# show command
# ---------------------------------------------------------------------------


@cli.command(name="show")
@click.argument("name")
@root_option
@config_option
@click.option("--plain", is_flag=True, default=False, help="Print the body without highlighting")
def show_command(name: str, root: str | None, config_path: str | None, plain: bool) -> None:
    """Print the expanded body of document NAME."""
    loader = _make_loader(root, config_path)
    doc = _load_or_exit(loader, name)
    if plain:
        click.echo(doc.body, nl=False)
    else:
        console.print(Syntax(doc.body, "markdown", word_wrap=True))


# ---------------------------------------------------------------------------
# meta command
# ---------------------------------------------------------------------------


@cli.command(name="meta")
@click.argument("name")
@root_option
@config_option
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"], case_sensitive=False),
    default="json",
    help="Metadata output format",
)
def meta_command(name: str, root: str | None, config_path: str | None, output_format: str) -> None:
    """Print the front-matter metadata of document NAME."""
    loader = _make_loader(root, config_path)
    doc = _load_or_exit(loader, name)
    if output_format.lower() == "json":
        click.echo(json.dumps(doc.metadata, indent=2, ensure_ascii=False, default=str))
    else:
        click.echo(yaml.safe_dump(doc.metadata, allow_unicode=True, sort_keys=False), nl=False)


# ---------------------------------------------------------------------------
# check command
# ---------------------------------------------------------------------------


@cli.command(name="check")
@click.argument("names", nargs=-1)
@root_option
@config_option
def check_command(names: tuple[str, ...], root: str | None, config_path: str | None) -> None:
    """Resolve documents and report failures.

    NAMES are logical document names.  Without NAMES, every document
    under the root is checked.
    """
    loader = _make_loader(root, config_path)
    targets = list(names) or _discover(loader)

    if not targets:
        console.print(f"[yellow]No documents found under[/yellow] {loader.root}")
        sys.exit(0)

    table = Table(title=f"Check: {loader.root}", show_lines=True)
    table.add_column("Status", style="bold", min_width=6)
    table.add_column("Document", min_width=12)
    table.add_column("Imports", justify="right")
    table.add_column("Detail")

    failures = 0
    for name in targets:
        try:
            doc = loader.resolve(name)
        except ResolutionError as exc:
            failures += 1
            table.add_row("[red]FAIL[/red]", name, "-", f"{type(exc).__name__}: {exc}")
        else:
            table.add_row("[green]OK[/green]", name, str(len(doc.imports)), "")

    console.print(table)
    console.print(
        f"\n[bold]Summary:[/bold] {len(targets) - failures} ok, {failures} failed"
    )
    if failures:
        sys.exit(1)


if __name__ == "__main__":
    cli()
