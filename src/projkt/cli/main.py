"""CLI commands for projkt."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from projkt.core.exceptions import ProjktError


app = typer.Typer(
    name="projkt",
    help="Generate .gitignore and LICENSE files from template catalogs.",
    no_args_is_help=True,
)


class TemplateKind(str, Enum):
    GITIGNORE = "gitignore"
    LICENSE = "license"


def _fail(error: ProjktError) -> NoReturn:
    """Report a library error and exit with status 1."""
    typer.echo(f"Error: {error}", err=True)
    if error.recovery_hint:
        typer.echo(f"Hint: {error.recovery_hint}", err=True)
    raise typer.Exit(1)


def _format_age(seconds: float) -> str:
    """Format an age in seconds as the largest sensible unit."""
    for unit, size in (("d", 86400), ("h", 3600), ("m", 60)):
        if seconds >= size:
            return f"{seconds / size:.1f}{unit}"
    return f"{max(seconds, 0):.0f}s"


@app.callback()
def callback(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging (cache hits, downloads).",
    ),
) -> None:
    """Generate .gitignore and LICENSE files from template catalogs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command()
def gitignore(
    name: str | None = typer.Option(
        None,
        "--name",
        "-n",
        help="Exact template name (case-sensitive). Omit to pick interactively.",
    ),
    dest: Path = typer.Option(
        Path("."),
        "--dest",
        "-d",
        help="Directory to write .gitignore into.",
    ),
    overwrite: bool = typer.Option(
        False,
        "--overwrite",
        "-o",
        help="Replace an existing .gitignore.",
    ),
    append: bool = typer.Option(
        False,
        "--append",
        "-a",
        help="Append to an existing .gitignore.",
    ),
) -> None:
    """Create a .gitignore from one or more gitignore templates."""
    from projkt.core.services import GitIgnore, GitIgnoreOptions

    opts = GitIgnoreOptions(dest=dest, name=name, overwrite=overwrite, append=append)
    try:
        outcome = GitIgnore.default().exec(opts)
    except ProjktError as e:
        _fail(e)

    if outcome is None:
        typer.echo("Nothing selected.")
    elif outcome.changed:
        typer.echo(f"Warning: {outcome.path} was created/modified.")
    else:
        typer.echo(
            f"{outcome.path} already exists and was left unchanged. "
            "Use --overwrite or --append to modify it."
        )


@app.command(name="license")
def license_files(
    names: list[str] | None = typer.Argument(
        None,
        help="License identifiers (e.g. MIT Apache-2.0). Omit to pick interactively.",
    ),
    dest: Path = typer.Option(
        Path("."),
        "--dest",
        "-d",
        help="Directory to write LICENSE-<id> files into.",
    ),
    overwrite: bool = typer.Option(
        False,
        "--overwrite",
        "-o",
        help="Replace existing license files.",
    ),
    author: str | None = typer.Option(None, "--author", help="Copyright holder."),
    email: str | None = typer.Option(None, "--email", help="Contact email."),
) -> None:
    """Create LICENSE-<id> files from the embedded license texts."""
    from projkt.core.services import License, LicenseOptions, license_advisory

    opts = LicenseOptions(
        names=tuple(names or ()),
        overwrite=overwrite,
        author=author,
        email=email,
        dest=dest,
    )
    try:
        outcomes = License.default().exec(opts)
    except ProjktError as e:
        _fail(e)

    if not outcomes:
        typer.echo("Nothing selected.")
        return

    for outcome in outcomes:
        if outcome.changed:
            typer.echo(f"Wrote {outcome.path}")
        else:
            typer.echo(
                f"{outcome.path} already exists and was left unchanged. "
                "Use --overwrite to replace it."
            )

    if any(outcome.changed for outcome in outcomes):
        typer.echo(license_advisory(author=author, email=email))


@app.command(name="list")
def list_templates(
    kind: TemplateKind = typer.Argument(..., help="Catalog to list."),
) -> None:
    """List template names available in a catalog."""
    from projkt.core.services import GitIgnore, License

    try:
        if kind is TemplateKind.GITIGNORE:
            names = GitIgnore.default().catalog().names()
        else:
            names = License.default().catalog().names()
    except ProjktError as e:
        _fail(e)

    table = Table()
    table.add_column(kind.value.capitalize())
    for name in names:
        table.add_row(name)

    console = Console(force_terminal=True)
    console.print(table)


@app.command()
def cache() -> None:
    """Show the gitignore catalog cache location and freshness."""
    from projkt.adapters.cache import JsonCacheStore, is_expired
    from projkt.config import CACHE_TTL, gitignore_cache_path

    store = JsonCacheStore(gitignore_cache_path())
    typer.echo(f"Cache path: {store.path()}")

    if not store.path().exists():
        typer.echo("Status: missing")
        return

    try:
        age = store.age()
    except ProjktError as e:
        _fail(e)

    state = "expired" if is_expired(age) else "fresh"
    typer.echo(f"Age: {_format_age(age.total_seconds())}")
    typer.echo(f"Status: {state} (refreshed after {CACHE_TTL.days} days)")


def main() -> None:
    """Entry point for the CLI."""
    app()
