# SPDX-License-Identifier: LGPL-2.1-only
# Copyright (c) 2026 Akshat Kotpalliwar (alias IntegerAlex)

"""Command-line interface for localbak."""

import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from localbak import __version__
from localbak.backup import create_backup, restore_backup
from localbak.config import BakConfig
from localbak.env import create_config_from_env
from localbak.exceptions import ConfigurationError, LocalBakError, WrongTypeError
from localbak.logs import configure_logging

app = typer.Typer(
    help="Simple local backups with a bit of compression",
    add_completion=False,
)
err_console = Console(stderr=True)

BACKUP_COMMANDS = ("backup", "b", "bak")
RESTORE_COMMANDS = ("restore", "r", "res")
GLOBAL_FLAGS = ("-y", "--yes", "-v", "--verbose")


def normalize_argv(argv: List[str]) -> List[str]:
    """
    Rewrite raw arguments into the form the typer app expects.

    - Global flags may appear anywhere and are moved in front of the command.
    - Without an explicit command, `restore` is assumed for names containing
      "bak" and `backup` for anything else: `bak foo` backs up foo,
      `bak foo.bak` restores it.
    """
    args = list(argv)
    if "--" in args:
        split = args.index("--")
        head, tail = args[:split], args[split:]
    else:
        head, tail = args, []

    flags = [a for a in head if a in GLOBAL_FLAGS]
    rest = [a for a in head if a not in GLOBAL_FLAGS] + tail

    if rest and not (
        rest[0].startswith("-")
        or rest[0] in BACKUP_COMMANDS
        or rest[0] in RESTORE_COMMANDS
    ):
        rest.insert(0, "restore" if "bak" in rest[0] else "backup")

    return flags + rest


def _fail(error: LocalBakError) -> None:
    err_console.print(f"[red]Error: {escape(str(error))}[/red]")
    code = 2 if isinstance(error, WrongTypeError) else 1
    raise typer.Exit(code)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"bak {__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
    ctx: typer.Context,
    yes: bool = typer.Option(False, "-y", "--yes", help="Do not confirm"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Print out every action"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show version"
    ),
):
    """
    Simple local backups with a bit of compression.

    Examples:
        # Plain copy next to the original: notes.txt -> notes.txt.bak
        bak notes.txt

        # Compressed archive, then delete the original
        bak backup -z -d project/

        # Restore into another directory
        bak restore project.tar.zstd -o /tmp
    """
    try:
        config = create_config_from_env()
    except ConfigurationError as e:
        _fail(e)

    updates = {}
    if yes:
        updates["assume_yes"] = True
    if verbose:
        updates["verbose"] = True
    if updates:
        config = config.with_updates(**updates)

    configure_logging(config.verbose)
    ctx.obj = config


def backup(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="File or directory to backup"),
    compress: bool = typer.Option(False, "-z", "--compress", help="Use zstd compression"),
    delete: bool = typer.Option(
        False, "-d", "--delete", help="Delete original after successful backup"
    ),
):
    """Create backup of files or directories, default action."""
    config: BakConfig = ctx.obj or BakConfig()

    try:
        created = create_backup(path, compress=compress, delete=delete, config=config)
    except LocalBakError as e:
        _fail(e)

    if config.verbose:
        typer.echo(str(created))


def restore(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Backup file to restore from"),
    delete: bool = typer.Option(
        False, "-d", "--delete", help="Delete backup after successful restore"
    ),
    output_dir: Optional[Path] = typer.Option(
        None, "-o", "--output", help="Directory to restore to"
    ),
):
    """Restore from backup."""
    config: BakConfig = ctx.obj or BakConfig()

    try:
        created = restore_backup(path, output_dir=output_dir, delete=delete, config=config)
    except LocalBakError as e:
        _fail(e)

    if config.verbose:
        typer.echo(str(created))


def _with_aliases(text: str, names) -> str:
    return f"{text} (aliases: {', '.join(names[1:])})"


app.command(
    "backup",
    help=_with_aliases("Create backup of files or directories, default action.", BACKUP_COMMANDS),
)(backup)
app.command("restore", help=_with_aliases("Restore from backup.", RESTORE_COMMANDS))(restore)
for _alias in BACKUP_COMMANDS[1:]:
    app.command(_alias, hidden=True)(backup)
for _alias in RESTORE_COMMANDS[1:]:
    app.command(_alias, hidden=True)(restore)


def main(argv: Optional[List[str]] = None) -> None:
    """Console script entry point."""
    args = sys.argv[1:] if argv is None else list(argv)

    if not args:
        app(args=["--help"], prog_name="bak", standalone_mode=False)
        sys.exit(1)

    app(args=normalize_argv(args), prog_name="bak")


if __name__ == "__main__":
    main()
