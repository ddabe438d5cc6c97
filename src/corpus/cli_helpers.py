"""Shared helper functions for the corpus CLI."""

import logging
from enum import Enum
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from corpus.exceptions import (
    CorpusError,
    InvalidCurrentDirError,
    NoHomeDirError,
    PathOperationError,
)

console = Console(stderr=True)


class CreateAs(str, Enum):
    """What to create at the resulting path."""

    DIR = "dir"
    FILE = "file"


def setup_logging(verbose: bool) -> None:
    """Route log records to stderr through rich.

    Args:
        verbose: Show debug records instead of warnings only.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def handle_corpus_error(error: CorpusError) -> None:
    """Handle corpus errors with user-friendly messages.

    Args:
        error: The corpus error to handle.
    """
    if isinstance(error, NoHomeDirError):
        console.print(f"[red]Error: {error.message}[/red]")
        console.print("[yellow]Set $HOME, or pass a raw path with --kind[/yellow]")
    elif isinstance(error, InvalidCurrentDirError):
        console.print(f"[red]Error: {error.message}[/red]")
        console.print("[yellow]Pass an absolute path with --path[/yellow]")
    elif isinstance(error, PathOperationError):
        console.print(f"[red]Error: Failed to {error.operation}[/red]")
        console.print(f"[red]{error.message}[/red]")
    else:
        console.print(f"[red]Error: {error}[/red]")


def create_result(create_as: CreateAs, path: Path) -> None:
    """Create ``path`` as a directory or an empty file, parents first.

    Args:
        create_as: Whether to create a directory or a file.
        path: Path to create.

    Raises:
        PathOperationError: If the filesystem refuses.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        if create_as is CreateAs.DIR:
            path.mkdir()
        else:
            path.touch()
    except OSError as e:
        raise PathOperationError(f"create {create_as.value} {path}", str(e)) from e
