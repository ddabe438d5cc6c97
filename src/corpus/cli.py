"""Main CLI entry point for the corpus tool."""

import logging
from pathlib import Path
from typing import Optional

import typer

from corpus import __version__
from corpus.builder import builder
from corpus.cli_helpers import (
    CreateAs,
    create_result,
    handle_corpus_error,
    setup_logging,
)
from corpus.exceptions import CorpusError
from corpus.path import absolutize

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="corpus",
    help="Map a project path onto its per-project storage path",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"corpus version {__version__}")
        raise typer.Exit()


@app.command()
def main_command(
    path: Optional[Path] = typer.Option(
        None,
        "--path",
        "-p",
        help="Source path (default: current directory)",
    ),
    kind: str = typer.Option(
        "xdg-data",
        "--kind",
        envvar="CORPUS_KIND",
        help="Root location: xdg-data, xdg-config, xdg-cache or a raw path",
    ),
    ext: Optional[str] = typer.Option(
        None,
        "--ext",
        "-e",
        envvar="CORPUS_EXT",
        help="Extension forced onto the corpus path",
    ),
    nearest: bool = typer.Option(
        False,
        "--nearest",
        help="Print the nearest existing corpus ancestor instead",
    ),
    create: Optional[CreateAs] = typer.Option(
        None,
        "--create",
        "-c",
        case_sensitive=False,
        help="Create the resulting path as a dir or file",
    ),
    source_path: bool = typer.Option(
        False,
        "--source-path",
        "-s",
        help="Map the result back to its source path",
    ),
    name: Optional[str] = typer.Option(
        None,
        "--name",
        "-n",
        envvar="CORPUS_NAME",
        help="Sub-directory of the root location (usually the tool name)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version number and exit",
    ),
) -> None:
    """Print the corpus path for a source path.

    Source paths are taken relative to the home directory, so with the
    defaults ~/foo/bar maps to ~/.local/share/foo/bar.
    """
    setup_logging(verbose)

    try:
        corpus_builder = builder().relative_to_home().with_root(kind)
        if name:
            corpus_builder = corpus_builder.with_name(name)
        if ext:
            corpus_builder = corpus_builder.with_extension(ext)
        corpus = corpus_builder.build()

        source = absolutize(path) if path is not None else None
        logger.debug("Using %s", corpus)

        if nearest:
            result = corpus.find_nearest(source)
            if result is None:
                logger.debug("Nothing exists under %s", corpus.corpus_root)
                typer.echo("")
                return
        else:
            result = corpus.to_corpus_path(source)

        if source_path:
            result = corpus.to_source_path(result)

        if create is not None:
            create_result(create, result)
    except CorpusError as e:
        handle_corpus_error(e)
        raise typer.Exit(1)

    typer.echo(str(result))


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
