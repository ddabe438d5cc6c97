"""Lexical path normalization helpers.

Nothing in here resolves symlinks or otherwise consults the filesystem,
apart from reading the process working directory.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from corpus.exceptions import InvalidCurrentDirError

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def current_dir() -> Path:
    """Return the working directory, or ``Path(".")`` if it is unavailable."""
    try:
        return Path(os.getcwd())
    except OSError as e:
        logger.debug("Current directory unavailable (%s), using '.'", e)
        return Path(".")


def resolve_input(path: Optional[PathLike] = None) -> Path:
    """Turn an optional input path into a concrete one.

    Args:
        path: Explicit path. ``None`` means the current working directory.

    Returns:
        The path as given, or the current directory.
    """
    if path is None:
        return current_dir()
    return Path(path)


def absolutize(path: PathLike) -> Path:
    """Make ``path`` absolute and collapse ``.`` and ``..`` segments lexically.

    Args:
        path: Path to absolutize.

    Returns:
        Absolute, lexically normalized path.

    Raises:
        InvalidCurrentDirError: If ``path`` is relative and the current
            directory cannot be read.
    """
    path = Path(path)
    if not path.is_absolute():
        try:
            cwd = os.getcwd()
        except OSError as e:
            raise InvalidCurrentDirError(str(path)) from e
        path = Path(cwd) / path
    return Path(os.path.normpath(path))


def normalize(path: PathLike) -> Path:
    """Like :func:`absolutize`, but return ``path`` unchanged instead of raising."""
    try:
        return absolutize(path)
    except InvalidCurrentDirError:
        logger.debug("Could not absolutize '%s', leaving it as is", path)
        return Path(path)


def split_extension(name: str) -> tuple[str, Optional[str]]:
    """Split a file name into stem and extension.

    A leading dot (hidden files such as ``.bashrc``) does not start an
    extension. ``"archive.tar.gz"`` splits into ``("archive.tar", "gz")``.
    """
    if name == "..":
        return name, None
    index = name.rfind(".")
    if index <= 0:
        return name, None
    return name[:index], name[index + 1 :]


def with_extension(path: PathLike, extension: str) -> Path:
    """Replace the extension of the final path segment.

    Args:
        path: Path to modify.
        extension: New extension without a leading dot. An empty string
            removes the current extension.

    Returns:
        The modified path. Paths without a file-name component (``/``,
        ``..``) are returned unchanged.
    """
    path = Path(path)
    if path.name in ("", ".."):
        return path
    stem, _ = split_extension(path.name)
    if extension:
        return path.with_name(f"{stem}.{extension}")
    return path.with_name(stem)


def strip_prefix(path: Path, prefix: Path) -> Optional[Path]:
    """Return ``path`` relative to ``prefix``, or None if it does not lie under it.

    Matching is per component, so ``/homer`` does not lie under ``/home``.
    """
    try:
        return path.relative_to(prefix)
    except ValueError:
        return None
