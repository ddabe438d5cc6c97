"""Core corpus path mapping.

A :class:`Corpus` maps a *source* path (usually a project directory) onto a
*corpus* path below a fixed root, and back again.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator, Optional

from corpus.path import (
    PathLike,
    absolutize,
    normalize,
    resolve_input,
    strip_prefix,
    with_extension,
)

logger = logging.getLogger(__name__)

# Answers "does this path exist?". Must not have side effects.
ExistsFn = Callable[[Path], bool]


@dataclass(frozen=True)
class Corpus:
    """Bidirectional mapping between source paths and corpus paths.

    Attributes:
        corpus_root: Absolute directory all corpus paths live under.
        anchor_path: Absolute source-side reference point. A source path's
            position relative to it determines its position under
            ``corpus_root``.
        extension: If set, the extension forced onto every corpus path.

    Example:
        >>> corpus = Corpus(Path("/home/.config/foo"), Path("/home"), "toml")
        >>> corpus.to_corpus_path("/home/bar/baz.toml")
        PosixPath('/home/.config/foo/bar/baz.toml')
        >>> corpus.to_source_path("/home/.config/foo/bar/baz.toml")
        PosixPath('/home/bar/baz')
    """

    corpus_root: Path
    anchor_path: Path = Path("/")
    extension: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "corpus_root", Path(self.corpus_root))
        object.__setattr__(self, "anchor_path", Path(self.anchor_path))

    def apply_extension(self, path: Path) -> Path:
        """Force the corpus extension onto ``path``, if one is configured."""
        if self.extension is not None:
            return with_extension(path, self.extension)
        return path

    def to_corpus_path(self, path: Optional[PathLike] = None) -> Path:
        """Compute the corpus path corresponding to a source path.

        Args:
            path: Source path. Defaults to the current working directory.

        Returns:
            The corpus path. A source path outside ``anchor_path`` is joined
            whole onto ``corpus_root``, so an absolute one replaces the root.
        """
        source = normalize(resolve_input(path))

        relative = strip_prefix(source, self.anchor_path)
        if relative is None:
            relative = source

        return self.apply_extension(self.corpus_root / relative)

    def to_source_path(self, path: PathLike) -> Path:
        """Compute the source path implied by a corpus path.

        The extension of the final segment is always stripped, so when
        :attr:`extension` is set the source's original extension is lost.

        Args:
            path: Corpus path (typically the output of :meth:`to_corpus_path`).

        Returns:
            Absolute source path.

        Raises:
            InvalidCurrentDirError: If the result is relative and the current
                directory is unavailable.
        """
        path = Path(path)
        relative = strip_prefix(path, self.corpus_root)
        if relative is None:
            relative = path
        return absolutize(with_extension(self.anchor_path / relative, ""))

    def is_within(self, path: PathLike) -> bool:
        """Return True if ``path`` lies within the corpus root.

        The root itself with the extension applied counts too, which allows a
        single-file corpus such as ``/cfg.toml`` for root ``/cfg``.
        """
        path = Path(path)
        if self.extension is not None:
            if with_extension(self.corpus_root, self.extension) == path:
                return True
        return strip_prefix(path, self.corpus_root) is not None

    def ancestors(self, path: Optional[PathLike] = None) -> "Ancestors":
        """Return the corpus ancestors of a source path, most specific first."""
        return Ancestors(self, self.to_corpus_path(path))

    def find_nearest(
        self,
        path: Optional[PathLike] = None,
        exists: ExistsFn = os.path.exists,
    ) -> Optional[Path]:
        """Find the closest corpus ancestor of ``path`` which exists.

        - If the corpus path is ``/root/foo/bar`` and it exists, return it.
        - Otherwise try ``/root/foo``, and so on up to the corpus root.

        Args:
            path: Source path. Defaults to the current working directory.
            exists: Existence check, one call per candidate.

        Returns:
            The nearest existing ancestor, or None if none exists.
        """
        for candidate in self.ancestors(path):
            if strip_prefix(candidate, self.corpus_root) is None:
                continue
            logger.debug("Probing %s", candidate)
            if exists(candidate):
                return candidate
        logger.debug("No existing ancestor under %s", self.corpus_root)
        return None


class Ancestors:
    """Lazy, restartable sequence of the corpus ancestors of one corpus path.

    Each iteration walks from ``path`` up to the filesystem root, skipping
    ancestors outside the corpus root and re-applying the corpus extension.
    """

    def __init__(self, corpus: Corpus, path: Path):
        self.corpus = corpus
        self.path = path

    def __iter__(self) -> Iterator[Path]:
        for ancestor in (self.path, *self.path.parents):
            if self.corpus.is_within(ancestor):
                yield self.corpus.apply_extension(ancestor)

    def __repr__(self) -> str:
        return f"Ancestors({str(self.path)!r})"
