"""Convenience builder for :class:`corpus.core.Corpus`."""

from pathlib import Path
from typing import Optional, Union

from corpus.core import Corpus
from corpus.path import PathLike, absolutize
from corpus.root import RootKind, RootLocation, home_dir


class CorpusBuilder:
    """Collects corpus settings and builds a :class:`Corpus`.

    Every ``with_*``/``relative_to*`` method returns the builder so calls
    can be chained::

        corpus = (
            builder()
            .with_root("xdg-config")
            .relative_to_home()
            .with_name("sauce")
            .with_extension("toml")
            .build()
        )
    """

    def __init__(self) -> None:
        self.root_location: Optional[RootLocation] = None
        self.relative_path: Optional[Path] = None
        self.name: Optional[str] = None
        self.extension: Optional[str] = None

    def relative_to(self, path: PathLike) -> "CorpusBuilder":
        self.relative_path = Path(path)
        return self

    def relative_to_home(self) -> "CorpusBuilder":
        """Anchor source paths at the home directory.

        Raises:
            NoHomeDirError: If there is no home directory.
        """
        return self.relative_to(home_dir())

    def with_root(self, root: Union[RootLocation, PathLike]) -> "CorpusBuilder":
        self.root_location = RootLocation.parse(root)
        return self

    def with_name(self, name: str) -> "CorpusBuilder":
        self.name = name
        return self

    def with_extension(self, extension: str) -> "CorpusBuilder":
        self.extension = extension.lstrip(".") or None
        return self

    def build(self) -> Corpus:
        """Resolve the root location and build the corpus.

        Raises:
            NoHomeDirError: If the root needs a home directory and there is none.
            InvalidCurrentDirError: If a relative root or anchor cannot be
                made absolute.
        """
        root_location = self.root_location or RootLocation(RootKind.RAW, Path("/"))
        root = root_location.resolve()
        if self.name:
            root = root / self.name

        relative_path = absolutize(self.relative_path or Path("/"))

        return Corpus(root, relative_path, self.extension)


def builder() -> CorpusBuilder:
    """Shorthand for an empty :class:`CorpusBuilder`."""
    return CorpusBuilder()
