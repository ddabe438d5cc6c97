"""Corpus: map project paths onto per-project storage paths and back.

A corpus path lives under a fixed root (for example an XDG data directory)
and mirrors the position of a source path relative to an anchor directory.
"""

__version__ = "0.2.0"

from corpus.builder import CorpusBuilder, builder
from corpus.core import Ancestors, Corpus
from corpus.exceptions import (
    CorpusError,
    InvalidCurrentDirError,
    NoHomeDirError,
    PathOperationError,
)
from corpus.root import RootKind, RootLocation

__all__ = [
    "__version__",
    "Ancestors",
    "Corpus",
    "CorpusBuilder",
    "builder",
    "RootKind",
    "RootLocation",
    "CorpusError",
    "InvalidCurrentDirError",
    "NoHomeDirError",
    "PathOperationError",
]
