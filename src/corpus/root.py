"""Root locations a corpus can live under."""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from corpus.exceptions import NoHomeDirError
from corpus.path import PathLike, absolutize

logger = logging.getLogger(__name__)


class RootKind(Enum):
    """Kinds of root location."""

    XDG_DATA = "xdg-data"
    XDG_CONFIG = "xdg-config"
    XDG_CACHE = "xdg-cache"
    RAW = "raw"


# Named kinds: (environment override, default relative to home)
XDG_DIRECTORIES = {
    RootKind.XDG_DATA: ("XDG_DATA_HOME", Path(".local") / "share"),
    RootKind.XDG_CONFIG: ("XDG_CONFIG_HOME", Path(".config")),
    RootKind.XDG_CACHE: ("XDG_CACHE_HOME", Path(".cache")),
}

NAMED_KINDS = {kind.value for kind in XDG_DIRECTORIES}


def home_dir() -> Path:
    """Return the user's home directory.

    Raises:
        NoHomeDirError: If it cannot be determined.
    """
    try:
        return Path.home()
    except (RuntimeError, KeyError) as e:
        raise NoHomeDirError() from e


@dataclass(frozen=True)
class RootLocation:
    """Either a raw path or one of the XDG base directories."""

    kind: RootKind
    raw: Optional[Path] = None

    @classmethod
    def parse(cls, value: Union["RootLocation", PathLike]) -> "RootLocation":
        """Build a root location from a string or path.

        The strings ``xdg-data``, ``xdg-config`` and ``xdg-cache`` select the
        matching XDG directory; anything else is taken as a raw path.
        """
        if isinstance(value, RootLocation):
            return value
        if isinstance(value, str) and value in NAMED_KINDS:
            return cls(RootKind(value))
        return cls(RootKind.RAW, Path(value))

    def _base_dir(self) -> Path:
        if self.kind is RootKind.RAW:
            return Path(self.raw) if self.raw is not None else Path("/")

        env_var, default = XDG_DIRECTORIES[self.kind]
        override = os.environ.get(env_var)
        # XDG only honours absolute values
        if override and Path(override).is_absolute():
            return Path(override)
        return home_dir() / default

    def resolve(self) -> Path:
        """Resolve this location into an absolute path.

        Raises:
            NoHomeDirError: If an XDG directory needs the home directory and
                there is none.
            InvalidCurrentDirError: If a relative raw path cannot be made
                absolute.
        """
        path = absolutize(self._base_dir())
        logger.debug("Resolved root %s to %s", self.kind.value, path)
        return path
