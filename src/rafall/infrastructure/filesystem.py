"""Candidate-file sources for the collection builder.

The builder never touches the filesystem itself. It asks a
:class:`CandidateSource` for file names and, for the names it accepts,
for their raw bytes. Listing failures raise
:class:`~rafall.domain.errors.EnumerationError`; read failures raise
:class:`OSError` and are handled per file by the builder.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

from rafall.domain.errors import EnumerationError

logger = logging.getLogger(__name__)


class CandidateSource(Protocol):
    """Anything that can list candidate names and read their bytes."""

    def list_names(self) -> list[str]: ...

    def read_bytes(self, name: str) -> bytes: ...


class DirectorySource:
    """Regular files directly inside one directory (non-recursive)."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def __str__(self) -> str:
        return str(self.root)

    def list_names(self) -> list[str]:
        """Return the names of regular files in the directory, sorted."""
        try:
            names = sorted(path.name for path in self.root.iterdir() if path.is_file())
        except OSError as exc:
            msg = f"cannot list source directory {self.root}: {exc.strerror or exc}"
            raise EnumerationError(msg, str(self.root)) from exc
        logger.debug("Listed %d file(s) in %s", len(names), self.root)
        return names

    def read_bytes(self, name: str) -> bytes:
        return (self.root / name).read_bytes()


class InMemorySource:
    """Candidate files held in a name-to-bytes mapping."""

    def __init__(self, files: Mapping[str, bytes]) -> None:
        self._files = dict(files)

    def __str__(self) -> str:
        return "<memory>"

    def list_names(self) -> list[str]:
        return list(self._files)

    def read_bytes(self, name: str) -> bytes:
        try:
            return self._files[name]
        except KeyError:
            raise FileNotFoundError(name) from None
