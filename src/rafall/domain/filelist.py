"""FileList — the ordered, in-memory collection of posts.

Each entry pairs a :class:`~rafall.domain.metadata.Metadata` with the
post content that follows its front matter. Entries live in a single
list of records, so metadata and content can never drift apart.

Lifecycle: created empty, filled by :meth:`FileList.append` during the
directory scan, sorted once with :meth:`FileList.sort_by_date`, then
traversed read-only any number of times.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import NamedTuple

from rafall.domain.metadata import Metadata


class FileEntry(NamedTuple):
    """One post: its metadata and its content bytes."""

    metadata: Metadata
    content: bytes


class FileList:
    """Append-only, date-sortable list of posts."""

    def __init__(self) -> None:
        self._entries: list[FileEntry] = []

    def append(self, metadata: Metadata, content: bytes) -> None:
        """Add a post to the end of the list."""
        self._entries.append(FileEntry(metadata, content))

    def __len__(self) -> int:
        return len(self._entries)

    def length(self) -> int:
        """Number of posts in the list."""
        return len(self._entries)

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._entries)

    def less(self, x: int, y: int) -> bool:
        """Return whether entry *x* is dated strictly before entry *y*.

        Out-of-range indices return False instead of raising.
        """
        if not (self._in_range(x) and self._in_range(y)):
            return False
        return self._entries[x].metadata.date < self._entries[y].metadata.date

    def swap(self, x: int, y: int) -> None:
        """Exchange entries *x* and *y*; a no-op for out-of-range or equal indices."""
        if x == y or not (self._in_range(x) and self._in_range(y)):
            return
        entries = self._entries
        entries[x], entries[y] = entries[y], entries[x]

    def sort_by_date(self) -> None:
        """Sort oldest first. Posts with equal dates keep their append order.

        A stable key sort on the date stands in for a comparison sort driven
        by :meth:`less` and :meth:`swap`; both remain for index-level access.
        """
        self._entries.sort(key=lambda entry: entry.metadata.date)

    def iterate(self) -> Iterator[tuple[Metadata, bytes]]:
        """Yield ``(metadata, content)`` pairs in the current order.

        Every call starts a fresh traversal at the first entry. Mutating the
        list while a traversal is in progress gives undefined results.
        """
        for entry in self._entries:
            yield entry.metadata, entry.content

    def __iter__(self) -> Iterator[tuple[Metadata, bytes]]:
        return self.iterate()

    def entries(self) -> tuple[FileEntry, ...]:
        """Snapshot of the entries in the current order."""
        return tuple(self._entries)

    def __repr__(self) -> str:
        return f"FileList({len(self._entries)} entries)"
