"""Collection building — from candidate files to a date-sorted FileList.

:class:`CollectionBuilder` is the only component that talks to a
candidate source. It filters names, extracts front matter, appends the
posts and sorts them once. A single bad file never aborts a build: read
and extraction failures are logged, recorded in
:attr:`CollectionBuilder.skipped`, and the file is left out. Only a
source that cannot be listed is fatal.

:class:`CollectService` adapts the builder to the CLI contract
(:class:`~rafall.services.result.ServiceResult`).
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog

from rafall.config.models import DEFAULT_EXTENSIONS, DEFAULT_META_FILES
from rafall.domain.errors import (
    EnumerationError,
    MalformedFrontMatterError,
    MetadataDecodeError,
)
from rafall.domain.filelist import FileList
from rafall.domain.frontmatter import extract_metadata
from rafall.domain.metadata import Metadata
from rafall.domain.timestamps import encode
from rafall.infrastructure.filesystem import CandidateSource, DirectorySource
from rafall.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from rafall.config.settings import RafallSettings

log = structlog.get_logger(__name__)

_EXTRACT_ERROR_CODES: dict[type[Exception], str] = {
    MetadataDecodeError: "METADATA_DECODE_FAILED",
    MalformedFrontMatterError: "MALFORMED_FRONT_MATTER",
}


@dataclass(frozen=True)
class SkippedFile:
    """A candidate the builder left out, with the reason."""

    name: str
    reason: str


class CollectionBuilder:
    """Scan a candidate source into a sorted :class:`FileList`."""

    def __init__(
        self,
        *,
        meta_files: Mapping[str, str] | None = None,
        extensions: Iterable[str] | None = None,
    ) -> None:
        self.meta_files = dict(DEFAULT_META_FILES if meta_files is None else meta_files)
        self.extensions = tuple(DEFAULT_EXTENSIONS if extensions is None else extensions)
        self.skipped: list[SkippedFile] = []

    def is_meta_file(self, name: str) -> bool:
        """Whether *name* is one of the reserved template files."""
        return name in self.meta_files.values()

    def is_valid(self, name: str) -> bool:
        """Whether *name* is a post: a content extension and not a meta file."""
        if not name.endswith(self.extensions):
            return False
        return not self.is_meta_file(name)

    def build(self, source: CandidateSource) -> FileList:
        """Collect every valid post in *source*, sorted oldest first.

        Raises:
            EnumerationError: The source could not be listed.
        """
        self.skipped = []
        try:
            names = source.list_names()
        except EnumerationError:
            raise
        except OSError as exc:
            msg = f"cannot list candidate files in {source}: {exc}"
            raise EnumerationError(msg, str(source)) from exc

        files = FileList()
        for name in names:
            if not self.is_valid(name):
                continue
            try:
                raw = source.read_bytes(name)
            except OSError as exc:
                self._skip(name, f"read failed: {exc}")
                continue
            try:
                content, metadata = extract_metadata(raw)
            except (MetadataDecodeError, MalformedFrontMatterError) as exc:
                self._skip(name, f"failed to extract metadata: {exc}")
                continue
            files.append(metadata if metadata is not None else Metadata(), content)

        files.sort_by_date()
        log.debug("collection_built", posts=len(files), skipped=len(self.skipped))
        return files

    def _skip(self, name: str, reason: str) -> None:
        log.warning("skipping_file", file=name, reason=reason)
        self.skipped.append(SkippedFile(name=name, reason=reason))


def describe_post(index: int, metadata: Metadata, content: bytes) -> dict[str, Any]:
    """Flatten one post into a JSON-friendly dict."""
    return {
        "position": index,
        "title": metadata.title,
        "date": encode(metadata.date),
        "tags": list(metadata.tags),
        "size": len(content),
    }


class CollectService:
    """Run the builder against the configured source directory."""

    def __init__(self, settings: RafallSettings) -> None:
        self._settings = settings

    @property
    def source_dir(self) -> Path:
        source_dir = Path(self._settings.generator.source_dir)
        if source_dir.is_absolute():
            return source_dir
        return self._settings.project_root / source_dir

    def _builder(self) -> CollectionBuilder:
        generator = self._settings.generator
        return CollectionBuilder(meta_files=generator.meta_files, extensions=generator.extensions)

    def collect(self) -> ServiceResult:
        """Build the collection and list the posts in order."""
        builder = self._builder()
        try:
            files = builder.build(DirectorySource(self.source_dir))
        except EnumerationError as exc:
            return ServiceResult(
                ok=False,
                op="collect",
                error=ServiceError(
                    code="ENUMERATION_FAILED",
                    message=str(exc),
                    detail={"source": exc.source},
                ),
            )

        posts = [
            describe_post(index, metadata, content)
            for index, (metadata, content) in enumerate(files.iterate())
        ]
        return ServiceResult(
            ok=True,
            op="collect",
            data={
                "source_dir": str(self.source_dir),
                "count": len(posts),
                "posts": posts,
            },
            warnings=[f"Skipped {item.name}: {item.reason}" for item in builder.skipped],
        )

    def show(self, path: Path) -> ServiceResult:
        """Extract and describe the front matter of a single file."""
        try:
            raw = path.read_bytes()
        except OSError as exc:
            return ServiceResult(
                ok=False,
                op="show",
                error=ServiceError(
                    code="READ_FAILED",
                    message=f"cannot read {path}: {exc.strerror or exc}",
                    detail={"path": str(path)},
                ),
            )
        try:
            content, metadata = extract_metadata(raw)
        except (MetadataDecodeError, MalformedFrontMatterError) as exc:
            return ServiceResult(
                ok=False,
                op="show",
                error=ServiceError(
                    code=_EXTRACT_ERROR_CODES[type(exc)],
                    message=str(exc),
                    detail={"path": str(path)},
                ),
            )

        data = describe_post(0, metadata or Metadata(), content)
        del data["position"]
        data["path"] = str(path)
        data["has_front_matter"] = metadata is not None
        data["valid_post"] = self._builder().is_valid(path.name)
        return ServiceResult(ok=True, op="show", data=data)
