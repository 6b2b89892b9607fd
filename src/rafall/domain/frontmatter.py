"""Front-matter extraction for HTML post sources.

A post may start with a JSON object wrapped in an HTML comment::

    <!--{
    "Title": "Hello world",
    "Date": "27 May 12 01:50 -0300",
    "Tags": ["post"]
    }-->
    <p>Body...</p>

The opening marker must sit at byte offset 0. The JSON object spans from
the ``{`` of the opening marker through the ``}`` of the first closing
marker. Everything after the closing marker is returned verbatim.
"""

from __future__ import annotations

from pydantic import ValidationError

from rafall.domain.errors import MalformedFrontMatterError, MetadataDecodeError
from rafall.domain.metadata import Metadata

OPEN_MARKER = b"<!--{"
CLOSE_MARKER = b"}-->"


def has_front_matter(content: bytes) -> bool:
    """Return True when *content* starts with the opening marker."""
    return content.startswith(OPEN_MARKER)


def extract_metadata(content: bytes) -> tuple[bytes, Metadata | None]:
    """Split *content* into ``(tail, metadata)``.

    Returns ``(content, None)`` unchanged when there is no front matter.

    Raises:
        MalformedFrontMatterError: The closing marker is missing.
        MetadataDecodeError: The block is not a valid metadata object.
    """
    if not has_front_matter(content):
        return content, None

    end = content.find(CLOSE_MARKER, len(OPEN_MARKER) - 1)
    if end == -1:
        msg = "front matter opened with '<!--{' is never closed with '}-->'"
        raise MalformedFrontMatterError(msg, content)

    block = content[len(OPEN_MARKER) - 1 : end + 1]
    try:
        metadata = Metadata.model_validate_json(block)
    except ValidationError as exc:
        msg = f"invalid front matter: {exc.error_count()} error(s): {_first_error(exc)}"
        raise MetadataDecodeError(msg, block) from exc

    return content[end + len(CLOSE_MARKER) :], metadata


def _first_error(exc: ValidationError) -> str:
    error = exc.errors()[0]
    location = ".".join(str(part) for part in error["loc"])
    if location:
        return f"{location}: {error['msg']}"
    return error["msg"]
