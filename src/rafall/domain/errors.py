"""Error taxonomy for rafall.

Decode and extraction failures are always raised to the caller; the
collection builder decides whether a failure skips one file or aborts
the whole run.
"""

from __future__ import annotations


class RafallError(Exception):
    """Base exception for all rafall failures."""


class TimestampParseError(RafallError, ValueError):
    """Raised when date text does not match the RFC-822 numeric-zone layout."""


class MetadataDecodeError(RafallError):
    """Raised when a front-matter block is present but is not valid metadata.

    Attributes:
        content: The offending JSON bytes.
    """

    def __init__(self, message: str, content: bytes) -> None:
        super().__init__(message)
        self.content = content


class MalformedFrontMatterError(RafallError):
    """Raised when the opening ``<!--{`` marker has no closing ``}-->``."""

    def __init__(self, message: str, content: bytes) -> None:
        super().__init__(message)
        self.content = content


class EnumerationError(RafallError):
    """Raised when the candidate-file source cannot be listed."""

    def __init__(self, message: str, source: str) -> None:
        super().__init__(message)
        self.source = source


class ConfigError(RafallError):
    """Raised when configuration data cannot be read or decoded."""
