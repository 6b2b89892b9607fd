"""Pydantic configuration models with code-baked defaults.

The site config file is a flat JSON object of strings (site name,
subtitle, and so on) handed to templates untouched. Generator behaviour
is configured through :class:`GeneratorConfig`, whose defaults match a
project laid out as ``src/*.html`` with ``archive``, ``layout`` and
``post`` templates.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_META_FILES: dict[str, str] = {
    "archive": "archive.html",
    "layout": "layout.html",
    "post": "post.html",
}
DEFAULT_EXTENSIONS: tuple[str, ...] = (".html",)


class GeneratorConfig(BaseModel):
    """Where posts live and which files are templates rather than posts."""

    model_config = {"frozen": True}

    source_dir: str = "src"
    extensions: list[str] = Field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    meta_files: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_META_FILES))
