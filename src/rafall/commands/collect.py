"""Commands: collect posts into date order, show one file's metadata."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from rafall.commands._base import RafallCommand

if TYPE_CHECKING:
    from rafall.commands._context import AppContext


@click.command(
    cls=RafallCommand,
    examples="""\
  rafall collect
  rafall --conf site/etc/rafall.conf --root site collect
  rafall --json collect""",
)
@click.pass_obj
def collect(app: AppContext) -> None:
    """Scan the source directory and list posts, oldest first."""
    from rafall.services.collect import CollectService

    app.emit(CollectService(app.settings).collect())


@click.command(
    cls=RafallCommand,
    examples="""\
  rafall show src/hello_world.html
  rafall --json show src/hello_world.html""",
)
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@click.pass_obj
def show(app: AppContext, path: Path) -> None:
    """Print the front-matter metadata of a single source file."""
    from rafall.services.collect import CollectService

    app.emit(CollectService(app.settings).show(path))
