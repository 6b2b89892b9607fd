"""Root CLI group for rafall with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from rafall import __version__
from rafall.commands import register_commands
from rafall.commands._context import AppContext
from rafall.config.settings import RafallSettings
from rafall.domain.errors import ConfigError


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="rafall")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "-c",
    "--conf",
    "config_path",
    default=None,
    help="Site config file (JSON). Defaults to etc/rafall.conf under the root.",
)
@click.option(
    "-C",
    "--root",
    "project_root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Project root directory (defaults to CWD).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    project_root: Path | None,
) -> None:
    """rafall — turn annotated HTML sources into date-ordered posts."""
    try:
        settings = RafallSettings.from_cli(
            config_path=config_path,
            project_root=project_root,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
        )
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
