"""Command-line interface for nakedret using Click."""
from __future__ import annotations

import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, Final

import click

from nakedret.config import load_config
from nakedret.constants import DEFAULT_MAX_LENGTH, OutputFormat, __version__
from nakedret.runner import CheckResult, check_paths, format_results
from nakedret.types import ConfigError, InputError, NakedRetConfig


class ConfigType(click.ParamType):
    """Custom Click parameter type for config path."""

    name: str = "path"

    def convert(
        self,
        value: str | Path | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> Path | None:
        if value is None:
            return None
        return Path(value)


CONFIG_TYPE: Final[ConfigType] = ConfigType()


def _fail(ctx: click.Context, error: ConfigError | InputError) -> None:
    click.echo(f"Error: {error}", err=True)
    if isinstance(error, ConfigError) and error.path:
        click.echo(f"  in: {error.path}", err=True)
    ctx.exit(1)


@click.command()
@click.version_option(version=__version__, prog_name="nakedret")
@click.argument("paths", nargs=-1)
@click.option(
    "-l",
    "--max-length",
    type=click.IntRange(min=0),
    default=None,
    help=f"Maximum number of lines for a naked return function (default: {DEFAULT_MAX_LENGTH})",
)
@click.option(
    "--config",
    "config_path",
    type=CONFIG_TYPE,
    default=None,
    help="Path to .nakedret.toml (default: search upward from current directory)",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option(
    "--set-exit-status",
    is_flag=True,
    help="Exit with status 1 when naked returns are found",
)
@click.option("--verbose", is_flag=True, help="Show progress and timing")
@click.option("--debug", is_flag=True, help="Show detailed trace")
@click.pass_context
def cli(
    ctx: click.Context,
    paths: tuple[str, ...],
    *,
    max_length: int | None,
    config_path: Path | None,
    output_format: str,
    set_exit_status: bool,
    verbose: bool,
    debug: bool,
) -> None:
    """Report naked returns in long Go functions with named results.

    \b
    nakedret [flags]             # runs on package in current directory
    nakedret [flags] [packages]  # a trailing /... recurses into subdirectories
    """
    level: int = (
        logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    )
    logging.basicConfig(
        level=level,
        format="%(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        cfg: NakedRetConfig = load_config(path=config_path)
    except ConfigError as e:
        _fail(ctx, e)
        return

    # Apply CLI overrides
    overrides: dict[str, Any] = {
        "output_format": OutputFormat(output_format),
        "set_exit_status": set_exit_status,
    }
    if max_length is not None:
        overrides["max_length"] = max_length
    cfg = replace(cfg, **overrides)

    try:
        result: CheckResult = check_paths(args=paths, config=cfg)
    except (ConfigError, InputError) as e:
        _fail(ctx, e)
        return

    output: str = format_results(result=result, config=cfg)
    if cfg.output_format == OutputFormat.JSON:
        click.echo(output)
    elif output:
        click.echo(output, err=True)
    ctx.exit(result.exit_code)


def main() -> None:
    """Main entry point for nakedret CLI."""
    cli()


if __name__ == "__main__":
    main()
