"""
Main CLI entry point for the Asset Browser.

Provides a command-line interface for browsing AvatarExplorer and KonoAsset
databases.
"""

import json
import logging
from typing import Optional

import click
import yaml

from ..core.exceptions import ConfigurationError
from ..core.logging import configure_logging
from .catalog import list_records, stats
from .helpers import _echo_error, _load_config

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@click.group()
@click.version_option(version="1.0.0")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", "-d", is_flag=True, help="Enable debug output")
@click.option(
    "--config",
    "config_path",
    envvar="AB_CONFIG",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML configuration file (default: AB_* environment variables)",
)
@click.pass_context
def cli(
    ctx: click.Context, verbose: bool, debug: bool, config_path: Optional[str]
) -> None:
    """
    Asset Browser CLI

    Browse the avatars, items and world objects of AvatarExplorer and
    KonoAsset databases as one catalog.
    """
    # Ensure that ctx.obj exists and is a dict
    ctx.ensure_object(dict)

    try:
        config = _load_config(config_path)
    except ConfigurationError as e:
        _echo_error(str(e))
        raise click.Abort()

    # Set logging level
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    else:
        level = "WARNING"

    # Route structlog events through stdlib logging so stdout stays clean
    configure_logging(level, json_format=config.monitoring.structured_logging)
    logging.getLogger().setLevel(level)

    ctx.obj["config"] = config
    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug


cli.add_command(list_records)
cli.add_command(stats)


@cli.group()
def config() -> None:
    """Configuration commands."""
    pass


@config.command()
@click.option(
    "--format",
    type=click.Choice(["json", "yaml"]),
    default="yaml",
    help="Output format",
)
@click.pass_context
def show(ctx: click.Context, format: str) -> None:
    """Show the effective configuration."""
    config_data = ctx.obj["config"].to_dict()
    if format == "json":
        click.echo(json.dumps(config_data, indent=2, ensure_ascii=False))
    else:
        click.echo(yaml.dump(config_data, default_flow_style=False, allow_unicode=True))
