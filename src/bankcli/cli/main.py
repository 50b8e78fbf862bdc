#!/usr/bin/env python3
"""
Main CLI Entry Point for bankcli

Provides the ``bank`` command and wires each invocation to one set of stores.
"""

import logging
from pathlib import Path

import click

from ..core.config import load_config
from ..stores import Stores
from .cache import cache
from .query import query
from .settings import settings
from .transactions import transactions


@click.group()
@click.option(
    "--config-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory holding the bankcli data files (default: ~/.bankcli)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_dir: Path | None, verbose: bool, debug: bool) -> None:
    """
    bank - Personal banking from the command line

    Manage settings, merchant categories, saved transaction queries and the
    local cache of accounts and transactions.
    """
    ctx.ensure_object(dict)

    try:
        config = load_config()
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    if config_dir:
        config.config_dir = config_dir.expanduser().resolve()

    if debug:
        config.debug = True
        config.log_level = "DEBUG"

    config.setup_logging()
    if debug:
        logging.getLogger("bankcli").setLevel(logging.DEBUG)

    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = config
    ctx.obj["stores"] = Stores(config.config_dir)

    if verbose:
        click.echo(f"Environment: {config.environment.value}", err=True)
        click.echo(f"Config directory: {config.config_dir}", err=True)

    if debug:
        click.echo("Debug logging enabled", err=True)


@main.command()
def version() -> None:
    """Show version information."""
    from bankcli import __author__, __version__

    click.echo(f"bankcli v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration and the state of each data file."""
    config_obj = ctx.obj["config"]
    stores: Stores = ctx.obj["stores"]

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Config Directory: {config_obj.config_dir}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")
    click.echo()
    click.echo("Data Files:")
    for store in stores.all():
        status = f"{store.size_bytes()} bytes" if store.file_exists() else "not created"
        click.echo(f"  {store.path.name}: {status}")
        click.echo(f"    {store.summary_text()}")
        message = store.get_load_error_message()
        if message:
            click.echo(f"    ⚠️  {message}")


main.add_command(settings)
main.add_command(query)
main.add_command(cache)
main.add_command(transactions)


if __name__ == "__main__":
    main()
