#!/usr/bin/env python3
"""
Main CLI Entry Point for the Digital Wallet

Running `wallet` with no subcommand starts the interactive wallet.
"""

import logging
import os

import click

from ..core.config import Config, get_config, reload_config
from ..core.errors import ConfigurationError


def _load_config(config_env: str | None) -> Config:
    if config_env:
        os.environ["WALLET_ENV"] = config_env
        return reload_config()
    return get_config()


@click.group(invoke_without_command=True)
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, debug: bool) -> None:
    """
    Digital Wallet - Interactive Console Wallet

    Sign up, log in, check your balance, deposit, withdraw and pay bills.
    All data lives in memory and is discarded on exit.
    """
    ctx.ensure_object(dict)

    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"

    try:
        config = _load_config(config_env)
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("wallet").setLevel(logging.DEBUG)

    ctx.obj["debug"] = debug
    ctx.obj["config"] = config

    if ctx.invoked_subcommand is None:
        ctx.invoke(run)


@main.command()
@click.pass_context
def run(ctx: click.Context) -> None:
    """Start the interactive wallet."""
    from ..app import Application

    Application.from_config(ctx.obj["config"]).run()


@main.command()
def version() -> None:
    """Show version information."""
    from wallet import __author__, __version__

    click.echo(f"Digital Wallet v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]
    settings = config_obj.to_dict()

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Directory Capacity: {config_obj.directory.capacity}")
    click.echo(f"  Seed User: {config_obj.seed_user.username or '(none)'}")
    click.echo(f"  Seed Password: {settings['seed_user']['password']}")
    click.echo(f"  Seed Balance: {config_obj.seed_user.balance_money()}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


if __name__ == "__main__":
    main()
