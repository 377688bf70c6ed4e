"""Main CLI entry point for RideFare application."""

import logging

import click

from ridefare import config
from ridefare.cli_module.commands.demo_commands import demo_command
from ridefare.cli_module.commands.fare_commands import fares_command, quote_command

# Set context settings to properly display help for all commands
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 120,
    "show_default": True
}


@click.group(context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.option("--verbose", "-v", is_flag=True, help="Show informational log messages")
@click.pass_context
def cli(ctx, verbose):
    """RideFare CLI for ride fares and driver/rider summaries."""
    logging.basicConfig(
        level=config.VERBOSE_LOG_LEVEL if verbose else config.DEFAULT_LOG_LEVEL,
        format=config.LOG_FORMAT,
    )

    # With no subcommand, behave like the plain demo program
    if ctx.invoked_subcommand is None:
        ctx.invoke(demo_command)


cli.add_command(demo_command)
cli.add_command(fares_command)
cli.add_command(quote_command)


def main():
    """Entry point for the application."""
    cli()


if __name__ == '__main__':
    main()
