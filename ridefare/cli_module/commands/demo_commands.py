"""Demo command for the RideFare CLI."""

import click

from ridefare.main import run_demo


@click.command(name="demo", help="Run the fare calculation demo")
def demo_command():
    """Price the demo rides and print driver and rider summaries."""
    run_demo()
