"""Fare commands for the RideFare CLI."""

import sys

import click
from tabulate import tabulate

from ridefare.main import load_demo_rides, attach_demo_rides
from ridefare.models.ride import RideType, RideError, create_ride, format_number


@click.command(name="fares", help="Show the demo rides and their fares as a table")
def fares_command():
    """Price the demo rides and list them in a table."""
    service = load_demo_rides()
    service.compute_fares()

    driver, rider = attach_demo_rides(service)

    click.echo("\n🚕 Ride fares:\n")
    click.echo(tabulate(
        service.fare_table(),
        headers=["ID", "Type", "From", "To", "Miles", "Fare ($)"],
        tablefmt="grid"
    ))

    click.echo(f"\nTotal: ${format_number(driver.calculate_total_earnings())}")
    click.echo(f"Average: ${format_number(rider.compute_average_fare())}")


@click.command(name="quote", help="Estimate the fare for a single ride")
@click.argument("distance", type=float)
@click.option("--type", "ride_type", type=click.Choice([t.value for t in RideType]),
              default=RideType.STANDARD.value, help="Ride type")
@click.option("--pickup", default="Pickup", help="Pickup location")
@click.option("--dropoff", default="Dropoff", help="Dropoff location")
def quote_command(distance, ride_type, pickup, dropoff):
    """
    Estimate a fare.

    DISTANCE: Ride distance in miles.
    """
    try:
        ride = create_ride(ride_type, 1, pickup, dropoff, distance)
    except RideError as e:
        click.echo(f"Error: {str(e)}", err=True)
        sys.exit(1)

    fare = ride.compute_fare()
    click.echo(f"Estimated {ride.variant} fare for {format_number(distance)} miles: "
               f"${format_number(fare)}")
