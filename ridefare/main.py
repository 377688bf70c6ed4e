"""Demonstration flow for the RideFare application."""

import logging
from typing import Tuple

import click

from ridefare import config
from ridefare.models.driver import Driver
from ridefare.models.ride import format_number
from ridefare.models.rider import Rider
from ridefare.services.ride_service import RideService

logger = logging.getLogger(__name__)


def print_separator() -> None:
    click.echo("-" * config.SEPARATOR_WIDTH)


def load_demo_rides() -> RideService:
    """Create a ride book holding the demo rides."""
    service = RideService()
    for ride_type, ride_id, pickup, dropoff, distance in config.DEMO_RIDES:
        service.add_ride(ride_type, pickup, dropoff, distance, ride_id=ride_id)
    return service


def attach_demo_rides(service: RideService) -> Tuple[Driver, Rider]:
    """Create the demo driver and rider and attach every ride to both."""
    driver = Driver(**config.DEMO_DRIVER)
    rider = Rider(**config.DEMO_RIDER)

    for ride in service.rides:
        driver.add_completed_ride(ride)
        rider.request_ride(ride)

    logger.info(f"Attached {len(service.rides)} rides to driver {driver.id} and rider {rider.id}")
    return driver, rider


def run_demo() -> Tuple[Driver, Rider]:
    """
    Run the demo once: price the rides, attach them to a driver and a
    rider and print their summaries.

    Returns:
        Tuple[Driver, Rider]: The driver and rider built by the demo
    """
    service = load_demo_rides()

    print_separator()
    click.echo("Calculating fares for all rides (polymorphism demo)")
    print_separator()

    for ride in service.rides:
        ride.compute_fare()
        ride.print_details()

    print_separator()

    driver, rider = attach_demo_rides(service)

    click.echo("Driver info:")
    driver.print_driver_info()
    click.echo(f"Total driver earnings: ${format_number(driver.calculate_total_earnings())}")

    print_separator()

    click.echo("Rider info and history:")
    rider.print_ride_history()
    click.echo(f"Average fare paid by rider: ${format_number(rider.compute_average_fare())}")

    print_separator()
    click.echo("Program finished.")

    return driver, rider
