"""Driver entity for the RideFare application."""

from dataclasses import dataclass, field
from typing import List

import click

from ridefare.models.ride import Ride, format_number


@dataclass
class Driver:
    """
    Represents a driver in the ride-hailing system.

    Attributes:
        id: Identifier of the driver
        name: Driver's display name
        rating: Driver's average rating
        completed_rides: Rides the driver has completed, in completion order
    """
    id: int
    name: str
    rating: float
    completed_rides: List[Ride] = field(default_factory=list)

    @property
    def ride_count(self) -> int:
        """Get the number of completed rides."""
        return len(self.completed_rides)

    def add_completed_ride(self, ride: Ride) -> None:
        """Record a completed ride. The ride is shared, not copied."""
        self.completed_rides.append(ride)

    def calculate_total_earnings(self) -> float:
        """Sum the current fare of every completed ride."""
        return sum((ride.fare_total for ride in self.completed_rides), 0.0)

    def info(self) -> str:
        """Get a one-line summary of the driver."""
        return (f"Driver ID: {self.id}"
                f" | Name: {self.name}"
                f" | Rating: {format_number(self.rating)}"
                f" | Total rides: {self.ride_count}")

    def print_driver_info(self) -> None:
        """Print the driver summary line."""
        click.echo(self.info())
