"""Rider entity for the RideFare application."""

from dataclasses import dataclass, field
from typing import List

import click

from ridefare.models.ride import Ride


@dataclass
class Rider:
    """
    Represents a rider in the ride-hailing system.

    Attributes:
        id: Identifier of the rider
        name: Rider's display name
        ride_history: Requested rides, in request order
    """
    id: int
    name: str
    ride_history: List[Ride] = field(default_factory=list)

    def request_ride(self, ride: Ride) -> None:
        """Add a ride to the history."""
        self.ride_history.append(ride)

    def compute_average_fare(self) -> float:
        """Get the mean fare over the history, or 0.0 when it is empty."""
        if not self.ride_history:
            return 0.0
        total = sum(ride.fare_total for ride in self.ride_history)
        return total / len(self.ride_history)

    def history_lines(self) -> List[str]:
        """Get the rider header followed by one details line per ride."""
        lines = [f"Rider ID: {self.id} | Name: {self.name}", "Ride history:"]
        lines.extend(ride.details() for ride in self.ride_history)
        return lines

    def print_ride_history(self) -> None:
        for line in self.history_lines():
            click.echo(line)
