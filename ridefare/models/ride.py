"""Ride entities for the RideFare application."""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

import click


class RideError(Exception):
    """Base exception for ride model errors."""
    pass


class InvalidDistanceError(RideError, ValueError):
    """Raised when a ride is created with a negative or non-finite distance."""
    pass


class RideType(Enum):
    """Available ride variants."""
    STANDARD = "standard"
    PREMIUM = "premium"


def format_number(value: float) -> str:
    """Render a number with six significant digits and no trailing zeros."""
    return f"{value:g}"


@dataclass(eq=False)
class Ride(ABC):
    """
    Base class for every ride variant.

    Attributes:
        id: Identifier of the ride, unique within a run
        pickup: Pickup location
        dropoff: Dropoff location
        distance_miles: Distance of the ride in miles
        fare_total: Last computed fare, zero until compute_fare() runs
    """
    id: int
    pickup: str
    dropoff: str
    distance_miles: float
    fare_total: float = field(default=0.0, init=False)

    VARIANT = ""

    def __post_init__(self):
        """Validate the distance."""
        if not (math.isfinite(self.distance_miles) and self.distance_miles >= 0):
            raise InvalidDistanceError(
                f"Distance must be non-negative and finite, got {self.distance_miles}")

    @property
    def variant(self) -> str:
        """Get the variant tag shown in ride details."""
        return self.VARIANT

    @abstractmethod
    def compute_fare(self) -> float:
        """Compute the fare, store it as fare_total and return it."""

    def details(self) -> str:
        """Get a one-line description of the ride."""
        return (f"[{self.variant}] Ride ID: {self.id}"
                f" | From: {self.pickup}"
                f" | To: {self.dropoff}"
                f" | Distance: {format_number(self.distance_miles)} miles"
                f" | Fare: ${format_number(self.fare_total)}")

    def print_details(self) -> None:
        """Print the ride details line."""
        click.echo(self.details())


@dataclass(eq=False)
class StandardRide(Ride):
    """Everyday ride charged per mile on top of a small base fare."""

    VARIANT = "Standard"
    BASE_FARE = 1.5
    PER_MILE = 1.8

    def compute_fare(self) -> float:
        total = self.BASE_FARE + self.PER_MILE * self.distance_miles
        self.fare_total = total
        return total


@dataclass(eq=False)
class PremiumRide(Ride):
    """Premium ride with a higher per-mile rate and a luxury surcharge."""

    VARIANT = "Premium"
    BASE_FARE = 4.0
    PER_MILE = 3.2
    LUXURY_FEE = 1.5

    def compute_fare(self) -> float:
        total = self.BASE_FARE + self.PER_MILE * self.distance_miles + self.LUXURY_FEE
        self.fare_total = total
        return total


RIDE_CLASSES = {
    RideType.STANDARD: StandardRide,
    RideType.PREMIUM: PremiumRide,
}


def create_ride(ride_type, ride_id: int, pickup: str, dropoff: str,
                distance_miles: float) -> Ride:
    """
    Create a ride of the given variant.

    Args:
        ride_type: A RideType or its value ("standard" or "premium")
        ride_id: Identifier of the ride
        pickup: Pickup location
        dropoff: Dropoff location
        distance_miles: Distance in miles

    Returns:
        Ride: The new, not yet priced ride

    Raises:
        ValueError: If the ride type is unknown
        InvalidDistanceError: If the distance is negative
    """
    ride_class = RIDE_CLASSES[RideType(ride_type)]
    return ride_class(ride_id, pickup, dropoff, distance_miles)
