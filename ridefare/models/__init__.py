"""Entity models for the RideFare application."""
from ridefare.models.ride import (
    Ride,
    StandardRide,
    PremiumRide,
    RideType,
    RideError,
    InvalidDistanceError,
    create_ride,
)
from ridefare.models.driver import Driver
from ridefare.models.rider import Rider


__all__ = [
    'Ride',
    'StandardRide',
    'PremiumRide',
    'RideType',
    'RideError',
    'InvalidDistanceError',
    'create_ride',
    'Driver',
    'Rider',
]
