"""Services for the RideFare application."""
from ridefare.services.ride_service import RideService, RideServiceError


__all__ = [
    'RideService',
    'RideServiceError',
]
