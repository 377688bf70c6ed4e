"""Ride service for the RideFare application."""

import logging
from typing import Dict, List, Optional, Any

from ridefare.models.ride import Ride, create_ride

logger = logging.getLogger(__name__)


class RideServiceError(Exception):
    """Custom exception for ride service errors."""
    pass


class RideService:
    """
    Owns the rides created during a run.

    Drivers and riders only keep references to rides handed out by the
    service; the service is the single place rides are created.
    """

    def __init__(self):
        self._rides: Dict[int, Ride] = {}
        self._next_id = 1

    @property
    def rides(self) -> List[Ride]:
        """Get all rides in the order they were added."""
        return list(self._rides.values())

    def add_ride(self, ride_type, pickup: str, dropoff: str, distance_miles: float,
                 ride_id: Optional[int] = None) -> Ride:
        """
        Create a ride and add it to the book.

        Args:
            ride_type: A RideType or its value
            pickup: Pickup location
            dropoff: Dropoff location
            distance_miles: Distance in miles
            ride_id: Explicit ride ID; the next free sequential ID when omitted

        Returns:
            Ride: The created ride

        Raises:
            RideServiceError: If the ride ID is already taken
            InvalidDistanceError: If the distance is negative
            ValueError: If the ride type is unknown
        """
        if ride_id is None:
            ride_id = self._next_id
        if ride_id in self._rides:
            raise RideServiceError(f"Ride {ride_id} already exists")

        ride = create_ride(ride_type, ride_id, pickup, dropoff, distance_miles)
        self._rides[ride_id] = ride
        self._next_id = max(self._next_id, ride_id + 1)

        logger.info(f"Added {ride.variant} ride {ride_id}: {pickup} -> {dropoff}")
        return ride

    def get_ride(self, ride_id: int) -> Ride:
        """
        Get a ride by ID.

        Raises:
            RideServiceError: If no ride has this ID
        """
        try:
            return self._rides[ride_id]
        except KeyError:
            raise RideServiceError(f"Ride {ride_id} not found")

    def compute_fares(self) -> List[float]:
        """Compute the fare of every ride, in insertion order."""
        fares = []
        for ride in self._rides.values():
            fare = ride.compute_fare()
            logger.debug(f"Ride {ride.id} fare computed: {fare}")
            fares.append(fare)
        return fares

    def fare_table(self) -> List[List[Any]]:
        """Get one row per ride: ID, variant, pickup, dropoff, distance, fare."""
        return [
            [ride.id, ride.variant, ride.pickup, ride.dropoff,
             ride.distance_miles, ride.fare_total]
            for ride in self._rides.values()
        ]
