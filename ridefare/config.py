"""Configuration constants for the RideFare application."""

import logging

# Width of the dashed separator line in console output
SEPARATOR_WIDTH = 40

DEFAULT_LOG_LEVEL = logging.WARNING
VERBOSE_LOG_LEVEL = logging.INFO
LOG_FORMAT = "%(levelname)s:%(name)s:%(message)s"

# Demo data: (ride type, ride id, pickup, dropoff, distance in miles)
DEMO_RIDES = [
    ("standard", 1, "University", "City Center", 4.3),
    ("premium", 2, "International Airport", "Hotel District", 12.0),
    ("standard", 3, "Tech Park", "Student Housing", 3.1),
]

DEMO_DRIVER = {"id": 101, "name": "Anushka Driver", "rating": 4.8}
DEMO_RIDER = {"id": 201, "name": "Anushka Rider"}
