"""RideFare: a small ride-hailing fare model."""

__version__ = "0.1.0"
