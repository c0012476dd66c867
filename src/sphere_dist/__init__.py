"""Great-circle distance between geographic coordinates."""

from sphere_dist.geo import EARTH_RADIUS_KM, distance, distance_or_sentinel, haversine_km
from sphere_dist.models import Coordinate, Place
from sphere_dist.validation import (
    INVALID_DISTANCE,
    InvalidCoordinateError,
    is_valid_latitude,
    is_valid_longitude,
    validate_coordinates,
)

__all__ = [
    "EARTH_RADIUS_KM",
    "INVALID_DISTANCE",
    "Coordinate",
    "InvalidCoordinateError",
    "Place",
    "distance",
    "distance_or_sentinel",
    "haversine_km",
    "is_valid_latitude",
    "is_valid_longitude",
    "validate_coordinates",
]
