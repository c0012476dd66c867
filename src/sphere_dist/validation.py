"""Coordinate range checks and the error raised when they fail."""

from __future__ import annotations

INVALID_DISTANCE = -1.0


class InvalidCoordinateError(ValueError):
    """Raised when a latitude or longitude is outside its valid range."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        # Sentinel returned alongside the error by the two-value contract
        self.distance = INVALID_DISTANCE
        super().__init__(f"invalid latitude or longitude values: {'; '.join(errors)}")


def is_valid_latitude(lat: float) -> bool:
    """Latitude must lie in [-90, 90] degrees."""
    return -90 <= lat <= 90


def is_valid_longitude(lon: float) -> bool:
    """Longitude must lie in [-180, 180] degrees."""
    return -180 <= lon <= 180


def validate_coordinates(lat1: float, lon1: float, lat2: float, lon2: float) -> list[str]:
    """Validate two coordinate pairs. Returns list of error messages (empty = valid)."""
    errors: list[str] = []

    for name, value in (("lat1", lat1), ("lat2", lat2)):
        if not is_valid_latitude(value):
            errors.append(f"{name} {value} out of range [-90, 90]")

    for name, value in (("lon1", lon1), ("lon2", lon2)):
        if not is_valid_longitude(value):
            errors.append(f"{name} {value} out of range [-180, 180]")

    return errors
