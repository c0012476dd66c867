"""Data models for geographic points."""

from __future__ import annotations

from dataclasses import dataclass

from sphere_dist.geo import distance
from sphere_dist.validation import InvalidCoordinateError, is_valid_latitude, is_valid_longitude


@dataclass(frozen=True)
class Coordinate:
    """A point on the globe in decimal degrees."""

    latitude: float             # [-90, 90]
    longitude: float            # [-180, 180]

    def errors(self) -> list[str]:
        errors: list[str] = []
        if not is_valid_latitude(self.latitude):
            errors.append(f"latitude {self.latitude} out of range [-90, 90]")
        if not is_valid_longitude(self.longitude):
            errors.append(f"longitude {self.longitude} out of range [-180, 180]")
        return errors

    def validate(self) -> None:
        errors = self.errors()
        if errors:
            raise InvalidCoordinateError(errors)

    def distance_to(self, other: Coordinate) -> float:
        """Great-circle distance to ``other`` in km."""
        return distance(self.latitude, self.longitude, other.latitude, other.longitude)


@dataclass(frozen=True)
class Place:
    """Named reference point."""

    slug: str
    name: str
    coordinate: Coordinate
