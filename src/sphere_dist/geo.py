"""Great-circle distance on a spherical Earth."""

from __future__ import annotations

import math
from typing import Optional

from sphere_dist.validation import (
    INVALID_DISTANCE,
    InvalidCoordinateError,
    validate_coordinates,
)

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance between two points on Earth in kilometers.

    Uses the Haversine formula. Inputs are decimal degrees and are not
    range-checked; see :func:`distance` for the validating entry point.
    """
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(dlon / 2) ** 2
    )
    # Rounding can push a just past 1 for near-antipodal points
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Validate both coordinates, then return the Haversine distance in km.

    Raises:
        InvalidCoordinateError: if any latitude is outside [-90, 90] or any
            longitude is outside [-180, 180]. Nothing is computed in that case.
    """
    errors = validate_coordinates(lat1, lon1, lat2, lon2)
    if errors:
        raise InvalidCoordinateError(errors)
    return haversine_km(lat1, lon1, lat2, lon2)


def distance_or_sentinel(
    lat1: float, lon1: float, lat2: float, lon2: float
) -> tuple[float, Optional[InvalidCoordinateError]]:
    """Two-value form of :func:`distance`: ``(km, None)`` or ``(-1.0, error)``."""
    try:
        return distance(lat1, lon1, lat2, lon2), None
    except InvalidCoordinateError as exc:
        return INVALID_DISTANCE, exc
