"""Registry of named reference points."""

from __future__ import annotations

from sphere_dist.models import Coordinate, Place

PLACES: dict[str, Place] = {
    "nyc": Place(slug="nyc", name="New York City", coordinate=Coordinate(40.7128, -74.0060)),
    "la": Place(slug="la", name="Los Angeles", coordinate=Coordinate(34.0549, -118.2426)),
    "london": Place(slug="london", name="London", coordinate=Coordinate(51.5074, -0.1278)),
    "paris": Place(slug="paris", name="Paris", coordinate=Coordinate(48.8566, 2.3522)),
    "north-pole": Place(slug="north-pole", name="North Pole", coordinate=Coordinate(90.0, 0.0)),
    "south-pole": Place(slug="south-pole", name="South Pole", coordinate=Coordinate(-90.0, 0.0)),
}


def get_place(slug: str) -> Place:
    try:
        return PLACES[slug]
    except KeyError:
        known = ", ".join(sorted(PLACES))
        raise KeyError(f"unknown place '{slug}' (known: {known})") from None
