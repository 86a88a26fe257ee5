"""Coordinate validation and campus boundary checks."""
from dataclasses import dataclass
from math import isfinite

from .scoring import Coordinate, InvalidCoordinateError, OutsideCampusError


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned bounding box in decimal degrees."""
    north: float
    south: float
    east: float
    west: float

    def contains(self, latitude: float, longitude: float) -> bool:
        return self.south <= latitude <= self.north and self.west <= longitude <= self.east


# Approximate extent of the CWRU campus
CAMPUS_BOUNDS = Bounds(north=41.512, south=41.498, east=-81.595, west=-81.615)


def is_valid_coordinate(lat: float, lng: float) -> bool:
    """Check that lat/lng are finite numbers within geographic range."""
    for value in (lat, lng):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False
        if not isfinite(value):
            return False

    return -90 <= lat <= 90 and -180 <= lng <= 180


def is_within_campus(lat: float, lng: float, bounds: Bounds = CAMPUS_BOUNDS) -> bool:
    if not is_valid_coordinate(lat, lng):
        return False

    return bounds.contains(lat, lng)


def validate_campus_coordinates(
    lat: float,
    lng: float,
    field_name: str = "Coordinates",
    bounds: Bounds = CAMPUS_BOUNDS
) -> Coordinate:
    """
    Validate that coordinates are usable and inside the campus.

    Raises:
        InvalidCoordinateError: lat/lng are not valid geographic coordinates
        OutsideCampusError: lat/lng are valid but outside `bounds`
    """
    if not is_valid_coordinate(lat, lng):
        raise InvalidCoordinateError(f"{field_name} are invalid. Lat: {lat}, Lng: {lng}")

    if not is_within_campus(lat, lng, bounds):
        raise OutsideCampusError(
            f"{field_name} are outside campus bounds. Lat: {lat}, Lng: {lng}"
        )

    return Coordinate(latitude=lat, longitude=lng)
