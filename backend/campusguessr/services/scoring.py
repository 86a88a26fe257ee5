from dataclasses import dataclass
from math import radians, sin, cos, sqrt, atan2, exp, isfinite


# Earth's radius in meters
EARTH_RADIUS_M = 6371000.0

MAX_ROUND_SCORE = 5000

# Decay constant per meter. The right building (~20-30m off) still earns 4000+.
DECAY_K = 0.006


class ScoringError(ValueError):
    """Base error for invalid scoring input."""


class InvalidCoordinateError(ScoringError):
    """Latitude/longitude out of range or not a finite number."""


class NegativeDistanceError(ScoringError):
    """A score was requested for a negative (or non-finite) distance."""


class OutsideCampusError(ScoringError):
    """Coordinates are valid but fall outside the campus bounds."""


def _check_range(latitude: float, longitude: float) -> None:
    for name, value, limit in (("latitude", latitude, 90), ("longitude", longitude, 180)):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidCoordinateError(f"{name} must be a number, got {value!r}")
        if not isfinite(value):
            raise InvalidCoordinateError(f"{name} must be finite, got {value!r}")
        if not -limit <= value <= limit:
            raise InvalidCoordinateError(
                f"{name} must be between -{limit} and {limit}, got {value!r}"
            )


@dataclass(frozen=True)
class Coordinate:
    """A point on Earth in decimal degrees."""
    latitude: float
    longitude: float

    def __post_init__(self):
        _check_range(self.latitude, self.longitude)


@dataclass(frozen=True)
class GuessEvaluation:
    """Distance (meters) and score for a single guess."""
    distance: int
    score: int


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculate the great circle distance between two points on Earth.

    Args:
        lat1, lon1: Coordinates of the first point (degrees)
        lat2, lon2: Coordinates of the second point (degrees)

    Returns:
        Distance in meters (not rounded)
    """
    lat1_rad = radians(lat1)
    lat2_rad = radians(lat2)
    dlat = radians(lat2 - lat1)
    dlon = radians(lon2 - lon1)

    a = sin(dlat / 2)**2 + cos(lat1_rad) * cos(lat2_rad) * sin(dlon / 2)**2
    # Float error can push a slightly past 1 for antipodal points
    a = min(1.0, a)
    c = 2 * atan2(sqrt(a), sqrt(1 - a))

    return EARTH_RADIUS_M * c


def distance_meters(a: Coordinate, b: Coordinate) -> int:
    """Great-circle distance between two coordinates, rounded to the nearest meter."""
    return round(haversine_distance(a.latitude, a.longitude, b.latitude, b.longitude))


def score_from_distance(distance: float) -> int:
    """
    Calculate score based on distance from the actual location.

    Exponential decay: 5000 points at 0m, dropping off quickly with distance
    (~2570 at 111m, 0 beyond roughly 1.6km).

    Args:
        distance: Distance in meters, must be >= 0

    Returns:
        Score (0 to 5000)
    """
    if isinstance(distance, bool) or not isfinite(distance) or distance < 0:
        raise NegativeDistanceError(f"distance must be a non-negative number, got {distance!r}")

    score = round(MAX_ROUND_SCORE * exp(-DECAY_K * distance))
    return max(0, min(MAX_ROUND_SCORE, score))


def max_possible_score(rounds: int) -> int:
    """Maximum score attainable over `rounds` rounds."""
    return rounds * MAX_ROUND_SCORE


def evaluate_guess(guess: Coordinate, actual: Coordinate) -> GuessEvaluation:
    distance = distance_meters(guess, actual)
    return GuessEvaluation(distance=distance, score=score_from_distance(distance))
