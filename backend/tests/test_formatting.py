import pytest

from campusguessr.services.formatting import (
    distance_quality, format_coordinates, format_distance, format_game_duration,
    format_round, format_score, score_quality
)


@pytest.mark.parametrize("meters, expected", [
    (0, "0m"), (150, "150m"), (999, "999m"), (1000, "1.0km"), (1234, "1.2km"), (15000, "15.0km"),
])
def test_format_distance(meters, expected):
    assert format_distance(meters) == expected


def test_format_score():
    assert format_score(4250) == "4,250"
    assert format_score(25000) == "25,000"
    assert format_score(0) == "0"


def test_format_coordinates():
    assert format_coordinates(41.5045, -81.6087) == "41.504500, -81.608700"
    assert format_coordinates(41.5045, -81.6087, precision=2) == "41.50, -81.61"


@pytest.mark.parametrize("seconds, expected", [(45, "45s"), (60, "1m"), (120, "2m"), (154, "2m 34s")])
def test_format_game_duration(seconds, expected):
    assert format_game_duration(seconds) == expected


def test_format_round():
    assert format_round(3) == "Round 3/5"
    assert format_round(1, 10) == "Round 1/10"


@pytest.mark.parametrize("score, expected", [
    (25000, "Perfect!"),
    (22500, "Perfect!"),
    (20000, "Excellent!"),
    (15000, "Great!"),
    (10000, "Good!"),
    (5000, "Not bad!"),
    (4999, "Keep trying!"),
    (0, "Keep trying!"),
])
def test_score_quality(score, expected):
    assert score_quality(score) == expected


def test_score_quality_with_custom_maximum():
    assert score_quality(4500, 5000) == "Perfect!"
    assert score_quality(0, 0) == "Keep trying!"


@pytest.mark.parametrize("meters, expected", [
    (0, "Spot on!"),
    (9, "Spot on!"),
    (10, "Very close!"),
    (75, "Close!"),
    (200, "Not too far!"),
    (499, "Getting warmer!"),
    (500, "Keep exploring!"),
])
def test_distance_quality(meters, expected):
    assert distance_quality(meters) == expected
