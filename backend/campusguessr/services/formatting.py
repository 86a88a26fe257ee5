from .scoring import max_possible_score


def format_distance(meters: float) -> str:
    """Format distance for display, e.g. "150m" or "1.2km"."""
    if meters < 1000:
        return f"{round(meters)}m"

    return f"{meters / 1000:.1f}km"


def format_score(score: int) -> str:
    """Format score with thousands separator, e.g. "4,250"."""
    return f"{score:,}"


def format_coordinates(lat: float, lng: float, precision: int = 6) -> str:
    return f"{lat:.{precision}f}, {lng:.{precision}f}"


def format_game_duration(seconds: int) -> str:
    """Format a duration as "45s", "2m" or "2m 34s"."""
    if seconds < 60:
        return f"{seconds}s"

    minutes, remaining = divmod(seconds, 60)
    if remaining == 0:
        return f"{minutes}m"

    return f"{minutes}m {remaining}s"


def format_round(current: int, total: int = 5) -> str:
    return f"Round {current}/{total}"


def score_quality(score: int, max_score: int = max_possible_score(5)) -> str:
    """Quality label for a game total relative to the maximum score."""
    percentage = score / max_score * 100 if max_score else 0

    if percentage >= 90:
        return "Perfect!"
    elif percentage >= 80:
        return "Excellent!"
    elif percentage >= 60:
        return "Great!"
    elif percentage >= 40:
        return "Good!"
    elif percentage >= 20:
        return "Not bad!"
    return "Keep trying!"


def distance_quality(meters: float) -> str:
    """Quality label for a single guess distance."""
    if meters < 10:
        return "Spot on!"
    elif meters < 50:
        return "Very close!"
    elif meters < 100:
        return "Close!"
    elif meters < 250:
        return "Not too far!"
    elif meters < 500:
        return "Getting warmer!"
    return "Keep exploring!"
