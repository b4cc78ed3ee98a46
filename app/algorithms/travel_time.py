import math

from app.core.config import TRAVEL_SPEEDS_KMH


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (builtin round() is banker's)"""
    return int(math.floor(value + 0.5))


def estimate_minutes(distance_km: float, speed_kmh: float) -> int:
    return round_half_up(distance_km / speed_kmh * 60)


def estimate_driving_minutes(distance_km: float) -> int:
    return estimate_minutes(distance_km, TRAVEL_SPEEDS_KMH["driving"])


def estimate_walking_minutes(distance_km: float) -> int:
    return estimate_minutes(distance_km, TRAVEL_SPEEDS_KMH["walking"])


def format_travel_time(minutes: int) -> str:
    """
    Render a duration in minutes as text

    45 -> "45 minutes", 60 -> "1 hour", 125 -> "2 hours 5 minutes"
    "minutes" is never singularised: 61 -> "1 hour 1 minutes"
    """
    if minutes < 60:
        return f"{minutes} minutes"

    hours, mins = divmod(minutes, 60)
    hour_label = f"{hours} hour{'s' if hours > 1 else ''}"
    if mins > 0:
        return f"{hour_label} {mins} minutes"
    return hour_label
