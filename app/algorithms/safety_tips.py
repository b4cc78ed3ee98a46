"""
Safety tips for a journey

Tips come from an ordered rule table. Every rule whose predicate matches
contributes its tips, in table order:

    distance tier -> long duration -> general -> night -> final
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Optional, Tuple

# hours counted as night travel (server local time)
NIGHT_START_HOUR = 20
NIGHT_END_HOUR = 5

LONG_DURATION_MINUTES = 180


@dataclass(frozen=True)
class TripConditions:
    distance_km: float
    driving_minutes: int
    hour: int  # 0-23


@dataclass(frozen=True)
class TipRule:
    name: str
    applies: Callable[[TripConditions], bool]
    tips: Tuple[str, ...]


LONG_JOURNEY_TIPS = (
    "🚗 Long journey ahead - Ensure your vehicle is in good condition before departure",
    "⛽ Check fuel level and plan refueling stops along the route",
    "🛌 Take breaks every 2 hours to avoid fatigue",
)

MODERATE_JOURNEY_TIPS = (
    "🚗 Moderate distance - Check your fuel level before starting",
    "☕ Consider a rest stop if you feel tired",
)

SHORT_JOURNEY_TIPS = (
    "🚶 Short distance - Walking or cycling could be a healthy alternative",
)

LONG_DURATION_TIPS = (
    "⏰ Journey exceeds 3 hours - Plan for meal breaks",
    "📱 Inform someone about your travel plans and estimated arrival time",
)

GENERAL_TIPS = (
    "🔒 Always wear your seatbelt and ensure all passengers do the same",
    "📵 Avoid using your phone while driving - pull over if you need to make a call",
    "🌦️ Check weather conditions before you travel",
    "🚦 Obey all traffic rules and speed limits",
    "💼 Keep emergency contacts and important documents handy",
    "🔦 Travel during daylight hours when possible for better visibility",
)

NIGHT_TRAVEL_TIPS = (
    "🌙 Night travel - Be extra cautious and ensure your vehicle lights are working",
)

FINAL_TIPS = (
    "🏥 Know the location of hospitals or emergency services along your route",
    "💧 Stay hydrated and carry water, especially for long trips",
)


def is_night(hour: int) -> bool:
    return hour >= NIGHT_START_HOUR or hour <= NIGHT_END_HOUR


# distance tiers are mutually exclusive; comparisons are strict
SAFETY_TIP_RULES: Tuple[TipRule, ...] = (
    TipRule("long_distance", lambda c: c.distance_km > 100, LONG_JOURNEY_TIPS),
    TipRule(
        "moderate_distance",
        lambda c: 50 < c.distance_km <= 100,
        MODERATE_JOURNEY_TIPS,
    ),
    TipRule("short_distance", lambda c: c.distance_km < 5, SHORT_JOURNEY_TIPS),
    TipRule(
        "long_duration",
        lambda c: c.driving_minutes > LONG_DURATION_MINUTES,
        LONG_DURATION_TIPS,
    ),
    TipRule("general", lambda c: True, GENERAL_TIPS),
    TipRule("night_travel", lambda c: is_night(c.hour), NIGHT_TRAVEL_TIPS),
    TipRule("final", lambda c: True, FINAL_TIPS),
)


def generate_safety_tips(
    distance_km: float,
    driving_minutes: int,
    current_hour: Optional[int] = None,
    rules: Tuple[TipRule, ...] = SAFETY_TIP_RULES,
) -> List[str]:
    """
    Collect the tips of every matching rule, in rule order

    Args:
        distance_km: unrounded straight-line distance
        driving_minutes: estimated driving time
        current_hour: hour of day, defaults to the server's local clock

    Returns:
        ordered list of tip strings
    """
    if current_hour is None:
        current_hour = datetime.now().hour

    conditions = TripConditions(
        distance_km=distance_km,
        driving_minutes=driving_minutes,
        hour=current_hour,
    )

    tips: List[str] = []
    for rule in rules:
        if rule.applies(conditions):
            tips.extend(rule.tips)
    return tips
