"""
Safety tip rule table tests
"""

import pytest

from app.algorithms.safety_tips import (
    FINAL_TIPS,
    GENERAL_TIPS,
    LONG_DURATION_TIPS,
    LONG_JOURNEY_TIPS,
    MODERATE_JOURNEY_TIPS,
    NIGHT_TRAVEL_TIPS,
    SAFETY_TIP_RULES,
    SHORT_JOURNEY_TIPS,
    generate_safety_tips,
    is_night,
)

DAYTIME = 12


class TestSafetyTipOrdering:
    """Exact ordering of the generated tips"""

    def test_long_journey_order(self):
        """120 km / 200 min by day: 3 + 2 + 6 + 2 tips, in that order"""
        tips = generate_safety_tips(120, 200, current_hour=DAYTIME)

        assert len(tips) == 13
        assert tips == (
            list(LONG_JOURNEY_TIPS)
            + list(LONG_DURATION_TIPS)
            + list(GENERAL_TIPS)
            + list(FINAL_TIPS)
        )

    def test_long_journey_at_night(self):
        """Night tip sits between the general and final tips"""
        tips = generate_safety_tips(120, 200, current_hour=22)

        assert len(tips) == 14
        assert tips[:11] == (
            list(LONG_JOURNEY_TIPS) + list(LONG_DURATION_TIPS) + list(GENERAL_TIPS)
        )
        assert tips[11] == NIGHT_TRAVEL_TIPS[0]
        assert tips[12:] == list(FINAL_TIPS)

    def test_mid_distance_only_general_and_final(self):
        tips = generate_safety_tips(20, 24, current_hour=DAYTIME)

        assert tips == list(GENERAL_TIPS) + list(FINAL_TIPS)

    def test_short_distance(self):
        tips = generate_safety_tips(2, 2, current_hour=DAYTIME)

        assert tips == list(SHORT_JOURNEY_TIPS) + list(GENERAL_TIPS) + list(FINAL_TIPS)

    def test_moderate_distance(self):
        tips = generate_safety_tips(75, 90, current_hour=DAYTIME)

        assert tips == (
            list(MODERATE_JOURNEY_TIPS) + list(GENERAL_TIPS) + list(FINAL_TIPS)
        )

    def test_general_tips_always_six(self):
        assert len(GENERAL_TIPS) == 6
        assert len(FINAL_TIPS) == 2


class TestSafetyTipBoundaries:
    """Tier boundaries use strict comparisons"""

    def test_exactly_50_km_no_moderate_tip(self):
        tips = generate_safety_tips(50, 60, current_hour=DAYTIME)

        assert not set(MODERATE_JOURNEY_TIPS) & set(tips)
        assert len(tips) == 8

    def test_just_over_50_km_moderate_tip(self):
        tips = generate_safety_tips(50.01, 60, current_hour=DAYTIME)

        assert tips[:2] == list(MODERATE_JOURNEY_TIPS)

    def test_exactly_5_km_no_short_tip(self):
        tips = generate_safety_tips(5, 6, current_hour=DAYTIME)

        assert SHORT_JOURNEY_TIPS[0] not in tips
        assert len(tips) == 8

    def test_just_under_5_km_short_tip(self):
        tips = generate_safety_tips(4.99, 6, current_hour=DAYTIME)

        assert tips[0] == SHORT_JOURNEY_TIPS[0]

    def test_exactly_100_km_is_moderate(self):
        tips = generate_safety_tips(100, 120, current_hour=DAYTIME)

        assert tips[:2] == list(MODERATE_JOURNEY_TIPS)
        assert not set(LONG_JOURNEY_TIPS) & set(tips)

    def test_exactly_180_minutes_no_duration_tips(self):
        tips = generate_safety_tips(150, 180, current_hour=DAYTIME)

        assert not set(LONG_DURATION_TIPS) & set(tips)
        assert len(tips) == 11

    def test_181_minutes_duration_tips(self):
        tips = generate_safety_tips(150, 181, current_hour=DAYTIME)

        assert tips[3:5] == list(LONG_DURATION_TIPS)


class TestNightTravel:
    """Night window is hour >= 20 or hour <= 5"""

    @pytest.mark.parametrize("hour", [20, 21, 23, 0, 3, 5])
    def test_night_hours(self, hour):
        assert is_night(hour) is True
        assert NIGHT_TRAVEL_TIPS[0] in generate_safety_tips(20, 24, current_hour=hour)

    @pytest.mark.parametrize("hour", [6, 7, 12, 18, 19])
    def test_day_hours(self, hour):
        assert is_night(hour) is False
        assert NIGHT_TRAVEL_TIPS[0] not in generate_safety_tips(
            20, 24, current_hour=hour
        )

    def test_defaults_to_local_clock(self, mocker):
        """Without current_hour the server's local hour is used"""
        mock_datetime = mocker.patch("app.algorithms.safety_tips.datetime")
        mock_datetime.now.return_value.hour = 23

        tips = generate_safety_tips(20, 24)

        assert NIGHT_TRAVEL_TIPS[0] in tips
        mock_datetime.now.assert_called_once()


class TestRuleTable:
    """Rule table shape"""

    def test_rule_order(self):
        assert [rule.name for rule in SAFETY_TIP_RULES] == [
            "long_distance",
            "moderate_distance",
            "short_distance",
            "long_duration",
            "general",
            "night_travel",
            "final",
        ]

    def test_custom_rules(self):
        """A caller-supplied table is evaluated instead of the default one"""
        rules = SAFETY_TIP_RULES[-1:]

        assert generate_safety_tips(500, 600, current_hour=2, rules=rules) == list(
            FINAL_TIPS
        )
