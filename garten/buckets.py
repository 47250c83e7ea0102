"""
Time-of-day and season bucketing.

Hour boundaries are inclusive-lower / exclusive-upper. Months are 1-based,
as returned by datetime.month.
"""

from enum import Enum


class TimeOfDay(str, Enum):
    """Hour-of-day partition used for the default accent."""
    DAWN = "dawn"
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    NIGHT = "night"


class Season(str, Enum):
    """Month partition used for the season accent."""
    SPRING = "spring"
    SUMMER = "summer"
    AUTUMN = "autumn"
    WINTER = "winter"


# Index 0 = January
_MONTH_SEASONS: tuple[Season, ...] = (
    Season.WINTER,
    Season.WINTER,
    Season.SPRING,
    Season.SPRING,
    Season.SPRING,
    Season.SUMMER,
    Season.SUMMER,
    Season.SUMMER,
    Season.AUTUMN,
    Season.AUTUMN,
    Season.AUTUMN,
    Season.WINTER,
)


def time_of_day(hour: int) -> TimeOfDay:
    """
    Map an hour (0-23) to its TimeOfDay bucket.

    Hours outside 5-21 fall through to night.
    """
    if 5 <= hour < 7:
        return TimeOfDay.DAWN
    if 7 <= hour < 12:
        return TimeOfDay.MORNING
    if 12 <= hour < 17:
        return TimeOfDay.AFTERNOON
    if 17 <= hour < 21:
        return TimeOfDay.EVENING
    return TimeOfDay.NIGHT


def season_for_month(month: int) -> Season:
    """Map a 1-based month (1 = January) to its Season."""
    return _MONTH_SEASONS[month - 1]
