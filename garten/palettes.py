"""
Accent colors for each time-of-day and season bucket.
"""

from types import MappingProxyType

from garten.buckets import TimeOfDay, Season

TIME = MappingProxyType({
    TimeOfDay.DAWN: "#e8a87c",       # Soft coral
    TimeOfDay.MORNING: "#f5a623",    # Warm gold
    TimeOfDay.AFTERNOON: "#ff6b35",  # Bold orange
    TimeOfDay.EVENING: "#d35f8d",    # Dusky pink
    TimeOfDay.NIGHT: "#7c6aef",      # Deep purple
})

SEASON = MappingProxyType({
    Season.SPRING: "#4ade80",  # Fresh green
    Season.SUMMER: "#fbbf24",  # Warm amber
    Season.AUTUMN: "#f97316",  # Burnt orange
    Season.WINTER: "#94a3b8",  # Cool slate
})
