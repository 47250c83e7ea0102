"""
Annual calendar events that override the time-of-day accent.

Ranges are year-independent "MM-DD" strings compared lexically. A range
whose start sorts after its end wraps across Dec 31 -> Jan 1.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional


@dataclass(frozen=True)
class CalendarEvent:
    """Recurring annual date range with an accent override."""
    name: str  # Human-readable label (logging and listings only)
    start: str  # "MM-DD", inclusive
    end: str  # "MM-DD", inclusive
    accent: str  # "#rrggbb"

    @property
    def wraps(self) -> bool:
        return self.start > self.end

    def contains(self, mmdd: str) -> bool:
        """Check whether an "MM-DD" date falls inside this range."""
        if self.wraps:
            return mmdd >= self.start or mmdd <= self.end
        return self.start <= mmdd <= self.end


# Order matters: the first matching entry wins where ranges overlap.
EVENTS: tuple[CalendarEvent, ...] = (
    CalendarEvent("New Year", "01-01", "01-01", "#ffd700"),
    CalendarEvent("Lunar New Year", "01-29", "01-29", "#de2910"),
    CalendarEvent("Valentine's Day", "02-14", "02-14", "#e91e63"),
    CalendarEvent("Fasnacht", "02-15", "03-15", "#ff6d00"),  # Swiss Carnival
    CalendarEvent("Commonwealth Day", "03-10", "03-10", "#00247d"),
    CalendarEvent("St Patrick's Day", "03-17", "03-17", "#009a44"),
    CalendarEvent("Easter", "03-29", "04-21", "#ab47bc"),
    CalendarEvent("Sechseläuten", "04-13", "04-28", "#ff5722"),  # Zürich
    CalendarEvent("St George's Day", "04-23", "04-23", "#cf142b"),
    CalendarEvent("May Day", "05-01", "05-01", "#d32f2f"),
    CalendarEvent("VE Day", "05-08", "05-08", "#1565c0"),
    CalendarEvent("Windrush Day", "06-22", "06-22", "#ffab00"),
    CalendarEvent("NHS Birthday", "07-05", "07-05", "#0072ce"),
    CalendarEvent("Bundesfeier", "08-01", "08-01", "#ff0000"),  # Swiss National Day
    CalendarEvent("Notting Hill Carnival", "08-24", "08-26", "#ff6f00"),
    CalendarEvent("Black History Month", "10-01", "10-31", "#e4b61a"),
    CalendarEvent("Bonfire Night", "11-05", "11-05", "#ff5722"),
    CalendarEvent("Remembrance", "11-09", "11-11", "#b71c1c"),
    CalendarEvent("Christmas Eve", "12-24", "12-24", "#2e7d32"),
    CalendarEvent("Christmas Day", "12-25", "12-25", "#c62828"),
    CalendarEvent("Boxing Day", "12-26", "12-26", "#1565c0"),
    CalendarEvent("New Year's Eve", "12-31", "12-31", "#ffd700"),
)


def month_day(moment: datetime) -> str:
    """Format a moment as zero-padded "MM-DD"."""
    return f"{moment.month:02d}-{moment.day:02d}"


def find_event(mmdd: str, events: Iterable[CalendarEvent] = EVENTS) -> Optional[CalendarEvent]:
    """
    Return the first event whose range contains the date.

    Args:
        mmdd: Date as "MM-DD"
        events: Event table, scanned in order

    Returns:
        Matching CalendarEvent, or None if no range contains the date
    """
    for event in events:
        if event.contains(mmdd):
            return event
    return None
