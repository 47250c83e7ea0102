"""
Accent resolution for the Garten widget.

Priority: an active calendar event wins, otherwise the time-of-day color.
The season accent is exposed separately and is not part of the config.

All functions take an optional ``now`` so callers can pin the instant;
it defaults to the system-local wall clock.
"""

from datetime import datetime
from typing import Iterable, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

from garten.buckets import TimeOfDay, Season, time_of_day, season_for_month
from garten.config import GARTEN_SEED, GARTEN_MAX_HEIGHT, GARTEN_PALETTE
from garten.events import CalendarEvent, EVENTS, month_day, find_event
from garten.logger import logger
from garten.palettes import TIME, SEASON


# ============================================================================
# Data Structures
# ============================================================================

class GartenColors(BaseModel):
    """Color block of a Garten config."""
    model_config = ConfigDict(frozen=True)

    accent: str = Field(..., description="Resolved accent color (#rrggbb)")
    palette: str = Field(GARTEN_PALETTE, description="Palette name")


class GartenConfig(BaseModel):
    """Configuration handed to the host rendering surface."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    container: str = Field(..., description="Caller-supplied container identifier")
    seed: int = Field(GARTEN_SEED, description="Rendering seed")
    max_height: float = Field(GARTEN_MAX_HEIGHT, alias="maxHeight", description="Maximum height factor")
    colors: GartenColors


class AccentResolution(BaseModel):
    """Breakdown of how an accent was chosen."""
    model_config = ConfigDict(frozen=True)

    date: str = Field(..., description="Local date as MM-DD")
    hour: int = Field(..., ge=0, le=23)
    accent: str
    source: Literal["event", "time_of_day"]
    event: Optional[str] = Field(None, description="Name of the matching event, if any")
    time_of_day: TimeOfDay
    season: Season
    season_accent: str


# ============================================================================
# Resolution
# ============================================================================

def resolve_accent(now: Optional[datetime] = None, events: Iterable[CalendarEvent] = EVENTS) -> str:
    """Resolve the accent color: first matching event, else time-of-day."""
    return explain_accent(now, events).accent


def explain_accent(now: Optional[datetime] = None, events: Iterable[CalendarEvent] = EVENTS) -> AccentResolution:
    """
    Resolve the accent and report which table it came from.

    Args:
        now: Instant to resolve for (default: local wall clock)
        events: Event table, first match wins

    Returns:
        AccentResolution with the chosen accent and intermediate buckets
    """
    moment = now or datetime.now()
    mmdd = month_day(moment)
    bucket = time_of_day(moment.hour)
    season = season_for_month(moment.month)

    event = find_event(mmdd, events)
    if event:
        accent, source = event.accent, "event"
    else:
        accent, source = TIME[bucket], "time_of_day"

    logger.debug(
        f"Accent {accent} from {source} "
        f"(date={mmdd}, hour={moment.hour}, event={event.name if event else None})"
    )

    return AccentResolution(
        date=mmdd,
        hour=moment.hour,
        accent=accent,
        source=source,
        event=event.name if event else None,
        time_of_day=bucket,
        season=season,
        season_accent=SEASON[season],
    )


def resolve_config(
    container: str,
    now: Optional[datetime] = None,
    events: Iterable[CalendarEvent] = EVENTS,
) -> GartenConfig:
    """
    Build a fresh GartenConfig for a container.

    Args:
        container: Opaque identifier, echoed unchanged
        now: Instant to resolve for (default: local wall clock)
        events: Event table override

    Returns:
        GartenConfig with the resolved accent
    """
    return GartenConfig(
        container=container,
        colors=GartenColors(accent=resolve_accent(now, events)),
    )


def resolve_season_accent(now: Optional[datetime] = None) -> str:
    """Season color for the current month. Not used by resolve_config."""
    moment = now or datetime.now()
    return SEASON[season_for_month(moment.month)]
