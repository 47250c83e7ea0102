"""Static checks on the color and event tables."""

import re
import pytest
from garten.buckets import TimeOfDay, Season
from garten.events import EVENTS
from garten.palettes import TIME, SEASON

HEX_COLOR = re.compile(r"^#[0-9a-f]{6}$")
MONTH_DAY = re.compile(r"^(0[1-9]|1[0-2])-(0[1-9]|[12][0-9]|3[01])$")


class TestTimeTable:
    """Tests for the time-of-day color table."""

    def test_has_every_bucket(self):
        assert set(TIME) == set(TimeOfDay)

    def test_colors(self):
        assert TIME[TimeOfDay.DAWN] == "#e8a87c"
        assert TIME[TimeOfDay.MORNING] == "#f5a623"
        assert TIME[TimeOfDay.AFTERNOON] == "#ff6b35"
        assert TIME[TimeOfDay.EVENING] == "#d35f8d"
        assert TIME[TimeOfDay.NIGHT] == "#7c6aef"

    def test_read_only(self):
        with pytest.raises(TypeError):
            TIME[TimeOfDay.DAWN] = "#000000"


class TestSeasonTable:
    """Tests for the season color table."""

    def test_has_every_season(self):
        assert set(SEASON) == set(Season)

    def test_colors(self):
        assert SEASON[Season.SPRING] == "#4ade80"
        assert SEASON[Season.SUMMER] == "#fbbf24"
        assert SEASON[Season.AUTUMN] == "#f97316"
        assert SEASON[Season.WINTER] == "#94a3b8"

    def test_read_only(self):
        with pytest.raises(TypeError):
            SEASON[Season.WINTER] = "#000000"


class TestEventTable:
    """Tests for the literal contents of EVENTS."""

    def test_event_count(self):
        assert len(EVENTS) == 22

    @pytest.mark.parametrize("event", EVENTS, ids=lambda e: e.name)
    def test_dates_are_month_day(self, event):
        """Start and end should be valid MM-DD strings."""
        assert MONTH_DAY.match(event.start)
        assert MONTH_DAY.match(event.end)

    @pytest.mark.parametrize("event", EVENTS, ids=lambda e: e.name)
    def test_accent_is_hex_color(self, event):
        assert HEX_COLOR.match(event.accent)

    def test_names_are_unique(self):
        names = [e.name for e in EVENTS]
        assert len(names) == len(set(names))

    def test_no_authored_range_wraps(self):
        """Current table has no ranges crossing the year boundary."""
        assert not any(e.wraps for e in EVENTS)

    def test_authored_order(self):
        """Order is significant for overlaps and must stay as authored."""
        names = [e.name for e in EVENTS]
        assert names.index("Fasnacht") < names.index("Commonwealth Day")
        assert names.index("Easter") < names.index("Sechseläuten")
        assert names.index("Sechseläuten") < names.index("St George's Day")
