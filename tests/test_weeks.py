import datetime as dt

import pytest

from tracker.weeks import WEEK_IDENTIFIER_RE, week_identifier


@pytest.mark.parametrize("moment, expected", [
    (dt.datetime(2021, 1, 1, 12, 0), "2020-W53"),   # Friday, still the previous ISO year
    (dt.datetime(2021, 1, 4, 0, 0), "2021-W01"),    # first Monday of ISO 2021
    (dt.datetime(2019, 12, 30, 9, 30), "2020-W01"), # Monday that belongs to the next ISO year
    (dt.datetime(2024, 3, 5), "2024-W10"),
])
def test_known_iso_weeks(moment, expected):
    assert week_identifier(moment) == expected


def test_defaults_to_now():
    assert week_identifier() == week_identifier(dt.datetime.now(dt.timezone.utc))


def test_every_day_of_a_decade_matches_the_pattern():
    day = dt.datetime(2015, 1, 1)
    while day.year < 2026:
        assert WEEK_IDENTIFIER_RE.match(week_identifier(day)), day
        day += dt.timedelta(days=1)


def test_aware_moment_uses_configured_time_zone(settings):
    settings.TIME_ZONE = "Asia/Tokyo"
    # Sunday 2021-01-03 20:00 UTC is already Monday in Tokyo
    moment = dt.datetime(2021, 1, 3, 20, 0, tzinfo=dt.timezone.utc)
    assert week_identifier(moment) == "2021-W01"


@pytest.mark.parametrize("value, ok", [
    ("2021-W01", True),
    ("2020-W53", True),
    ("2021-W00", False),
    ("2021-W54", False),
    ("2021-w05", False),
    ("21-W05", False),
    ("2021-W5", False),
    ("2021-W05\n", False),
    (" 2021-W05", False),
    ("", False),
])
def test_week_identifier_pattern(value, ok):
    assert bool(WEEK_IDENTIFIER_RE.match(value)) is ok
