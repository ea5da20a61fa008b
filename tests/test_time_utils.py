from datetime import UTC, date

from backend.app.core.time import month_bounds, utc_now, utc_today


def test_utc_now_is_timezone_aware_utc():
    value = utc_now()
    assert value.tzinfo is UTC


def test_utc_today_matches_utc_now():
    assert utc_today() == utc_now().date()


def test_month_bounds_regular_month():
    assert month_bounds(date(2024, 4, 17)) == (date(2024, 4, 1), date(2024, 4, 30))


def test_month_bounds_handles_december_and_leap_february():
    assert month_bounds(date(2023, 12, 31)) == (date(2023, 12, 1), date(2023, 12, 31))
    assert month_bounds(date(2024, 2, 10)) == (date(2024, 2, 1), date(2024, 2, 29))
